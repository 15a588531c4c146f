"""Error event and error record data models."""

import traceback
from dataclasses import dataclass
from typing import Any


@dataclass
class ErrorEvent:
    """An uncaught error as delivered by the host."""

    type: str  # event category, e.g. "error"
    message: str
    filename: str
    lineno: int
    colno: int
    error: BaseException | None = None

    @classmethod
    def from_exception(cls, exc: BaseException, type: str = "error") -> "ErrorEvent":
        """Build an event located at the innermost frame of `exc`'s traceback."""
        filename, lineno, colno = "", 0, 0

        frames = traceback.extract_tb(exc.__traceback__) if exc.__traceback__ else []
        if frames:
            frame = frames[-1]
            filename = frame.filename
            lineno = frame.lineno or 0
            offset = getattr(frame, "colno", None)  # 0-based, Python 3.11+
            colno = offset + 1 if offset is not None else 0

        return cls(
            type=type,
            message=f"{exc.__class__.__name__}: {exc}",
            filename=filename,
            lineno=lineno,
            colno=colno,
            error=exc,
        )


@dataclass
class ErrorRecord:
    """An error event enriched with capture context."""

    type: str
    message: str
    path: str
    line: int
    column: int
    stack_trace: str  # newline-delimited frames
    viewport: str  # "<width>x<height>"
    time_spend: int  # ms since session start
    datetime: str

    def stack_lines(self) -> list[str]:
        """Return the stack trace split into lines."""
        if not self.stack_trace:
            return []
        return self.stack_trace.split("\n")

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body sent to a collection endpoint."""
        return {
            "type": self.type,
            "message": self.message,
            "path": self.path,
            "line": self.line,
            "column": self.column,
            "stackTrace": self.stack_lines(),
            "viewport": self.viewport,
            "timeSpend": self.time_spend,
            "datetime": self.datetime,
        }

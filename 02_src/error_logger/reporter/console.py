"""Console sink printing error records to diagnostic output."""

import sys
from typing import TextIO

from ..duration import format_duration
from ..models import ErrorRecord


def render_record(record: ErrorRecord) -> str:
    """Render the multi-line console report for one record."""
    return "\n".join(
        [
            f"Type: {record.type}",
            f"Error: {record.message}",
            f"StackTrace: {record.stack_trace}",
            f"Path: {record.path}",
            f"Line: {record.line}",
            f"Column: {record.column}",
            f"Debug: {record.path}:{record.line}",
            f"Viewport: {record.viewport}",
            f"Visitor time on page: {format_duration(record.time_spend)}",
            f"Date: {record.datetime}",
        ]
    )


class ConsoleSink:
    """Writes rendered records to a text stream (stderr by default)."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    def write(self, record: ErrorRecord) -> None:
        """Print the report for `record`."""
        stream = self._stream or sys.stderr
        stream.write(render_record(record) + "\n")
        stream.flush()

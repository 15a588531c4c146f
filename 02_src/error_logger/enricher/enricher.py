"""Turns raw error events into enriched error records."""

import traceback
from datetime import datetime
from typing import Callable, Protocol

from ..clock import ISessionClock
from ..host.viewport import IViewportProvider, viewport_string
from ..models import ErrorEvent, ErrorRecord


def format_datetime(moment: datetime | None = None) -> str:
    """Human-readable local timestamp, e.g. "Mon Oct 19 2026 10:00:00 GMT+0000 (UTC)"."""
    moment = (moment or datetime.now()).astimezone()
    return moment.strftime("%a %b %d %Y %H:%M:%S GMT%z (%Z)")


def format_stack(error: BaseException | None) -> str:
    """Traceback of `error` as newline-delimited text, "" if there is none."""
    if error is None:
        return ""
    lines = traceback.format_exception(type(error), error, error.__traceback__)
    return "".join(lines).rstrip("\n")


class IErrorEnricher(Protocol):
    """Builds ErrorRecords from ErrorEvents."""

    def enrich(self, event: ErrorEvent) -> ErrorRecord:
        """Create an ErrorRecord for one event."""
        ...


class ErrorEnricher:
    """Adds stack trace, viewport, elapsed time and timestamp to events."""

    def __init__(
        self,
        clock: ISessionClock,
        viewport: IViewportProvider,
        now: Callable[[], datetime] | None = None,
    ):
        self._clock = clock
        self._viewport = viewport
        self._now = now or datetime.now

    def enrich(self, event: ErrorEvent) -> ErrorRecord:
        """Create an ErrorRecord for one event."""
        return ErrorRecord(
            type=event.type,
            message=event.message,
            path=event.filename,
            line=event.lineno,
            column=event.colno,
            stack_trace=format_stack(event.error),
            viewport=viewport_string(self._viewport),
            time_spend=self._clock.elapsed(),
            datetime=format_datetime(self._now()),
        )

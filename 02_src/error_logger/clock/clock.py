"""Session clock measuring time spent since initialization."""

import time
from typing import Callable, Protocol

from ..config import ConfigError

TimeSource = Callable[[], int]


def now_ms() -> int:
    """Current wall-clock time in milliseconds since epoch."""
    return int(time.time() * 1000)


class ISessionClock(Protocol):
    """Source of elapsed time since session start."""

    def init(self) -> None:
        """Record the session start time."""
        ...

    def elapsed(self) -> int:
        """Milliseconds since the session start."""
        ...


class SessionClock:
    """Stores a start timestamp and reports elapsed milliseconds."""

    def __init__(self, time_source: TimeSource | None = None):
        self._time_source = time_source or now_ms
        self._start_time: int | None = None

    @property
    def start_time(self) -> int | None:
        """Start timestamp in ms, None before init()."""
        return self._start_time

    def init(self) -> None:
        """Record the session start time, discarding any previous one."""
        self._start_time = self._time_source()

    def elapsed(self) -> int:
        """Milliseconds since init()."""
        if self._start_time is None:
            raise ConfigError("Session clock not started; call init() first")
        return self._time_source() - self._start_time

"""Session clock module."""

from .clock import ISessionClock, SessionClock, TimeSource, now_ms

__all__ = ["ISessionClock", "SessionClock", "TimeSource", "now_ms"]

"""Pytest configuration and fixtures."""

import io
import sys
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import Mock

import httpx
import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


class FakeTime:
    """Controllable millisecond time source."""

    def __init__(self, start: int = 1_700_000_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def fake_time():
    """Create a controllable time source."""
    return FakeTime()


@pytest.fixture
def clock(fake_time):
    """Create SessionClock driven by fake_time."""
    from error_logger.clock import SessionClock

    return SessionClock(time_source=fake_time)


@pytest.fixture
def viewport():
    """Viewport rendering as 1024x600."""
    from error_logger.host import StaticViewport

    return StaticViewport(document=(800, 600), window=(1024, 0))


@pytest.fixture
def fixed_now():
    """Fixed capture timestamp."""
    return datetime(2026, 10, 19, 10, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def enricher(clock, viewport, fixed_now):
    """Create ErrorEnricher with fake clock and static viewport."""
    from error_logger.enricher import ErrorEnricher

    return ErrorEnricher(clock=clock, viewport=viewport, now=lambda: fixed_now)


@pytest.fixture
def source():
    """Create in-process error event source."""
    from error_logger.host import ErrorEventSource

    return ErrorEventSource()


@pytest.fixture
def console_stream():
    """Capture console sink output."""
    return io.StringIO()


@pytest.fixture
def requests_seen():
    """Requests received by the mock transport."""
    return []


@pytest.fixture
def make_transport(requests_seen):
    """Build an httpx.MockTransport answering with a fixed status."""

    def _make(status_code: int = 200) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return httpx.Response(status_code, json={"status": "ok"})

        return httpx.MockTransport(handler)

    return _make


@pytest.fixture
def callbacks():
    """Success/error callback mocks."""
    return Mock(success=Mock(), error=Mock())


@pytest.fixture
def error_event():
    """ErrorEvent built from a really raised exception."""
    from error_logger.models import ErrorEvent

    try:
        raise ValueError("boom")
    except ValueError as e:
        return ErrorEvent.from_exception(e)


@pytest.fixture
def record():
    """Enriched error record with a three-line stack."""
    from error_logger.models import ErrorRecord

    return ErrorRecord(
        type="error",
        message="ValueError: boom",
        path="app/views.py",
        line=42,
        column=9,
        stack_trace="line1\nline2\nline3",
        viewport="1024x600",
        time_spend=61000,
        datetime="Mon Oct 19 2026 10:00:00 GMT+0000 (UTC)",
    )

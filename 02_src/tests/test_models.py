"""Tests for data models."""

import json
import sys

from error_logger.models import DeliveryResult, ErrorEvent, ErrorRecord


def _raise_value_error():
    raise ValueError("boom")


class TestErrorEvent:
    """Tests for ErrorEvent model."""

    def test_create_event(self):
        """Test creating an ErrorEvent without an error object."""
        event = ErrorEvent(
            type="error",
            message="Script error.",
            filename="app.py",
            lineno=3,
            colno=1,
        )
        assert event.error is None
        assert event.type == "error"

    def test_from_exception_location(self):
        """Test location comes from the innermost frame."""
        try:
            _raise_value_error()
        except ValueError as e:
            event = ErrorEvent.from_exception(e)

        assert event.type == "error"
        assert event.message == "ValueError: boom"
        assert event.filename == __file__
        assert event.lineno == _raise_value_error.__code__.co_firstlineno + 1
        assert isinstance(event.error, ValueError)

    def test_from_exception_column(self):
        """Test column is 1-based where the interpreter reports it."""
        try:
            _raise_value_error()
        except ValueError as e:
            event = ErrorEvent.from_exception(e)

        if sys.version_info >= (3, 11):
            assert event.colno == 5
        else:
            assert event.colno == 0

    def test_from_exception_without_traceback(self):
        """Test an exception that was never raised has no location."""
        event = ErrorEvent.from_exception(RuntimeError("not raised"))

        assert event.filename == ""
        assert event.lineno == 0
        assert event.colno == 0
        assert event.message == "RuntimeError: not raised"

    def test_custom_type(self):
        """Test the event category can be overridden."""
        event = ErrorEvent.from_exception(RuntimeError("x"), type="unhandledrejection")
        assert event.type == "unhandledrejection"


class TestErrorRecord:
    """Tests for ErrorRecord model."""

    def test_stack_lines(self, record):
        """Test the stack trace splits on newlines."""
        assert record.stack_lines() == ["line1", "line2", "line3"]

    def test_empty_stack_lines(self, record):
        """Test an empty stack trace gives no lines."""
        record.stack_trace = ""
        assert record.stack_lines() == []

    def test_payload_fields(self, record):
        """Test wire field names and the stack trace array."""
        payload = record.to_payload()

        assert list(payload) == [
            "type",
            "message",
            "path",
            "line",
            "column",
            "stackTrace",
            "viewport",
            "timeSpend",
            "datetime",
        ]
        assert payload["stackTrace"] == ["line1", "line2", "line3"]
        assert payload["timeSpend"] == 61000

    def test_payload_is_json(self, record):
        """Test the payload serializes to a JSON array for stackTrace."""
        body = json.loads(json.dumps(record.to_payload()))
        assert body["stackTrace"] == ["line1", "line2", "line3"]

    def test_payload_leaves_record_unchanged(self, record):
        """Test serialization does not rewrite the record's stack trace."""
        record.to_payload()
        assert record.stack_trace == "line1\nline2\nline3"


class TestDeliveryResult:
    """Tests for DeliveryResult model."""

    def test_success(self):
        result = DeliveryResult(ok=True, status_code=200)
        assert result.error is None

    def test_transport_failure(self):
        result = DeliveryResult(ok=False, error="connection refused")
        assert result.status_code is None

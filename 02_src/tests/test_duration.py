"""Tests for duration formatting."""

import pytest

from error_logger.duration import ZERO_DURATION, decompose_duration, format_duration


class TestDecomposeDuration:
    """Tests for decompose_duration()."""

    def test_zero(self):
        """Test all components are zero for 0 ms."""
        assert decompose_duration(0) == {
            "ms": 0,
            "seconds": 0,
            "minutes": 0,
            "hours": 0,
            "days": 0,
        }

    def test_carry_into_seconds(self):
        """Test 1500 ms carries 1 second and keeps 500 ms."""
        duration = decompose_duration(1500)
        assert duration["seconds"] == 1
        assert duration["ms"] == 500

    def test_full_cascade(self):
        """Test 1 day 1 hour 1 minute 1 second."""
        assert decompose_duration(90_061_000) == {
            "ms": 0,
            "seconds": 1,
            "minutes": 1,
            "hours": 1,
            "days": 1,
        }

    def test_components_within_modulus(self):
        """Test every component but days stays below its modulus."""
        duration = decompose_duration(86_399_999)
        assert duration == {
            "ms": 999,
            "seconds": 59,
            "minutes": 59,
            "hours": 23,
            "days": 0,
        }

    def test_days_unbounded(self):
        """Test days keep the whole carry."""
        assert decompose_duration(40 * 86_400_000)["days"] == 40

    def test_negative_rejected(self):
        """Test negative durations raise ValueError."""
        with pytest.raises(ValueError):
            decompose_duration(-1)


class TestFormatDuration:
    """Tests for format_duration()."""

    def test_zero_fallback(self):
        """Test 0 ms renders the zero fallback."""
        assert format_duration(0) == ZERO_DURATION == "0 ms"

    def test_one_and_a_half_seconds(self):
        """Test 1500 ms."""
        assert format_duration(1500) == "1 second, 500 ms"

    def test_exact_second(self):
        """Test 1000 ms."""
        assert format_duration(1000) == "1 second"

    def test_minute_and_second(self):
        """Test 61000 ms."""
        assert format_duration(61_000) == "1 minute, 1 second"

    def test_full_cascade(self):
        """Test units render largest first and zero ms is omitted."""
        assert format_duration(90_061_000) == "1 day, 1 hour, 1 minute, 1 second"

    def test_plural_labels(self):
        """Test values other than 1 use plural labels."""
        assert format_duration(2 * 86_400_000 + 3 * 3_600_000 + 2_000) == "2 days, 3 hours, 2 seconds"

    def test_single_ms(self):
        """Test 1 ms keeps the "ms" label."""
        assert format_duration(1) == "1 ms"

    def test_zero_units_omitted(self):
        """Test zero units in the middle are skipped."""
        assert format_duration(3_600_005) == "1 hour, 5 ms"

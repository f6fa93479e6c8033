"""
Tests for display formatters.
"""

from fittrack.shared.formatters import (
    PACE_PLACEHOLDER,
    format_distance,
    format_distance_short,
    format_duration,
    format_pace,
    format_speed,
)


class TestFormatDuration:
    """Tests for format_duration function."""

    def test_minutes_seconds(self):
        assert format_duration(307) == "05:07"

    def test_auto_hours(self):
        assert format_duration(3723) == "1:02:03"

    def test_forced_hours(self):
        assert format_duration(65, show_hours=True) == "0:01:05"

    def test_negative_is_zero(self):
        assert format_duration(-5) == "00:00"

    def test_fractional_truncated(self):
        assert format_duration(59.9) == "00:59"


class TestFormatPace:
    """Tests for format_pace function."""

    def test_regular_pace(self):
        assert format_pace(330) == "5'30\""

    def test_rounds_seconds(self):
        assert format_pace(300.6) == "5'01\""

    def test_rounding_carries_into_minutes(self):
        """59.7 seconds rounds to the next full minute."""
        assert format_pace(359.7) == "6'00\""

    def test_unknown_pace(self):
        assert format_pace(None) == PACE_PLACEHOLDER
        assert format_pace(0) == PACE_PLACEHOLDER

    def test_unrealistic_pace(self):
        """Slower than 2 hours per km is a placeholder."""
        assert format_pace(7201) == PACE_PLACEHOLDER


class TestFormatDistance:
    """Tests for distance/speed formatters."""

    def test_meters(self):
        assert format_distance(850.4) == "850 m"

    def test_kilometers(self):
        assert format_distance(12500) == "12.50 km"

    def test_short(self):
        assert format_distance_short(5234) == "5.23"

    def test_speed(self):
        assert format_speed(10.04) == "10.0"

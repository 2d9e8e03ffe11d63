"""Tests for core/domain/durations.py"""

import pytest

from core.domain.durations import format_duration, parse_duration


class TestParseDuration:
    """Compact duration strings to seconds."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("45s", 45),
            ("30m", 1800),
            ("1h", 3600),
            ("2d", 172800),
            ("1w", 604800),
            ("10", 10),
            ("0m", 0),
        ],
    )
    def test_units(self, text, expected):
        """Each unit multiplies by its number of seconds."""
        assert parse_duration(text) == expected

    def test_whitespace_and_case_are_ignored(self):
        """Surrounding spaces and upper-case units are accepted."""
        assert parse_duration("  1H ") == 3600

    @pytest.mark.parametrize("text", ["", "abc", "1.5h", "-1h", "1x", "h", "1 h", None, "１h", "٣m", "1５m"])
    def test_invalid_returns_none(self, text):
        """Anything outside <ASCII digits><unit?> is rejected."""
        assert parse_duration(text) is None


class TestFormatDuration:
    """Seconds back to the largest exact unit."""

    @pytest.mark.parametrize(
        "seconds,expected",
        [
            (604800, "1w"),
            (1209600, "2w"),
            (86400, "1d"),
            (172800, "2d"),
            (3600, "1h"),
            (7200, "2h"),
            (120, "2m"),
            (90, "90s"),
            (59, "59s"),
        ],
    )
    def test_largest_exact_unit(self, seconds, expected):
        assert format_duration(seconds) == expected

    def test_none_is_empty(self):
        """A missing duration renders as an empty field."""
        assert format_duration(None) == ""

    def test_zero_uses_weeks(self):
        """Zero divides every unit, so the first one wins."""
        assert format_duration(0) == "0w"

    @pytest.mark.parametrize("text", ["1w", "3d", "5h", "15m", "59s"])
    def test_canonical_strings_survive_parse_and_format(self, text):
        assert format_duration(parse_duration(text)) == text

    def test_non_canonical_input_is_normalised(self):
        """60m is shown as 1h once it comes back from the server."""
        assert format_duration(parse_duration("60m")) == "1h"

    def test_every_seconds_value_survives_format_and_parse(self):
        """Formatting never loses precision, whatever unit gets picked."""
        values = list(range(0, 3 * 3600)) + [86400 * d for d in range(1, 15)] + [604800 * 52, 604800 * 3 + 1]
        for seconds in values:
            assert parse_duration(format_duration(seconds)) == seconds, seconds

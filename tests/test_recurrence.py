"""
Tests for the weekly recurrence helpers.
"""

from datetime import time

import pendulum
import pytest

from nexus_scheduling.domain.exceptions import MalformedInputError
from nexus_scheduling.domain.recurrence import (
    days_until,
    occurrence,
    parse_wall_clock,
    sunday_based_weekday,
)


class TestParseWallClock:
    """Tests for parse_wall_clock."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("09:00", time(9, 0)),
            ("9:05", time(9, 5)),
            ("23:59:59", time(23, 59, 59)),
            ("00:00:00", time(0, 0)),
            ("14:30:00.000000", time(14, 30)),
            (" 08:15 ", time(8, 15)),
        ],
    )
    def test_valid_values(self, text, expected):
        """Accepted formats parse to the right time."""
        assert parse_wall_clock(text) == expected

    def test_error_names_the_value(self):
        """The error message points at the offending input."""
        with pytest.raises(MalformedInputError, match="'noon'"):
            parse_wall_clock("noon")

    def test_out_of_range_hour(self):
        """Hours past 23 are rejected."""
        with pytest.raises(MalformedInputError, match="out of range"):
            parse_wall_clock("24:00")

    def test_non_string_rejected(self):
        """Only strings are accepted."""
        with pytest.raises(MalformedInputError):
            parse_wall_clock(900)

    def test_malformed_input_is_a_value_error(self):
        """Callers catching ValueError also catch malformed input."""
        with pytest.raises(ValueError):
            parse_wall_clock("xx:yy")


class TestWeekdayArithmetic:
    """Tests for weekday conversion and day offsets."""

    def test_sunday_based_weekday(self):
        """Sunday is 0 and Saturday is 6."""
        sunday = pendulum.datetime(2024, 1, 7, tz="UTC")

        assert [sunday_based_weekday(sunday.add(days=i)) for i in range(7)] == [0, 1, 2, 3, 4, 5, 6]

    def test_days_until_same_day_is_zero(self):
        """The current weekday is zero days away."""
        wednesday = pendulum.datetime(2024, 1, 10, 10, tz="UTC")

        assert days_until(wednesday, 3) == 0

    def test_days_until_wraps(self):
        """Earlier weekdays are reached in the following week."""
        wednesday = pendulum.datetime(2024, 1, 10, 10, tz="UTC")

        assert days_until(wednesday, 2) == 6
        assert days_until(wednesday, 0) == 4
        assert days_until(wednesday, 6) == 3

    def test_occurrence_with_week_offset(self):
        """Week offsets add whole weeks and the wall clock is overwritten."""
        wednesday = pendulum.datetime(2024, 1, 10, 10, 17, 3, tz="UTC")

        assert occurrence(wednesday, 5, time(7, 30)) == pendulum.datetime(2024, 1, 12, 7, 30, tz="UTC")
        assert occurrence(wednesday, 5, time(7, 30), week_offset=1) == pendulum.datetime(
            2024, 1, 19, 7, 30, tz="UTC"
        )

    def test_occurrence_keeps_timezone(self):
        """The result lives in the reference's timezone."""
        reference = pendulum.datetime(2024, 1, 10, 10, tz="Europe/Berlin")

        result = occurrence(reference, 3, time(18, 0))

        assert result.timezone_name == "Europe/Berlin"
        assert result.hour == 18

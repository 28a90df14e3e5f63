"""
Calendar arithmetic for weekly recurring availability.

Weekdays use 0=Sunday throughout.
"""

import re
from datetime import datetime, time

import pendulum
from pendulum import DateTime

from .exceptions import MalformedInputError

DAYS_PER_WEEK = 7

_WALL_CLOCK_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2})(?:\.\d+)?)?$")


def parse_wall_clock(text: str) -> time:
    """
    Parse an ``HH:MM`` or ``HH:MM:SS`` string into a ``datetime.time``.

    Fractional seconds are accepted and dropped.

    Raises:
        MalformedInputError: If the value is not a valid wall-clock time
    """
    if not isinstance(text, str):
        raise MalformedInputError(f"Start time must be a string, got {text!r}")

    match = _WALL_CLOCK_PATTERN.match(text.strip())
    if not match:
        raise MalformedInputError(f"Cannot parse start time {text!r} as HH:MM[:SS]")

    hour = int(match.group(1))
    minute = int(match.group(2))
    second = int(match.group(3) or 0)

    if hour > 23 or minute > 59 or second > 59:
        raise MalformedInputError(f"Start time {text!r} is out of range")

    return time(hour=hour, minute=minute, second=second)


def to_instant(moment: datetime) -> DateTime:
    """Coerce a datetime to a pendulum DateTime. Naive values are taken as UTC."""
    if isinstance(moment, DateTime):
        return moment
    return pendulum.instance(moment, tz="UTC")


def sunday_based_weekday(moment: datetime) -> int:
    """Return the weekday of ``moment`` with 0=Sunday ... 6=Saturday."""
    return moment.isoweekday() % DAYS_PER_WEEK


def days_until(moment: datetime, day_of_week: int) -> int:
    """Days from ``moment``'s date to the next date (inclusive) on ``day_of_week``."""
    return (day_of_week - sunday_based_weekday(moment) + DAYS_PER_WEEK) % DAYS_PER_WEEK


def occurrence(
    reference: DateTime,
    day_of_week: int,
    wall_clock: time,
    week_offset: int = 0
) -> DateTime:
    """
    Concrete start of a weekly rule relative to ``reference``.

    Takes the nearest date on/after ``reference``'s date falling on
    ``day_of_week``, shifts it by ``week_offset`` weeks and overwrites the
    clock with ``wall_clock`` hour and minute. Seconds are zeroed.
    """
    offset_days = days_until(reference, day_of_week) + DAYS_PER_WEEK * week_offset

    return reference.add(days=offset_days).set(
        hour=wall_clock.hour,
        minute=wall_clock.minute,
        second=0,
        microsecond=0
    )

"""Calendar utilities for timeperiod.

Helpers that locate the first instant of a calendar unit. All of them
take a tzinfo and return an aware datetime at local midnight.

This module is not part of the public API.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, tzinfo

from timeperiod._internal.constants import MONTHS_PER_YEAR


def iso_week_monday(year: int, week: int) -> date:
    """Return the Monday of an ISO 8601 week.

    Week 1 is the week holding January 4th. Week numbers past the last
    week of the year roll over into the next year, so week 53 of a
    52-week year is week 1 of the following one.

    Args:
        year: The ISO week-numbering year.
        week: The ISO week number.

    Returns:
        The date of that week's Monday.

    Examples:
        >>> iso_week_monday(2014, 3)
        datetime.date(2014, 1, 13)
        >>> iso_week_monday(2015, 53)
        datetime.date(2015, 12, 28)
    """
    jan4 = date(year, 1, 4)
    week1_monday = jan4 - timedelta(days=jan4.weekday())
    return week1_monday + timedelta(weeks=week - 1)


def first_month_of(index: int, months_per_unit: int) -> int:
    """Return the first month (1-12) of the index-th unit of a year.

    Examples:
        >>> first_month_of(3, 3)  # third quarter
        7
        >>> first_month_of(2, 6)  # second semester
        7
    """
    return (index - 1) * months_per_unit + 1


def month_start(year: int, month: int, tz: tzinfo) -> datetime:
    """Return midnight of the first day of a month in the given zone."""
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise ValueError(f"month must be 1-12, got {month}")
    return datetime(year, month, 1, tzinfo=tz)


def midnight(value: datetime) -> datetime:
    """Truncate a datetime to midnight, keeping its type and tzinfo."""
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


__all__ = [
    "iso_week_monday",
    "first_month_of",
    "month_start",
    "midnight",
]

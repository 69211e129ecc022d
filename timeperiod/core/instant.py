"""Instant resolution for the Period boundary.

An instant is an aware datetime. This module turns the loose values
callers pass around (datetimes, dates, strings) into one, and provides
the absolute-time helpers the Period algebra is written against.

Naive input is placed in the configured default time zone. Aware input
is returned untouched, so datetime subclasses and their tzinfo survive.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Union

from dateutil import parser as dateutil_parser
from dateutil.relativedelta import relativedelta

from timeperiod.config import get_default_timezone
from timeperiod.errors import ParseError

InstantLike = Union[datetime, date, str]

# Keywords resolved against the current clock
_NOW_KEYWORDS = frozenset({"now"})
_TODAY_KEYWORDS = frozenset({"today", "midnight"})


def is_aware(value: datetime) -> bool:
    """Return True if the datetime carries a usable UTC offset."""
    return value.tzinfo is not None and value.utcoffset() is not None


def to_instant(value: InstantLike, tz: tzinfo | None = None) -> datetime:
    """Resolve an instant-like value to an aware datetime.

    Args:
        value: A datetime (naive or aware), a date, or a string such as
            "2014-05-01", "2015-01-03 08:06:25.235",
            "2008-07-01T22:35:17+08:00" or "now".
        tz: Zone for naive input. Defaults to the configured default zone.

    Returns:
        An aware datetime. Aware datetimes are returned as-is.

    Raises:
        ParseError: If a string cannot be understood as a point in time.
        TypeError: If value is of an unsupported type.

    Examples:
        >>> to_instant("2014-05-01T10:00:00+02:00")
        datetime.datetime(2014, 5, 1, 10, 0, tzinfo=tzoffset(None, 7200))

        >>> to_instant(date(2014, 5, 1), timezone.utc)
        datetime.datetime(2014, 5, 1, 0, 0, tzinfo=datetime.timezone.utc)
    """
    zone = tz if tz is not None else get_default_timezone()

    # datetime is a subclass of date, so it must be checked first
    if isinstance(value, datetime):
        if is_aware(value):
            return value
        return value.replace(tzinfo=zone)

    if isinstance(value, date):
        return datetime.combine(value, time(), tzinfo=zone)

    if isinstance(value, str):
        return _parse_instant(value, zone)

    raise TypeError(
        f"expected datetime, date, or str, got {type(value).__name__}"
    )


def _parse_instant(text: str, zone: tzinfo) -> datetime:
    stripped = text.strip()
    if not stripped:
        raise ParseError("empty string")

    keyword = stripped.lower()
    if keyword in _NOW_KEYWORDS:
        return datetime.now(zone)
    if keyword in _TODAY_KEYWORDS:
        return datetime.now(zone).replace(hour=0, minute=0, second=0, microsecond=0)

    try:
        parsed = dateutil_parser.parse(stripped)
    except (ValueError, OverflowError) as e:
        raise ParseError(f"cannot parse instant: {text!r}") from e

    if is_aware(parsed):
        return parsed
    return parsed.replace(tzinfo=zone)


def to_utc(value: datetime) -> datetime:
    """Return the absolute instant of an aware datetime, expressed in UTC.

    Ordering and equality of periods go through this function, so that
    two datetimes sharing a tzinfo are still compared as instants and
    not as wall-clock readings.
    """
    return value.astimezone(timezone.utc)


def shift(value: datetime, duration: timedelta | relativedelta) -> datetime:
    """Move an aware datetime by a duration.

    A timedelta is exact elapsed time, so it is applied to the absolute
    instant and the result is read back in value's zone. A relativedelta
    follows the local calendar and clock of value.

    Examples:
        >>> from zoneinfo import ZoneInfo
        >>> paris = ZoneInfo("Europe/Paris")
        >>> shift(datetime(2026, 3, 29, 1, 30, tzinfo=paris), timedelta(hours=1)).hour
        3
    """
    if isinstance(duration, timedelta):
        return (to_utc(value) + duration).astimezone(value.tzinfo)
    return value + duration


def elapsed_seconds(start: datetime, end: datetime) -> float:
    """Return the elapsed seconds from start to end (negative if end is earlier).

    Examples:
        >>> a = datetime(2012, 1, 1, tzinfo=timezone.utc)
        >>> elapsed_seconds(a, datetime(2012, 1, 1, 1, tzinfo=timezone.utc))
        3600.0
    """
    return (to_utc(end) - to_utc(start)).total_seconds()


def calendar_difference(start: datetime, end: datetime) -> relativedelta:
    """Return the calendar-relative duration leading from start to end.

    The difference is computed in start's zone, so that adding the
    result to start lands on end.

    Examples:
        >>> a = datetime(2014, 3, 1, tzinfo=timezone.utc)
        >>> calendar_difference(a, datetime(2014, 4, 1, tzinfo=timezone.utc))
        relativedelta(months=+1)
    """
    return relativedelta(end.astimezone(start.tzinfo), start)


__all__ = [
    "InstantLike",
    "is_aware",
    "to_instant",
    "to_utc",
    "shift",
    "elapsed_seconds",
    "calendar_difference",
]

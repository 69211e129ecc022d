"""Duration resolution for the Period boundary.

Every duration argument collapses into one of two canonical shapes:

    relativedelta  calendar-relative span (years, months, days, time)
    timedelta      exact elapsed time

Accepted input:
    - timedelta and relativedelta, returned unchanged
    - int or float, a number of seconds
    - relative text: "1 DAY", "+2 weeks", "- 1 day", "1 year 2 months",
      "3 days ago"
    - ISO 8601 durations: "P1D", "PT1H", "-P1M", "P1Y2M3DT4H5M6.5S", "P2W"

Text always resolves to a relativedelta, numbers to a timedelta.

Whether a duration runs backward depends on the instant it is applied
to (relativedelta(months=1, days=-31) is backward from March 1st but
forward from February 1st), so inversion is checked against an anchor.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta
from typing import Union

from dateutil.relativedelta import relativedelta

from timeperiod.core.instant import shift, to_utc
from timeperiod.errors import ParseError

Duration = Union[timedelta, relativedelta]
DurationLike = Union[timedelta, relativedelta, int, float, str]

# Unit names for relative text, mapped to relativedelta keywords
TIME_UNITS: dict[str, str] = {
    "year": "years",
    "years": "years",
    "yr": "years",
    "yrs": "years",
    "month": "months",
    "months": "months",
    "week": "weeks",
    "weeks": "weeks",
    "wk": "weeks",
    "wks": "weeks",
    "day": "days",
    "days": "days",
    "hour": "hours",
    "hours": "hours",
    "hr": "hours",
    "hrs": "hours",
    "minute": "minutes",
    "minutes": "minutes",
    "min": "minutes",
    "mins": "minutes",
    "second": "seconds",
    "seconds": "seconds",
    "sec": "seconds",
    "secs": "seconds",
    "microsecond": "microseconds",
    "microseconds": "microseconds",
    "usec": "microseconds",
    "usecs": "microseconds",
}

# One signed "<amount> <unit>" term of relative text
RELATIVE_TERM_PATTERN = re.compile(
    r"\s*([+-])?\s*(\d+)\s*([a-z]+)\s*",
    re.IGNORECASE,
)

# Trailing "ago" turns the whole expression around
AGO_SUFFIX_PATTERN = re.compile(r"\s+ago\s*$", re.IGNORECASE)

ISO8601_DURATION_PATTERN = re.compile(
    r"^([+-])?P(?!$)"
    r"(?:(\d+)Y)?(?:(\d+)M)?(?:(\d+)W)?(?:(\d+)D)?"
    r"(?:T(?=\d)(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)(?:[.,](\d+))?S)?)?$",
    re.IGNORECASE,
)


def to_duration(value: DurationLike) -> Duration:
    """Resolve a duration-like value to a relativedelta or a timedelta.

    Args:
        value: A timedelta, relativedelta, number of seconds, or text.

    Returns:
        The canonical duration.

    Raises:
        ParseError: If text cannot be parsed.
        TypeError: If value is of an unsupported type.

    Examples:
        >>> to_duration(3600)
        datetime.timedelta(seconds=3600)
        >>> to_duration("2 MONTHS")
        relativedelta(months=+2)
        >>> to_duration("PT1H")
        relativedelta(hours=+1)
    """
    if isinstance(value, (timedelta, relativedelta)):
        return value

    # bool is an int subclass but never a meaningful number of seconds
    if isinstance(value, bool):
        raise TypeError("expected a duration, got bool")

    if isinstance(value, (int, float)):
        try:
            return timedelta(seconds=value)
        except (OverflowError, ValueError) as e:
            raise ParseError(f"cannot use {value!r} as a number of seconds") from e

    if isinstance(value, str):
        return parse_duration(value)

    raise TypeError(
        f"expected timedelta, relativedelta, number, or str, got {type(value).__name__}"
    )


def parse_duration(text: str) -> relativedelta:
    """Parse relative text or an ISO 8601 duration into a relativedelta.

    Args:
        text: The duration text.

    Returns:
        A relativedelta; negative components mean "backward".

    Raises:
        ParseError: If the text is not a duration.

    Examples:
        >>> parse_duration("+1 DAY")
        relativedelta(days=+1)
        >>> parse_duration("- 1 day")
        relativedelta(days=-1)
        >>> parse_duration("1 hour 30 minutes")
        relativedelta(hours=+1, minutes=+30)
        >>> parse_duration("2 weeks ago")
        relativedelta(days=-14)
        >>> parse_duration("-P1M")
        relativedelta(months=-1)
    """
    stripped = text.strip()
    if not stripped:
        raise ParseError("empty string")

    iso_match = ISO8601_DURATION_PATTERN.match(stripped)
    if iso_match:
        return _from_iso8601_match(iso_match)

    return _parse_relative_text(stripped)


def _from_iso8601_match(match: re.Match[str]) -> relativedelta:
    sign, years, months, weeks, days, hours, minutes, seconds, fraction = match.groups()

    microseconds = 0
    if fraction:
        microseconds = int(fraction.ljust(6, "0")[:6])

    result = relativedelta(
        years=int(years or 0),
        months=int(months or 0),
        weeks=int(weeks or 0),
        days=int(days or 0),
        hours=int(hours or 0),
        minutes=int(minutes or 0),
        seconds=int(seconds or 0),
        microseconds=microseconds,
    )
    return -result if sign == "-" else result


def _parse_relative_text(text: str) -> relativedelta:
    body, ago = AGO_SUFFIX_PATTERN.subn("", text)

    components: dict[str, int] = {}
    position = 0
    while position < len(body):
        match = RELATIVE_TERM_PATTERN.match(body, position)
        if match is None:
            raise ParseError(f"cannot parse duration: {text!r}")

        sign, amount, unit_name = match.groups()
        unit = TIME_UNITS.get(unit_name.lower())
        if unit is None:
            raise ParseError(f"unknown time unit {unit_name!r} in duration {text!r}")

        value = -int(amount) if sign == "-" else int(amount)
        components[unit] = components.get(unit, 0) + value
        position = match.end()

    if not components:
        raise ParseError(f"cannot parse duration: {text!r}")

    result = relativedelta(**components)
    return -result if ago else result


def is_inverted(duration: Duration, anchor: datetime) -> bool:
    """Return True if applying the duration to anchor moves back in time.

    Examples:
        >>> from datetime import timezone
        >>> anchor = datetime(2012, 1, 12, tzinfo=timezone.utc)
        >>> is_inverted(parse_duration("-1 DAY"), anchor)
        True
        >>> is_inverted(timedelta(0), anchor)
        False
    """
    return to_utc(shift(anchor, duration)) < to_utc(anchor)


__all__ = [
    "Duration",
    "DurationLike",
    "TIME_UNITS",
    "to_duration",
    "parse_duration",
    "is_inverted",
]

"""Default time zone configuration.

Naive input (a date string without offset, a naive datetime or a plain
date) is interpreted in the default time zone. The initial value is read
from the TIMEPERIOD_DEFAULT_TIMEZONE environment variable and falls back
to UTC.

Examples:
    >>> from timeperiod.config import default_timezone, get_default_timezone
    >>> with default_timezone("+03:00"):
    ...     get_default_timezone().utcoffset(None)
    datetime.timedelta(seconds=10800)
"""

from __future__ import annotations

import logging
import os
import re
from contextlib import contextmanager
from datetime import timedelta, timezone, tzinfo
from typing import Iterator, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from timeperiod._internal.constants import DEFAULT_TIMEZONE_ENV
from timeperiod.errors import ParseError

_LOGGER = logging.getLogger(__name__)

TimezoneLike = Union[str, tzinfo]

_OFFSET_PATTERN = re.compile(r"^([+-])(\d{2}):?(\d{2})$")


def resolve_timezone(value: TimezoneLike) -> tzinfo:
    """Turn a time zone specification into a tzinfo.

    Args:
        value: A tzinfo, "UTC"/"Z", a "+HH:MM" offset, or an IANA name.

    Returns:
        The matching tzinfo.

    Raises:
        ParseError: If the name is unknown or the offset malformed.
        TypeError: If value is neither a string nor a tzinfo.

    Examples:
        >>> resolve_timezone("Z")
        datetime.timezone.utc
        >>> resolve_timezone("-05:30")
        datetime.timezone(datetime.timedelta(days=-1, seconds=66600))
    """
    if isinstance(value, tzinfo):
        return value
    if not isinstance(value, str):
        raise TypeError(
            f"expected str or tzinfo, got {type(value).__name__}"
        )

    text = value.strip()
    if text.upper() in ("UTC", "Z"):
        return timezone.utc

    match = _OFFSET_PATTERN.match(text)
    if match:
        sign, hours, minutes = match.groups()
        offset = timedelta(hours=int(hours), minutes=int(minutes))
        if offset >= timedelta(hours=24):
            raise ParseError(f"UTC offset out of range: {value!r}")
        return timezone(-offset if sign == "-" else offset)

    try:
        return ZoneInfo(text)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ParseError(f"unknown time zone: {value!r}") from e


def _initial_timezone() -> tzinfo:
    configured = os.environ.get(DEFAULT_TIMEZONE_ENV)
    if not configured:
        return timezone.utc
    return resolve_timezone(configured)


_default_timezone: tzinfo = _initial_timezone()


def get_default_timezone() -> tzinfo:
    """Return the zone applied to naive input."""
    return _default_timezone


def set_default_timezone(value: TimezoneLike | None) -> tzinfo:
    """Replace the zone applied to naive input.

    Args:
        value: Any value accepted by resolve_timezone, or None to go back
            to the environment/UTC default.

    Returns:
        The previous default, so callers can restore it.
    """
    global _default_timezone

    previous = _default_timezone
    _default_timezone = _initial_timezone() if value is None else resolve_timezone(value)
    _LOGGER.debug("Default time zone changed from %s to %s", previous, _default_timezone)
    return previous


@contextmanager
def default_timezone(value: TimezoneLike) -> Iterator[tzinfo]:
    """Temporarily change the default time zone.

    Examples:
        >>> with default_timezone("Africa/Nairobi") as tz:
        ...     str(tz)
        'Africa/Nairobi'
    """
    previous = set_default_timezone(value)
    try:
        yield _default_timezone
    finally:
        set_default_timezone(previous)


__all__ = [
    "TimezoneLike",
    "resolve_timezone",
    "get_default_timezone",
    "set_default_timezone",
    "default_timezone",
]

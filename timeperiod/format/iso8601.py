"""ISO 8601 interval formatting.

Periods are written in the "<start>/<end>" interval notation of ISO 8601,
with both bounds converted to UTC and marked with the "Z" designator.
Microseconds are only written when they are not zero.

Examples:
    >>> from datetime import datetime, timezone
    >>> format_instant(datetime(2014, 5, 1, 12, 30, tzinfo=timezone.utc))
    '2014-05-01T12:30:00Z'
"""

from __future__ import annotations

from datetime import datetime

from timeperiod.core.instant import to_utc

# Separator between the two bounds of an interval
INTERVAL_SEPARATOR = "/"


def format_instant(value: datetime) -> str:
    """Format an aware datetime as a UTC ISO 8601 string.

    Args:
        value: An aware datetime.

    Returns:
        "YYYY-MM-DDTHH:MM:SS[.ffffff]Z".

    Raises:
        ValueError: If value is naive.

    Examples:
        >>> from datetime import datetime, timedelta, timezone
        >>> plus3 = timezone(timedelta(hours=3))
        >>> format_instant(datetime(2014, 5, 1, 1, 0, 0, 250000, tzinfo=plus3))
        '2014-04-30T22:00:00.250000Z'
    """
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError("cannot format a naive datetime as UTC")
    return to_utc(value).replace(tzinfo=None).isoformat() + "Z"


def format_interval(start: datetime, end: datetime) -> str:
    """Format two aware datetimes as a UTC ISO 8601 interval.

    Examples:
        >>> from datetime import datetime, timezone
        >>> format_interval(
        ...     datetime(2014, 5, 1, tzinfo=timezone.utc),
        ...     datetime(2014, 5, 8, tzinfo=timezone.utc),
        ... )
        '2014-05-01T00:00:00Z/2014-05-08T00:00:00Z'
    """
    return f"{format_instant(start)}{INTERVAL_SEPARATOR}{format_instant(end)}"


__all__ = [
    "INTERVAL_SEPARATOR",
    "format_instant",
    "format_interval",
]

"""Period formatting.

Functions:
    format_instant: Format an aware datetime as a UTC ISO 8601 string.
    format_interval: Format two bounds as a UTC ISO 8601 interval.

Examples:
    >>> from timeperiod import Period
    >>> from timeperiod.format import format_interval

    >>> p = Period.from_month(2014, 3)
    >>> format_interval(p.start, p.end)
    '2014-03-01T00:00:00Z/2014-04-01T00:00:00Z'
"""

from __future__ import annotations

from timeperiod.format.iso8601 import format_instant, format_interval

__all__ = [
    "format_instant",
    "format_interval",
]

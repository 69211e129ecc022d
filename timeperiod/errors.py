"""Timeperiod exception hierarchy.

All timeperiod-specific exceptions inherit from PeriodError. The ones
that describe a bad argument value also inherit from ValueError so that
callers catching the builtin keep working.
"""

from __future__ import annotations


class PeriodError(Exception):
    """Base exception for all timeperiod errors."""

    pass


class OrderingError(PeriodError, ValueError):
    """A period would end before it starts.

    Raised by every construction path, including the transformations
    that replace or shift a single endpoint.

    Examples:
        - Period("2014-05-02", "2014-05-01")
        - Moving the end date three months back on a one month period
    """

    pass


class InvalidDurationError(PeriodError, ValueError):
    """A duration runs backward where a forward span is required.

    Examples:
        - Period.from_duration("2012-01-12", "-1 DAY")
        - period.with_duration(-timedelta(days=1))
    """

    pass


class RangeError(PeriodError, ValueError):
    """A calendar unit index is outside its valid domain.

    Examples:
        - Month outside 1-12
        - Quarter outside 1-4
        - Semester outside 1-2
        - ISO week outside 1-53
    """

    pass


class LogicError(PeriodError):
    """A set operation was invoked on an unsuitable pair of periods.

    Examples:
        - Intersecting two periods that do not overlap
        - Asking for the gap between two overlapping periods
        - Diffing two periods that do not overlap
    """

    pass


class StepError(PeriodError, ValueError):
    """A decomposition interval does not move time forward.

    Examples:
        - period.split(0)
        - period.get_date_period(-3600)
    """

    pass


class ParseError(PeriodError, ValueError):
    """Failed to understand an instant, duration or serialized period.

    Examples:
        - Unparseable date string
        - Unknown duration unit such as "3 lightyears"
        - JSON payload without a "start" field
    """

    pass


__all__ = [
    "PeriodError",
    "OrderingError",
    "InvalidDurationError",
    "RangeError",
    "LogicError",
    "StepError",
    "ParseError",
]

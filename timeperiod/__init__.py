"""Timeperiod: immutable time periods and their algebra.

A Period is a half-open span [start, end) between two aware datetimes.
Periods can be compared, merged, intersected, diffed, moved, resized and
decomposed into sub-periods or stepped instants. Every operation returns
a new Period and keeps start <= end.

Core Types:
    Period: Time span between two instants [start, end)

Boundary Helpers:
    to_instant: Resolve a datetime, date or string to an aware datetime
    to_duration: Resolve seconds, text or a delta to timedelta/relativedelta

Configuration:
    get_default_timezone: Zone applied to naive input
    set_default_timezone: Replace that zone
    default_timezone: Context manager changing it temporarily

Exceptions:
    PeriodError: Base exception
    OrderingError: Period would end before it starts
    InvalidDurationError: Duration runs backward
    RangeError: Calendar index out of range
    LogicError: Set operation precondition violated
    StepError: Decomposition interval does not advance
    ParseError: Failed to parse input

Example:
    >>> from timeperiod import Period
    >>> march = Period.from_month(2014, 3)
    >>> march.overlaps(Period.from_month(2014, 4))
    False
    >>> str(march.next())
    '2014-04-01T00:00:00Z/2014-05-01T00:00:00Z'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from timeperiod.core.period import Period

# Boundary helpers
from timeperiod.core.duration import to_duration
from timeperiod.core.instant import to_instant

# Configuration
from timeperiod.config import (
    default_timezone,
    get_default_timezone,
    set_default_timezone,
)

# Exceptions
from timeperiod.errors import (
    InvalidDurationError,
    LogicError,
    OrderingError,
    ParseError,
    PeriodError,
    RangeError,
    StepError,
)

# Conversion and format functions
from timeperiod.convert import from_json, to_json
from timeperiod.format import format_interval

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Period",
    # Boundary helpers
    "to_instant",
    "to_duration",
    # Configuration
    "get_default_timezone",
    "set_default_timezone",
    "default_timezone",
    # Exceptions
    "PeriodError",
    "OrderingError",
    "InvalidDurationError",
    "RangeError",
    "LogicError",
    "StepError",
    "ParseError",
    # Conversion and format functions
    "to_json",
    "from_json",
    "format_interval",
]

"""Core period types.

This module provides:
    - Period: Immutable half-open time span [start, end)
    - to_instant: Resolution of instant-like input to aware datetimes
    - to_duration: Resolution of duration-like input to timedelta or relativedelta
"""

from __future__ import annotations

from timeperiod.core.duration import parse_duration, to_duration
from timeperiod.core.instant import to_instant, to_utc
from timeperiod.core.period import Period

__all__: list[str] = [
    "Period",
    "parse_duration",
    "to_duration",
    "to_instant",
    "to_utc",
]

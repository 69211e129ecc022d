"""Internal constants for timeperiod.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

import datetime as _dt

# Year limits (those of the datetime module)
MIN_YEAR: int = _dt.MINYEAR
MAX_YEAR: int = _dt.MAXYEAR

# Calendar unit sizes in months
MONTHS_PER_YEAR: int = 12
MONTHS_PER_SEMESTER: int = 6
MONTHS_PER_QUARTER: int = 3

# Index domains for the calendar factories (inclusive)
SEMESTERS_PER_YEAR: int = 2
QUARTERS_PER_YEAR: int = 4
MAX_ISO_WEEK: int = 53

# Environment variable holding the initial default time zone
DEFAULT_TIMEZONE_ENV: str = "TIMEPERIOD_DEFAULT_TIMEZONE"


__all__ = [
    "MIN_YEAR",
    "MAX_YEAR",
    "MONTHS_PER_YEAR",
    "MONTHS_PER_SEMESTER",
    "MONTHS_PER_QUARTER",
    "SEMESTERS_PER_YEAR",
    "QUARTERS_PER_YEAR",
    "MAX_ISO_WEEK",
    "DEFAULT_TIMEZONE_ENV",
]

"""Internal utilities for timeperiod.

This module contains private implementation details:
    - Range validation decorator
    - Constants and magic numbers
    - Calendar helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from timeperiod._internal.calendar import (
    first_month_of,
    iso_week_monday,
    midnight,
    month_start,
)
from timeperiod._internal.validation import validate_range

__all__: list[str] = [
    "first_month_of",
    "iso_week_monday",
    "midnight",
    "month_start",
    "validate_range",
]

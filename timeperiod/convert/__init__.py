"""Period conversion utilities.

This module provides functions for converting periods to and from
JSON-serializable dictionaries.

Examples:
    >>> from timeperiod import Period
    >>> from timeperiod.convert import to_json, from_json

    >>> p = Period.from_quarter(2024, 2)
    >>> restored = from_json(to_json(p))
    >>> restored == p
    True
"""

from __future__ import annotations

from timeperiod.convert.json import from_json, to_json

__all__ = [
    "to_json",
    "from_json",
]

"""JSON serialization and deserialization for periods.

This module provides functions for converting periods to and from
JSON-serializable dictionaries.

Functions:
    to_json: Convert a Period to a JSON-serializable dict.
    from_json: Create a Period from a JSON dict.

The JSON format carries a type tag and both bounds as ISO 8601 strings,
with their original UTC offsets:

    {"_type": "Period", "start": "2014-05-01T00:00:00+02:00",
     "end": "2014-05-08T00:00:00+02:00"}

Examples:
    >>> from timeperiod import Period
    >>> from timeperiod.convert import to_json, from_json

    >>> p = Period.from_month(2024, 1)
    >>> data = to_json(p)
    >>> data['_type']
    'Period'

    >>> from_json(data) == p
    True
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from timeperiod.errors import ParseError

if TYPE_CHECKING:
    from timeperiod.core.period import Period

_LOGGER = logging.getLogger(__name__)

PERIOD_TYPE_TAG = "Period"


def to_json(value: Period) -> dict[str, Any]:
    """Convert a Period to a JSON-serializable dictionary.

    Args:
        value: The Period to convert.

    Returns:
        A dictionary with `_type`, `start` and `end` fields.

    Raises:
        TypeError: If value is not a Period.

    Examples:
        >>> from timeperiod import Period
        >>> to_json(Period.from_day("2024-01-15T00:00:00Z"))
        {'_type': 'Period', 'start': '2024-01-15T00:00:00+00:00', 'end': '2024-01-16T00:00:00+00:00'}
    """
    # Import here to avoid circular imports
    from timeperiod.core.period import Period

    if not isinstance(value, Period):
        raise TypeError(f"expected Period, got {type(value).__name__}")

    return {
        "_type": PERIOD_TYPE_TAG,
        "start": value.start.isoformat(),
        "end": value.end.isoformat(),
    }


def from_json(data: dict[str, Any]) -> Period:
    """Create a Period from a JSON dictionary.

    Args:
        data: A dictionary with `_type`, `start` and `end` fields.

    Returns:
        The Period described by data.

    Raises:
        ParseError: If the data is missing required fields or has invalid format.
        OrderingError: If the end precedes the start.

    Examples:
        >>> p = from_json({
        ...     '_type': 'Period',
        ...     'start': '2024-01-15T00:00:00Z',
        ...     'end': '2024-01-16T00:00:00Z',
        ... })
        >>> p.get_timestamp_interval()
        86400.0
    """
    # Import here to avoid circular imports
    from timeperiod.core.period import Period

    if not isinstance(data, dict):
        raise ParseError(f"expected dict, got {type(data).__name__}")

    type_name = data.get("_type")
    if not type_name:
        raise ParseError("missing '_type' field in JSON data")
    if type_name != PERIOD_TYPE_TAG:
        _LOGGER.debug("Rejected JSON payload tagged %r", type_name)
        raise ParseError(f"unknown period type: {type_name!r}")

    bounds = []
    for field in ("start", "end"):
        value = data.get(field)
        if not value or not isinstance(value, str):
            raise ParseError(f"missing '{field}' field for Period")
        bounds.append(value)

    return Period(*bounds)


__all__ = [
    "to_json",
    "from_json",
]

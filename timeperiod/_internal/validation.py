"""Validation utilities for timeperiod.

This module provides the decorator used by the calendar factories to
reject unit indices outside their domain.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
import logging
from typing import Callable, TypeVar, ParamSpec

from timeperiod.errors import RangeError

P = ParamSpec("P")
T = TypeVar("T")

_LOGGER = logging.getLogger(__name__)


def validate_range(
    **limits: tuple[int, int],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that integer parameters are within ranges.

    Named parameters are checked against (min, max) pairs, both
    inclusive. Parameters that are None or not integers (for instance an
    instant passed in place of a year) are left alone.

    Args:
        **limits: Mapping of parameter names to (min, max) tuples.

    Returns:
        A decorator function.

    Raises:
        RangeError: From the decorated callable, when a value is out of range.

    Examples:
        >>> @validate_range(month=(1, 12))
        ... def month_start(year: int, month: int) -> None:
        ...     pass

        >>> month_start(2014, 13)
        Traceback (most recent call last):
        ...
        timeperiod.errors.RangeError: month must be between 1 and 12, got 13
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = sig.bind_partial(*args, **kwargs)

            for param_name, (min_val, max_val) in limits.items():
                value = bound.arguments.get(param_name)
                if not isinstance(value, int):
                    continue
                if value < min_val or value > max_val:
                    _LOGGER.debug(
                        "%s rejected %s=%r outside [%d, %d]",
                        func.__qualname__,
                        param_name,
                        value,
                        min_val,
                        max_val,
                    )
                    raise RangeError(
                        f"{param_name} must be between {min_val} and {max_val}, "
                        f"got {value}"
                    )

            return func(*args, **kwargs)

        return wrapper

    return decorator


__all__ = [
    "validate_range",
]

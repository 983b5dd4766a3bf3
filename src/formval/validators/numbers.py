"""Numeric range predicate."""

from __future__ import annotations

from formval.validators.base import Number, require_number


def is_number_between(value: Number, floor: Number, ceil: Number) -> bool:
    """Check that ``floor <= value <= ceil``.

    Both bounds are inclusive. When ``floor > ceil`` the range is empty and
    every value fails.

    Args:
        value: The number to check.
        floor: Lower bound of the range.
        ceil: Upper bound of the range.

    Returns:
        True if ``value`` lies within the range.

    Raises:
        InvalidArgumentError: If any argument is missing or not a number.
    """
    require_number(value, "input")
    require_number(floor, "floor")
    require_number(ceil, "ceil")
    return floor <= value <= ceil

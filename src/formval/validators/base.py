"""Argument pre-conditions shared by every predicate.

Each predicate checks the shape of its own arguments before applying its
rule. A failed check raises ``InvalidArgumentError``; it never returns
``False``.
"""

from __future__ import annotations

import math
import re
from collections.abc import Sequence
from typing import Any

from formval.errors import InvalidArgumentError

Number = int | float

# Leading-number grammars used when reading color components.
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def require_text(value: Any, param: str = "input") -> str:
    """Return ``value`` if it is a string, else raise.

    The empty string is text, not a missing value.

    Raises:
        InvalidArgumentError: If ``value`` is None or not a ``str``.
    """
    if value is None or not isinstance(value, str):
        raise InvalidArgumentError(param, "string")
    return value


def require_number(value: Any, param: str = "n") -> Number:
    """Return ``value`` if it is a real number, else raise.

    ``bool`` is rejected even though it subclasses ``int``, and so is NaN.

    Raises:
        InvalidArgumentError: If ``value`` is None, not numeric, or NaN.
    """
    if value is None or isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(param, "number")
    if isinstance(value, float) and math.isnan(value):
        raise InvalidArgumentError(param, "number")
    return value


def require_token_list(value: Any, param: str = "words") -> Sequence[str]:
    """Return ``value`` if it is a non-empty list or tuple of strings, else raise.

    Raises:
        InvalidArgumentError: If ``value`` is not list-shaped, is empty, or
            holds a non-string entry.
    """
    if not isinstance(value, (list, tuple)) or len(value) == 0:
        raise InvalidArgumentError(param, "array")
    if not all(isinstance(token, str) for token in value):
        raise InvalidArgumentError(param, "array of strings")
    return value


def parse_int_prefix(text: str) -> int | None:
    """Read the integer at the start of ``text``.

    Leading whitespace is skipped and trailing garbage ignored, so ``"12px"``
    reads as 12.

    Returns:
        The integer, or None if ``text`` does not start with one.
    """
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    return int(match.group(1))


def parse_float_prefix(text: str) -> float | None:
    """Read the decimal number at the start of ``text``.

    Returns:
        The float, or None if ``text`` does not start with one.
    """
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return None
    return float(match.group(1))

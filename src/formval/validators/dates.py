"""Date predicates.

The before/after family coerces non-string arguments with ``str()`` and
answers False for anything that does not parse as a date. It never raises
for a bad date; only ``is_date`` itself insists on a string argument.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from formval.dateparse import parse_date, to_instant
from formval.validators.base import require_text

DateLike = str | date | datetime


def is_date(text: str, *, dayfirst: bool = False) -> bool:
    """Check whether ``text`` parses as a date.

    Raises:
        InvalidArgumentError: If ``text`` is not a string.
    """
    require_text(text)
    return parse_date(text, dayfirst=dayfirst) is not None


def _instant(value: Any, dayfirst: bool) -> int | None:
    """Coerce ``value`` to text and parse it, returning epoch milliseconds."""
    text = value if isinstance(value, str) else str(value)
    parsed = parse_date(text, dayfirst=dayfirst)
    if parsed is None:
        return None
    return to_instant(parsed)


def _now() -> int:
    return to_instant(datetime.now())


def is_before_date(value: DateLike, reference: DateLike, *, dayfirst: bool = False) -> bool:
    """Check that ``value`` is strictly earlier than ``reference``.

    Args:
        value: The date to check, as a string or date object.
        reference: The date to compare against.
        dayfirst: Read ambiguous numeric dates as day-month-year.

    Returns:
        True if ``value`` comes first. False if either side is not a date or
        both are the same instant.
    """
    instant = _instant(value, dayfirst)
    reference_instant = _instant(reference, dayfirst)
    if instant is None or reference_instant is None:
        return False
    return instant < reference_instant


def is_after_date(value: DateLike, reference: DateLike, *, dayfirst: bool = False) -> bool:
    """Check that ``value`` is strictly later than ``reference``.

    Returns:
        True if ``value`` comes last. False if either side is not a date or
        both are the same instant.
    """
    instant = _instant(value, dayfirst)
    reference_instant = _instant(reference, dayfirst)
    if instant is None or reference_instant is None:
        return False
    return instant > reference_instant


def is_before_today(value: DateLike, *, dayfirst: bool = False) -> bool:
    """Check that ``value`` is earlier than the moment of the call."""
    now = _now()
    instant = _instant(value, dayfirst)
    if instant is None:
        return False
    return instant < now


def is_after_today(value: DateLike, *, dayfirst: bool = False) -> bool:
    """Check that ``value`` is later than the moment of the call."""
    now = _now()
    instant = _instant(value, dayfirst)
    if instant is None:
        return False
    return instant > now

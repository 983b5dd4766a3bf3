"""Lenient date-string parsing.

Turns the handful of date notations people type into forms into
``datetime`` values. Naive results are in host local time.

Handles formats:
- ISO 8601 (also what ``str(datetime)`` produces)
- MM-DD-YYYY and MM/DD/YYYY (DD first when ``dayfirst`` is set)
- YYYY/MM/DD
- 12 Dec 2018, 12 December 2018
- Dec 12 2018, Dec 12, 2018, December 12, 2018
- Wed Dec 12 2018

Each non-ISO form may carry a trailing ``HH:MM`` or ``HH:MM:SS``.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)
# Years the host clock can convert on every supported platform
_CLOCK_YEARS = (1971, 2037)

_MONTH_FIRST = ("%m-%d-%Y", "%m/%d/%Y")
_DAY_FIRST = ("%d-%m-%Y", "%d/%m/%Y")
_NAMED = (
    "%Y/%m/%d",
    "%d %b %Y",
    "%d %B %Y",
    "%b %d %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%B %d, %Y",
    "%a %b %d %Y",
)
_TIMES = ("", " %H:%M", " %H:%M:%S")


def _formats(dayfirst: bool) -> list[str]:
    numeric = _DAY_FIRST if dayfirst else _MONTH_FIRST
    return [date + time for date in (*numeric, *_NAMED) for time in _TIMES]


def parse_date(text: str, *, dayfirst: bool = False) -> datetime | None:
    """Parse a date string to datetime.

    Args:
        text: Date string to parse.
        dayfirst: Read ambiguous numeric dates as day-month-year.

    Returns:
        datetime object, or None if parsing fails.
    """
    if not text:
        return None

    text = text.strip()

    # Try ISO format first
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        pass

    for fmt in _formats(dayfirst):
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    logger.debug("Unparsable date string: %r", text)
    return None


def _local_offset(value: datetime) -> timedelta:
    """Return the host's UTC offset in effect at naive local time ``value``.

    Times outside what the platform clock can convert take the offset of the
    same month in the nearest year it can.
    """
    try:
        offset = value.astimezone().utcoffset()
    except (ValueError, OverflowError):
        year = min(max(value.year, _CLOCK_YEARS[0]), _CLOCK_YEARS[1])
        offset = datetime(year, value.month, 1, value.hour).astimezone().utcoffset()
    return offset or timedelta(0)


def to_instant(value: datetime) -> int:
    """Convert ``value`` to milliseconds since the Unix epoch.

    Naive datetimes are taken to be in host local time. The arithmetic is
    done on timedeltas, so the full ``datetime.min`` to ``datetime.max``
    range converts.
    """
    if value.tzinfo is None:
        offset = _local_offset(value)
        return (value.replace(tzinfo=timezone.utc) - _EPOCH - offset) // _ONE_MS
    return (value - _EPOCH) // _ONE_MS

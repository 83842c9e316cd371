"""Date parsing and rendering for exercise entries.

Exercise dates are naive local datetimes. ``None`` stands for the invalid
date: it is stored as NULL, renders as ``"Invalid Date"`` and never
satisfies a range comparison.
"""

import math
from datetime import datetime
from typing import Any, Optional

INVALID_DATE = "Invalid Date"

# Rendering must not depend on the process locale, so %a / %b are not used.
_DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Tried in order after ISO-8601 parsing fails
_FALLBACK_FORMATS = (
    "%a %b %d %Y",   # Mon Jan 01 2024 (our own rendered form)
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%B %d, %Y",     # January 5, 2024
    "%b %d, %Y",     # Jan 5, 2024
    "%d %B %Y",      # 5 January 2024
)


def _to_local_naive(value: datetime) -> datetime:
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def parse_date(value: Any) -> Optional[datetime]:
    """
    Parse a client-supplied date.

    A date-only string such as ``"2024-01-05"`` means local midnight, not UTC
    midnight, so it renders as the same calendar day in every time zone.

    Args:
        value: Milliseconds since the epoch (int/float) or a date string

    Returns:
        A naive local datetime, or None when the value is not a valid date
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return None
        try:
            return datetime.fromtimestamp(value / 1000)
        except (OverflowError, OSError, ValueError):
            return None

    text = str(value).strip()
    if not text:
        return None

    try:
        return _to_local_naive(datetime.fromisoformat(text))
    except ValueError:
        pass

    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    return None


def format_date(value: Optional[datetime]) -> str:
    """Render a date as ``"Mon Jan 01 2024"``; the invalid date as ``"Invalid Date"``."""
    if value is None:
        return INVALID_DATE
    return (
        f"{_DAY_NAMES[value.weekday()]} {_MONTH_NAMES[value.month - 1]} "
        f"{value.day:02d} {value.year:04d}"
    )


def to_storage(value: Optional[datetime]) -> Optional[str]:
    """Serialize for the ``date`` column; fixed width keeps text order equal to time order."""
    if value is None:
        return None
    return value.isoformat(timespec="microseconds")


def from_storage(text: Optional[str]) -> Optional[datetime]:
    """Inverse of :func:`to_storage`."""
    if not text:
        return None
    return datetime.fromisoformat(text)

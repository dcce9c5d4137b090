"""Date validators.

Unlike `utilkit.date_utils`, these predicates do not coerce: only real
``datetime`` instances qualify. Aware and naive values are compared after
converting aware ones to naive local time; values that cannot be converted
(offsets pushing them past ``datetime.min``/``datetime.max``) fail every check.
"""

from datetime import datetime
from typing import Any

__all__ = ["is_date", "in_range", "is_future", "is_past"]


def _naive(value: datetime) -> datetime | None:
    if value.tzinfo is None:
        return value
    try:
        return value.astimezone().replace(tzinfo=None)
    except (OverflowError, ValueError, OSError):
        return None


def is_date(value: Any) -> bool:
    """Return True for ``datetime`` instances."""
    return isinstance(value, datetime)


def in_range(value: Any, start: Any, end: Any) -> bool:
    """Return True if all three are datetimes and ``start <= value <= end``."""
    if not (is_date(value) and is_date(start) and is_date(end)):
        return False
    bounds = [_naive(start), _naive(value), _naive(end)]
    if None in bounds:
        return False
    low, middle, high = bounds
    return low <= middle <= high


def is_future(value: Any) -> bool:
    """Return True for datetimes later than now."""
    if not is_date(value):
        return False
    local = _naive(value)
    return local is not None and local > datetime.now()


def is_past(value: Any) -> bool:
    """Return True for datetimes earlier than now."""
    if not is_date(value):
        return False
    local = _naive(value)
    return local is not None and local < datetime.now()

"""Sequence validators."""

from typing import Any

__all__ = ["is_array", "is_length", "includes"]


def is_array(value: Any) -> bool:
    """Return True for lists and tuples."""
    return isinstance(value, (list, tuple))


def is_length(value: Any, minimum: int, maximum: int | None = None) -> bool:
    """Return True if ``value`` is an array whose length is within bounds."""
    if not is_array(value):
        return False
    try:
        return len(value) >= minimum and (maximum is None or len(value) <= maximum)
    except TypeError:
        return False


def includes(value: Any, item: Any) -> bool:
    """Return True if ``value`` is an array containing ``item``."""
    return is_array(value) and item in value

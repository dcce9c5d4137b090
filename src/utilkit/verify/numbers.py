"""Number validators.

Booleans are not numbers here even though ``bool`` subclasses ``int``.
"""

import math
from typing import Any

__all__ = ["is_number", "is_integer", "is_positive", "is_negative", "in_range", "is_port"]

MAX_PORT = 65535


def is_number(value: Any) -> bool:
    """Return True for ints and non-NaN floats."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


def is_integer(value: Any) -> bool:
    """Return True for numbers without a fractional part."""
    if not is_number(value):
        return False
    return isinstance(value, int) or value.is_integer()


def is_positive(value: Any) -> bool:
    """Return True for numbers greater than zero."""
    return is_number(value) and value > 0


def is_negative(value: Any) -> bool:
    """Return True for numbers less than zero."""
    return is_number(value) and value < 0


def in_range(value: Any, minimum: float, maximum: float) -> bool:
    """Return True if ``minimum <= value <= maximum``."""
    if not (is_number(value) and is_number(minimum) and is_number(maximum)):
        return False
    return minimum <= value <= maximum


def is_port(value: Any) -> bool:
    """Return True for integers in 0-65535."""
    return is_integer(value) and in_range(value, 0, MAX_PORT)

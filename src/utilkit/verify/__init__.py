"""Validation predicates.

Validators are grouped by the kind of value they inspect:

- `string`: type, length and format checks plus password policy/strength;
- `number`: numeric type, sign and range checks;
- `obj`: mapping checks;
- `array`: list/tuple checks;
- `date`: ``datetime`` checks.

`is_empty` works on any value.
"""

from collections.abc import Sized
from typing import Any

from . import arrays as array
from . import dates as date
from . import numbers as number
from . import objects as obj
from . import strings as string
from .passwords import get_password_strength, validate_password

__all__ = [
    "is_empty",
    "string",
    "number",
    "obj",
    "array",
    "date",
    "validate_password",
    "get_password_strength",
]


def is_empty(value: Any) -> bool:
    """Return True for None, blank strings and empty containers.

    Examples:
        >>> is_empty("   ")
        True
        >>> is_empty(0)
        False
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, Sized):
        return len(value) == 0
    return False

"""Mapping ("object") validators."""

from collections.abc import Mapping
from typing import Any

__all__ = ["is_object", "has_props", "is_empty"]


def is_object(value: Any) -> bool:
    """Return True for mappings."""
    return isinstance(value, Mapping)


def has_props(value: Any, props: Any) -> bool:
    """Return True if ``value`` has the key ``props`` (a str) or every key in ``props`` (a list).

    Any other ``props`` type yields False.
    """
    if not is_object(value):
        return False
    if isinstance(props, str):
        return props in value
    if isinstance(props, (list, tuple)):
        return all(prop in value for prop in props)
    return False


def is_empty(value: Any) -> bool:
    """Return True for mappings without keys."""
    return is_object(value) and len(value) == 0

"""Attribute operations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from utilkit.interfaces.dom import Element

# pylint: disable=redefined-builtin

__all__ = ["set", "get", "remove", "has"]


def set(element: Element, name: str | Mapping[str, Any], value: Any = None) -> None:
    """Set one attribute, or several from a mapping.

    None sets an empty value, which is how boolean attributes such as
    ``disabled`` are switched on.
    """
    if isinstance(name, Mapping):
        for key, item in name.items():
            element.set_attribute(key, item)
    else:
        element.set_attribute(name, value)


def get(element: Element, name: str) -> str | None:
    return element.get_attribute(name)


def remove(element: Element, *names: str) -> None:
    for name in names:
        element.remove_attribute(name)


def has(element: Element, name: str) -> bool:
    return element.has_attribute(name)

"""Inline style operations and visibility helpers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from utilkit.interfaces.dom import Element

# pylint: disable=redefined-builtin

__all__ = ["set", "get", "show", "hide", "toggle"]


def set(element: Element, prop: str | Mapping[str, Any], value: Any = None) -> None:
    """Set one inline style property, or several from a mapping.

    A value of None or ``""`` removes the property. Numbers are written
    without units:

        set(el, "opacity", 0.5)
        set(el, {"display": "block", "marginTop": "4px"})
    """
    if isinstance(prop, Mapping):
        for name, item in prop.items():
            element.style[name] = item
    else:
        element.style[prop] = value


def get(element: Element, prop: str) -> str:
    """Return the computed value of ``prop``."""
    return element.computed_style(prop)


def show(element: Element) -> None:
    """Clear the inline ``display`` so the element takes its default."""
    element.style["display"] = ""


def hide(element: Element) -> None:
    element.style["display"] = "none"


def toggle(element: Element, force: bool | None = None) -> None:
    """Flip the inline ``display`` between hidden and default.

    With ``force`` the element is shown (True) or hidden (False) regardless
    of its current state. Only the inline ``display`` is inspected.
    """
    hidden = element.style.get("display", "") == "none"
    visible = hidden if force is None else force
    element.style["display"] = "" if visible else "none"

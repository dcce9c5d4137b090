"""Class-name operations."""

from __future__ import annotations

from utilkit.interfaces.dom import Element

__all__ = ["add", "remove", "toggle", "has"]


def add(element: Element, *names: str) -> None:
    element.class_list.add(*names)


def remove(element: Element, *names: str) -> None:
    element.class_list.remove(*names)


def toggle(element: Element, name: str, force: bool | None = None) -> bool:
    """Toggle ``name`` (or force it on/off); return whether it is now present."""
    return element.class_list.toggle(name, force)


def has(element: Element, name: str) -> bool:
    return element.class_list.contains(name)

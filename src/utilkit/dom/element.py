"""Element creation and tree edits."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from utilkit.interfaces.dom import Document, Element

from . import context

__all__ = ["create", "insert", "remove", "replace", "clone"]


def create(
    tag: str,
    props: Mapping[str, Any] | None = None,
    *children: Element | str,
    document: Document | None = None,
) -> Element:
    """Create an element with attributes, listeners and children.

    Args:
        tag: Tag name.
        props: ``style`` (a mapping of style properties), ``on<event>``
            callables (registered as listeners for the lower-cased event
            name) and any other attribute.
        *children: Elements to append, or strings appended as text.
        document: Document that creates the element; defaults to
            `utilkit.dom.context.get_document`.

    Returns:
        Element: The new, detached element.

    Example:
        >>> button = create("button", {"class": "primary", "onClick": save}, "Save",
        ...                 document=doc)
    """
    if document is None:
        document = context.get_document()
    element = document.create_element(tag)
    for key, value in (props or {}).items():
        if key == "style" and isinstance(value, Mapping):
            for name, item in value.items():
                element.style[name] = item
        elif key.startswith("on") and callable(value):
            element.add_event_listener(key[2:].lower(), value)
        else:
            element.set_attribute(key, value)
    for child in children:
        element.append_child(child)
    return element


def insert(element: Element, target: Element, position: str = "beforeend") -> Element | None:
    """Insert ``element`` relative to ``target``.

    Raises:
        InvalidInsertPositionError: If ``position`` is not one of
            ``beforebegin``, ``afterbegin``, ``beforeend`` or ``afterend``.
    """
    return target.insert_adjacent_element(position, element)


def remove(element: Element) -> None:
    element.remove()


def replace(old: Element, new: Element) -> None:
    old.replace_with(new)


def clone(element: Element, deep: bool = True) -> Element:
    return element.clone_node(deep)

"""Element selection.

``context`` defaults to the document set with `utilkit.dom.context`.
"""

from __future__ import annotations

from utilkit.interfaces.dom import Element, ParentNode

from . import context as _context

__all__ = ["get", "get_all", "closest", "matches"]


def get(selector: str, context: ParentNode | None = None) -> Element | None:
    """Return the first element under ``context`` matching ``selector``."""
    root = _context.get_document() if context is None else context
    return root.query_selector(selector)


def get_all(selector: str, context: ParentNode | None = None) -> list[Element]:
    """Return every element under ``context`` matching ``selector``."""
    root = _context.get_document() if context is None else context
    return list(root.query_selector_all(selector))


def closest(element: Element, selector: str) -> Element | None:
    """Return the nearest inclusive ancestor of ``element`` matching ``selector``."""
    return element.closest(selector)


def matches(element: Element, selector: str) -> bool:
    """Return True if ``element`` matches ``selector``."""
    return element.matches(selector)

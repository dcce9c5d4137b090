"""Event listener helpers."""

from __future__ import annotations

from typing import Any

from utilkit.interfaces.dom import Element, Event, Listener

__all__ = ["on", "off", "trigger", "once"]


def on(
    element: Element,
    type_: str,
    handler: Listener,
    *,
    capture: bool = False,
    once: bool = False,  # pylint: disable=redefined-outer-name
) -> None:
    """Attach ``handler`` to ``type_`` events on ``element``."""
    element.add_event_listener(type_, handler, capture=capture, once=once)


def off(element: Element, type_: str, handler: Listener, *, capture: bool = False) -> None:
    """Detach a handler previously attached with the same ``capture`` flag."""
    element.remove_event_listener(type_, handler, capture=capture)


def trigger(element: Element, type_: str, detail: Any = None) -> bool:
    """Dispatch a bubbling custom event carrying ``detail``.

    Returns:
        bool: False if a listener prevented the default action.
    """
    return element.dispatch_event(Event(type_, detail=detail, bubbles=True))


def once(element: Element, type_: str, handler: Listener, *, capture: bool = False) -> Listener:
    """Attach a wrapper that calls ``handler`` once and then detaches itself.

    The wrapper is returned so it can still be removed with `off` before it
    fires.
    """

    def wrapper(event: Event) -> Any:
        try:
            return handler(event)
        finally:
            element.remove_event_listener(type_, wrapper, capture=capture)

    element.add_event_listener(type_, wrapper, capture=capture)
    return wrapper

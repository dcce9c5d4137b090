"""DOM interface definitions.

These ABCs capture the subset of the browser DOM that `utilkit.dom` wraps:
selection, class tokens, inline style, attributes, events, tree edits, form
control state, scrolling and layout metrics. Names follow Python
conventions; semantics follow the DOM standard unless noted.
"""

from __future__ import annotations

import abc
from collections.abc import Callable, Iterator, MutableMapping
from dataclasses import dataclass
from typing import Any

from .frame_scheduler import FrameScheduler

# pylint: disable=too-many-public-methods


@dataclass
class Event:
    """An event travelling through the tree.

    `target` is set by `EventTarget.dispatch_event`; `current_target` changes
    as the event visits each node on its propagation path.
    """

    type: str
    detail: Any = None
    bubbles: bool = False
    cancelable: bool = True
    target: Element | None = None
    current_target: Element | None = None
    default_prevented: bool = False
    propagation_stopped: bool = False

    def prevent_default(self) -> None:
        """Mark the event as handled (only if it is cancelable)."""
        if self.cancelable:
            self.default_prevented = True

    def stop_propagation(self) -> None:
        """Stop the event from reaching further nodes."""
        self.propagation_stopped = True


Listener = Callable[[Event], Any]


class EventTarget(abc.ABC):
    """Something listeners can be attached to."""

    @abc.abstractmethod
    def add_event_listener(
        self, type_: str, listener: Listener, *, capture: bool = False, once: bool = False
    ) -> None:
        """Register ``listener`` for ``type_`` events.

        Registering the same (type, listener, capture) triple twice has no
        effect. ``once`` listeners are removed before their first call.
        """

    @abc.abstractmethod
    def remove_event_listener(
        self, type_: str, listener: Listener, *, capture: bool = False
    ) -> None:
        """Unregister a listener; unknown listeners are ignored."""

    @abc.abstractmethod
    def dispatch_event(self, event: Event) -> bool:
        """Dispatch ``event`` with this node as target.

        Capture listeners run from the root down to the target, then bubble
        listeners from the target up (the upward leg only when
        ``event.bubbles``).

        Returns:
            bool: False if a listener called `Event.prevent_default`.
        """


class TokenList(abc.ABC):
    """Ordered set of class tokens (``DOMTokenList``)."""

    @abc.abstractmethod
    def add(self, *tokens: str) -> None:
        """Add tokens that are not present yet."""

    @abc.abstractmethod
    def remove(self, *tokens: str) -> None:
        """Remove tokens; absent tokens are ignored."""

    @abc.abstractmethod
    def toggle(self, token: str, force: bool | None = None) -> bool:
        """Toggle ``token`` (or force it on/off) and return whether it is now present."""

    @abc.abstractmethod
    def contains(self, token: str) -> bool:
        """Return True if ``token`` is present."""

    @abc.abstractmethod
    def __iter__(self) -> Iterator[str]: ...

    @abc.abstractmethod
    def __len__(self) -> int: ...


class StyleDeclaration(MutableMapping[str, str], abc.ABC):
    """Inline style of an element (``CSSStyleDeclaration``).

    Keys are CSS property names; implementations accept both kebab-case
    (``background-color``) and camelCase (``backgroundColor``). Assigning an
    empty string removes the property.
    """

    @property
    @abc.abstractmethod
    def css_text(self) -> str:
        """Serialized ``style`` attribute value."""


class ParentNode(abc.ABC):
    """A node that can be searched with CSS selectors."""

    @abc.abstractmethod
    def query_selector(self, selector: str) -> Element | None:
        """Return the first descendant matching ``selector``, or None."""

    @abc.abstractmethod
    def query_selector_all(self, selector: str) -> list[Element]:
        """Return all descendants matching ``selector`` in document order."""


class Element(ParentNode, EventTarget):
    """An element node.

    Settable properties: `text_content`, `value`, `checked`, `selected` and
    `scroll_height` (layout metrics are supplied by the host).
    """

    # --- Tree ---

    @property
    @abc.abstractmethod
    def tag_name(self) -> str:
        """Upper-case tag name."""

    @property
    @abc.abstractmethod
    def parent(self) -> Element | None:
        """Parent element, or None for detached and root elements."""

    @property
    @abc.abstractmethod
    def children(self) -> list[Element]:
        """Child elements (text nodes excluded)."""

    @property
    @abc.abstractmethod
    def owner_document(self) -> Document:
        """Document that created this element."""

    @abc.abstractmethod
    def matches(self, selector: str) -> bool:
        """Return True if this element matches ``selector``."""

    @abc.abstractmethod
    def closest(self, selector: str) -> Element | None:
        """Nearest inclusive ancestor matching ``selector``."""

    @abc.abstractmethod
    def append_child(self, child: Element | str) -> None:
        """Append an element (moving it if attached elsewhere) or a text node."""

    @abc.abstractmethod
    def insert_adjacent_element(self, position: str, element: Element) -> Element | None:
        """Insert ``element`` relative to this one.

        Raises:
            InvalidInsertPositionError: If ``position`` is not a valid position.

        Returns:
            The inserted element, or None when ``beforebegin``/``afterend`` is
            requested on an element without a parent.
        """

    @abc.abstractmethod
    def remove(self) -> None:
        """Detach this element from its parent."""

    @abc.abstractmethod
    def replace_with(self, other: Element) -> None:
        """Put ``other`` in this element's place; no-op when detached."""

    @abc.abstractmethod
    def clone_node(self, deep: bool = False) -> Element:
        """Copy this element (and its subtree when ``deep``); listeners are not copied."""

    # --- Content, classes, style and attributes ---

    @property
    @abc.abstractmethod
    def text_content(self) -> str:
        """Concatenated text of the subtree."""

    @property
    @abc.abstractmethod
    def class_list(self) -> TokenList:
        """Live class tokens."""

    @property
    @abc.abstractmethod
    def style(self) -> StyleDeclaration:
        """Live inline style."""

    @abc.abstractmethod
    def computed_style(self, prop: str) -> str:
        """Resolved value of a style property (``""`` when unknown)."""

    @abc.abstractmethod
    def get_attribute(self, name: str) -> str | None:
        """Attribute value, or None when absent."""

    @abc.abstractmethod
    def set_attribute(self, name: str, value: Any) -> None:
        """Set an attribute; None becomes an empty value, anything else `str(value)`."""

    @abc.abstractmethod
    def remove_attribute(self, name: str) -> None:
        """Remove an attribute; absent attributes are ignored."""

    @abc.abstractmethod
    def has_attribute(self, name: str) -> bool:
        """Return True if the attribute is present."""

    # --- Form controls ---

    @property
    @abc.abstractmethod
    def value(self) -> str:
        """Current value of a form control."""

    @property
    @abc.abstractmethod
    def checked(self) -> bool:
        """Current checkedness of a checkbox or radio button."""

    @property
    @abc.abstractmethod
    def selected(self) -> bool:
        """Current selectedness of an ``<option>``."""

    @property
    @abc.abstractmethod
    def form_elements(self) -> list[Element]:
        """Controls (input, select, textarea, button) inside a form."""

    @abc.abstractmethod
    def reset(self) -> None:
        """Restore every control of a form to its default state."""

    @abc.abstractmethod
    def submit(self) -> None:
        """Submit a form to the host."""

    # --- Scrolling and layout ---

    @property
    @abc.abstractmethod
    def scroll_height(self) -> float:
        """Full content height in pixels."""

    @abc.abstractmethod
    def scroll_to(
        self, top: float | None = None, left: float | None = None, behavior: str = "auto"
    ) -> None:
        """Scroll this element's content; None leaves an axis unchanged."""

    @abc.abstractmethod
    def scroll_into_view(self, options: dict[str, Any] | None = None) -> None:
        """Ask the host to bring this element into view."""


class Document(ParentNode):
    """A document: element factory plus frame scheduling for animations."""

    @property
    @abc.abstractmethod
    def frame_scheduler(self) -> FrameScheduler:
        """Scheduler that drives animations of this document's elements."""

    @abc.abstractmethod
    def create_element(self, tag: str) -> Element:
        """Create a detached element."""

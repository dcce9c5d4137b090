"""In-memory HTML DOM backed by BeautifulSoup.

`SoupDocument` parses markup with the stdlib ``html.parser`` tree builder and
hands out `SoupElement` wrappers. CSS selection goes through soupsieve (via
``Tag.css``), so selector syntax errors surface as
`soupsieve.SelectorSyntaxError`.

State that HTML cannot hold lives on the wrapper, not in the tree:

- event listeners;
- the *dirty* value of text controls and the checkedness/selectedness of
  checkboxes, radios and options (attributes keep the defaults, which is
  what `reset` restores);
- layout metrics such as `scroll_height`, supplied by the host.

Each tag has exactly one wrapper per document, so that state is stable no
matter how an element is reached (selector, parent, children...).

Hosts can observe side effects through two optional hooks:

    doc = SoupDocument(
        "<form><input name='q'></form>",
        submit_handler=lambda form: print("submit", form),
        scroll_handler=lambda kind, element, options: print(kind, options),
    )
"""

from __future__ import annotations

import copy
import logging
import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from bs4 import BeautifulSoup, NavigableString, Tag

from utilkit.interfaces.dom import (
    Document,
    Element,
    Event,
    Listener,
    StyleDeclaration,
    TokenList,
)
from utilkit.interfaces.errors import INSERT_POSITIONS, InvalidInsertPositionError
from utilkit.interfaces.frame_scheduler import FrameScheduler

from .frame_schedulers import AsyncioFrameScheduler

# pylint: disable=protected-access,too-many-public-methods,too-many-instance-attributes

logger = logging.getLogger(__name__)

__all__ = ["SoupDocument", "SoupElement", "css_property_name"]

SubmitHandler = Callable[["SoupElement"], None]
ScrollHandler = Callable[[str, "SoupElement", dict[str, Any]], None]

FORM_CONTROLS = "input, select, textarea, button"
_RESETTABLE = ["input", "textarea", "select", "option"]

_CAMEL_HUMP = re.compile(r"[A-Z]")

_HIDDEN_TAGS = frozenset(
    {"head", "link", "meta", "script", "style", "template", "title"}
)
_BLOCK_TAGS = frozenset(
    {
        "address", "article", "aside", "blockquote", "body", "dd", "details",
        "dialog", "div", "dl", "dt", "fieldset", "figcaption", "figure",
        "footer", "form", "h1", "h2", "h3", "h4", "h5", "h6", "header",
        "hgroup", "hr", "html", "main", "menu", "nav", "ol", "p", "pre",
        "section", "summary", "ul",
    }
)  # fmt: skip
_DISPLAY_DEFAULTS = {
    "li": "list-item",
    "table": "table",
    "thead": "table-header-group",
    "tbody": "table-row-group",
    "tfoot": "table-footer-group",
    "tr": "table-row",
    "td": "table-cell",
    "th": "table-cell",
    "caption": "table-caption",
}
_STYLE_DEFAULTS = {"opacity": "1", "visibility": "visible", "overflow": "visible"}
_WRAPPER_ATTR = "_utilkit_element"


def css_property_name(prop: str) -> str:
    """Normalize a style property name to CSS kebab-case.

    >>> css_property_name("backgroundColor")
    'background-color'
    >>> css_property_name("--Brand-Color")
    '--Brand-Color'
    """
    prop = prop.strip()
    if prop.startswith("--"):
        return prop
    return _CAMEL_HUMP.sub(lambda m: f"-{m.group(0).lower()}", prop).lower()


def _css_value(value: Any) -> str:
    if isinstance(value, float):
        text = f"{value:.6f}".rstrip("0").rstrip(".")
        return "0" if text in ("", "-0") else text
    return str(value)


def _unwrap(element: Element) -> Tag:
    if not isinstance(element, SoupElement):
        raise TypeError(f"SoupElement expected, got {type(element).__name__}")
    return element.tag


class _ClassList(TokenList):
    """Class tokens stored in the tag's ``class`` attribute."""

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    def _tokens(self) -> list[str]:
        raw = self._tag.get("class")
        if raw is None:
            return []
        if isinstance(raw, str):
            raw = raw.split()
        tokens: list[str] = []
        for token in raw:
            if token not in tokens:
                tokens.append(token)
        return tokens

    def _store(self, tokens: list[str]) -> None:
        # Removing from an absent attribute must not create it.
        if tokens or self._tag.has_attr("class"):
            self._tag["class"] = tokens

    def add(self, *tokens: str) -> None:
        current = self._tokens()
        current.extend(t for t in dict.fromkeys(tokens) if t and t not in current)
        self._store(current)

    def remove(self, *tokens: str) -> None:
        self._store([t for t in self._tokens() if t not in tokens])

    def toggle(self, token: str, force: bool | None = None) -> bool:
        wanted = not self.contains(token) if force is None else bool(force)
        if wanted:
            self.add(token)
        else:
            self.remove(token)
        return wanted

    def contains(self, token: str) -> bool:
        return token in self._tokens()

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens())

    def __len__(self) -> int:
        return len(self._tokens())

    def __str__(self) -> str:
        return " ".join(self._tokens())

    def __repr__(self) -> str:
        return f"<ClassList {self._tokens()!r}>"


class _InlineStyle(StyleDeclaration):
    """Declarations parsed from, and written back to, the ``style`` attribute."""

    def __init__(self, element: SoupElement) -> None:
        self._element = element

    def _read(self) -> dict[str, str]:
        declarations: dict[str, str] = {}
        for chunk in (self._element.get_attribute("style") or "").split(";"):
            name, sep, value = chunk.partition(":")
            if sep and name.strip() and value.strip():
                declarations[css_property_name(name)] = value.strip()
        return declarations

    def _write(self, declarations: dict[str, str]) -> None:
        if declarations:
            text = "; ".join(f"{name}: {value}" for name, value in declarations.items())
            self._element.set_attribute("style", f"{text};")
        else:
            self._element.remove_attribute("style")

    @property
    def css_text(self) -> str:
        return self._element.get_attribute("style") or ""

    def __getitem__(self, prop: str) -> str:
        return self._read()[css_property_name(prop)]

    def __setitem__(self, prop: str, value: Any) -> None:
        declarations = self._read()
        name = css_property_name(prop)
        if value is None or value == "":
            declarations.pop(name, None)
        else:
            declarations[name] = _css_value(value)
        self._write(declarations)

    def __delitem__(self, prop: str) -> None:
        declarations = self._read()
        del declarations[css_property_name(prop)]
        self._write(declarations)

    def __iter__(self) -> Iterator[str]:
        return iter(self._read())

    def __len__(self) -> int:
        return len(self._read())

    def __repr__(self) -> str:
        return f"<InlineStyle {self.css_text!r}>"


@dataclass(eq=False)
class _Registration:
    type: str
    listener: Listener
    capture: bool
    once: bool
    removed: bool = False


class SoupElement(Element):
    """`Element` implementation wrapping a `bs4.Tag`.

    Obtain instances from a `SoupDocument`; do not construct them directly.
    """

    def __init__(self, tag: Tag, document: SoupDocument) -> None:
        self._tag = tag
        self._document = document
        self._listeners: list[_Registration] = []
        self._value: str | None = None
        self._checked: bool | None = None
        self._selected: bool | None = None
        self._scroll_height = 0.0
        self.scroll_top = 0.0
        self.scroll_left = 0.0

    @property
    def tag(self) -> Tag:
        """Underlying BeautifulSoup tag."""
        return self._tag

    def __repr__(self) -> str:
        ident = self._tag.get("id")
        return f"<SoupElement {self._tag.name}{f'#{ident}' if ident else ''}>"

    def __str__(self) -> str:
        return str(self._tag)

    # --- Tree ---

    @property
    def tag_name(self) -> str:
        return self._tag.name.upper()

    @property
    def parent(self) -> SoupElement | None:
        parent = self._tag.parent
        if parent is None or isinstance(parent, BeautifulSoup):
            return None
        return self._document.wrap(parent)

    @property
    def children(self) -> list[SoupElement]:
        return [self._document.wrap(c) for c in self._tag.children if isinstance(c, Tag)]

    @property
    def owner_document(self) -> SoupDocument:
        return self._document

    def query_selector(self, selector: str) -> SoupElement | None:
        found = self._tag.css.select_one(selector)
        return None if found is None else self._document.wrap(found)

    def query_selector_all(self, selector: str) -> list[SoupElement]:
        return [self._document.wrap(t) for t in self._tag.css.select(selector)]

    def matches(self, selector: str) -> bool:
        return bool(self._tag.css.match(selector))

    def closest(self, selector: str) -> SoupElement | None:
        found = self._tag.css.closest(selector)
        return None if found is None else self._document.wrap(found)

    def append_child(self, child: Element | str) -> None:
        if isinstance(child, str):
            self._tag.append(NavigableString(child))
        else:
            self._tag.append(_unwrap(child))

    def insert_adjacent_element(self, position: str, element: Element) -> Element | None:
        where = position.lower() if isinstance(position, str) else position
        if where not in INSERT_POSITIONS:
            raise InvalidInsertPositionError(position)
        node = _unwrap(element)
        match where:
            case "beforebegin":
                if self._tag.parent is None:
                    return None
                self._tag.insert_before(node)
            case "afterbegin":
                self._tag.insert(0, node)
            case "beforeend":
                self._tag.append(node)
            case "afterend":
                if self._tag.parent is None:
                    return None
                self._tag.insert_after(node)
        return element

    def remove(self) -> None:
        self._tag.extract()

    def replace_with(self, other: Element) -> None:
        node = _unwrap(other)
        if self._tag.parent is None or node is self._tag:
            return
        self._tag.replace_with(node)

    def clone_node(self, deep: bool = False) -> SoupElement:
        if deep:
            node = copy.copy(self._tag)
        else:
            attrs = {
                k: list(v) if isinstance(v, list) else v for k, v in self._tag.attrs.items()
            }
            node = self._document.soup.new_tag(self._tag.name, attrs=attrs)
        clone = self._document.wrap(node)
        clone._copy_state(self)
        if deep:
            for original, copied in zip(self._tag.find_all(True), node.find_all(True)):
                source = self._document.peek(original)
                if source is not None:
                    self._document.wrap(copied)._copy_state(source)
        return clone

    def _copy_state(self, other: SoupElement) -> None:
        self._value = other._value
        self._checked = other._checked
        self._selected = other._selected

    # --- Content, classes, style and attributes ---

    @property
    def text_content(self) -> str:
        return self._tag.get_text()

    @text_content.setter
    def text_content(self, value: str) -> None:
        self._tag.string = "" if value is None else str(value)

    @property
    def class_list(self) -> TokenList:
        return _ClassList(self._tag)

    @property
    def style(self) -> StyleDeclaration:
        return _InlineStyle(self)

    def computed_style(self, prop: str) -> str:
        """Resolve ``prop`` from the inline style, then element defaults.

        There is no cascade: stylesheets are not evaluated. ``display``
        falls back to the element's UA default (``none`` for ``hidden``
        elements), a few properties to their CSS initial value, and
        everything else to ``""``.
        """
        name = css_property_name(prop)
        inline = self.style.get(name)
        if inline:
            return inline
        if name == "display":
            return self._default_display()
        return _STYLE_DEFAULTS.get(name, "")

    def _default_display(self) -> str:
        tag = self._tag.name
        if self.has_attribute("hidden") or tag in _HIDDEN_TAGS:
            return "none"
        if tag in _DISPLAY_DEFAULTS:
            return _DISPLAY_DEFAULTS[tag]
        return "block" if tag in _BLOCK_TAGS else "inline"

    def get_attribute(self, name: str) -> str | None:
        value = self._tag.get(name.lower())
        if isinstance(value, list):
            return " ".join(value)
        return value

    def set_attribute(self, name: str, value: Any) -> None:
        self._tag[name.lower()] = "" if value is None else str(value)

    def remove_attribute(self, name: str) -> None:
        self._tag.attrs.pop(name.lower(), None)

    def has_attribute(self, name: str) -> bool:
        return name.lower() in self._tag.attrs

    # --- Form controls ---

    def _input_type(self) -> str:
        return (self.get_attribute("type") or "text").lower()

    def _options(self) -> list[SoupElement]:
        return [self._document.wrap(t) for t in self._tag.find_all("option")]

    def _selected_option(self) -> SoupElement | None:
        options = self._options()
        chosen = [o for o in options if o.selected]
        if chosen:
            return chosen[0] if self.has_attribute("multiple") else chosen[-1]
        if options and not self.has_attribute("multiple"):
            return options[0]
        return None

    @property
    def value(self) -> str:
        match self._tag.name:
            case "input":
                if self._value is not None:
                    return self._value
                default = self.get_attribute("value")
                if default is None:
                    return "on" if self._input_type() in ("checkbox", "radio") else ""
                return default
            case "textarea":
                return self._tag.get_text() if self._value is None else self._value
            case "select":
                option = self._selected_option()
                return "" if option is None else option.value
            case "option":
                label = self.get_attribute("value")
                return " ".join(self.text_content.split()) if label is None else label
            case _:
                return self.get_attribute("value") or ""

    @value.setter
    def value(self, value: Any) -> None:
        text = "" if value is None else str(value)
        match self._tag.name:
            case "input" if self._input_type() not in ("checkbox", "radio"):
                self._value = text
            case "textarea":
                self._value = text
            case "select":
                for option in self._options():
                    option._selected = option.value == text
            case _:
                self.set_attribute("value", text)

    @property
    def checked(self) -> bool:
        return self.has_attribute("checked") if self._checked is None else self._checked

    @checked.setter
    def checked(self, value: Any) -> None:
        self._checked = bool(value)
        if self._checked and self._input_type() == "radio":
            for other in self._radio_group():
                if other is not self:
                    other._checked = False

    def _radio_group(self) -> list[SoupElement]:
        name = self.get_attribute("name")
        if not name:
            return []
        scope = self._tag.find_parent("form")
        if scope is None:
            scope = self._tag
            while scope.parent is not None:
                scope = scope.parent
        return [
            self._document.wrap(t)
            for t in scope.find_all("input")
            if (t.get("type") or "").lower() == "radio" and t.get("name") == name
        ]

    @property
    def selected(self) -> bool:
        return self.has_attribute("selected") if self._selected is None else self._selected

    @selected.setter
    def selected(self, value: Any) -> None:
        self._selected = bool(value)
        select = self._tag.find_parent("select")
        if self._selected and select is not None and not select.has_attr("multiple"):
            for option in self._document.wrap(select)._options():
                if option is not self:
                    option._selected = False

    @property
    def form_elements(self) -> list[Element]:
        if self._tag.name != "form":
            return []
        return list(self.query_selector_all(FORM_CONTROLS))

    def reset(self) -> None:
        """Fire a cancelable ``reset`` event, then restore control defaults."""
        if self._tag.name != "form":
            return
        if not self.dispatch_event(Event("reset", bubbles=True)):
            logger.debug("Reset of %r cancelled by a listener", self)
            return
        for tag in self._tag.find_all(_RESETTABLE):
            control = self._document.peek(tag)
            if control is not None:
                control._value = control._checked = control._selected = None
        logger.debug("Reset %r", self)

    def submit(self) -> None:
        """Hand the form to the document's submit handler (no ``submit`` event)."""
        if self._tag.name == "form":
            self._document.submit(self)

    # --- Scrolling and layout ---

    @property
    def scroll_height(self) -> float:
        return self._scroll_height

    @scroll_height.setter
    def scroll_height(self, value: float) -> None:
        self._scroll_height = float(value)

    def scroll_to(
        self, top: float | None = None, left: float | None = None, behavior: str = "auto"
    ) -> None:
        if top is not None:
            self.scroll_top = max(0.0, float(top))
        if left is not None:
            self.scroll_left = max(0.0, float(left))
        self._document.scroll(
            "scroll_to", self, {"top": top, "left": left, "behavior": behavior}
        )

    def scroll_into_view(self, options: dict[str, Any] | None = None) -> None:
        self._document.scroll("scroll_into_view", self, dict(options or {}))

    # --- Events ---

    def _find_listener(
        self, type_: str, listener: Listener, capture: bool
    ) -> _Registration | None:
        for registration in self._listeners:
            if (
                registration.type == type_
                and registration.listener == listener
                and registration.capture == capture
            ):
                return registration
        return None

    def add_event_listener(
        self, type_: str, listener: Listener, *, capture: bool = False, once: bool = False
    ) -> None:
        if not callable(listener) or self._find_listener(type_, listener, capture):
            return
        self._listeners.append(_Registration(type_, listener, capture, once))

    def remove_event_listener(
        self, type_: str, listener: Listener, *, capture: bool = False
    ) -> None:
        registration = self._find_listener(type_, listener, capture)
        if registration is not None:
            registration.removed = True
            self._listeners.remove(registration)

    def dispatch_event(self, event: Event) -> bool:
        event.target = self
        path = self._propagation_path()
        ancestors = path[:-1]
        logger.debug("Dispatching %r on %r (path length %d)", event.type, self, len(path))

        for node in ancestors:
            node._invoke(event, capture=True)
        self._invoke(event, capture=True)
        self._invoke(event, capture=False)
        if event.bubbles:
            for node in reversed(ancestors):
                node._invoke(event, capture=False)

        event.current_target = None
        return not event.default_prevented

    def _propagation_path(self) -> list[SoupElement]:
        path: list[SoupElement] = []
        node: SoupElement | None = self
        while node is not None:
            path.append(node)
            node = node.parent
        path.reverse()
        return path

    def _invoke(self, event: Event, *, capture: bool) -> None:
        if event.propagation_stopped:
            return
        event.current_target = self
        snapshot = [
            r for r in self._listeners if r.type == event.type and r.capture == capture
        ]
        for registration in snapshot:
            if registration.removed:
                continue
            if registration.once:
                self.remove_event_listener(
                    registration.type, registration.listener, capture=capture
                )
            try:
                registration.listener(event)
            except Exception:  # pylint: disable=broad-except
                logger.exception(
                    "Listener %r for %r on %r raised", registration.listener, event.type, self
                )
                raise


class SoupDocument(Document):
    """`Document` implementation over a parsed BeautifulSoup tree.

    Args:
        markup: HTML to parse (a fragment is fine).
        frame_scheduler: Scheduler for animations; defaults to an
            `AsyncioFrameScheduler`.
        submit_handler: Called with the form on `SoupElement.submit`.
        scroll_handler: Called with ``(kind, element, options)`` on
            `scroll_to` (kind ``"scroll_to"``) and `scroll_into_view`
            (kind ``"scroll_into_view"``).
    """

    def __init__(
        self,
        markup: str = "",
        *,
        frame_scheduler: FrameScheduler | None = None,
        submit_handler: SubmitHandler | None = None,
        scroll_handler: ScrollHandler | None = None,
    ) -> None:
        self._soup = BeautifulSoup(markup, "html.parser")
        self._frame_scheduler = frame_scheduler or AsyncioFrameScheduler()
        self.submit_handler = submit_handler
        self.scroll_handler = scroll_handler

    @property
    def soup(self) -> BeautifulSoup:
        """Underlying BeautifulSoup tree."""
        return self._soup

    @property
    def frame_scheduler(self) -> FrameScheduler:
        return self._frame_scheduler

    @property
    def body(self) -> SoupElement | None:
        """The ``<body>`` element, if the markup has one."""
        body = self._soup.body
        return None if body is None else self.wrap(body)

    def __str__(self) -> str:
        return self._soup.decode()

    def wrap(self, tag: Tag) -> SoupElement:
        """Return the unique wrapper for ``tag``, creating it on first use.

        The wrapper lives on the tag itself, so it is released together with
        the tag once the element is detached and no longer referenced.
        """
        wrapper = self.peek(tag)
        if wrapper is None:
            wrapper = SoupElement(tag, self)
            setattr(tag, _WRAPPER_ATTR, wrapper)
        return wrapper

    def peek(self, tag: Tag) -> SoupElement | None:
        """Return the wrapper for ``tag`` only if one was already created."""
        # vars() skips Tag.__getattr__, which would search for a child tag
        wrapper = vars(tag).get(_WRAPPER_ATTR)
        if wrapper is None or wrapper.tag is not tag or wrapper.owner_document is not self:
            return None
        return wrapper

    def create_element(self, tag: str) -> SoupElement:
        return self.wrap(self._soup.new_tag(tag.lower()))

    def query_selector(self, selector: str) -> SoupElement | None:
        found = self._soup.css.select_one(selector)
        return None if found is None else self.wrap(found)

    def query_selector_all(self, selector: str) -> list[SoupElement]:
        return [self.wrap(t) for t in self._soup.css.select(selector)]

    def submit(self, form: SoupElement) -> None:
        """Deliver a submitted form to the host."""
        if self.submit_handler is None:
            logger.debug("No submit handler; %r not submitted", form)
            return
        logger.debug("Submitting %r", form)
        self.submit_handler(form)

    def scroll(self, kind: str, element: SoupElement, options: dict[str, Any]) -> None:
        """Report a scroll request to the host."""
        logger.debug("%s on %r with %r", kind, element, options)
        if self.scroll_handler is not None:
            self.scroll_handler(kind, element, options)

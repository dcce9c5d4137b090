"""Contract tests for selection, class names, inline styles and attributes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from soupsieve import SelectorSyntaxError

from utilkit.dom import attr, class_name, selector, style

if TYPE_CHECKING:
    from utilkit.interfaces.dom import Document

# pylint: disable=magic-value-comparison

# ============================================================================
#                               Selection
# ============================================================================


def test_get_returns_first_match_or_none(page: Document) -> None:
    first = selector.get("li.item", page)
    assert first is not None
    assert first.text_content == "One"
    assert selector.get("table", page) is None


def test_get_all_returns_list_in_document_order(page: Document) -> None:
    items = selector.get_all(".item", page)
    assert isinstance(items, list)
    assert [i.get_attribute("data-id") for i in items] == ["1", "2", "3"]
    assert selector.get_all(".missing", page) == []


def test_selection_is_scoped_to_context(page: Document) -> None:
    app = selector.get("#app", page)
    assert selector.get("li", app) is not None
    lst = selector.get("#list", page)
    assert selector.get("#note", lst) is None


def test_same_node_yields_same_wrapper(page: Document) -> None:
    assert selector.get("#note", page) is selector.get("p", page)


def test_closest_and_matches(page: Document) -> None:
    active = selector.get(".active", page)
    assert selector.closest(active, "ul").get_attribute("id") == "list"
    assert selector.closest(active, "li") is active
    assert selector.closest(active, "table") is None
    assert selector.matches(active, "li.item.active")
    assert not selector.matches(active, "p")


def test_invalid_selector_raises(page: Document) -> None:
    with pytest.raises(SelectorSyntaxError):
        selector.get("li[", page)


def test_tree_navigation(page: Document) -> None:
    lst = selector.get("#list", page)
    assert lst.tag_name == "UL"
    assert [c.text_content for c in lst.children] == ["One", "Two", "Three"]
    assert lst.children[0].parent is lst
    assert selector.get("#app", page).parent is None
    assert lst.owner_document is page


# ============================================================================
#                               Class names
# ============================================================================


def test_class_add_remove_has(page: Document) -> None:
    item = selector.get("li", page)
    class_name.add(item, "selected", "big", "selected")
    assert list(item.class_list) == ["item", "selected", "big"]
    assert class_name.has(item, "big")

    class_name.remove(item, "big", "absent")
    assert not class_name.has(item, "big")
    assert item.get_attribute("class") == "item selected"


def test_class_toggle(page: Document) -> None:
    item = selector.get("li", page)
    assert class_name.toggle(item, "on") is True
    assert class_name.has(item, "on")
    assert class_name.toggle(item, "on") is False
    assert not class_name.has(item, "on")
    assert class_name.toggle(item, "item", force=True) is True
    assert class_name.toggle(item, "ghost", force=False) is False
    assert not class_name.has(item, "ghost")


def test_removing_from_element_without_class_keeps_it_clean(page: Document) -> None:
    note = selector.get("#note", page)
    class_name.remove(note, "x")
    assert not attr.has(note, "class")


# ============================================================================
#                               Styles
# ============================================================================


def test_style_set_accepts_camel_case_and_mappings(page: Document) -> None:
    box = selector.get("#app", page)
    style.set(box, "backgroundColor", "blue")
    style.set(box, {"display": "flex", "marginTop": "8px", "opacity": 0.5})
    assert box.style["background-color"] == "blue"
    assert style.get(box, "marginTop") == "8px"
    assert style.get(box, "opacity") == "0.5"
    assert style.get(box, "display") == "flex"


def test_style_parses_existing_attribute(page: Document) -> None:
    note = selector.get("#note", page)
    assert style.get(note, "color") == "red"
    assert style.get(note, "margin-top") == "4px"
    assert dict(note.style) == {"color": "red", "margin-top": "4px"}


def test_style_none_or_empty_removes_property(page: Document) -> None:
    note = selector.get("#note", page)
    style.set(note, "color", None)
    style.set(note, "marginTop", "")
    assert len(note.style) == 0
    assert not attr.has(note, "style")


def test_computed_defaults(page: Document) -> None:
    assert style.get(selector.get("#app", page), "display") == "block"
    assert style.get(selector.get("li", page), "display") == "list-item"
    assert style.get(selector.get("#hidden", page), "display") == "none"
    assert style.get(selector.get("#note", page), "opacity") == "1"
    assert style.get(selector.get("#note", page), "font-weight") == ""


def test_hide_show_toggle(page: Document) -> None:
    note = selector.get("#note", page)
    style.hide(note)
    assert style.get(note, "display") == "none"
    style.show(note)
    assert "display" not in note.style
    assert style.get(note, "display") == "block"

    style.toggle(note)
    assert note.style["display"] == "none"
    style.toggle(note)
    assert "display" not in note.style
    style.toggle(note, force=True)
    assert "display" not in note.style
    style.toggle(note, force=False)
    assert note.style["display"] == "none"


# ============================================================================
#                               Attributes
# ============================================================================


def test_attr_set_get_remove(page: Document) -> None:
    item = selector.get("li", page)
    attr.set(item, "title", "First")
    attr.set(item, {"aria-label": "one", "tabindex": 0})
    assert attr.get(item, "title") == "First"
    assert attr.get(item, "tabindex") == "0"
    assert attr.has(item, "aria-label")

    attr.remove(item, "title", "aria-label", "absent")
    assert attr.get(item, "title") is None
    assert not attr.has(item, "aria-label")


def test_attr_none_sets_boolean_attribute(page: Document) -> None:
    item = selector.get("li", page)
    attr.set(item, "disabled", None)
    assert attr.has(item, "disabled")
    assert attr.get(item, "disabled") == ""


def test_attribute_names_are_case_insensitive(page: Document) -> None:
    item = selector.get("li", page)
    attr.set(item, "Data-Role", "row")
    assert attr.get(item, "data-role") == "row"
    assert attr.has(item, "DATA-ROLE")

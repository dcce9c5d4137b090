"""Form data helpers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from utilkit.interfaces.dom import Element

__all__ = ["get_data", "set_data", "reset", "submit"]

# Input types that never contribute to form data without a submitter.
_NON_DATA_INPUTS = frozenset({"button", "file", "image", "reset", "submit"})


def get_data(form: Element) -> dict[str, str]:
    """Collect the form's successful controls into a dict.

    Disabled and unnamed controls, buttons, and unchecked checkboxes and
    radios are skipped. When several entries share a name the last one
    wins, as with ``Object.fromEntries(new FormData(form))``.
    """
    data: dict[str, str] = {}
    for control in form.form_elements:
        name = control.get_attribute("name")
        if not name or control.has_attribute("disabled"):
            continue
        match control.tag_name:
            case "INPUT":
                kind = (control.get_attribute("type") or "text").lower()
                if kind in _NON_DATA_INPUTS:
                    continue
                if kind in ("checkbox", "radio") and not control.checked:
                    continue
                data[name] = control.value
            case "SELECT":
                if control.has_attribute("multiple"):
                    for option in control.query_selector_all("option"):
                        if option.selected:
                            data[name] = option.value
                else:
                    data[name] = control.value
            case "TEXTAREA":
                data[name] = control.value
    return data


def set_data(form: Element, data: Mapping[str, Any]) -> None:
    """Write values into the form's controls by name.

    When several controls share a name (a radio group), the one whose value
    equals the given value is checked. A lone checkbox is checked by the
    truthiness of the value. Anything else gets the value as text. Unknown
    names are ignored.
    """
    controls = form.form_elements
    for name, value in data.items():
        named = [c for c in controls if c.get_attribute("name") == name]
        if not named:
            continue
        if len(named) > 1:
            chosen = next((c for c in named if c.value == value), None)
            if chosen is not None:
                chosen.checked = True
            continue
        control = named[0]
        if (control.get_attribute("type") or "").lower() == "checkbox":
            control.checked = bool(value)
        else:
            control.value = value


def reset(form: Element) -> None:
    form.reset()


def submit(form: Element) -> None:
    form.submit()

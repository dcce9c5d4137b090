"""DOM helpers.

Thin facades over the `utilkit.interfaces.dom` contract, one module per
concern. Selection takes an optional context node and `element.create` an
optional ``document=``; both fall back to the default document of
`utilkit.dom.context`. `utilkit.adapters.SoupDocument` is the
bundled implementation.

    from utilkit.adapters import SoupDocument
    from utilkit.dom import cls, selector

    doc = SoupDocument("<ul><li>a</li><li>b</li></ul>")
    for item in selector.get_all("li", doc):
        cls.add(item, "item")
"""

from . import animation, attr, class_name, context, element, event, form, selector, style

cls = class_name
css = style
attrs = attr
evt = event
el = element
form_utils = form
anim = animation

__all__ = [
    "context",
    "selector",
    "class_name",
    "style",
    "attr",
    "event",
    "element",
    "form",
    "animation",
    "cls",
    "css",
    "attrs",
    "evt",
    "el",
    "form_utils",
    "anim",
]

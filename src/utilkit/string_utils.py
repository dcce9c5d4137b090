"""String helpers.

Pure, total transforms. Non-string input never raises: transforms return
``""``, prefix/suffix checks return ``False`` and `word_count` returns ``0``.
"""

import math
import re
from typing import Any

_UPPER = re.compile(r"([A-Z])")
_KEBAB_LETTER = re.compile(r"-([a-z])")

_HTML_ENTITIES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#39;",
        "/": "&#x2F;",
    }
)


def capitalize(text: Any) -> str:
    """Upper-case the first character, leaving the rest untouched.

    Examples:
        >>> capitalize("hello world")
        'Hello world'
    """
    if not isinstance(text, str) or not text:
        return ""
    return text[0].upper() + text[1:]


def camel_to_kebab(text: Any) -> str:
    """Convert ``camelCase`` to ``kebab-case``.

    A leading upper-case letter does not produce a leading dash.

    Examples:
        >>> camel_to_kebab("backgroundColor")
        'background-color'
    """
    if not isinstance(text, str):
        return ""
    return _UPPER.sub(r"-\1", text).lower().removeprefix("-")


def kebab_to_camel(text: Any) -> str:
    """Convert ``kebab-case`` to ``camelCase``.

    Examples:
        >>> kebab_to_camel("background-color")
        'backgroundColor'
    """
    if not isinstance(text, str):
        return ""
    return _KEBAB_LETTER.sub(lambda m: m.group(1).upper(), text)


def to_snake_case(text: Any) -> str:
    """Convert ``camelCase``/``PascalCase`` to ``snake_case``."""
    if not isinstance(text, str):
        return ""
    return _UPPER.sub(r"_\1", text).lower().removeprefix("_")


def truncate(text: Any, max_length: int, suffix: str = "...") -> str:
    """Shorten ``text`` to ``max_length`` characters, ending with ``suffix``.

    Strings that already fit are returned unchanged. When ``max_length`` is
    shorter than the suffix, only the suffix is returned.

    Examples:
        >>> truncate("Hello world", 8)
        'Hello...'
    """
    if not isinstance(text, str):
        return ""
    if len(text) <= max_length:
        return text
    keep = max(0, max_length - len(suffix))
    return text[:keep] + suffix


def trim(text: Any, chars: str = " ") -> str:
    """Strip any of ``chars`` from both ends of ``text``."""
    if not isinstance(text, str):
        return ""
    return text.strip(chars)


def repeat(text: Any, count: int) -> str:
    """Repeat ``text`` ``count`` times; negative counts yield ``""``."""
    if not isinstance(text, str):
        return ""
    try:
        times = int(count)
    except (TypeError, ValueError, OverflowError):
        return ""
    return text * times if times > 0 else ""


def escape(text: Any) -> str:
    """Replace HTML-significant characters with entities.

    Examples:
        >>> escape("<a href='/x'>")
        '&lt;a href=&#39;&#x2F;x&#39;&gt;'
    """
    if not isinstance(text, str):
        return ""
    return text.translate(_HTML_ENTITIES)


def reverse(text: Any) -> str:
    """Reverse the characters of ``text``."""
    if not isinstance(text, str):
        return ""
    return text[::-1]


def pad(text: Any, length: int, chars: str = " ", end: bool = True) -> str:
    """Pad ``text`` to ``length`` with a repeating ``chars`` pattern.

    Args:
        text: Input string.
        length: Target length.
        chars: Padding pattern; truncated to fit exactly.
        end: Pad at the end when True, at the start otherwise.

    Returns:
        The padded string, or ``text`` unchanged when it is already long
        enough or ``chars`` is empty.

    Examples:
        >>> pad("7", 3, "0", end=False)
        '007'
    """
    if not isinstance(text, str):
        return ""
    missing = length - len(text)
    if missing <= 0 or not chars:
        return text
    padding = (chars * math.ceil(missing / len(chars)))[:missing]
    return text + padding if end else padding + text


def starts_with(text: Any, search: str, position: int = 0) -> bool:
    """Return True if ``search`` occurs in ``text`` at ``position``."""
    if not isinstance(text, str) or not isinstance(search, str):
        return False
    start = max(position, 0)
    return text[start : start + len(search)] == search


def ends_with(text: Any, search: str) -> bool:
    """Return True if ``text`` ends with ``search``."""
    if not isinstance(text, str) or not isinstance(search, str):
        return False
    return text.endswith(search)


def word_count(text: Any) -> int:
    """Count whitespace-separated words; blank text has none."""
    if not isinstance(text, str):
        return 0
    return len(text.split())

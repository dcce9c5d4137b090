"""String validators.

Format checks are regex or parse based. Phone, ID card and zip code formats
are those of mainland China.
"""

import re
from typing import Any
from urllib.parse import urlsplit

from .passwords import get_password_strength, validate_password

__all__ = [
    "is_string",
    "is_length",
    "is_email",
    "is_phone",
    "is_url",
    "is_id_card",
    "is_zip_code",
    "is_alpha",
    "is_alphanumeric",
    "validate_password",
    "get_password_strength",
]

_EMAIL = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_PHONE = re.compile(r"1[3-9][0-9]{9}")
_ID_CARD = re.compile(r"[0-9]{15}|[0-9]{18}|[0-9]{17}[0-9Xx]")
_ZIP_CODE = re.compile(r"[0-9]{6}")
_ALPHA = re.compile(r"[a-zA-Z]+")
_ALPHANUMERIC = re.compile(r"[a-zA-Z0-9]+")
_SCHEME = re.compile(r"[a-zA-Z][a-zA-Z0-9+.-]*")


def _full_match(pattern: re.Pattern[str], value: Any) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def is_string(value: Any) -> bool:
    """Return True if ``value`` is a ``str``."""
    return isinstance(value, str)


def is_length(value: Any, minimum: int, maximum: int | None = None) -> bool:
    """Return True if ``value`` is a string whose length is within bounds."""
    if not isinstance(value, str):
        return False
    try:
        return len(value) >= minimum and (maximum is None or len(value) <= maximum)
    except TypeError:
        return False


def is_email(value: Any) -> bool:
    """Return True for ``local@domain.tld`` shaped addresses."""
    return _full_match(_EMAIL, value)


def is_phone(value: Any) -> bool:
    """Return True for 11-digit mainland China mobile numbers."""
    return _full_match(_PHONE, value)


def is_url(value: Any) -> bool:
    """Return True for absolute URLs.

    An absolute URL has a scheme followed by either an authority
    (``https://host``) or a non-empty opaque part (``mailto:a@b``).
    """
    if not isinstance(value, str) or not value or value != value.strip():
        return False
    try:
        parts = urlsplit(value)
        _ = parts.port  # validates the port component
    except ValueError:
        return False
    if not parts.scheme or not _SCHEME.fullmatch(parts.scheme):
        return False
    if value[len(parts.scheme) + 1 :].startswith("//"):
        return bool(parts.netloc)
    return bool(parts.path or parts.query or parts.fragment)


def is_id_card(value: Any) -> bool:
    """Return True for 15- or 18-character resident ID numbers."""
    return _full_match(_ID_CARD, value)


def is_zip_code(value: Any) -> bool:
    """Return True for 6-digit postal codes."""
    return _full_match(_ZIP_CODE, value)


def is_alpha(value: Any) -> bool:
    """Return True if ``value`` is non-empty and only ASCII letters."""
    return _full_match(_ALPHA, value)


def is_alphanumeric(value: Any) -> bool:
    """Return True if ``value`` is non-empty and only ASCII letters and digits."""
    return _full_match(_ALPHANUMERIC, value)

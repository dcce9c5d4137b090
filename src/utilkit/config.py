"""Configuration utilities for UTILKIT.

This module centralizes small helpers and constants related to library
configuration. Environment lookups are performed at call time so tests can
monkeypatch the environment without reloading modules.
"""

import os
from pathlib import Path

from platformdirs import user_log_dir

DEFAULT_LOCALE = "zh-CN"  # pragma: no mutate
LOCALE_ENV_VAR = "UTILKIT_LOCALE"  # pragma: no mutate
LOG_PATH_ENV_VAR = "UTILKIT_LOG_PATH"  # pragma: no mutate

DEFAULT_DATE_PATTERN = "YYYY-MM-DD HH:mm:ss"  # pragma: no mutate
DEFAULT_ANIMATION_DURATION_MS = 300
DEFAULT_FRAME_RATE = 60
DEFAULT_PASSWORD_MIN_LENGTH = 8

SUPPORTED_LOCALES = ("zh-CN", "en-US")


def get_locale(locale: str | None = None) -> str:
    """Resolve the message locale.

    Resolution order: the explicit ``locale`` argument, the ``UTILKIT_LOCALE``
    environment variable, then ``DEFAULT_LOCALE``. Unsupported values fall back
    to the default instead of raising.

    Args:
        locale: Explicit locale requested by the caller, or None.

    Returns:
        One of `SUPPORTED_LOCALES`.
    """
    candidate = locale or os.environ.get(LOCALE_ENV_VAR) or DEFAULT_LOCALE
    if candidate in SUPPORTED_LOCALES:
        return candidate
    return DEFAULT_LOCALE


def default_log_path() -> Path:
    """Return the flight-recorder path used by the CLI.

    Uses ``UTILKIT_LOG_PATH`` when set, otherwise ``latest.log`` inside the
    platform's per-user log directory.
    """
    if env_path := os.environ.get(LOG_PATH_ENV_VAR):
        return Path(env_path)
    return Path(user_log_dir("utilkit", appauthor=False, ensure_exists=True)) / "latest.log"

"""CLI helpers for UTILKIT.

Utilities used by the command-line interface: logger-level option parsing,
message emitters that write to stderr with emoji→ASCII fallbacks, JSON
output to stdout, and access to the locale chosen on the command line.
"""

from .context import current_locale
from .messages import error, success, warn
from .output import echo_json

__all__ = ["current_locale", "echo_json", "error", "success", "warn"]

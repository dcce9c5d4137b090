"""Machine-readable output for CLI commands.

Results go to **stdout** as one JSON document per invocation; human-oriented
status lines go to stderr through `messages`.
"""

import json
from datetime import date
from typing import Any

import click


def _encode(value: Any) -> Any:
    """Encode values the json module does not know about.

    Dates and datetimes become ISO 8601 strings; tuples are already lists.

    Raises:
        TypeError: For any other unsupported type.
    """
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def echo_json(value: Any) -> None:
    """Write ``value`` to stdout as JSON, keeping non-ASCII text readable."""
    click.echo(json.dumps(value, ensure_ascii=False, default=_encode))

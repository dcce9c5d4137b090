"""UTILKIT string commands.

Thin wrappers over `utilkit.string_utils`; each prints its result as JSON.

Examples
    $ utilkit string kebab backgroundColor
    "background-color"
    $ utilkit string truncate "Hello World" --length 8
    "Hello..."
"""

import click
import click_extra as clickx

from utilkit import string_utils

from .helpers import echo_json


@click.group(cls=clickx.ExtraGroup)
def string() -> None:
    """String transforms."""


@string.command()
@click.argument("text")
def capitalize(text: str) -> None:
    """Upper-case the first character, leaving the rest unchanged."""
    echo_json(string_utils.capitalize(text))


@string.command()
@click.argument("text")
def kebab(text: str) -> None:
    """Convert camelCase to kebab-case."""
    echo_json(string_utils.camel_to_kebab(text))


@string.command()
@click.argument("text")
def camel(text: str) -> None:
    """Convert kebab-case to camelCase."""
    echo_json(string_utils.kebab_to_camel(text))


@string.command()
@click.argument("text")
def snake(text: str) -> None:
    """Convert camelCase to snake_case."""
    echo_json(string_utils.to_snake_case(text))


@string.command()
@click.argument("text")
@click.option("--length", "-n", "max_length", type=int, required=True, help="Maximum length.")
@click.option("--suffix", default="...", show_default=True, help="Marker for cut text.")
def truncate(text: str, max_length: int, suffix: str) -> None:
    """Cut TEXT to at most --length characters, suffix included."""
    echo_json(string_utils.truncate(text, max_length, suffix))


@string.command()
@click.argument("text")
def escape(text: str) -> None:
    """Escape HTML special characters."""
    echo_json(string_utils.escape(text))


@string.command()
@click.argument("text")
def reverse(text: str) -> None:
    """Reverse TEXT."""
    echo_json(string_utils.reverse(text))


@string.command()
@click.argument("text")
@click.argument("length", type=int)
@click.option("--chars", default=" ", show_default=True, help="Fill pattern.")
@click.option(
    "--start/--end",
    "at_start",
    default=False,
    help="Pad at the start instead of the end.",
)
def pad(text: str, length: int, chars: str, at_start: bool) -> None:
    """Pad TEXT to LENGTH by repeating --chars."""
    echo_json(string_utils.pad(text, length, chars, end=not at_start))


@string.command()
@click.argument("text")
def words(text: str) -> None:
    """Count whitespace-separated words."""
    echo_json(string_utils.word_count(text))

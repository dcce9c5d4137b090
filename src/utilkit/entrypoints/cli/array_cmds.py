"""UTILKIT array commands.

Arrays are passed as JSON and results printed as JSON.

Examples
    $ utilkit array unique '[1, 1, 2, 3, 3]'
    [1, 2, 3]
    $ utilkit array sort-by '[{"n": 2}, {"n": 1}]' n --desc
    [{"n": 2}, {"n": 1}]
"""

import random

import click
import click_extra as clickx

from utilkit import array_utils

from .helpers import echo_json, warn
from .helpers.params import JSON_ARRAY


@click.group(cls=clickx.ExtraGroup)
def array() -> None:
    """Array helpers over JSON input."""


@array.command()
@click.argument("items", type=JSON_ARRAY)
def unique(items: list) -> None:
    """Drop duplicates, keeping first occurrences."""
    echo_json(array_utils.unique(items))


@array.command()
@click.argument("items", type=JSON_ARRAY)
@click.option("--size", "-n", type=int, default=1, show_default=True, help="Chunk size.")
def chunk(items: list, size: int) -> None:
    """Split ITEMS into consecutive chunks of --size."""
    echo_json(array_utils.chunk(items, size))


@array.command()
@click.argument("items", type=JSON_ARRAY)
@click.option(
    "--depth",
    type=float,
    default=1,
    show_default=True,
    help="Levels to flatten; 'inf' flattens completely.",
)
def flatten(items: list, depth: float) -> None:
    """Flatten nested arrays up to --depth levels."""
    echo_json(array_utils.flatten(items, depth))


@array.command(name="sort-by")
@click.argument("items", type=JSON_ARRAY)
@click.argument("key")
@click.option("--desc", is_flag=True, help="Sort in descending order.")
def sort_by(items: list, key: str, desc: bool) -> None:
    """Sort objects by field KEY; objects without it go last."""
    echo_json(array_utils.sort_by(items, key, desc))


@array.command(name="group-by")
@click.argument("items", type=JSON_ARRAY)
@click.argument("key")
def group_by(items: list, key: str) -> None:
    """Group objects by field KEY."""
    echo_json(array_utils.group_by(items, key))


@array.command(name="sum-by")
@click.argument("items", type=JSON_ARRAY)
@click.argument("key")
def sum_by(items: list, key: str) -> None:
    """Sum the numeric field KEY."""
    echo_json(array_utils.sum_by(items, key))


@array.command()
@click.argument("items", type=JSON_ARRAY)
@click.option("--count", "-n", type=int, default=1, show_default=True, help="How many.")
@click.option("--seed", type=int, default=None, help="Seed for a reproducible pick.")
def sample(items: list, count: int, seed: int | None) -> None:
    """Pick --count elements at random positions."""
    if count > len(items):
        warn(f"Only {len(items)} elements to sample from; returning all of them.")
    rng = random.Random(seed) if seed is not None else None
    echo_json(array_utils.sample(items, count, rng=rng))

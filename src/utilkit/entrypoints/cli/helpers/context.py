"""Access to state the top-level group stores on the Click context."""

import click

from utilkit import config


def current_locale(ctx: click.Context) -> str:
    """Return the locale resolved by the ``utilkit`` group.

    Falls back to `utilkit.config.get_locale` when a subcommand runs without
    the top-level group (e.g. invoked directly in tests).
    """
    state = ctx.find_object(dict) or {}
    return state.get("locale") or config.get_locale()

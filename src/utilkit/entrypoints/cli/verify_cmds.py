"""UTILKIT verify commands.

Each command prints its result as JSON and exits with status 1 when the
value does not pass, so the commands can gate shell scripts:

    $ utilkit verify email someone@example.com && echo ok
    true
    ok
"""

import logging
from collections.abc import Callable
from typing import Any

import click
import click_extra as clickx

from utilkit import verify as checks
from utilkit.config import DEFAULT_PASSWORD_MIN_LENGTH

from .helpers import current_locale, echo_json, error, success

logger = logging.getLogger(__name__)


@click.group(cls=clickx.ExtraGroup)
def verify() -> None:
    """Validation predicates and password policy."""


@verify.command()
@click.argument("password")
@click.option(
    "--min-length",
    type=int,
    default=DEFAULT_PASSWORD_MIN_LENGTH,
    show_default=True,
    help="Minimum number of characters.",
)
@click.option("--number/--no-number", "require_number", default=True, show_default=True)
@click.option("--letter/--no-letter", "require_letter", default=True, show_default=True)
@click.option("--lower/--no-lower", "require_lower_case", default=True, show_default=True)
@click.option("--upper/--no-upper", "require_upper_case", default=True, show_default=True)
@click.option(
    "--special/--no-special", "require_special_char", default=True, show_default=True
)
@click.pass_context
def password(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    password: str,  # pylint: disable=redefined-outer-name
    min_length: int,
    require_number: bool,
    require_letter: bool,
    require_lower_case: bool,
    require_upper_case: bool,
    require_special_char: bool,
) -> None:
    """Check PASSWORD against a policy and list unmet requirements."""
    result = checks.validate_password(
        password,
        min_length=min_length,
        require_number=require_number,
        require_letter=require_letter,
        require_lower_case=require_lower_case,
        require_upper_case=require_upper_case,
        require_special_char=require_special_char,
        locale=current_locale(ctx),
    )
    echo_json(result.to_dict())
    if result.is_valid:
        success(result.message)
    else:
        error(result.message)
        ctx.exit(1)


@verify.command()
@click.argument("password")
@click.pass_context
def strength(ctx: click.Context, password: str) -> None:  # pylint: disable=redefined-outer-name
    """Score PASSWORD and name its strength level."""
    echo_json(checks.get_password_strength(password, locale=current_locale(ctx)).to_dict())


def _predicate_command(name: str, predicate: Callable[[Any], bool], summary: str) -> None:
    @verify.command(name=name, help=summary)
    @click.argument("value")
    @click.pass_context
    def command(ctx: click.Context, value: str) -> None:
        passed = predicate(value)
        logger.debug("%s(%r) -> %s", name, value, passed)
        echo_json(passed)
        if not passed:
            ctx.exit(1)


_predicate_command("email", checks.string.is_email, "Is VALUE an email address?")
_predicate_command(
    "phone", checks.string.is_phone, "Is VALUE a mainland China mobile number?"
)
_predicate_command("url", checks.string.is_url, "Is VALUE an absolute URL?")
_predicate_command(
    "id-card", checks.string.is_id_card, "Is VALUE a 15- or 18-character resident ID?"
)
_predicate_command(
    "zip-code", checks.string.is_zip_code, "Is VALUE a six-digit postal code?"
)

"""UTILKIT date commands.

Dates are accepted in any format `utilkit.date_utils.to_date` understands
(``2024-03-15``, ISO 8601 timestamps, free text such as ``15 Mar 2024``).
Datetimes in results are printed as ISO 8601 strings.

Examples
    $ utilkit date format 2024-03-15 --pattern 'YYYY/MM/DD'
    "2024/03/15"
    $ utilkit date add 2024-01-31 1 --unit month
    "2024-02-29T00:00:00"
"""

from datetime import datetime

import click
import click_extra as clickx

from utilkit import date_utils
from utilkit.config import DEFAULT_DATE_PATTERN

from .helpers import current_locale, echo_json
from .helpers.params import DATE

UNITS = click.Choice(["year", "month", "week", "day", "hour", "minute", "second"])


@click.group(cls=clickx.ExtraGroup)
def date() -> None:
    """Date formatting, arithmetic and calendar queries."""


@date.command(name="format")
@click.argument("value", type=DATE)
@click.option(
    "--pattern",
    "-p",
    default=DEFAULT_DATE_PATTERN,
    show_default=True,
    help="Tokens: YYYY MM DD HH hh mm ss SSS d dd A; [text] is literal.",
)
@click.pass_context
def format_(ctx: click.Context, value: datetime, pattern: str) -> None:
    """Render VALUE with --pattern."""
    echo_json(date_utils.format(value, pattern, locale=current_locale(ctx)))


@date.command()
@click.argument("value", type=DATE)
@click.option("--base", type=DATE, default=None, help="Reference time (default: now).")
@click.pass_context
def relative(ctx: click.Context, value: datetime, base: datetime | None) -> None:
    """Describe VALUE relative to --base, e.g. "3 days ago"."""
    echo_json(date_utils.relative_time(value, base, locale=current_locale(ctx)))


@date.command()
@click.argument("value", type=DATE)
@click.argument("amount", type=float)
@click.option("--unit", "-u", type=UNITS, default="day", show_default=True)
def add(value: datetime, amount: float, unit: str) -> None:
    """Add AMOUNT units to VALUE (negative amounts subtract)."""
    echo_json(date_utils.add(value, amount, unit))


@date.command()
@click.argument("first", type=DATE)
@click.argument("second", type=DATE)
@click.option("--unit", "-u", type=UNITS, default="day", show_default=True)
def diff(first: datetime, second: datetime, unit: str) -> None:
    """Whole units from FIRST to SECOND (SECOND - FIRST)."""
    echo_json(date_utils.diff(first, second, unit))


@date.command()
@click.argument("value", type=DATE)
def info(value: datetime) -> None:
    """Calendar facts about VALUE."""
    echo_json(
        {
            "date": value,
            "day_of_year": date_utils.get_day_of_year(value),
            "week_of_year": date_utils.get_week_of_year(value),
            "quarter": date_utils.get_quarter(value),
            "is_leap_year": date_utils.is_leap_year(value),
            "days_in_month": date_utils.get_days_in_month(value),
            "days_in_year": date_utils.get_days_in_year(value),
            "is_weekend": date_utils.is_weekend(value),
            "is_today": date_utils.is_today(value),
        }
    )

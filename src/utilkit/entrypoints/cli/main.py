"""UTILKIT CLI entry point.

Defines the top-level ``utilkit`` command (via Click-Extra) and registers the
subcommand groups.

Currently available groups
- ``utilkit string`` - case conversion, truncation, escaping, padding, word count.
- ``utilkit array`` - unique, chunk, flatten, sort/group/sum by field, sample.
- ``utilkit date`` - formatting, relative time, arithmetic, calendar info.
- ``utilkit verify`` - password policy and strength, format validators.

Notes
- The CLI version is sourced from `utilkit.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Results are JSON on stdout; logs and status lines go to stderr.

Examples
    $ utilkit string kebab backgroundColor
    $ utilkit array chunk '[1, 2, 3, 4, 5]' --size 2
    $ utilkit --locale en-US verify password 'Password123'
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from utilkit import __version__, config
from utilkit.logging import config_console_handler, config_flight_recorder, log_startup

from .array_cmds import array
from .date_cmds import date
from .helpers.log_level_parser import parse_log_level
from .string_cmds import string
from .verify_cmds import verify

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """UTILKIT command-line interface.

    Run the UTILKIT string, array, date and validation helpers from the shell.
    Every command prints its result as JSON on stdout, so it composes with
    tools like jq.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=config.default_log_path,
    envvar=config.LOG_PATH_ENV_VAR,
    show_default="<user log dir>/latest.log",
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="UTILKIT_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "(tunable via UTILKIT_FLIGHT_RECORDER_CAPACITY) at DEBUG granularity (unaffected by -v/-q) "
        "and writes them to --log-path when a WARNING/ERROR occurs, or on clean exit "
        "if --force-flush is set. Console verbosity is unchanged. "
        "Use --no-flight-recorder to disable."
    ),
    default=True,
    envvar="UTILKIT_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help=(
        "Force-flush the flight recorder buffer to --log-path on program exit. "
        "Normally the buffer only dumps on WARNING/ERROR; console output is unaffected. "
        "Use --no-force-flush to disable."
    ),
    default=False,
    envvar="UTILKIT_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). This changes the "
        "logger's own level, so it applies to BOTH console and flight-recorder. "
        "Repeatable (e.g. -L utilkit.adapters=INFO -L asyncio=ERROR) or via "
        "UTILKIT_LOGGER_LEVELS (comma/space list)."
    ),
    default=("asyncio=WARNING", "bs4=WARNING"),
    envvar="UTILKIT_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--locale",
    "locale",
    help=(
        f"Language of user-facing messages ({', '.join(config.SUPPORTED_LOCALES)}). "
        f"Unsupported values fall back to {config.DEFAULT_LOCALE}."
    ),
    default=None,
    envvar=config.LOCALE_ENV_VAR,
    show_envvar=True,
)
@clickx.pass_context
def utilkit(  # pylint: disable=too-many-arguments, too-many-locals, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
    locale: str | None,
) -> None:
    """UTILKIT command-line interface."""

    # 0) compute effective verbosity
    base_level = logging.WARNING
    level = base_level - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = []

    # 1) configure console handler
    use_color = ctx.color is not False  # None or True => allow color
    handlers.append(
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    )

    # 2) configure flight recorder
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # 3) configure root logger with the handlers
    logging.basicConfig(
        level=logging.DEBUG,  # capture all levels; handlers filter
        handlers=handlers,
        force=True,
    )

    # 4) set per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    # 5) resolve the message locale for subcommands
    resolved_locale = config.get_locale(locale)
    if locale and locale != resolved_locale:
        logger.warning("Unsupported locale %r; using %s.", locale, resolved_locale)
    ctx.ensure_object(dict)["locale"] = resolved_locale

    # 6) log startup info
    log_startup(
        logger,
        app_version=__version__,
        level=level,
        locale=resolved_locale,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )

    # 7) ensure logging is cleanly shut down after the command returns
    ctx.call_on_close(logging.shutdown)


utilkit.add_command(string)
utilkit.add_command(array)
utilkit.add_command(date)
utilkit.add_command(verify)

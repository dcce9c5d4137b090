"""End-to-end tests for the global options of `utilkit`.

Verbosity, logger-level overrides, debug formatting and the flight recorder
are checked through real commands:

- ``--locale fr-FR`` logs a WARNING (unsupported locale, falls back to zh-CN);
- the startup summary is logged at INFO;
- ``verify email`` logs its verdict at DEBUG on
  ``utilkit.entrypoints.cli.verify_cmds``;
- date arguments log how they were read at DEBUG on
  ``utilkit.entrypoints.cli.helpers.params``.
"""

import re

import pytest

# pylint: disable=unused-argument, magic-value-comparison

FALLBACK = "Unsupported locale 'fr-FR'; using zh-CN."
VERDICT = "email('someone@example.com') -> True"
EMAIL = ("verify", "email", "someone@example.com")


def _lines(pattern: str, text: str) -> list[str]:
    return re.findall(pattern, text, re.MULTILINE)


# ============================================================================
#                               Console verbosity
# ============================================================================


def test_default_console_shows_warnings_only(invoke, fs):
    result = invoke("--locale", "fr-FR", *EMAIL)
    assert result.exit_code == 0
    assert FALLBACK in result.stderr
    assert "UTILKIT" not in result.stderr  # INFO startup banner
    assert VERDICT not in result.stderr
    assert result.stdout.strip() == "true"


def test_verbose_adds_startup_info(invoke, fs):
    result = invoke("-v", *EMAIL)
    assert result.exit_code == 0
    assert _lines(r"UTILKIT \d+\.\d+\.\d+", result.stderr)
    assert VERDICT not in result.stderr


def test_double_verbose_adds_debug_details(invoke, fs):
    result = invoke("-vv", "date", "info", "2024-03-15")
    assert result.exit_code == 0
    assert "Read '2024-03-15' as 2024-03-15T00:00" in result.stderr
    assert result.stdout.startswith("{")


def test_quiet_hides_warnings(invoke, fs):
    result = invoke("-q", "--locale", "fr-FR", *EMAIL)
    assert result.exit_code == 0
    assert FALLBACK not in result.stderr


@pytest.mark.parametrize(
    "env, cli_args",
    [
        ({}, ["-vv", "-L", "utilkit.entrypoints.cli.verify_cmds=INFO"]),
        ({"UTILKIT_LOGGER_LEVELS": "utilkit.entrypoints.cli.verify_cmds=INFO"}, ["-vv"]),
    ],
    ids=["cli-flag", "env-var"],
)
def test_logger_level_override_silences_one_logger(invoke, fs, env, cli_args):
    result = invoke(*cli_args, *EMAIL, env=env)
    assert result.exit_code == 0
    assert VERDICT not in result.stderr
    # other loggers keep the console level
    assert _lines(r"UTILKIT \d+\.\d+\.\d+", result.stderr)


def test_debug_mode_shows_source_locations(invoke, fs):
    result = invoke("--debug", *EMAIL)
    assert result.exit_code == 0
    # the wider debug prefix may wrap the line, so match the call only
    assert "email('someone@example.com')" in result.stderr
    assert _lines(r"verify_cmds\.py:\d+", result.stderr)


def test_source_locations_hidden_by_default(invoke, fs):
    result = invoke("-vv", *EMAIL)
    assert VERDICT in result.stderr
    assert not _lines(r"verify_cmds\.py:\d+", result.stderr)


# ============================================================================
#                               Flight recorder
# ============================================================================


def test_recorder_flushes_up_to_the_warning(invoke, fs, recorder_path):
    result = invoke("--log-path", str(recorder_path), "--locale", "fr-FR", *EMAIL)
    assert result.exit_code == 0
    content = recorder_path.read_text(encoding="utf-8")
    assert FALLBACK in content
    # records after the warning stay buffered
    assert VERDICT not in content


def test_recorder_stays_empty_without_warnings(invoke, fs, recorder_path):
    result = invoke("--log-path", str(recorder_path), *EMAIL)
    assert result.exit_code == 0
    assert recorder_path.read_text(encoding="utf-8") == ""


@pytest.mark.parametrize(
    "env, cli_args",
    [({}, ["--force-flush"]), ({"UTILKIT_FORCE_FLUSH_FLIGHT_RECORDER": "true"}, [])],
    ids=["cli-flag", "env-var"],
)
def test_recorder_force_flush_keeps_debug_records(invoke, fs, recorder_path, env, cli_args):
    result = invoke("--log-path", str(recorder_path), *cli_args, *EMAIL, env=env)
    assert result.exit_code == 0
    content = recorder_path.read_text(encoding="utf-8")
    # DEBUG granularity regardless of the WARNING console level
    assert "DEBUG utilkit.entrypoints.cli.verify_cmds" in content
    assert VERDICT in content


@pytest.mark.parametrize(
    "env, cli_args",
    [({}, ["--no-flight-recorder"]), ({"UTILKIT_FLIGHT_RECORDER": "0"}, [])],
    ids=["cli-flag", "env-var"],
)
def test_recorder_can_be_disabled(invoke, fs, recorder_path, env, cli_args):
    result = invoke(
        "--log-path", str(recorder_path), *cli_args, "--locale", "fr-FR", *EMAIL, env=env
    )
    assert result.exit_code == 0
    assert FALLBACK in result.stderr
    assert not recorder_path.exists()


def test_recorder_file_is_rewritten_each_run(invoke, fs, recorder_path):
    log = ("--log-path", str(recorder_path), "--force-flush")
    invoke(*log, "date", "diff", "2024-01-01", "2024-02-01")
    first = recorder_path.read_text(encoding="utf-8")
    invoke(*log, *EMAIL)
    second = recorder_path.read_text(encoding="utf-8")
    assert "Read '2024-01-01'" in first
    assert "Read '2024-01-01'" not in second
    assert VERDICT in second


def test_startup_diagnostics(invoke, fs, recorder_path):
    result = invoke(
        "--log-path",
        str(recorder_path),
        "--force-flush",
        "--locale",
        "en-US",
        *EMAIL,
        env={"UTILKIT_LOGGER_LEVELS": "utilkit.adapters=INFO"},
    )
    assert result.exit_code == 0
    content = recorder_path.read_text(encoding="utf-8")
    for pattern in (
        r"UTILKIT \d+\.\d+\.\d+",
        r"console=WARNING",
        r"flight-recorder=ON",
        r"locale=en-US",
        r"Python: \d+\.\d+\.\d+",
        r"Platform: .+",
        r"PID: \d+",
        r"BeautifulSoup: \d+\.\d+\.\d+",
        r"soupsieve: \d+\.\d+",
        r"dateutil: \d+\.\d+\.\d+",
        r"Handlers: .+",
        r"Flight recorder: path=recorder\.log, capacity=2000, flush_on_close=True",
        r"Per-logger overrides: \{'asyncio': 'WARNING', 'bs4': 'WARNING', 'utilkit.adapters': 'INFO'\}",
    ):
        assert _lines(pattern, content), f"{pattern!r} missing from:\n{content}"

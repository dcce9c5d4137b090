"""Fixtures for end-to-end tests of the `utilkit` CLI.

Every test gets a fresh `CliRunner` and may opt into an isolated working
directory (`fs`) so flight-recorder files land in a throwaway location.
"""

import logging
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner, Result

from utilkit.entrypoints.cli.main import utilkit

# pylint: disable=redefined-outer-name


@pytest.fixture(autouse=True)
def _restore_logger_levels():
    """Undo per-logger levels set by `-L` so they don't leak into later tests."""
    manager = logging.Logger.manager
    saved = {
        name: logger.level
        for name, logger in manager.loggerDict.items()
        if isinstance(logger, logging.Logger)
    }
    yield
    for name, logger in list(manager.loggerDict.items()):
        if isinstance(logger, logging.Logger):
            logger.setLevel(saved.get(name, logging.NOTSET))


@pytest.fixture
def runner() -> CliRunner:
    """Click runner used to invoke `utilkit`."""
    return CliRunner()


@pytest.fixture
def fs(runner: CliRunner):
    """Run the test inside `runner.isolated_filesystem()`."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def invoke(runner: CliRunner) -> Callable[..., Result]:
    """Invoke `utilkit` with the given arguments and optional environment."""

    def run(*args: str, env: dict[str, str] | None = None) -> Result:
        return runner.invoke(utilkit, list(args), env=env)

    return run


@pytest.fixture
def recorder_path() -> Path:
    """Flight-recorder file, relative to the isolated working directory."""
    return Path("recorder.log")

"""Global pytest fixtures for UTILKIT."""

import pytest

from utilkit import config


@pytest.fixture(autouse=True)
def _isolate_locale(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test with the default locale unless it opts into another.

    A ``UTILKIT_LOCALE`` exported in the developer's shell would otherwise
    change every localized assertion.
    """
    monkeypatch.delenv(config.LOCALE_ENV_VAR, raising=False)


@pytest.fixture
def en_us(monkeypatch: pytest.MonkeyPatch) -> str:
    """Switch the process default locale to English for one test."""
    monkeypatch.setenv(config.LOCALE_ENV_VAR, "en-US")
    return "en-US"


@pytest.fixture(autouse=True)
def _isolate_log_path(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep the CLI's default flight-recorder file out of the user log dir."""
    monkeypatch.setenv(config.LOG_PATH_ENV_VAR, str(tmp_path / "latest.log"))

from __future__ import annotations

from pathlib import Path
from zoneinfo import ZoneInfo

import pytest

from planmacro.config import (
    AppConfig,
    ConfigurationError,
    MissingConfigurationError,
    get_app_config,
    get_google_sheets_config,
)

_APP_VARS = ("PLANMACRO_CONFIG_RANGE", "PLANMACRO_STATUS_RANGE", "PLANMACRO_TIMEZONE")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (*_APP_VARS, "GOOGLE_SERVICE_ACCOUNT_FILE", "PLANMACRO_SPREADSHEET_KEY"):
        monkeypatch.delenv(name, raising=False)


def test_app_config_defaults() -> None:
    assert get_app_config() == AppConfig(
        config_range="config", status_range="status", timezone=ZoneInfo("UTC")
    )


def test_app_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PLANMACRO_CONFIG_RANGE", "plannerConfig")
    monkeypatch.setenv("PLANMACRO_STATUS_RANGE", "plannerStatus")
    monkeypatch.setenv("PLANMACRO_TIMEZONE", "Europe/Berlin")

    config = get_app_config()

    assert config.config_range == "plannerConfig"
    assert config.status_range == "plannerStatus"
    assert config.timezone == ZoneInfo("Europe/Berlin")


def test_unknown_timezone_is_a_configuration_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PLANMACRO_TIMEZONE", "Mars/Olympus_Mons")

    with pytest.raises(ConfigurationError, match="Unknown timezone: Mars/Olympus_Mons"):
        get_app_config()


def test_google_sheets_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GOOGLE_SERVICE_ACCOUNT_FILE", "~/keys/planner.json")
    monkeypatch.setenv("PLANMACRO_SPREADSHEET_KEY", "abc123")

    config = get_google_sheets_config()

    assert config.service_account_file == Path("~/keys/planner.json").expanduser()
    assert config.spreadsheet_key == "abc123"


def test_google_sheets_config_requires_both_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PLANMACRO_SPREADSHEET_KEY", "abc123")

    with pytest.raises(MissingConfigurationError, match="GOOGLE_SERVICE_ACCOUNT_FILE"):
        get_google_sheets_config()

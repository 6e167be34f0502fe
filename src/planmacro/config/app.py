"""Application-wide settings resolved from the environment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .env import optional_env_var
from .errors import ConfigurationError

DEFAULT_CONFIG_RANGE: Final[str] = "config"
DEFAULT_STATUS_RANGE: Final[str] = "status"
DEFAULT_TIMEZONE: Final[str] = "UTC"


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Names of the spreadsheet regions the edit handler reads, plus the sheet timezone."""

    config_range: str = DEFAULT_CONFIG_RANGE
    status_range: str = DEFAULT_STATUS_RANGE
    timezone: ZoneInfo = ZoneInfo(DEFAULT_TIMEZONE)


def get_app_config() -> AppConfig:
    tz_name = optional_env_var("PLANMACRO_TIMEZONE", DEFAULT_TIMEZONE)
    try:
        timezone = ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigurationError(f"Unknown timezone: {tz_name}") from exc
    return AppConfig(
        config_range=optional_env_var("PLANMACRO_CONFIG_RANGE", DEFAULT_CONFIG_RANGE),
        status_range=optional_env_var("PLANMACRO_STATUS_RANGE", DEFAULT_STATUS_RANGE),
        timezone=timezone,
    )

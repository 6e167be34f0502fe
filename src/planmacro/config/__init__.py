"""Application configuration helpers."""

from __future__ import annotations

from .app import AppConfig, get_app_config
from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .google_sheets import GoogleSheetsConfig, get_google_sheets_config
from .logging import configure_logging

__all__ = [
    "AppConfig",
    "ConfigurationError",
    "GoogleSheetsConfig",
    "MissingConfigurationError",
    "configure_logging",
    "get_app_config",
    "get_google_sheets_config",
    "optional_env_var",
    "require_env_vars",
]

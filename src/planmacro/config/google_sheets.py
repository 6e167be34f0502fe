"""Google Sheets configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .env import require_env_vars


@dataclass(frozen=True)
class GoogleSheetsConfig:
    """Holds the service-account credentials path and target spreadsheet key."""

    service_account_file: Path
    spreadsheet_key: str


def get_google_sheets_config() -> GoogleSheetsConfig:
    values = require_env_vars(("GOOGLE_SERVICE_ACCOUNT_FILE", "PLANMACRO_SPREADSHEET_KEY"))
    return GoogleSheetsConfig(
        service_account_file=Path(values["GOOGLE_SERVICE_ACCOUNT_FILE"]).expanduser(),
        spreadsheet_key=values["PLANMACRO_SPREADSHEET_KEY"],
    )

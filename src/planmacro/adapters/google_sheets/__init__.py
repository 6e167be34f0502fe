"""Public interface for the Google Sheets adapter."""

from __future__ import annotations

from .client import GOOGLE_SHEETS_SCOPES, GoogleSheetsHost, build_google_sheets_host
from .schema import GridRangePayload, NamedRangePayload

__all__ = [
    "GOOGLE_SHEETS_SCOPES",
    "GoogleSheetsHost",
    "GridRangePayload",
    "NamedRangePayload",
    "build_google_sheets_host",
]

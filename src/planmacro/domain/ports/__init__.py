"""Domain port definitions for adapters."""

from __future__ import annotations

from .host import CellValue, EditEvent, SpreadsheetHost, is_blank

__all__ = [
    "CellValue",
    "EditEvent",
    "SpreadsheetHost",
    "is_blank",
]

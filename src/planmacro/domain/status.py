"""Single-cell run status shown inside the spreadsheet."""

from __future__ import annotations

from typing import TYPE_CHECKING

from planmacro.domain.ports.host import is_blank
from planmacro.domain.ranges import GridRange

if TYPE_CHECKING:
    from datetime import datetime

    from planmacro.domain.ports.host import SpreadsheetHost


def format_status(message: str, at: datetime) -> str:
    return f"{message} ({at.isoformat(sep=' ', timespec='seconds')})"


def report_failure(
    host: SpreadsheetHost, status_cell: GridRange, message: str, at: datetime
) -> str:
    """Overwrite the status cell with ``message`` stamped with ``at``."""

    text = format_status(message, at)
    host.set_value(status_cell.bound_sheet, status_cell.start_row, status_cell.start_column, text)
    return text


def clear_status(host: SpreadsheetHost, status_cell: GridRange) -> bool:
    """Blank the status cell, skipping the write when it is already blank.

    Writing an unchanged blank would raise a fresh edit event in some hosts.
    """

    top_left = GridRange.cell(status_cell.sheet, status_cell.start_row, status_cell.start_column)
    current = host.get_values(top_left)
    if not current or not current[0] or is_blank(current[0][0]):
        return False
    host.set_value(status_cell.bound_sheet, status_cell.start_row, status_cell.start_column, None)
    return True


__all__ = ["clear_status", "format_status", "report_failure"]

"""gspread-based host for planners kept in Google Sheets."""

from __future__ import annotations

from dataclasses import replace
from logging import getLogger
from typing import TYPE_CHECKING

import gspread
from gspread.utils import ValueRenderOption

from planmacro.config.google_sheets import GoogleSheetsConfig, get_google_sheets_config
from planmacro.domain.ranges import GridRange

from .schema import GridRangePayload, NamedRangePayload

if TYPE_CHECKING:
    from planmacro.domain.ports.host import CellValue, SpreadsheetHost

log = getLogger(__name__)

GOOGLE_SHEETS_SCOPES = ("https://www.googleapis.com/auth/spreadsheets",)


class GoogleSheetsHost:
    """Expose a gspread ``Spreadsheet`` through the spreadsheet host port."""

    def __init__(self, *, spreadsheet: gspread.Spreadsheet) -> None:
        self._spreadsheet = spreadsheet
        self._worksheets: dict[str, gspread.Worksheet] = {}

    @classmethod
    def from_config(cls, config: GoogleSheetsConfig) -> GoogleSheetsHost:
        client = gspread.service_account(
            filename=config.service_account_file, scopes=list(GOOGLE_SHEETS_SCOPES)
        )
        return cls(spreadsheet=client.open_by_key(config.spreadsheet_key))

    def get_values(self, grid_range: GridRange) -> list[list[CellValue]]:
        worksheet = self._worksheet(grid_range.bound_sheet)
        raw_rows = worksheet.get(
            _local_a1(grid_range), value_render_option=ValueRenderOption.unformatted
        )
        rows: list[list[CellValue]] = [
            [None if value == "" else value for value in row] for row in raw_rows
        ]
        width = grid_range.width or max((len(row) for row in rows), default=0)
        if grid_range.end_row is not None:
            height = grid_range.end_row - grid_range.start_row + 1
            rows.extend([] for _ in range(height - len(rows)))
        return [[*row, *([None] * (width - len(row)))] for row in rows]

    def set_value(self, sheet: str, row: int, column: int, value: CellValue) -> None:
        log.debug("Writing %r to %s row %s column %s", value, sheet, row, column)
        self._worksheet(sheet).update_cell(row, column, "" if value is None else value)

    def named_range(self, name: str) -> GridRange | None:
        for raw in self._spreadsheet.list_named_ranges():
            payload = NamedRangePayload.model_validate(raw)
            if payload.name == name:
                return self._to_grid_range(payload.range)
        return None

    def flush(self) -> None:
        # the API applies each write and recalculates before answering the next request
        log.debug("Flush requested; Google Sheets writes are already committed")

    def sort_range(self, grid_range: GridRange, *, column: int, ascending: bool = True) -> None:
        worksheet = self._worksheet(grid_range.bound_sheet)
        worksheet.sort((column, "asc" if ascending else "des"), range=_local_a1(grid_range))

    def _worksheet(self, title: str) -> gspread.Worksheet:
        worksheet = self._worksheets.get(title)
        if worksheet is None:
            worksheet = self._spreadsheet.worksheet(title)
            self._worksheets[title] = worksheet
        return worksheet

    def _to_grid_range(self, payload: GridRangePayload) -> GridRange:
        worksheet = self._spreadsheet.get_worksheet_by_id(payload.sheet_id)
        return GridRange(
            sheet=worksheet.title,
            start_row=payload.start_row_index + 1,
            start_column=payload.start_column_index + 1,
            end_row=payload.end_row_index,
            end_column=payload.end_column_index,
        )


def build_google_sheets_host(config: GoogleSheetsConfig | None = None) -> GoogleSheetsHost:
    return GoogleSheetsHost.from_config(config or get_google_sheets_config())


def _local_a1(grid_range: GridRange) -> str:
    return replace(grid_range, sheet=None).to_a1()


if TYPE_CHECKING:

    def _host_check(host: GoogleSheetsHost) -> SpreadsheetHost:
        return host

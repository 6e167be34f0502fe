"""Shared fixtures for Google Sheets adapter tests."""

from __future__ import annotations

import pytest

from planmacro.adapters.google_sheets import GoogleSheetsHost

SheetsPayload = dict[str, object]


class FakeWorksheet:
    def __init__(self, title: str, sheet_id: int, values: list[list[object]]) -> None:
        self.title = title
        self.id = sheet_id
        self.values = values
        self.reads: list[tuple[str, object]] = []
        self.updates: list[tuple[int, int, object]] = []
        self.sorts: list[tuple[tuple[int, str], str]] = []

    def get(self, range_name: str, *, value_render_option: object = None) -> list[list[object]]:
        self.reads.append((range_name, value_render_option))
        return self.values

    def update_cell(self, row: int, col: int, value: object) -> None:
        self.updates.append((row, col, value))

    def sort(self, *specs: tuple[int, str], range: str) -> None:  # noqa: A002
        (spec,) = specs
        self.sorts.append((spec, range))


class FakeSpreadsheet:
    def __init__(self, worksheets: list[FakeWorksheet], named_ranges: list[SheetsPayload]) -> None:
        self._worksheets = {worksheet.title: worksheet for worksheet in worksheets}
        self._named_ranges = named_ranges
        self.lookups: list[str] = []

    def worksheet(self, title: str) -> FakeWorksheet:
        self.lookups.append(title)
        return self._worksheets[title]

    def get_worksheet_by_id(self, sheet_id: int) -> FakeWorksheet:
        return next(ws for ws in self._worksheets.values() if ws.id == sheet_id)

    def list_named_ranges(self) -> list[SheetsPayload]:
        return self._named_ranges


@pytest.fixture
def planner_worksheet() -> FakeWorksheet:
    return FakeWorksheet(
        "Planner",
        0,
        [
            ["Pay rent", "2024-04-01", "", 45383],
            ["Dentist", "d5-1"],
        ],
    )


@pytest.fixture
def settings_worksheet() -> FakeWorksheet:
    return FakeWorksheet("Settings", 781, [["autoSort", True, ""]])


@pytest.fixture
def fake_spreadsheet(
    planner_worksheet: FakeWorksheet, settings_worksheet: FakeWorksheet
) -> FakeSpreadsheet:
    return FakeSpreadsheet(
        [planner_worksheet, settings_worksheet],
        [
            {
                "namedRangeId": "nr1",
                "name": "config",
                "range": {
                    "sheetId": 781,
                    "startRowIndex": 0,
                    "endRowIndex": 3,
                    "startColumnIndex": 0,
                    "endColumnIndex": 3,
                },
            },
            {
                "namedRangeId": "nr2",
                "name": "dates",
                "range": {"startRowIndex": 1, "startColumnIndex": 1, "endColumnIndex": 2},
            },
        ],
    )


@pytest.fixture
def sheets_host(fake_spreadsheet: FakeSpreadsheet) -> GoogleSheetsHost:
    return GoogleSheetsHost(spreadsheet=fake_spreadsheet)  # type: ignore[arg-type]

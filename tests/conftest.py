from __future__ import annotations

from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

import pytest

from planmacro.adapters.memory import InMemorySpreadsheet
from planmacro.config.app import AppConfig
from planmacro.domain.context import MacroContext

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from planmacro.domain.context import Clock
    from planmacro.domain.ports.host import CellValue

# Thursday
TODAY = date(2024, 3, 14)
NOW = datetime(2024, 3, 14, 9, 30, tzinfo=UTC)

PLANNER_ROWS: list[list[CellValue]] = [
    ["Task", "Date", "Notes", "Sort date"],
    ["Pay rent", "2024-04-01", None, "2024-04-01"],
    ["Dentist", "2024-05-01", "bring forms", "2024-05-01"],
    ["Taxes", "2024-04-15", None, "2024-04-15"],
]

SETTINGS_ROWS: list[list[CellValue]] = [
    ["autoSort", True, None],
    ["plannerRange", "Planner!A2:D", None],
    ["dateRange", "Planner!B2:B", None],
]


def _sort_date(row: Mapping[int, CellValue]) -> CellValue:
    return row.get(2)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def context() -> MacroContext:
    return MacroContext(today=TODAY)


@pytest.fixture
def fixed_clock() -> Clock:
    def _clock() -> datetime:
        return NOW

    return _clock


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig(config_range="config", status_range="status")


def _build_planner_host(
    *,
    settings_rows: list[list[CellValue]] | None = None,
    config_address: str = "Settings!A1:C3",
) -> InMemorySpreadsheet:
    host = InMemorySpreadsheet()
    host.add_sheet("Planner", [list(row) for row in PLANNER_ROWS])
    host.add_sheet("Settings", [list(row) for row in settings_rows or SETTINGS_ROWS])
    host.define_named_range("config", config_address)
    host.define_named_range("status", "Settings!E1")
    host.add_derived_column("Planner!D2:D", _sort_date)
    return host


@pytest.fixture
def planner_host_factory() -> Callable[..., InMemorySpreadsheet]:
    return _build_planner_host


@pytest.fixture
def planner_host() -> InMemorySpreadsheet:
    return _build_planner_host()

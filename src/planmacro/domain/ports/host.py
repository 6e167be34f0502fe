"""Port describing the spreadsheet that hosts the planner."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from planmacro.domain.ranges import GridRange

type CellValue = str | int | float | bool | None


def is_blank(value: CellValue) -> bool:
    return value is None or value == ""


@dataclass(frozen=True, slots=True)
class EditEvent:
    """A single user edit as delivered by the host.

    ``value`` is the new value of a single-cell edit; hosts leave it ``None`` for
    multi-cell edits (pastes, fills), in which case the cells are read back.
    """

    range_address: str
    value: CellValue = None


@runtime_checkable
class SpreadsheetHost(Protocol):
    """Cell storage, named ranges, recalculation and sorting provided by the host."""

    def get_values(self, grid_range: GridRange) -> list[list[CellValue]]:
        """Return a rectangular block of values (blank cells as ``None``)."""
        ...

    def set_value(self, sheet: str, row: int, column: int, value: CellValue) -> None: ...

    def named_range(self, name: str) -> GridRange | None: ...

    def flush(self) -> None:
        """Settle pending writes and derived (formula) values."""
        ...

    def sort_range(self, grid_range: GridRange, *, column: int, ascending: bool = True) -> None:
        """Sort the rows of ``grid_range`` by the absolute ``column`` index."""
        ...


__all__ = ["CellValue", "EditEvent", "SpreadsheetHost", "is_blank"]

"""In-memory spreadsheet host used for tests and local experiments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from planmacro.domain.ports.host import is_blank
from planmacro.domain.ranges import GridRange, parse_a1

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from planmacro.domain.ports.host import CellValue, SpreadsheetHost

type Formula = Callable[[Mapping[int, CellValue]], CellValue]
type Cells = dict[tuple[int, int], CellValue]


@dataclass(slots=True)
class _DerivedColumn:
    cells: GridRange
    formula: Formula


@dataclass(frozen=True, slots=True)
class _Block:
    """A range clipped to the sheet's data, with concrete row and column spans."""

    grid: GridRange
    rows: range
    columns: range

    @property
    def sheet(self) -> str:
        return self.grid.bound_sheet


@dataclass(slots=True)
class InMemorySpreadsheet:
    """Sheets of sparse cells plus named ranges and per-row derived columns.

    Derived columns stand in for spreadsheet formulas: they are recomputed only
    by :meth:`flush`, so a sort issued before flushing sees stale values.
    Every host call is appended to ``operations``.
    """

    sheets: dict[str, Cells] = field(default_factory=dict)
    named_ranges: dict[str, GridRange] = field(default_factory=dict)
    operations: list[tuple[object, ...]] = field(default_factory=list)
    _derived: list[_DerivedColumn] = field(default_factory=list)

    def add_sheet(self, name: str, rows: list[list[CellValue]] | None = None) -> None:
        cells: Cells = {}
        for row_index, values in enumerate(rows or [], start=1):
            for column_index, value in enumerate(values, start=1):
                if not is_blank(value):
                    cells[(row_index, column_index)] = value
        self.sheets[name] = cells

    def define_named_range(self, name: str, address: str) -> None:
        self.named_ranges[name] = parse_a1(address)

    def add_derived_column(self, address: str, formula: Formula) -> None:
        """Compute every cell of ``address`` from its row's values on flush."""

        self._derived.append(_DerivedColumn(cells=parse_a1(address), formula=formula))

    def value(self, sheet: str, row: int, column: int) -> CellValue:
        return self._sheet(sheet).get((row, column))

    def row_values(self, sheet: str, row: int) -> dict[int, CellValue]:
        return {column: value for (r, column), value in self._sheet(sheet).items() if r == row}

    # SpreadsheetHost

    def get_values(self, grid_range: GridRange) -> list[list[CellValue]]:
        self.operations.append(("get_values", grid_range.to_a1()))
        block = self._clip(grid_range)
        if block is None:
            return []
        cells = self._sheet(block.sheet)
        return [[cells.get((row, column)) for column in block.columns] for row in block.rows]

    def set_value(self, sheet: str, row: int, column: int, value: CellValue) -> None:
        self.operations.append(("set_value", sheet, row, column, value))
        cells = self._sheet(sheet)
        if is_blank(value):
            cells.pop((row, column), None)
        else:
            cells[(row, column)] = value

    def named_range(self, name: str) -> GridRange | None:
        return self.named_ranges.get(name)

    def flush(self) -> None:
        self.operations.append(("flush",))
        for derived in self._derived:
            block = self._clip(derived.cells)
            if block is None:
                continue
            sheet = self._sheet(block.sheet)
            for row, column in block.grid.cells():
                inputs = {
                    c: v for c, v in self.row_values(block.sheet, row).items() if c != column
                }
                has_data = any(not is_blank(v) for v in inputs.values())
                result = derived.formula(inputs) if has_data else None
                if is_blank(result):
                    sheet.pop((row, column), None)
                else:
                    sheet[(row, column)] = result

    def sort_range(self, grid_range: GridRange, *, column: int, ascending: bool = True) -> None:
        self.operations.append(("sort_range", grid_range.to_a1(), column, ascending))
        block = self._clip(grid_range)
        if block is None:
            return
        cells = self._sheet(block.sheet)
        table = [{c: cells.get((row, c)) for c in block.columns} for row in block.rows]

        filled = [values for values in table if not is_blank(values.get(column))]
        blanks = [values for values in table if is_blank(values.get(column))]
        filled.sort(key=lambda values: _sort_key(values.get(column)), reverse=not ascending)

        for row, values in zip(block.rows, filled + blanks, strict=True):
            for c in block.columns:
                value = values[c]
                if is_blank(value):
                    cells.pop((row, c), None)
                else:
                    cells[(row, c)] = value

    def _sheet(self, name: str) -> Cells:
        return self.sheets.setdefault(name, {})

    def _clip(self, grid_range: GridRange) -> _Block | None:
        cells = self._sheet(grid_range.bound_sheet)
        end_row = grid_range.end_row
        if end_row is None:
            end_row = max((row for row, _ in cells), default=0)
        end_column = grid_range.end_column
        if end_column is None:
            end_column = max((column for _, column in cells), default=0)
        if end_row < grid_range.start_row or end_column < grid_range.start_column:
            return None
        return _Block(
            grid=grid_range.bounded(max_row=end_row, max_column=end_column),
            rows=range(grid_range.start_row, end_row + 1),
            columns=range(grid_range.start_column, end_column + 1),
        )


def _sort_key(value: CellValue) -> tuple[int, float | str]:
    # numbers before text before booleans
    if isinstance(value, bool):
        return (2, float(value))
    if isinstance(value, int | float):
        return (0, float(value))
    return (1, str(value).lower())


if TYPE_CHECKING:
    _host_check: SpreadsheetHost = InMemorySpreadsheet()

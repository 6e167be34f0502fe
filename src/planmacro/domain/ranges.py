"""Rectangular cell ranges and A1 addresses, independent of any spreadsheet binding.

Coordinates are 1-based and inclusive. An ``end_row`` or ``end_column`` of
``None`` means the range runs to the edge of the sheet (``A2:F``, ``B:B``).
A1 bodies are converted with :mod:`gspread.utils`, which is pure and never
talks to a spreadsheet.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from gspread.exceptions import IncorrectCellLabel
from gspread.utils import a1_range_to_grid_range, rowcol_to_a1

if TYPE_CHECKING:
    from collections.abc import Iterator

_SHEET_PREFIX = re.compile(r"(?:(?P<sheet>'(?:[^']|'')+'|[^!']+)!)?(?P<body>[^!]+)")
_PLAIN_SHEET_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


class RangeAddressError(ValueError):
    """Raised when text is not a valid A1 range address."""


@dataclass(frozen=True, slots=True)
class GridRange:
    sheet: str | None
    start_row: int
    start_column: int
    end_row: int | None
    end_column: int | None

    def __post_init__(self) -> None:
        if self.start_row < 1 or self.start_column < 1:
            raise RangeAddressError("Range coordinates are 1-based")
        if self.end_row is not None and self.end_row < self.start_row:
            raise RangeAddressError("Range end row precedes its start row")
        if self.end_column is not None and self.end_column < self.start_column:
            raise RangeAddressError("Range end column precedes its start column")

    @classmethod
    def cell(cls, sheet: str | None, row: int, column: int) -> GridRange:
        return cls(sheet=sheet, start_row=row, start_column=column, end_row=row, end_column=column)

    @property
    def bound_sheet(self) -> str:
        """The sheet name, for operations that must not guess a tab."""

        if self.sheet is None:
            raise RangeAddressError(f"Range {self.to_a1()} is not bound to a sheet")
        return self.sheet

    @property
    def is_bounded(self) -> bool:
        return self.end_row is not None and self.end_column is not None

    @property
    def is_single_cell(self) -> bool:
        return self.end_row == self.start_row and self.end_column == self.start_column

    @property
    def width(self) -> int | None:
        if self.end_column is None:
            return None
        return self.end_column - self.start_column + 1

    @property
    def last_column(self) -> int:
        """Absolute index of the rightmost column (the sort-key column of a table)."""

        if self.end_column is None:
            raise RangeAddressError(f"Range {self.to_a1()} has no last column")
        return self.end_column

    def bounded(self, *, max_row: int, max_column: int) -> GridRange:
        """Clip unbounded ends to the given sheet extent."""

        return replace(
            self,
            end_row=max_row if self.end_row is None else self.end_row,
            end_column=max_column if self.end_column is None else self.end_column,
        )

    def cells(self) -> Iterator[tuple[int, int]]:
        """Yield ``(row, column)`` pairs row by row."""

        if self.end_row is None or self.end_column is None:
            raise RangeAddressError(f"Cannot enumerate cells of unbounded range {self.to_a1()}")
        for row in range(self.start_row, self.end_row + 1):
            for column in range(self.start_column, self.end_column + 1):
                yield row, column

    def to_a1(self) -> str:
        end_row = "" if self.end_row is None else str(self.end_row)
        if self.end_column is None:
            body = f"{self.start_row}:{end_row}"
        elif self.is_single_cell:
            body = rowcol_to_a1(self.start_row, self.start_column)
        elif self.end_row is None:
            start = rowcol_to_a1(self.start_row, self.start_column)
            body = f"{start}:{_column_letters(self.end_column)}"
        else:
            start = rowcol_to_a1(self.start_row, self.start_column)
            body = f"{start}:{rowcol_to_a1(self.end_row, self.end_column)}"
        if self.sheet is None:
            return body
        return f"{quote_sheet_name(self.sheet)}!{body}"

    def __str__(self) -> str:
        return self.to_a1()


def parse_a1(address: str, *, default_sheet: str | None = None) -> GridRange:
    """Parse ``Sheet!A1:C9``-style addresses.

    Supported bodies are single cells (``B4``), bounded ranges (``A1:C9``), ranges
    open to the bottom (``A2:F``), whole columns (``B:D``) and whole rows (``3:5``).
    Reversed corners (``C9:A1``) are normalised the way Google Sheets does.
    """

    outer = _SHEET_PREFIX.fullmatch(address.strip())
    if outer is None:
        raise RangeAddressError(f"Invalid range address: {address!r}")
    sheet = _unquote_sheet_name(outer.group("sheet")) or default_sheet
    body = outer.group("body").strip().replace("$", "")
    if not _has_supported_shape(body):
        raise RangeAddressError(f"Invalid range address: {address!r}")

    try:
        grid = a1_range_to_grid_range(body)
    except IncorrectCellLabel as exc:
        raise RangeAddressError(f"Invalid range address: {address!r}") from exc
    return GridRange(
        sheet=sheet,
        start_row=grid.get("startRowIndex", 0) + 1,
        start_column=grid.get("startColumnIndex", 0) + 1,
        end_row=grid.get("endRowIndex"),
        end_column=grid.get("endColumnIndex"),
    )


def intersect(first: GridRange, second: GridRange) -> GridRange | None:
    """Return the overlap of two ranges, or ``None`` when they do not touch."""

    if first.sheet != second.sheet:
        return None
    rows = _overlap(first.start_row, first.end_row, second.start_row, second.end_row)
    columns = _overlap(
        first.start_column, first.end_column, second.start_column, second.end_column
    )
    if rows is None or columns is None:
        return None
    return GridRange(
        sheet=first.sheet,
        start_row=rows[0],
        start_column=columns[0],
        end_row=rows[1],
        end_column=columns[1],
    )


def overlaps(first: GridRange, second: GridRange) -> bool:
    return intersect(first, second) is not None


def quote_sheet_name(name: str) -> str:
    if _PLAIN_SHEET_NAME.fullmatch(name):
        return name
    escaped = name.replace("'", "''")
    return f"'{escaped}'"


def _has_supported_shape(body: str) -> bool:
    # gspread reads an empty or one-sided label as "unbounded", so reject
    # the shapes it would silently widen: "A1:", "B", "B:3", "3:C"
    start, colon, end = body.partition(":")
    if not start or ":" in end or (colon and not end):
        return False
    if not colon:
        return start[:1].isalpha() and start[-1:].isdigit()
    start_has_row, start_has_column = start[-1:].isdigit(), start[:1].isalpha()
    end_has_row, end_has_column = end[-1:].isdigit(), end[:1].isalpha()
    return (start_has_row or end_has_column) and (start_has_column or end_has_row)


def _column_letters(column: int) -> str:
    return rowcol_to_a1(1, column).removesuffix("1")


def _unquote_sheet_name(raw: str | None) -> str | None:
    if raw is None:
        return None
    if raw.startswith("'") and raw.endswith("'"):
        return raw[1:-1].replace("''", "'")
    return raw


def _overlap(
    start_a: int, end_a: int | None, start_b: int, end_b: int | None
) -> tuple[int, int | None] | None:
    start = max(start_a, start_b)
    if end_a is None:
        end = end_b
    elif end_b is None:
        end = end_a
    else:
        end = min(end_a, end_b)
    if end is not None and start > end:
        return None
    return start, end


__all__ = [
    "GridRange",
    "RangeAddressError",
    "intersect",
    "overlaps",
    "parse_a1",
    "quote_sheet_name",
]

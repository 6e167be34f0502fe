"""Load planner settings from the key/value table kept inside the spreadsheet.

The table has exactly three columns: key, value and a status cell that receives
the error for its row. Loading is all-or-nothing: any bad row aborts the run and
no partial settings are returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, NoReturn

from planmacro.config.errors import ConfigurationError
from planmacro.domain.ports.host import is_blank
from planmacro.domain.ranges import GridRange, parse_a1

if TYPE_CHECKING:
    from collections.abc import Callable

    from planmacro.domain.ports.host import CellValue, SpreadsheetHost

log = logging.getLogger(__name__)

CONFIG_TABLE_WIDTH: Final[int] = 3
_KEY_COLUMN, _VALUE_COLUMN, _STATUS_COLUMN = 0, 1, 2


class PlannerConfigError(ConfigurationError):
    """Raised when the in-sheet configuration table cannot be loaded."""

    def __init__(self, message: str, *, row: int | None = None) -> None:
        super().__init__(message)
        self.row = row


@dataclass(frozen=True, slots=True)
class PlannerSettings:
    planner_range: GridRange
    date_range: GridRange
    auto_sort: bool = True


def _parse_bool(value: CellValue, _default_sheet: str | None) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"expected TRUE or FALSE, got {value!r}")  # noqa: TRY004
    return value


def _parse_range(value: CellValue, default_sheet: str | None) -> GridRange:
    if not isinstance(value, str) or not value.strip():
        raise ValueError("expected a range address such as Planner!A2:F")  # noqa: TRY004
    return parse_a1(value, default_sheet=default_sheet)


type _Parser = Callable[[CellValue, str | None], object]

# key -> (PlannerSettings field, parser)
_FIELDS: Final[dict[str, tuple[str, _Parser]]] = {
    "autoSort": ("auto_sort", _parse_bool),
    "plannerRange": ("planner_range", _parse_range),
    "dateRange": ("date_range", _parse_range),
}
_REQUIRED_KEYS: Final[tuple[str, ...]] = ("plannerRange", "dateRange")

CONFIG_KEYS: Final[frozenset[str]] = frozenset(_FIELDS)


def load_planner_settings(host: SpreadsheetHost, config_range: GridRange) -> PlannerSettings:
    """Read and validate the configuration table at ``config_range``.

    Row-level failures are written to that row's status cell before raising.
    Stale row statuses are cleared once the whole table validates.
    """

    rows = host.get_values(config_range)
    width = config_range.width or max((len(row) for row in rows), default=0)
    if width != CONFIG_TABLE_WIDTH:
        raise PlannerConfigError(
            f"Config range {config_range} must have {CONFIG_TABLE_WIDTH} columns "
            f"(key, value, status), found {width}"
        )

    values: dict[str, object] = {}
    seen: set[str] = set()
    stale_status_rows: list[int] = []
    for offset, row_values in enumerate(rows):
        row = config_range.start_row + offset
        key, value, status = _pad_row(row_values)
        if not is_blank(status):
            stale_status_rows.append(row)
        if is_blank(key):
            continue
        if not isinstance(key, str):
            _fail_row(host, config_range, row, f"Config key must be text, got {key!r}")
        name = key.strip()
        if name not in _FIELDS:
            _fail_row(host, config_range, row, f"Unrecognized config key '{name}'")
        if name in seen:
            _fail_row(host, config_range, row, f"Duplicate config key '{name}'")
        seen.add(name)

        field_name, parse = _FIELDS[name]
        try:
            values[field_name] = parse(value, config_range.sheet)
        except ValueError as exc:
            _fail_row(host, config_range, row, f"Invalid value for '{name}': {exc}", cause=exc)

    for name in _REQUIRED_KEYS:
        if name not in seen:
            raise PlannerConfigError(f"Missing required config key '{name}'")
    settings = PlannerSettings(**values)  # type: ignore[arg-type]

    for row in stale_status_rows:
        _write_status(host, config_range, row, None)
    log.debug(
        "Loaded planner settings: auto_sort=%s planner=%s dates=%s",
        settings.auto_sort,
        settings.planner_range,
        settings.date_range,
    )
    return settings


def _pad_row(values: list[CellValue]) -> tuple[CellValue, CellValue, CellValue]:
    padded = [*values, None, None, None]
    return padded[_KEY_COLUMN], padded[_VALUE_COLUMN], padded[_STATUS_COLUMN]


def _write_status(
    host: SpreadsheetHost, config_range: GridRange, row: int, value: CellValue
) -> None:
    status_column = config_range.start_column + _STATUS_COLUMN
    host.set_value(config_range.bound_sheet, row, status_column, value)


def _fail_row(
    host: SpreadsheetHost,
    config_range: GridRange,
    row: int,
    message: str,
    *,
    cause: BaseException | None = None,
) -> NoReturn:
    log.warning("Config row %s rejected: %s", row, message)
    _write_status(host, config_range, row, message)
    raise PlannerConfigError(message, row=row) from cause


__all__ = [
    "CONFIG_KEYS",
    "CONFIG_TABLE_WIDTH",
    "PlannerConfigError",
    "PlannerSettings",
    "load_planner_settings",
]

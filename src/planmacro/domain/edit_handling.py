"""Handle one spreadsheet edit: expand date macros, then re-sort the planner."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from functools import partial
from typing import TYPE_CHECKING

from planmacro.config.app import AppConfig
from planmacro.config.errors import ConfigurationError
from planmacro.domain.context import MacroContext
from planmacro.domain.macros import MacroError, expand_text
from planmacro.domain.planner_config import PlannerConfigError, load_planner_settings
from planmacro.domain.ranges import RangeAddressError, intersect, overlaps, parse_a1
from planmacro.domain.status import clear_status, report_failure

if TYPE_CHECKING:
    from planmacro.domain.context import Clock
    from planmacro.domain.planner_config import PlannerSettings
    from planmacro.domain.ports.host import CellValue, EditEvent, SpreadsheetHost
    from planmacro.domain.ranges import GridRange

log = logging.getLogger(__name__)


@dataclass(slots=True)
class EditOutcome:
    """Summary of a handled edit."""

    expanded: int = 0
    failed: int = 0
    sorted: bool = False
    error: str | None = None
    status: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def handle_edit(
    event: EditEvent,
    *,
    host: SpreadsheetHost,
    config: AppConfig | None = None,
    clock: Clock | None = None,
) -> EditOutcome:
    """Process ``event`` against ``host`` without ever raising.

    Macro failures are written into the offending cells and processing moves on
    to the next cell. Configuration and structural failures abort the run and are
    written once to the status cell.
    """

    app_config = config or AppConfig()
    now = (clock or partial(datetime.now, app_config.timezone))()
    outcome = EditOutcome()

    try:
        _process(
            event,
            host=host,
            config=app_config,
            context=MacroContext.from_datetime(now),
            outcome=outcome,
        )
    except (ConfigurationError, RangeAddressError) as exc:
        log.warning("Edit of %s aborted: %s", event.range_address, exc)
        outcome.error = str(exc)
    except Exception as exc:  # noqa: BLE001
        log.exception("Unexpected failure while handling edit of %s", event.range_address)
        outcome.error = f"Unexpected error: {exc}"

    _publish_status(host, app_config, outcome, now)
    return outcome


def _process(
    event: EditEvent,
    *,
    host: SpreadsheetHost,
    config: AppConfig,
    context: MacroContext,
    outcome: EditOutcome,
) -> None:
    config_range = _require_named_range(host, config.config_range)
    settings = load_planner_settings(host, config_range)
    edited = parse_a1(event.range_address, default_sheet=config_range.sheet)

    _expand_macros(event, edited, settings, host=host, context=context, outcome=outcome)
    if outcome.expanded or outcome.failed:
        # sort keys derived from the written dates must settle before sorting
        host.flush()

    touches_table = overlaps(edited, settings.planner_range) or overlaps(edited, config_range)
    if settings.auto_sort and touches_table:
        planner = settings.planner_range
        host.sort_range(planner, column=planner.last_column, ascending=True)
        outcome.sorted = True
        log.info("Sorted %s by column %s", planner, planner.last_column)


def _expand_macros(
    event: EditEvent,
    edited: GridRange,
    settings: PlannerSettings,
    *,
    host: SpreadsheetHost,
    context: MacroContext,
    outcome: EditOutcome,
) -> None:
    target = intersect(edited, settings.date_range)
    if target is None:
        return
    sheet = target.bound_sheet

    for row, column, value in _edited_cells(event, edited, target, host):
        try:
            rendered = expand_text(value, context)
        except MacroError as exc:
            log.info("Macro %r at row %s column %s failed: %s", value, row, column, exc)
            host.set_value(sheet, row, column, str(exc))
            outcome.failed += 1
            continue
        if rendered is None:
            continue
        host.set_value(sheet, row, column, rendered)
        outcome.expanded += 1


def _edited_cells(
    event: EditEvent, edited: GridRange, target: GridRange, host: SpreadsheetHost
) -> list[tuple[int, int, CellValue]]:
    if edited.is_single_cell and event.value is not None:
        return [(edited.start_row, edited.start_column, event.value)]
    values = host.get_values(target)
    return [
        (target.start_row + row_offset, target.start_column + column_offset, value)
        for row_offset, row_values in enumerate(values)
        for column_offset, value in enumerate(row_values)
    ]


def _require_named_range(host: SpreadsheetHost, name: str) -> GridRange:
    grid_range = host.named_range(name)
    if grid_range is None:
        raise PlannerConfigError(f"Named range '{name}' not found")
    return grid_range


def _publish_status(
    host: SpreadsheetHost, config: AppConfig, outcome: EditOutcome, now: datetime
) -> None:
    try:
        status_cell = host.named_range(config.status_range)
        if status_cell is None:
            log.warning("Named range '%s' not found; status not written", config.status_range)
            return
        if outcome.error is None:
            clear_status(host, status_cell)
        else:
            outcome.status = report_failure(host, status_cell, outcome.error, now)
    except Exception:  # noqa: BLE001
        log.exception("Could not update status cell '%s'", config.status_range)


__all__ = ["EditOutcome", "handle_edit"]

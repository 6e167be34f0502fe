"""Application orchestration entry points."""

from __future__ import annotations

from datetime import datetime
from logging import getLogger
from typing import TYPE_CHECKING

from planmacro.adapters.google_sheets import build_google_sheets_host
from planmacro.config import get_app_config
from planmacro.domain.context import MacroContext
from planmacro.domain.edit_handling import EditOutcome, handle_edit
from planmacro.domain.macros import expand_text
from planmacro.domain.ports.host import EditEvent

if TYPE_CHECKING:
    from datetime import date

    from planmacro.config import AppConfig
    from planmacro.domain.context import Clock
    from planmacro.domain.ports.host import CellValue, SpreadsheetHost

log = getLogger(__name__)


def handle_sheet_edit(
    range_address: str,
    value: CellValue = None,
    *,
    host: SpreadsheetHost | None = None,
    config: AppConfig | None = None,
    clock: Clock | None = None,
) -> EditOutcome:
    """Handle one edit using the configured adapters (Google Sheets by default)."""

    effective_host = host or build_google_sheets_host()
    app_config = config or get_app_config()
    log.info("Handling edit of %s", range_address)

    outcome = handle_edit(
        EditEvent(range_address=range_address, value=value),
        host=effective_host,
        config=app_config,
        clock=clock,
    )

    log.info(
        f"Finished edit of {range_address}: expanded={outcome.expanded}, "
        f"failed={outcome.failed}, sorted={outcome.sorted}, error={outcome.error}"
    )
    return outcome


def expand_macro(
    text: str,
    *,
    today: date | None = None,
    config: AppConfig | None = None,
) -> str | None:
    """Expand a single macro to its ISO date, or ``None`` when ``text`` is not a macro."""

    if today is not None:
        context = MacroContext(today=today)
    else:
        timezone = (config or get_app_config()).timezone
        context = MacroContext.capture(lambda: datetime.now(timezone))
    return expand_text(text, context)

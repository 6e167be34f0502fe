from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from planmacro.app import expand_macro, handle_sheet_edit
from planmacro.config import configure_logging
from planmacro.domain.macros import MacroError, parse_iso_date

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import date
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Expand planner date macros")
    subparsers = parser.add_subparsers(dest="command", required=True)

    expand = subparsers.add_parser("expand", help="Expand one date macro and print it")
    expand.add_argument("macro", type=str, help="Macro text such as f3, w5, m1 or d3-23")
    expand.add_argument(
        "--today",
        type=str,
        help="ISO date (YYYY-MM-DD) to evaluate against instead of the current date",
    )

    edit = subparsers.add_parser("edit", help="Handle an edit of the Google Sheets planner")
    edit.add_argument("range", type=str, help="Edited range in A1 notation, e.g. Planner!B4")
    edit.add_argument(
        "--value",
        type=str,
        help="New value of a single-cell edit (read from the sheet when omitted)",
    )

    return parser.parse_args(list(argv))


def _parse_today(value: str | None) -> date | None:
    if value is None:
        return None
    return parse_iso_date(value)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    parsed_args: argparse.Namespace
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        today = _parse_today(parsed_args.today) if parsed_args.command == "expand" else None
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "expand":
            result = expand_macro(parsed_args.macro, today=today)
            if result is None:
                log.error("Not a date macro: %r", parsed_args.macro)
                sys.exit(2)
            print(result)  # noqa: T201
        elif parsed_args.command == "edit":
            outcome = handle_sheet_edit(parsed_args.range, parsed_args.value)
            if not outcome.ok:
                sys.exit(1)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except MacroError as exc:
        log.error("Macro error: %s", exc)  # noqa: TRY400
        sys.exit(1)
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()

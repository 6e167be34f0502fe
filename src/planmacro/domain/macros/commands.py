"""Date computations behind each macro command letter.

Every command receives the raw argument text and the evaluation context and
returns a plain :class:`datetime.date`. Day and month values that overflow the
calendar roll over into neighbouring months and years (day 0 is the last day
of the previous month, month 13 is January of the following year).
"""

from __future__ import annotations

import logging
import re
from datetime import date, timedelta
from typing import TYPE_CHECKING

from .errors import MacroError, MacroErrorKind

if TYPE_CHECKING:
    from collections.abc import Callable

    from planmacro.domain.context import MacroContext

    from .grammar import MacroInvocation

type CommandHandler = Callable[[str, MacroContext], date]

log = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?\d+")
_DATE_PARTS = re.compile(r"(-?\d+)(?:\D+?(-?\d+))?(?:\D+?(-?\d+))?")
_DAYS_IN_WEEK = 7

_COMMANDS: dict[str, CommandHandler] = {}


def _command(letter: str) -> Callable[[CommandHandler], CommandHandler]:
    def register(handler: CommandHandler) -> CommandHandler:
        _COMMANDS[letter] = handler
        return handler

    return register


def registered_commands() -> frozenset[str]:
    """Return the command letters the evaluator understands."""

    return frozenset(_COMMANDS)


def is_registered(command: str) -> bool:
    return command in _COMMANDS


def evaluate(command: str, argument: str, context: MacroContext) -> date:
    """Compute the date described by ``command`` and ``argument``.

    Raises:
        MacroError: ``UNDEFINED_COMMAND`` for unknown letters, ``INVALID_ARGUMENT``
            for arguments that do not parse, ``OUT_OF_RANGE`` for weekday indices
            outside 0..6 or results beyond the supported calendar.
    """

    handler = _COMMANDS.get(command)
    if handler is None:
        raise MacroError(MacroErrorKind.UNDEFINED_COMMAND, f"Macro '{command}' is not defined")
    result = handler(argument, context)
    log.debug("Expanded macro %s%s relative to %s -> %s", command, argument, context.today, result)
    return result


def expand_invocation(invocation: MacroInvocation, context: MacroContext) -> date:
    return evaluate(invocation.command, invocation.argument, context)


@_command("f")
def _future_offset(argument: str, context: MacroContext) -> date:
    days = _parse_integer("f", argument)
    return _shift(context.today, days)


@_command("w")
def _next_weekday(argument: str, context: MacroContext) -> date:
    index = _parse_integer("w", argument)
    if not 0 <= index < _DAYS_IN_WEEK:
        raise MacroError(
            MacroErrorKind.OUT_OF_RANGE,
            f"Macro 'w': weekday must be between 0 (Sunday) and 6 (Saturday), got {index}",
        )
    # always 1..7 days ahead, never today itself
    days_ahead = (index - _sunday_based_weekday(context.today) - 1) % _DAYS_IN_WEEK + 1
    return _shift(context.today, days_ahead)


@_command("m")
def _day_of_month(argument: str, context: MacroContext) -> date:
    day = _parse_integer("m", argument)
    today = context.today
    return _calendar_date(today.year, today.month - 1, day)


@_command("d")
def _explicit_date(argument: str, context: MacroContext) -> date:
    match = _DATE_PARTS.fullmatch(argument.strip())
    if match is None:
        raise MacroError(
            MacroErrorKind.INVALID_ARGUMENT,
            f"Macro 'd': expected 1 to 3 numbers such as 23, 3-23 or 2024-3-23, got {argument!r}",
        )
    parts = [part for part in match.groups() if part is not None]
    today = context.today

    year_text: str | None = None
    month_text: str | None = None
    if len(parts) == 1:
        (day_text,) = parts
    elif len(parts) == 2:  # noqa: PLR2004
        month_text, day_text = parts
    elif len(parts[0].lstrip("-")) >= len(str(today.year)):
        year_text, month_text, day_text = parts
    else:
        day_text, month_text, year_text = parts

    year = today.year if year_text is None else _complete_year(year_text, today.year)
    month_index = today.month - 1 if month_text is None else int(month_text) - 1
    return _calendar_date(year, month_index, int(day_text))


def _parse_integer(command: str, argument: str) -> int:
    text = argument.strip()
    if not _INTEGER.fullmatch(text):
        raise MacroError(
            MacroErrorKind.INVALID_ARGUMENT,
            f"Macro '{command}': expected an integer, got {argument!r}",
        )
    return int(text)


def _complete_year(text: str, current_year: int) -> int:
    """Splice a partial year onto the low-order digits of ``current_year``.

    With a current year of 2024, ``"9"`` becomes 2029 and ``"23"`` becomes 2023.
    Signed or full-length years are taken literally.
    """

    current = str(current_year)
    if not text.isdigit() or len(text) >= len(current):
        return int(text)
    return int(current[: len(current) - len(text)] + text)


def _sunday_based_weekday(value: date) -> int:
    return value.isoweekday() % _DAYS_IN_WEEK


def _shift(start: date, days: int) -> date:
    try:
        return start + timedelta(days=days)
    except OverflowError as exc:
        raise MacroError(
            MacroErrorKind.OUT_OF_RANGE,
            f"Date {days:+d} days from {start.isoformat()} is outside the supported calendar",
        ) from exc


def _calendar_date(year: int, month_index: int, day: int) -> date:
    year += month_index // 12
    month_index %= 12
    try:
        first_of_month = date(year, month_index + 1, 1)
    except (ValueError, OverflowError) as exc:
        raise MacroError(
            MacroErrorKind.OUT_OF_RANGE, f"Year {year} is outside the supported calendar"
        ) from exc
    return _shift(first_of_month, day - 1)


__all__ = [
    "CommandHandler",
    "evaluate",
    "expand_invocation",
    "is_registered",
    "registered_commands",
]

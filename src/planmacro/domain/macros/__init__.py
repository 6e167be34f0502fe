"""Date macro grammar, evaluation and formatting."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .commands import evaluate, expand_invocation, registered_commands
from .errors import MacroError, MacroErrorKind
from .formatting import format_iso_date, parse_iso_date
from .grammar import MacroInvocation, match_macro

if TYPE_CHECKING:
    from planmacro.domain.context import MacroContext


def expand_text(value: object, context: MacroContext) -> str | None:
    """Expand ``value`` to an ISO date string, or return ``None`` when it is not a macro.

    Raises:
        MacroError: when the value is a macro that cannot be evaluated.
    """

    invocation = match_macro(value)
    if invocation is None:
        return None
    return format_iso_date(expand_invocation(invocation, context))


__all__ = [
    "MacroError",
    "MacroErrorKind",
    "MacroInvocation",
    "evaluate",
    "expand_invocation",
    "expand_text",
    "format_iso_date",
    "match_macro",
    "parse_iso_date",
    "registered_commands",
]

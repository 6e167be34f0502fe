"""Recognise date macros typed into cells.

A macro is a single lowercase command letter immediately followed by a digit,
or by ``-`` and a digit: ``f3``, ``f-2``, ``w5``, ``m1``, ``d3-23``. The
argument is everything after the letter.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .commands import is_registered
from .errors import MacroError, MacroErrorKind

_MACRO = re.compile(r"([a-z])(-?\d.*)", re.DOTALL)


@dataclass(frozen=True, slots=True)
class MacroInvocation:
    command: str
    argument: str

    def __str__(self) -> str:
        return f"{self.command}{self.argument}"


def match_macro(value: object) -> MacroInvocation | None:
    """Return the invocation encoded by ``value``, or ``None`` when it is not a macro.

    Text that has the macro shape but names an unknown command is a failure, not
    a non-match, so the caller can surface it instead of silently leaving it.
    """

    if not isinstance(value, str):
        return None
    match = _MACRO.fullmatch(value)
    if match is None:
        return None
    command, argument = match.groups()
    if not is_registered(command):
        raise MacroError(MacroErrorKind.UNDEFINED_COMMAND, f"Macro '{command}' is not defined")
    return MacroInvocation(command=command, argument=argument)


__all__ = ["MacroInvocation", "match_macro"]

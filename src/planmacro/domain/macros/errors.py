"""Structured failures raised while matching or evaluating date macros."""

from __future__ import annotations

from enum import StrEnum


class MacroErrorKind(StrEnum):
    UNDEFINED_COMMAND = "undefined_command"
    INVALID_ARGUMENT = "invalid_argument"
    OUT_OF_RANGE = "out_of_range"


class MacroError(ValueError):
    """Raised when text claims to be a macro but cannot be expanded.

    ``str(error)`` is the human-readable text written back into the edited cell.
    """

    def __init__(self, kind: MacroErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"MacroError(kind={self.kind.value!r}, message={self.message!r})"

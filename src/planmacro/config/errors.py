"""Errors raised while resolving planmacro settings."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when environment or in-sheet settings are unusable.

    The edit handler reports these to the spreadsheet's status cell instead of
    propagating them.
    """


class MissingConfigurationError(ConfigurationError):
    """Raised when required environment variables are absent or blank."""

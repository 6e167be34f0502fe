"""Render computed dates as ISO calendar strings."""

from __future__ import annotations

import re
from datetime import date

_ISO_DATE = re.compile(r"(\d{4})-(\d{2})-(\d{2})")


def format_iso_date(value: date) -> str:
    """Return ``YYYY-MM-DD`` built from the date's own components.

    No timezone conversion takes part, so every caller sees the same calendar day.
    """

    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_iso_date(text: str) -> date:
    match = _ISO_DATE.fullmatch(text.strip())
    if match is None:
        raise ValueError(f"Invalid ISO date: {text}")
    year, month, day = (int(group) for group in match.groups())
    return date(year, month, day)


__all__ = ["format_iso_date", "parse_iso_date"]

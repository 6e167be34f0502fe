"""Evaluation context threaded through macro expansion."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol


class Clock(Protocol):
    def __call__(self) -> datetime: ...


def utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class MacroContext:
    """The single notion of "today" shared by every computation in one run."""

    today: date

    @classmethod
    def capture(cls, clock: Clock = utcnow) -> MacroContext:
        """Read ``clock`` exactly once and pin today's calendar date."""

        return cls.from_datetime(clock())

    @classmethod
    def from_datetime(cls, now: datetime) -> MacroContext:
        return cls(today=now.date())


__all__ = ["Clock", "MacroContext", "utcnow"]

"""Core value types: time units, durations and pomodoro periods."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Unit(Enum):
    """The unit a duration is counted in."""

    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"

    def duration(self, value: int) -> Duration:
        """Build a duration of ``value`` in this unit."""
        return Duration(self, value)


_SECONDS_PER_UNIT = {
    Unit.SECONDS: 1,
    Unit.MINUTES: 60,
    Unit.HOURS: 60 * 60,
}


@dataclass(frozen=True)
class Duration:
    """A non-negative whole number of seconds, minutes or hours."""

    unit: Unit
    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"duration cannot be negative: {self.value}")

    def total_seconds(self) -> int:
        """The length of the duration in seconds."""
        return self.value * _SECONDS_PER_UNIT[self.unit]


class Period(Enum):
    """One stretch of a pomodoro schedule."""

    WORK = "Work"
    REST = "Rest"
    LONG_REST = "LongRest"

    @classmethod
    def from_name(cls, text: str) -> Period:
        """Parse ``Work``, ``Rest`` or ``LongRest``; raise ValueError otherwise."""
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"unknown period: {text!r}") from None
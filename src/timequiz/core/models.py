"""Domain models for timequiz.

All models are **frozen** dataclasses — immutable value objects that
validate their ranges on construction.  They carry zero I/O and no
dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

HOURS_PER_DAY: int = 24
MINUTES_PER_HOUR: int = 60
MINUTES_PER_DAY: int = HOURS_PER_DAY * MINUTES_PER_HOUR


def _check_component(name: str, value: int, upper: int) -> None:
    """Raise ``ValueError`` unless *value* is an int in ``[0, upper)``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if not 0 <= value < upper:
        raise ValueError(f"{name} must be in [0, {upper - 1}], got {value}")


# ---------------------------------------------------------------------------
# Clock values
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Time:
    """A wall-clock point of day."""

    hours: int
    """Hour of day, ``0``–``23``."""

    minutes: int
    """Minute of hour, ``0``–``59``."""

    def __post_init__(self) -> None:
        _check_component("hours", self.hours, HOURS_PER_DAY)
        _check_component("minutes", self.minutes, MINUTES_PER_HOUR)

    @property
    def minute_of_day(self) -> int:
        return self.hours * MINUTES_PER_HOUR + self.minutes

    @classmethod
    def from_minute_of_day(cls, total: int) -> Time:
        """Build a Time from a minute count, wrapping around midnight."""
        hours, minutes = divmod(total % MINUTES_PER_DAY, MINUTES_PER_HOUR)
        return cls(hours=hours, minutes=minutes)

    def __add__(self, minutes: object) -> Time:
        if isinstance(minutes, bool) or not isinstance(minutes, int):
            return NotImplemented
        from timequiz.core.clock import add_minutes

        return add_minutes(self, minutes)

    def __str__(self) -> str:
        from timequiz.core.formatting import format_clock

        return format_clock(self)


@dataclass(frozen=True, slots=True)
class Duration:
    """An elapsed amount between two :class:`Time` values."""

    hours: int
    minutes: int

    def __post_init__(self) -> None:
        _check_component("hours", self.hours, HOURS_PER_DAY)
        _check_component("minutes", self.minutes, MINUTES_PER_HOUR)

    def __str__(self) -> str:
        from timequiz.core.formatting import format_clock

        return format_clock(self)


# ---------------------------------------------------------------------------
# Questions
# ---------------------------------------------------------------------------

class QuestionKind(enum.Enum):
    """Tags of the :data:`Question` union, used by the weight table."""

    TIME_PLUS_MINUTES = "time-plus-minutes"
    TIME_DIFFERENCE = "time-difference"


@dataclass(frozen=True, slots=True)
class TimePlusMinutes:
    """What time is it *minutes* after *base_time*?  The answer is a Time."""

    base_time: Time
    minutes: int

    def __post_init__(self) -> None:
        if isinstance(self.minutes, bool) or not isinstance(self.minutes, int):
            raise ValueError(f"minutes must be an integer, got {self.minutes!r}")
        if self.minutes < 0:
            raise ValueError(f"minutes must be non-negative, got {self.minutes}")

    @property
    def kind(self) -> QuestionKind:
        return QuestionKind.TIME_PLUS_MINUTES


@dataclass(frozen=True, slots=True)
class TimeDifference:
    """How far apart are *start_time* and *end_time*?  The answer is a Duration."""

    start_time: Time
    end_time: Time

    @property
    def kind(self) -> QuestionKind:
        return QuestionKind.TIME_DIFFERENCE


Question = TimePlusMinutes | TimeDifference
"""One quiz prompt; its expected answer is fixed at construction."""

ClockValue = Time | Duration

"""Clock arithmetic on :class:`Time` values.

Pure functions only — no I/O, fully deterministic.
"""

from __future__ import annotations

import enum

from timequiz.core.models import MINUTES_PER_HOUR, Duration, Time


class DifferenceMode(enum.Enum):
    """How the gap between two times is computed."""

    PER_FIELD = "per-field"
    """Absolute difference of hours and of minutes, independently."""

    ELAPSED = "elapsed"
    """Absolute difference of minutes-of-day, borrowing across the hour."""


def add_minutes(time: Time, minutes: int) -> Time:
    """Return *time* advanced by *minutes*, wrapping past midnight.

    >>> add_minutes(Time(23, 45), 30)
    Time(hours=0, minutes=15)
    """
    if minutes < 0:
        raise ValueError(f"minute offset must be non-negative, got {minutes}")
    return Time.from_minute_of_day(time.minute_of_day + minutes)


def difference(
    time_a: Time,
    time_b: Time,
    mode: DifferenceMode = DifferenceMode.PER_FIELD,
) -> Duration:
    """Return the gap between *time_a* and *time_b* as a Duration.

    The result is symmetric in its arguments under both modes.  With
    ``PER_FIELD``, ``10h15`` and ``08h30`` are ``02h15`` apart; with
    ``ELAPSED`` they are ``01h45`` apart.
    """
    if mode is DifferenceMode.PER_FIELD:
        return Duration(
            hours=abs(time_a.hours - time_b.hours),
            minutes=abs(time_a.minutes - time_b.minutes),
        )
    gap = abs(time_a.minute_of_day - time_b.minute_of_day)
    hours, minutes = divmod(gap, MINUTES_PER_HOUR)
    return Duration(hours=hours, minutes=minutes)

"""Text rendering of clock values and questions."""

from __future__ import annotations

from timequiz.core.models import ClockValue, Question, TimeDifference, TimePlusMinutes


def format_clock(value: ClockValue) -> str:
    """Render a Time or Duration as zero-padded ``HHhMM``."""
    return f"{value.hours:02d}h{value.minutes:02d}"


def render_question(question: Question) -> str:
    """Return the prompt line shown to the user."""
    if isinstance(question, TimePlusMinutes):
        return f"{format_clock(question.base_time)} + {question.minutes}m ?"
    if isinstance(question, TimeDifference):
        return (
            f"Difference between {format_clock(question.end_time)} "
            f"and {format_clock(question.start_time)} ?"
        )
    raise TypeError(f"unsupported question type: {type(question).__name__}")

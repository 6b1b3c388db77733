"""Answer checking — compare raw input against a question's answer."""

from __future__ import annotations

from timequiz.core.clock import DifferenceMode, add_minutes, difference
from timequiz.core.models import ClockValue, Question, TimeDifference, TimePlusMinutes
from timequiz.core.parser import parse_duration, parse_time


def expected_answer(
    question: Question,
    difference_mode: DifferenceMode = DifferenceMode.PER_FIELD,
) -> ClockValue:
    """Return the value a correct answer to *question* must equal."""
    if isinstance(question, TimePlusMinutes):
        return add_minutes(question.base_time, question.minutes)
    if isinstance(question, TimeDifference):
        return difference(question.start_time, question.end_time, difference_mode)
    raise TypeError(f"unsupported question type: {type(question).__name__}")


def is_correct(
    text: str,
    question: Question,
    difference_mode: DifferenceMode = DifferenceMode.PER_FIELD,
) -> bool:
    """Parse *text* for *question*'s answer type and compare structurally.

    Raises
    ------
    AnswerFormatError
        When *text* is not a well-formed ``HHhMM`` value.
    """
    answer: ClockValue
    if isinstance(question, TimeDifference):
        answer = parse_duration(text)
    else:
        answer = parse_time(text)
    return answer == expected_answer(question, difference_mode)

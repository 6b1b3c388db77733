"""Parsing of ``HHhMM`` answers into clock values.

Malformed input never aborts the process: every failure is reported
as :class:`~timequiz.exceptions.AnswerFormatError` so the quiz loop can
decide whether to re-prompt or terminate.
"""

from __future__ import annotations

from timequiz.core.models import Duration, Time
from timequiz.exceptions import ANSWER_FORMAT_HINT, AnswerFormatError

SEPARATOR = "h"


def _parse_unsigned(part: str, name: str, raw: str) -> int:
    # str.isdigit() accepts non-ASCII digits such as "²"
    if not part or not (part.isascii() and part.isdigit()):
        raise AnswerFormatError(
            f"Invalid {name} in answer {raw!r}.",
            hint=ANSWER_FORMAT_HINT,
        )
    return int(part)


def _split(text: str) -> tuple[int, int]:
    """Split ``HHhMM`` into its two unsigned integer halves."""
    stripped = text.strip()
    parts = stripped.split(SEPARATOR)
    if len(parts) != 2:
        raise AnswerFormatError(
            f"Answer {stripped!r} is not in HHhMM format.",
            hint=ANSWER_FORMAT_HINT,
        )
    hours = _parse_unsigned(parts[0], "hours", stripped)
    minutes = _parse_unsigned(parts[1], "minutes", stripped)
    return hours, minutes


def parse_time(text: str) -> Time:
    """Parse *text* as a :class:`Time`."""
    hours, minutes = _split(text)
    try:
        return Time(hours=hours, minutes=minutes)
    except ValueError as exc:
        raise AnswerFormatError(str(exc), hint=ANSWER_FORMAT_HINT) from exc


def parse_duration(text: str) -> Duration:
    """Parse *text* as a :class:`Duration`."""
    hours, minutes = _split(text)
    try:
        return Duration(hours=hours, minutes=minutes)
    except ValueError as exc:
        raise AnswerFormatError(str(exc), hint=ANSWER_FORMAT_HINT) from exc

"""Answer readers for the quiz loop.

This module is responsible for:

* Reading answers with a questionary text field when stdin is a TTY.
* Falling back to plain line reads when input is piped.
* Reporting end of input as ``None`` so the quiz loop can stop.

All display of the question itself happens in :mod:`timequiz.cli.app`
through the Rich console — no checking logic lives here.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

from timequiz.core.protocols import AnswerReader
from timequiz.exceptions import EnvironmentError

logger = logging.getLogger(__name__)


def _import_questionary() -> Any:
    """Import questionary lazily for interactive input."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


# ---------------------------------------------------------------------------
# Readers
# ---------------------------------------------------------------------------

class LineAnswerReader:
    """Read one answer per line from a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def __call__(self, prompt: str) -> str | None:
        stream = self._stream if self._stream is not None else sys.stdin
        line = stream.readline()
        if line == "":
            return None
        return line


class InteractiveAnswerReader:
    """Read answers through a questionary text prompt.

    ``Ctrl+C`` propagates as ``KeyboardInterrupt`` to the CLI error
    boundary; ``Ctrl+D`` is reported as end of input.
    """

    def __init__(self) -> None:
        self._questionary = _import_questionary()

    def __call__(self, prompt: str) -> str | None:
        try:
            answer: str | None = self._questionary.text(prompt).unsafe_ask()
        except EOFError:
            return None
        return answer


# ---------------------------------------------------------------------------
# Public factory
# ---------------------------------------------------------------------------

def make_answer_reader(stream: TextIO | None = None) -> AnswerReader:
    """Pick the interactive reader on a terminal, else a line reader.

    When questionary is missing the quiz still works on a terminal,
    just without the inline prompt.
    """
    stream = stream if stream is not None else sys.stdin
    if stream.isatty():
        try:
            return InteractiveAnswerReader()
        except EnvironmentError as exc:
            logger.debug("Falling back to line input: %s", exc)
    return LineAnswerReader(stream)

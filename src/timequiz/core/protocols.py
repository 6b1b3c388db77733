"""Protocols (interfaces) consumed by the core layer.

The quiz loop depends only on these contracts — the CLI layer supplies
concrete terminal-backed implementations, tests supply lists and
lambdas.
"""

from __future__ import annotations

from typing import Protocol


class AnswerReader(Protocol):
    """Source of answer lines."""

    def __call__(self, prompt: str) -> str | None:
        """Return the next answer line, or ``None`` once input is exhausted.

        *prompt* is a short label for readers that display one inline
        (e.g. an interactive text field).  Plain line readers ignore it.
        """
        ...  # pragma: no cover


class MessageSink(Protocol):
    """Destination for the question and feedback lines."""

    def __call__(self, message: str) -> None:
        ...  # pragma: no cover

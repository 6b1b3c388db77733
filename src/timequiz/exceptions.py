"""Custom exception hierarchy for timequiz.

Every user-visible error condition inherits from :class:`TimeQuizError`
so the CLI error boundary can render a clean message without a stack
trace.  Raw ``OSError`` and ``ValueError`` instances raised by the
standard library are caught at the layer that produces them and
re-raised as a typed subclass defined here.

Hierarchy
---------
TimeQuizError
├── AnswerFormatError
├── QuizAbortedError
├── TargetCommandError
├── ConfigurationError
└── EnvironmentError
"""

from __future__ import annotations


class TimeQuizError(Exception):
    """Base exception for all timequiz errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Answers ---------------------------------------------------------------

class AnswerFormatError(TimeQuizError):
    """Raised when an answer is not a well-formed ``HHhMM`` value."""


class QuizAbortedError(TimeQuizError):
    """Raised when input ends before a correct answer was given."""


# --- Target command --------------------------------------------------------

class TargetCommandError(TimeQuizError):
    """Raised when the target command cannot be launched."""


# --- Configuration / environment -------------------------------------------

class ConfigurationError(TimeQuizError):
    """Raised when quiz settings are out of their allowed ranges."""


class EnvironmentError(TimeQuizError):
    """Raised when an optional runtime dependency is not available."""


ANSWER_FORMAT_HINT = "Answer as hours and minutes separated by 'h', e.g. 07h45."

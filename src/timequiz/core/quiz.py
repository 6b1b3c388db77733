"""The quiz loop as a two-state machine.

States
------
``AWAITING_INPUT`` → ``AWAITING_INPUT``  wrong (or malformed, under RETRY)
``AWAITING_INPUT`` → ``CORRECT``         answer equals the expected value

There is no timeout and no retry limit; the loop only ends on a correct
answer, a malformed answer under the ABORT policy, or end of input.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from timequiz.core.checker import is_correct
from timequiz.core.formatting import render_question
from timequiz.core.models import Question
from timequiz.core.protocols import AnswerReader, MessageSink
from timequiz.core.settings import InvalidAnswerPolicy, QuizSettings
from timequiz.exceptions import ANSWER_FORMAT_HINT, AnswerFormatError, QuizAbortedError

logger = logging.getLogger(__name__)

WRONG_MESSAGE = "Wrong! Try again."
ANSWER_PROMPT = "Answer (HHhMM):"


class QuizState(enum.Enum):
    AWAITING_INPUT = "awaiting-input"
    CORRECT = "correct"


class AttemptOutcome(enum.Enum):
    CORRECT = "correct"
    WRONG = "wrong"
    MALFORMED = "malformed"


@dataclass(frozen=True, slots=True)
class QuizResult:
    """Summary of a finished quiz."""

    question: Question
    attempts: int


class QuizSession:
    """Tracks state and attempt count for one question."""

    def __init__(self, question: Question, settings: QuizSettings | None = None) -> None:
        self.question = question
        self.settings = settings if settings is not None else QuizSettings()
        self.state = QuizState.AWAITING_INPUT
        self.attempts = 0

    @property
    def prompt(self) -> str:
        return render_question(self.question)

    def submit(self, text: str) -> AttemptOutcome:
        """Check one answer and advance the state machine.

        Raises
        ------
        AnswerFormatError
            When *text* is malformed and the policy is ``ABORT``.
        RuntimeError
            When called after the quiz was already answered.
        """
        if self.state is QuizState.CORRECT:
            raise RuntimeError("quiz already answered correctly")

        self.attempts += 1
        try:
            matched = is_correct(text, self.question, self.settings.difference_mode)
        except AnswerFormatError:
            logger.debug("Attempt %d malformed: %r", self.attempts, text)
            if self.settings.on_invalid is InvalidAnswerPolicy.ABORT:
                raise
            return AttemptOutcome.MALFORMED

        if matched:
            self.state = QuizState.CORRECT
            logger.debug("Attempt %d correct", self.attempts)
            return AttemptOutcome.CORRECT

        logger.debug("Attempt %d wrong: %r", self.attempts, text)
        return AttemptOutcome.WRONG


def run_quiz(
    session: QuizSession,
    read_answer: AnswerReader,
    show: MessageSink,
) -> QuizResult:
    """Prompt until *session* is answered correctly.

    Raises
    ------
    QuizAbortedError
        When *read_answer* reports end of input first.
    AnswerFormatError
        Propagated from :meth:`QuizSession.submit` under ``ABORT``.
    """
    show(session.prompt)
    while session.state is QuizState.AWAITING_INPUT:
        text = read_answer(ANSWER_PROMPT)
        if text is None:
            raise QuizAbortedError(
                "Input ended before the question was answered.",
                hint="The target command only runs after a correct answer.",
            )

        outcome = session.submit(text)
        if outcome is AttemptOutcome.CORRECT:
            break
        show(WRONG_MESSAGE)
        if outcome is AttemptOutcome.MALFORMED:
            show(ANSWER_FORMAT_HINT)
        show(session.prompt)

    logger.info("Quiz passed after %d attempt(s)", session.attempts)
    return QuizResult(question=session.question, attempts=session.attempts)

"""Random question generation.

Each run draws exactly one :data:`~timequiz.core.models.Question` from
the weight table in :class:`~timequiz.core.settings.QuizSettings`.
The random source is injectable so tests and ``--seed`` runs are
reproducible.
"""

from __future__ import annotations

import logging
import random

from timequiz.core.models import (
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    Question,
    QuestionKind,
    Time,
    TimeDifference,
    TimePlusMinutes,
)
from timequiz.core.settings import QuizSettings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Primitive draws
# ---------------------------------------------------------------------------

def random_hours(rng: random.Random) -> int:
    """Uniform hour in ``[0, 24)``."""
    return rng.randrange(HOURS_PER_DAY)


def random_minutes(rng: random.Random, upper_bound: int = MINUTES_PER_HOUR) -> int:
    """Uniform minute in ``[0, upper_bound)``."""
    return rng.randrange(upper_bound)


def random_time(rng: random.Random, minute_upper_bound: int = MINUTES_PER_HOUR) -> Time:
    """Time with independently drawn hour and minute."""
    return Time(
        hours=random_hours(rng),
        minutes=random_minutes(rng, minute_upper_bound),
    )


# ---------------------------------------------------------------------------
# Question generator
# ---------------------------------------------------------------------------

class QuestionGenerator:
    """Weighted random choice among the question kinds."""

    def __init__(
        self,
        settings: QuizSettings | None = None,
        *,
        rng: random.Random | None = None,
        seed: int | None = None,
    ) -> None:
        self._settings = settings if settings is not None else QuizSettings()
        self._rng = rng if rng is not None else random.Random(seed)

    def choose_kind(self) -> QuestionKind:
        kinds = list(self._settings.weights)
        weights = [self._settings.weights[kind] for kind in kinds]
        return self._rng.choices(kinds, weights=weights, k=1)[0]

    def generate(self) -> Question:
        kind = self.choose_kind()
        bound = self._settings.minute_upper_bound
        question: Question
        if kind is QuestionKind.TIME_PLUS_MINUTES:
            question = TimePlusMinutes(
                base_time=random_time(self._rng, bound),
                minutes=self._rng.randrange(1, bound),
            )
        else:
            question = TimeDifference(
                start_time=random_time(self._rng, bound),
                end_time=random_time(self._rng, bound),
            )
        logger.debug("Generated %s question: %r", kind.value, question)
        return question

"""Quiz settings — the knobs the CLI exposes.

:class:`QuizSettings` validates itself on construction and raises
:class:`~timequiz.exceptions.ConfigurationError` for any out-of-range
value, so the rest of the core can assume a consistent configuration.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from timequiz.core.clock import DifferenceMode
from timequiz.core.models import MINUTES_PER_HOUR, QuestionKind
from timequiz.exceptions import ConfigurationError


class InvalidAnswerPolicy(enum.Enum):
    """What the quiz loop does with an answer it cannot parse."""

    RETRY = "retry"
    """Count it as a wrong answer and ask again."""

    ABORT = "abort"
    """Stop the quiz with a diagnostic."""


DEFAULT_WEIGHTS: Mapping[QuestionKind, int] = MappingProxyType(
    {
        QuestionKind.TIME_PLUS_MINUTES: 2,
        QuestionKind.TIME_DIFFERENCE: 1,
    }
)


@dataclass(frozen=True, slots=True)
class QuizSettings:
    """Validated configuration for question generation and checking."""

    minute_upper_bound: int = MINUTES_PER_HOUR
    """Exclusive upper bound for random minutes and minute offsets."""

    difference_mode: DifferenceMode = DifferenceMode.PER_FIELD
    on_invalid: InvalidAnswerPolicy = InvalidAnswerPolicy.RETRY
    weights: Mapping[QuestionKind, int] = field(default_factory=lambda: DEFAULT_WEIGHTS)

    def __post_init__(self) -> None:
        bound = self.minute_upper_bound
        if isinstance(bound, bool) or not isinstance(bound, int):
            raise ConfigurationError(f"Minute bound must be an integer, got {bound!r}.")
        # Offsets are drawn from [1, bound), which must not be empty.
        if not 2 <= bound <= MINUTES_PER_HOUR:
            raise ConfigurationError(
                f"Minute bound must be between 2 and {MINUTES_PER_HOUR}, got {bound}.",
                hint=f"Use --max-minutes with a value from 2 to {MINUTES_PER_HOUR}.",
            )

        unknown = set(self.weights) - set(QuestionKind)
        if unknown:
            raise ConfigurationError(f"Unknown question kinds in weights: {unknown}.")
        for kind, weight in self.weights.items():
            if isinstance(weight, bool) or not isinstance(weight, int):
                raise ConfigurationError(
                    f"Weight for {kind.value} must be an integer, got {weight!r}."
                )
        if any(w < 0 for w in self.weights.values()):
            raise ConfigurationError("Question weights must be non-negative.")
        if sum(self.weights.values()) <= 0:
            raise ConfigurationError("At least one question kind needs a positive weight.")
        # Read-only copy; the caller's mapping is not shared.
        object.__setattr__(self, "weights", MappingProxyType(dict(self.weights)))

"""Shared pytest fixtures and configuration for the timequiz test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* Randomness is always seeded or injected.
* Subprocesses are mocked at the infra boundary, except for one smoke
  test that runs the current Python interpreter.
* No test opens an interactive terminal.
"""

from __future__ import annotations

import io
import random
import sys
from collections.abc import Callable

import pytest


@pytest.fixture
def rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def feed_stdin(monkeypatch: pytest.MonkeyPatch) -> Callable[..., None]:
    """Replace ``sys.stdin`` with a non-TTY stream of answer lines."""

    def _feed(*lines: str) -> None:
        text = "".join(f"{line}\n" for line in lines)
        monkeypatch.setattr(sys, "stdin", io.StringIO(text))

    return _feed

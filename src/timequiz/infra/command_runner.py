"""Infrastructure: run the target command once the quiz is passed.

Rules
-----
* The child inherits stdin, stdout and stderr — nothing is captured.
* No shell: arguments are passed through verbatim.
* Launch failures surface as :class:`TargetCommandError`; the child's
  own exit status is returned, never raised.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Sequence

from timequiz.exceptions import TargetCommandError

logger = logging.getLogger(__name__)

SIGNAL_EXIT_BASE: int = 128
"""POSIX shells report a child killed by signal N as 128 + N."""


def _launch_hint(program: str) -> str:
    if shutil.which(program) is None:
        return f"Check that '{program}' is installed and on your PATH."
    return f"Check that '{program}' is executable."


def run_target_command(argv: Sequence[str]) -> int | None:
    """Spawn ``argv[0]`` with ``argv[1:]`` and wait for it to exit.

    Returns
    -------
    int | None
        ``None`` when *argv* is empty (nothing to run), otherwise the
        child's exit status.

    Raises
    ------
    TargetCommandError
        When the command cannot be started.
    """
    if not argv:
        logger.debug("No target command given")
        return None

    program = argv[0]
    logger.info("Running target command: %s", " ".join(argv))
    try:
        completed = subprocess.run(list(argv), check=False)
    except OSError as exc:
        raise TargetCommandError(
            f"Cannot start target command '{program}': {exc.strerror or exc}",
            hint=_launch_hint(program),
        ) from exc

    code = completed.returncode
    if code < 0:
        code = SIGNAL_EXIT_BASE - code
    logger.debug("Target command exited with status %d", code)
    return code

"""CLI application entry point for timequiz.

This module is the **sole error boundary** for the entire application.
It catches :class:`~timequiz.exceptions.TimeQuizError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No quiz logic lives here — generation, checking and the state machine
  are in ``core``; spawning the target command is in ``infra``.
* Options must come before the target command.  Everything from the
  first positional argument onward is handed to the command verbatim.
* When a target command runs, its exit status becomes ours.
"""

from __future__ import annotations

import argparse
import sys

from timequiz.cli import exit_codes
from timequiz.cli.console import console, err_console, escape_markup
from timequiz.core.clock import DifferenceMode
from timequiz.core.models import MINUTES_PER_HOUR
from timequiz.core.settings import InvalidAnswerPolicy, QuizSettings
from timequiz.exceptions import TimeQuizError
from timequiz.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``timequiz [options] <command> [args...]`` — quiz, then run command
    * ``timequiz [options]``                     — quiz only
    * ``timequiz --version``
    """
    parser = argparse.ArgumentParser(
        prog="timequiz",
        description="Answer a clock-arithmetic question, then run a command.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--difference-mode",
        choices=[mode.value for mode in DifferenceMode],
        default=DifferenceMode.PER_FIELD.value,
        help=(
            "How 'Difference between' questions are scored: 'per-field' "
            "subtracts hours and minutes separately, 'elapsed' borrows "
            "across the hour (default: %(default)s)."
        ),
    )
    parser.add_argument(
        "--on-invalid",
        choices=[policy.value for policy in InvalidAnswerPolicy],
        default=InvalidAnswerPolicy.RETRY.value,
        help="What to do with an answer that is not HHhMM (default: %(default)s).",
    )
    parser.add_argument(
        "--max-minutes",
        type=int,
        default=MINUTES_PER_HOUR,
        metavar="N",
        help="Exclusive upper bound for generated minutes (default: %(default)s).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the random generator for a reproducible question.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug information to stderr.",
    )
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="Command to run once the question is answered correctly.",
    )
    return parser


def _settings_from_args(args: argparse.Namespace) -> QuizSettings:
    return QuizSettings(
        minute_upper_bound=args.max_minutes,
        difference_mode=DifferenceMode(args.difference_mode),
        on_invalid=InvalidAnswerPolicy(args.on_invalid),
    )


def _target_argv(args: argparse.Namespace) -> list[str]:
    command: list[str] = list(args.command)
    # argparse keeps a leading "--" in REMAINDER arguments.
    if command and command[0] == "--":
        command = command[1:]
    return command


def _show(message: str) -> None:
    console.print(escape_markup(message))


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the timequiz CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code: the target command's status when one ran,
        otherwise :data:`exit_codes.SUCCESS`.
    """
    from timequiz.cli.answer_prompt import make_answer_reader
    from timequiz.core.generator import QuestionGenerator
    from timequiz.core.quiz import QuizSession, run_quiz
    from timequiz.infra.command_runner import run_target_command
    from timequiz.utils.logging_config import configure_logging

    parser = _build_parser()
    args = parser.parse_args(argv)

    logger = configure_logging(verbose=args.verbose)
    settings = _settings_from_args(args)
    target = _target_argv(args)

    question = QuestionGenerator(settings, seed=args.seed).generate()
    session = QuizSession(question, settings)
    run_quiz(session, make_answer_reader(), _show)

    status = run_target_command(target)
    if status is None:
        logger.debug("Quiz passed, nothing to run")
        return exit_codes.SUCCESS
    return status


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except TimeQuizError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            err_console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)

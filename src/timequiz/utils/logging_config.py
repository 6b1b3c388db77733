"""Logging configuration helpers for timequiz."""

from __future__ import annotations

import logging
import sys
from logging import Logger

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(verbose: bool = False) -> Logger:
    """Configure stderr logging and return the package logger.

    Logging goes to stderr so it never interleaves with the question
    on stdout.  ``WARNING`` by default, ``DEBUG`` when *verbose*.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    logger = logging.getLogger("timequiz")
    logger.setLevel(level)
    return logger

"""Diagnostic reporting on stderr plus exit-status accumulation.

Listing keeps going after per-entry and per-directory problems; every
reported problem only flips the final exit status to failure.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOGGER_NAME = "gridls"
EXIT_SUCCESS = 0
EXIT_FAILURE = 1

logger = logging.getLogger(LOGGER_NAME)


def configure_logging(prog: str, stream: TextIO | None = None) -> logging.Handler:
    """Send ``gridls`` log records to ``stream`` as ``prog: message`` lines."""
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(f"{prog}: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.WARNING)
    logger.propagate = False
    return handler


class Diagnostics:
    """Counts non-fatal problems while logging them."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self.log = log or logger
        self.error_count = 0

    def warn(self, message: str) -> None:
        self.error_count += 1
        self.log.warning(message)

    def fatal(self, message: str) -> None:
        self.error_count += 1
        self.log.error(message)

    @property
    def exit_status(self) -> int:
        return EXIT_FAILURE if self.error_count else EXIT_SUCCESS


__all__ = [
    "LOGGER_NAME",
    "EXIT_SUCCESS",
    "EXIT_FAILURE",
    "configure_logging",
    "Diagnostics",
]

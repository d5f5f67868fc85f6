"""Output width resolution for grid layout."""

from __future__ import annotations

import os
from collections.abc import Mapping

from .listing.options import DEFAULT_OUTPUT_WIDTH


def _positive_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        parsed = int(value.strip())
    except ValueError:
        return None
    return parsed if parsed > 0 else None


def output_width(environ: Mapping[str, str] | None = None, stdout_fd: int = 1) -> int:
    """Return the column count to lay entries out in.

    ``COLUMNS`` wins when it holds a positive integer; otherwise the terminal
    attached to ``stdout_fd`` is queried, falling back to 80 columns.
    """
    env = os.environ if environ is None else environ
    override = _positive_int(env.get("COLUMNS"))
    if override is not None:
        return override
    try:
        columns = os.get_terminal_size(stdout_fd).columns
    except OSError:
        return DEFAULT_OUTPUT_WIDTH
    return columns if columns > 0 else DEFAULT_OUTPUT_WIDTH


__all__ = ["output_width"]

"""Long-format timestamps in "month day time" or "month day year" form."""

from __future__ import annotations

import time
from datetime import datetime

from .errors import TimestampFormatError

SIX_MONTHS_SECONDS = 6 * 30 * 24 * 60 * 60


def six_months_before(now: float) -> float:
    return now - SIX_MONTHS_SECONDS


def is_recent(seconds: float, now: float) -> bool:
    """Timestamps at or before the six-month boundary are not recent."""
    return seconds > six_months_before(now)


def format_timestamp(seconds: float, now: float | None = None) -> str:
    """Render ``seconds`` in local time, like ``%b %e %H:%M`` / ``%b %e  %Y``."""
    if now is None:
        now = time.time()
    try:
        moment = datetime.fromtimestamp(seconds)
    except (OverflowError, OSError, ValueError) as exc:
        raise TimestampFormatError(f"cannot convert timestamp {seconds!r}: {exc}") from exc
    if is_recent(seconds, now):
        return f"{moment:%b} {moment.day:2d} {moment:%H:%M}"
    return f"{moment:%b} {moment.day:2d}  {moment.year}"


__all__ = [
    "SIX_MONTHS_SECONDS",
    "six_months_before",
    "is_recent",
    "format_timestamp",
]

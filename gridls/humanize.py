"""Auto-scaled byte counts that fit a four-column field ("999", "1.2K", "34M")."""

from __future__ import annotations

from .errors import HumanizeError

MAX_HUMAN_LEN = 4
_DIVISOR = 1024
_PREFIXES = ("", "K", "M", "G", "T", "P", "E")
# One digit plus one prefix letter.
_BASE_LEN = 2


def format_human(byte_count: int, width: int = MAX_HUMAN_LEN) -> str:
    """Format ``byte_count`` in at most ``width`` characters.

    Values are scaled by 1024 until they fit; scaled values below 9.95 keep
    one decimal. Raises :class:`HumanizeError` when the value cannot fit.
    """
    if byte_count < 0:
        raise HumanizeError(f"negative byte count: {byte_count}")
    if width < _BASE_LEN:
        raise HumanizeError(f"field too narrow: {width}")

    # Work in hundredths so rounding matches the classic formatter.
    scaled = byte_count * 100
    limit = 100 * 10 ** (width + 1 - _BASE_LEN)
    scale = 0
    while scaled >= limit - 50 and scale < len(_PREFIXES) - 1:
        scaled //= _DIVISOR
        scale += 1

    prefix = _PREFIXES[scale]
    if scaled < 995 and scale > 0:
        rounded = (scaled + 5) // 10
        text = f"{rounded // 10}.{rounded % 10}{prefix}"
    else:
        text = f"{(scaled + 50) // 100}{prefix}"
    if len(text) > width:
        raise HumanizeError(f"{byte_count} does not fit in {width} columns")
    return text


__all__ = ["MAX_HUMAN_LEN", "format_human"]

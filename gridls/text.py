"""Name decoding, escaping and terminal display-width measurement.

Names arrive as raw bytes. They are decoded with the filesystem encoding and
``surrogateescape`` so undecodable bytes survive a round trip to the output
stream unchanged.
"""

from __future__ import annotations

import os
import unicodedata

REPLACEMENT_CHAR = "?"


def decode_name(name: bytes) -> str:
    return os.fsdecode(name)


def _is_surrogate_escape(ch: str) -> bool:
    return 0xDC80 <= ord(ch) <= 0xDCFF


def is_printable(ch: str) -> bool:
    """Return whether ``ch`` can be written to a terminal as-is."""
    if _is_surrogate_escape(ch):
        return False
    return ch.isprintable()


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns and East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in text)


def escape_name(name: bytes, raw: bool = False) -> str:
    """Decode ``name`` for display.

    Unless ``raw`` is set, every non-printable character (including each
    undecodable byte) is replaced by ``?``.
    """
    text = decode_name(name)
    if raw:
        return text
    if all(is_printable(ch) for ch in text):
        return text
    return "".join(ch if is_printable(ch) else REPLACEMENT_CHAR for ch in text)


__all__ = [
    "REPLACEMENT_CHAR",
    "decode_name",
    "is_printable",
    "char_display_width",
    "display_width",
    "escape_name",
]

"""Sibling ordering: a total-order comparator plus a ``sorted`` key adapter.

The comparator never sorts anything itself; the traversal driver applies it
with a stable sort so entries that compare equal keep their scan order.
"""

from __future__ import annotations

import functools
from enum import IntEnum

from ..entry_model import Entry, EntryStatus, StatSnapshot
from .options import ListingOptions, SortMode, TimeField


class Ordering(IntEnum):
    BEFORE = -1
    EQUAL = 0
    AFTER = 1


def _sign(value: int | float) -> Ordering:
    if value < 0:
        return Ordering.BEFORE
    if value > 0:
        return Ordering.AFTER
    return Ordering.EQUAL


def selected_time(snapshot: StatSnapshot, field: TimeField) -> float:
    if field is TimeField.ACCESSED:
        return snapshot.atime
    if field is TimeField.CHANGED:
        return snapshot.ctime
    return snapshot.mtime


def _compare_names(a: Entry, b: Entry) -> int:
    return (a.name > b.name) - (a.name < b.name)


def _compare_keys(a: Entry, b: Entry, options: ListingOptions) -> int:
    """Primary key for the active mode, falling back to the byte-wise name."""
    if a.stat is not None and b.stat is not None:
        # Newer and larger entries come first.
        if options.sort_mode is SortMode.TIME:
            a_time = selected_time(a.stat, options.time_field)
            b_time = selected_time(b.stat, options.time_field)
            if a_time != b_time:
                return 1 if a_time < b_time else -1
        elif options.sort_mode is SortMode.SIZE:
            if a.stat.size != b.stat.size:
                return 1 if a.stat.size < b.stat.size else -1
    return _compare_names(a, b)


def compare(a: Entry, b: Entry, options: ListingOptions) -> Ordering:
    """Order two sibling entries.

    Root-level directories come first and failed entries come last regardless
    of the reverse flag; the reverse flag only negates key comparisons.
    """
    if a.is_root_level:
        a_dir = a.status is EntryStatus.DIRECTORY
        b_dir = b.status is EntryStatus.DIRECTORY
        if a_dir != b_dir:
            return Ordering.BEFORE if a_dir else Ordering.AFTER

    direction = -1 if options.reverse else 1

    if a.is_failed or b.is_failed:
        if not (a.is_failed and b.is_failed):
            return Ordering.AFTER if a.is_failed else Ordering.BEFORE
        if options.sort_mode is SortMode.UNORDERED:
            return Ordering.EQUAL
        return _sign(direction * _compare_keys(a, b, options))

    if options.sort_mode is SortMode.UNORDERED:
        return Ordering.EQUAL
    return _sign(direction * _compare_keys(a, b, options))


def sort_key(options: ListingOptions):
    """Return a ``sorted`` key applying :func:`compare` under ``options``."""
    return functools.cmp_to_key(functools.partial(compare, options=options))


__all__ = [
    "Ordering",
    "selected_time",
    "compare",
    "sort_key",
]

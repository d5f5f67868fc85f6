"""Domain model for listed filesystem entries plus the traversal driver.

This package contains non-rendering primitives:
- entry, stat snapshot and level batch datatypes
- the filesystem walk that sorts siblings and honors skip directives
"""

from __future__ import annotations

from .types import ROOT_LEVEL, Entry, EntryStatus, LevelBatch, StatSnapshot
from .fs import DOT_NAMES, Traversal, stat_entry

__all__ = [
    "ROOT_LEVEL",
    "Entry",
    "EntryStatus",
    "LevelBatch",
    "StatSnapshot",
    "DOT_NAMES",
    "Traversal",
    "stat_entry",
]

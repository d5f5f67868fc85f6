"""Entry ordering, width aggregation, grid layout and rendering per level.

Defines ``ListingOptions`` and the per-level pipeline used by ``list_paths``:
visibility filter, aggregate widths, lay out columns, render entries.
"""

from __future__ import annotations

from .aggregate import Maxima, aggregate, convert_blocks, digit_count, shows_block_total
from .compare import Ordering, compare, sort_key
from .layout import LayoutPlan, choose_column_count, layout
from .level import LevelController, column_overhead, is_visible
from .options import ListingOptions, SortMode, TimeField
from .render import EntryRenderer, indicator_for
from .runner import ListingRun, list_paths

__all__ = [
    "ListingOptions",
    "SortMode",
    "TimeField",
    "Ordering",
    "compare",
    "sort_key",
    "Maxima",
    "aggregate",
    "convert_blocks",
    "digit_count",
    "shows_block_total",
    "LayoutPlan",
    "choose_column_count",
    "layout",
    "EntryRenderer",
    "indicator_for",
    "LevelController",
    "column_overhead",
    "is_visible",
    "ListingRun",
    "list_paths",
]

"""One directory level: filter, aggregate, lay out and render its entries.

All per-level annotations (display widths, grid coordinates) live in local
lists for the duration of :meth:`LevelController.render_level`; nothing is
stored on the shared :class:`Entry` objects.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from typing import TextIO

from ..diagnostics import Diagnostics
from ..entry_model import Entry, EntryStatus, LevelBatch
from ..names import NameResolver
from ..text import display_width, escape_name
from .aggregate import aggregate, shows_block_total
from .layout import layout
from .options import ListingOptions
from .render import EntryRenderer

logger = logging.getLogger(__name__)


def is_visible(entry: Entry, options: ListingOptions) -> bool:
    """Whether ``entry`` takes part in its level's output.

    Root operands bypass hidden-name filtering; root-level directories are
    listed through their own level unless directories are listed themselves.
    Root operands that could not be stat'ed are only reported.
    """
    if entry.is_root_level:
        if entry.status is EntryStatus.ERROR:
            return False
        return options.list_directories or not entry.is_directory
    return options.show_hidden or not entry.hidden


def column_overhead(options: ListingOptions, inode_width: int, blocks_width: int) -> int:
    """Fixed per-column cost: separator, indicator slot and leading fields."""
    overhead = 1
    if options.classify:
        overhead += 1
    if options.print_inode:
        overhead += inode_width + 1
    if options.print_blocks:
        overhead += blocks_width + 1
    return overhead


class LevelController:
    """Render one :class:`LevelBatch` at a time to ``out``."""

    def __init__(
        self,
        options: ListingOptions,
        out: TextIO,
        diagnostics: Diagnostics,
        names: NameResolver | None = None,
        now: float | None = None,
        read_link: Callable[[bytes], bytes] = os.readlink,
    ) -> None:
        self.options = options
        self.out = out
        self.diagnostics = diagnostics
        self.names = names or NameResolver()
        self.now = now
        self.read_link = read_link

    def visible_entries(self, batch: LevelBatch) -> list[Entry]:
        return [entry for entry in batch.entries if is_visible(entry, self.options)]

    def _report_failed(self, batch: LevelBatch) -> None:
        for entry in batch.entries:
            if entry.status is not EntryStatus.ERROR:
                continue
            if not (entry.is_root_level or is_visible(entry, self.options)):
                continue
            reason = os.strerror(entry.error_code) if entry.error_code is not None else "unknown error"
            self.diagnostics.warn(f"{escape_name(entry.name, raw=self.options.raw_names)}: {reason}")

    def render_level(self, batch: LevelBatch) -> int:
        """Write ``batch`` and return how many entries were rendered."""
        self._report_failed(batch)
        entries = self.visible_entries(batch)
        maxima = aggregate(entries, self.options, self.names)
        renderer = EntryRenderer(
            self.options,
            maxima,
            self.diagnostics,
            names=self.names,
            now=self.now,
            read_link=self.read_link,
        )
        if not entries:
            return 0

        if shows_block_total(batch.level, self.options):
            self.out.write(f"total {maxima.total_blocks}\n")

        if not self.options.uses_grid:
            for entry in entries:
                self.out.write(renderer.render_line(entry))
            return len(entries)

        name_widths = [display_width(renderer.display_name(entry)) for entry in entries]
        overhead = column_overhead(self.options, maxima.inode_width, maxima.blocks_width)
        plan = layout(name_widths, overhead, self.options.output_width, horizontal=self.options.horizontal)
        logger.debug("level %r: %d entries in %d columns x %d rows", batch.path, len(entries), plan.columns, plan.rows)
        for row in plan.row_indices():
            last = len(row) - 1
            for position, index in enumerate(row):
                column = plan.coordinates[index][1]
                self.out.write(
                    renderer.render_cell(
                        entries[index],
                        name_widths[index],
                        plan.column_widths[column],
                        row_end=position == last,
                    )
                )
        return len(entries)


__all__ = [
    "is_visible",
    "column_overhead",
    "LevelController",
]

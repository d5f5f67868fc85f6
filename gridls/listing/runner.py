"""Drive a traversal level by level: headers, per-directory errors, descent policy."""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence
from typing import TextIO

from ..diagnostics import Diagnostics
from ..entry_model import EntryStatus, LevelBatch, Traversal
from ..names import NameResolver
from ..text import escape_name
from .compare import sort_key
from .level import LevelController, is_visible
from .options import ListingOptions


class ListingRun:
    """Prints every level yielded by a :class:`Traversal` in order."""

    def __init__(
        self,
        operands: Sequence[bytes | str],
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
        self.traversal = Traversal(
            operands,
            sort_key=sort_key(options),
            follow_root_links=options.follow_root_links,
            include_dot_entries=options.show_dot_entries,
        )
        self.controller = LevelController(options, out, diagnostics, names=names, now=now, read_link=read_link)
        self.show_headers = options.recursive or len(operands) > 1
        self._printed_any = False

    def _header(self, batch: LevelBatch) -> None:
        if not self.show_headers:
            return
        if self._printed_any:
            self.out.write("\n")
        self._printed_any = True
        self.out.write(f"{escape_name(batch.path, raw=self.options.raw_names)}:\n")

    def _handle_root(self, batch: LevelBatch) -> None:
        if self.controller.render_level(batch):
            self._printed_any = True
        if self.options.list_directories:
            for entry in batch.entries:
                self.traversal.skip(entry)

    def _handle_directory(self, batch: LevelBatch) -> None:
        directory = batch.directory
        name = escape_name(directory.name, raw=self.options.raw_names)
        if directory.status is EntryStatus.CYCLE:
            self.diagnostics.warn(f"{name} causes a cycle")
            return
        if batch.error_code is not None:
            self.diagnostics.warn(f"{name}: {os.strerror(batch.error_code)}")
            return

        self._header(batch)
        if self.controller.render_level(batch):
            self._printed_any = True

        if not self.options.recursive:
            self.traversal.skip(directory)
            return
        for entry in batch.entries:
            if not is_visible(entry, self.options):
                self.traversal.skip(entry)

    def run(self) -> int:
        """List everything and return the exit status accumulated so far."""
        for batch in self.traversal.levels():
            if batch.is_root:
                self._handle_root(batch)
            else:
                self._handle_directory(batch)
        return self.diagnostics.exit_status


def list_paths(
    operands: Sequence[bytes | str],
    options: ListingOptions,
    out: TextIO,
    diagnostics: Diagnostics,
    **collaborators,
) -> int:
    """List ``operands`` to ``out``; returns the exit status."""
    return ListingRun(operands, options, out, diagnostics, **collaborators).run()


__all__ = [
    "ListingRun",
    "list_paths",
]

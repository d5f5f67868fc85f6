"""Per-entry output: optional inode/block/long fields, name, indicator, link target."""

from __future__ import annotations

import os
import stat as stat_module
import time
from collections.abc import Callable

from ..diagnostics import Diagnostics
from ..entry_model import Entry, StatSnapshot
from ..errors import FormatFailure
from ..humanize import format_human
from ..names import NameResolver
from ..text import escape_name
from ..timefmt import format_timestamp
from .aggregate import STAT_BLOCK_SIZE, Maxima, convert_blocks
from .compare import selected_time
from .options import ListingOptions

UNKNOWN_FIELD = "?"
UNKNOWN_MODE = "?" * 10
LINK_ARROW = " -> "
EXECUTABLE_BITS = stat_module.S_IXUSR | stat_module.S_IXGRP | stat_module.S_IXOTH


def indicator_for(mode: int) -> str:
    """Type suffix shown with ``-F``."""
    if stat_module.S_ISDIR(mode):
        return "/"
    if stat_module.S_ISLNK(mode):
        return "@"
    if stat_module.S_ISFIFO(mode):
        return "|"
    if stat_module.S_ISSOCK(mode):
        return "="
    if stat_module.S_ISWHT(mode):
        return "%"
    if mode & EXECUTABLE_BITS:
        return "*"
    return ""


class EntryRenderer:
    """Format entries of one level using that level's field widths."""

    def __init__(
        self,
        options: ListingOptions,
        maxima: Maxima,
        diagnostics: Diagnostics,
        names: NameResolver | None = None,
        now: float | None = None,
        read_link: Callable[[bytes], bytes] = os.readlink,
    ) -> None:
        self.options = options
        self.maxima = maxima
        self.diagnostics = diagnostics
        self.names = names or NameResolver()
        self.now = time.time() if now is None else now
        self.read_link = read_link

    # Field helpers

    def _human(self, byte_count: int, entry: Entry) -> str:
        try:
            return format_human(byte_count)
        except FormatFailure as exc:
            self.diagnostics.warn(f"{self.display_name(entry)}: {exc}")
            return ""

    def _inode_field(self, entry: Entry) -> str:
        value = str(entry.stat.inode) if entry.stat is not None else UNKNOWN_FIELD
        return value.rjust(self.maxima.inode_width)

    def _blocks_field(self, entry: Entry) -> str:
        if entry.stat is None:
            value = UNKNOWN_FIELD
        elif self.options.human_readable:
            value = self._human(entry.stat.blocks * STAT_BLOCK_SIZE, entry)
        else:
            value = str(convert_blocks(entry.stat.blocks, self.options.block_size))
        return value.rjust(self.maxima.blocks_width)

    def _owner_field(self, snapshot: StatSnapshot) -> str:
        owner = None if self.options.numeric_ids else self.names.resolve_owner(snapshot.uid)
        return (owner if owner is not None else str(snapshot.uid)).ljust(self.maxima.owner_width)

    def _group_field(self, snapshot: StatSnapshot) -> str:
        group = None if self.options.numeric_ids else self.names.resolve_group(snapshot.gid)
        return (group if group is not None else str(snapshot.gid)).ljust(self.maxima.group_width)

    def _size_field(self, entry: Entry, snapshot: StatSnapshot) -> str:
        if snapshot.is_device:
            major = str(snapshot.rdev_major).rjust(self.maxima.major_width)
            minor = str(snapshot.rdev_minor).rjust(self.maxima.minor_width)
            return f"{major}, {minor}"
        if self.options.human_readable:
            return self._human(snapshot.size, entry).rjust(self.maxima.size_width)
        return str(snapshot.size).rjust(self.maxima.size_width)

    def _time_field(self, entry: Entry, snapshot: StatSnapshot) -> str:
        try:
            return format_timestamp(selected_time(snapshot, self.options.time_field), self.now)
        except FormatFailure as exc:
            self.diagnostics.warn(f"{self.display_name(entry)}: {exc}")
            return ""

    def _long_fields(self, entry: Entry) -> list[str]:
        snapshot = entry.stat
        if snapshot is None:
            return [
                UNKNOWN_MODE,
                UNKNOWN_FIELD.rjust(self.maxima.nlink_width),
                UNKNOWN_FIELD.ljust(self.maxima.owner_width),
                UNKNOWN_FIELD.ljust(self.maxima.group_width),
                UNKNOWN_FIELD.rjust(self.maxima.size_width),
                UNKNOWN_FIELD,
            ]
        return [
            stat_module.filemode(snapshot.mode),
            str(snapshot.nlink).rjust(self.maxima.nlink_width),
            self._owner_field(snapshot),
            self._group_field(snapshot),
            self._size_field(entry, snapshot),
            self._time_field(entry, snapshot),
        ]

    # Public API

    def display_name(self, entry: Entry) -> str:
        return escape_name(entry.name, raw=self.options.raw_names)

    def indicator(self, entry: Entry) -> str:
        if not self.options.classify or entry.stat is None:
            return ""
        return indicator_for(entry.stat.mode)

    def prefix(self, entry: Entry) -> str:
        """Everything printed before the name, including its trailing space."""
        fields: list[str] = []
        if self.options.print_inode:
            fields.append(self._inode_field(entry))
        if self.options.print_blocks:
            fields.append(self._blocks_field(entry))
        if self.options.long_format:
            fields.extend(self._long_fields(entry))
        return "".join(f"{field} " for field in fields)

    def link_target(self, entry: Entry) -> str:
        if not self.options.long_format or entry.stat is None or not entry.stat.is_symlink:
            return ""
        try:
            target = self.read_link(entry.path)
        except OSError as exc:
            self.diagnostics.warn(f"{self.display_name(entry)}: readlink: {exc.strerror or exc}")
            return ""
        return LINK_ARROW + escape_name(os.fsencode(target), raw=self.options.raw_names)

    def render_line(self, entry: Entry) -> str:
        """One complete line for single-column and long listings."""
        return f"{self.prefix(entry)}{self.display_name(entry)}{self.indicator(entry)}{self.link_target(entry)}\n"

    def render_cell(self, entry: Entry, name_width: int, column_width: int, row_end: bool) -> str:
        """One grid cell, padded to ``column_width`` unless it ends the row.

        With indicators on, every cell reserves one column for the suffix so
        names stay aligned whether or not they carry one.
        """
        indicator = self.indicator(entry)
        text = f"{self.prefix(entry)}{self.display_name(entry)}{indicator}"
        if row_end:
            return text + "\n"
        slot = 1 if self.options.classify else 0
        padding = column_width + slot - name_width - len(indicator) + 1
        return text + " " * padding


__all__ = [
    "UNKNOWN_FIELD",
    "indicator_for",
    "EntryRenderer",
]

"""Filesystem traversal driver that yields sorted sibling batches per level.

The walk is preorder and depth-first: the batch of root operands comes first,
then every directory level in the order its parent sorted it. Callers steer
the descent by calling :meth:`Traversal.skip` on entries while handling the
batch that contains them (or the batch of the directory itself).
"""

from __future__ import annotations

import dataclasses
import os
import stat as stat_module
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any

from ..errors import FatalTraversalError
from .types import ROOT_LEVEL, Entry, EntryStatus, LevelBatch, StatSnapshot

DOT_NAMES = (b".", b"..")

SortKey = Callable[[Entry], Any]


def stat_entry(
    name: bytes,
    path: bytes,
    level: int,
    follow_symlinks: bool = False,
    ancestors: Sequence[tuple[int, int]] = (),
) -> Entry:
    """Stat ``path`` and classify it into an :class:`Entry`.

    A directory whose ``(device, inode)`` appears in ``ancestors`` is tagged
    ``CYCLE``. Stat failures produce an ``ERROR`` entry with the errno.
    """
    try:
        result = os.stat(path) if follow_symlinks else os.lstat(path)
    except OSError as exc:
        return Entry(name=name, path=path, level=level, status=EntryStatus.ERROR, error_code=exc.errno)

    snapshot = StatSnapshot.from_stat_result(result)
    if not stat_module.S_ISDIR(snapshot.mode):
        return Entry(name=name, path=path, level=level, status=EntryStatus.NORMAL, stat=snapshot)
    if name not in DOT_NAMES and snapshot.identity in ancestors:
        return Entry(name=name, path=path, level=level, status=EntryStatus.CYCLE, stat=snapshot)
    return Entry(name=name, path=path, level=level, status=EntryStatus.DIRECTORY, stat=snapshot)


class Traversal:
    """Walk root operands and hand out one :class:`LevelBatch` per directory."""

    def __init__(
        self,
        operands: Iterable[bytes | str],
        sort_key: SortKey | None = None,
        follow_root_links: bool = False,
        include_dot_entries: bool = False,
    ) -> None:
        self.operands = [os.fsencode(operand) for operand in operands]
        self.sort_key = sort_key
        self.follow_root_links = follow_root_links
        self.include_dot_entries = include_dot_entries
        self._skipped: set[bytes] = set()

    def skip(self, entry: Entry) -> None:
        """Never descend into ``entry``."""
        self._skipped.add(entry.path)

    def _sorted(self, entries: Iterable[Entry]) -> tuple[Entry, ...]:
        if self.sort_key is None:
            return tuple(entries)
        # ``sorted`` is stable, so entries the comparator calls equal keep scan order.
        return tuple(sorted(entries, key=self.sort_key))

    def _should_descend(self, entry: Entry) -> bool:
        if not entry.is_directory or entry.path in self._skipped:
            return False
        return entry.is_root_level or entry.name not in DOT_NAMES

    def root_batch(self) -> LevelBatch:
        entries = [
            stat_entry(operand, operand, ROOT_LEVEL, follow_symlinks=self.follow_root_links)
            for operand in self.operands
        ]
        return LevelBatch(directory=None, path=b"", level=ROOT_LEVEL, entries=self._sorted(entries))

    def read_level(self, directory: Entry, ancestors: Sequence[tuple[int, int]] = ()) -> LevelBatch:
        """Scan ``directory`` and return its sorted children.

        Failing to open the directory is reported through ``error_code`` on the
        batch, whose ``directory`` is then tagged ``UNREADABLE``. Failing
        half-way through an opened directory raises :class:`FatalTraversalError`.
        """
        level = directory.level + 1
        try:
            scanner = os.scandir(directory.path)
        except OSError as exc:
            unreadable = dataclasses.replace(directory, status=EntryStatus.UNREADABLE, error_code=exc.errno)
            return LevelBatch(directory=unreadable, path=directory.path, level=level, error_code=exc.errno)

        entries: list[Entry] = []
        if self.include_dot_entries:
            entries.append(stat_entry(b".", directory.path, level))
            entries.append(stat_entry(b"..", os.path.join(directory.path, b".."), level))
        with scanner:
            try:
                for child in scanner:
                    entries.append(stat_entry(child.name, child.path, level, ancestors=ancestors))
            except OSError as exc:
                raise FatalTraversalError(directory.path, exc) from exc
        return LevelBatch(directory=directory, path=directory.path, level=level, entries=self._sorted(entries))

    def _walk(self, directory: Entry, ancestors: tuple[tuple[int, int], ...]) -> Iterator[LevelBatch]:
        if directory.status is EntryStatus.CYCLE:
            yield LevelBatch(directory=directory, path=directory.path, level=directory.level + 1)
            return
        if directory.stat is not None:
            ancestors = ancestors + (directory.stat.identity,)
        batch = self.read_level(directory, ancestors)
        yield batch
        if batch.error_code is not None or directory.path in self._skipped:
            return
        for child in batch.entries:
            if self._should_descend(child):
                yield from self._walk(child, ancestors)

    def levels(self) -> Iterator[LevelBatch]:
        """Yield the root batch, then every directory level in preorder."""
        root = self.root_batch()
        yield root
        for entry in root.entries:
            if self._should_descend(entry):
                yield from self._walk(entry, ())


__all__ = [
    "DOT_NAMES",
    "stat_entry",
    "Traversal",
]

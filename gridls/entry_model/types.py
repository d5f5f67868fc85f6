"""Domain datatypes for directory entries and per-level sibling batches."""

from __future__ import annotations

import os
import stat as stat_module
from dataclasses import dataclass
from enum import Enum

ROOT_LEVEL = 0


class EntryStatus(Enum):
    """Traversal status of one entry, independent of any OS walk primitive."""

    NORMAL = "normal"
    DIRECTORY = "directory"
    ERROR = "error"
    CYCLE = "cycle"
    UNREADABLE = "unreadable"


@dataclass(frozen=True)
class StatSnapshot:
    """Read-only copy of the stat fields the listing needs."""

    inode: int
    size: int
    blocks: int
    nlink: int
    uid: int
    gid: int
    mode: int
    rdev_major: int = 0
    rdev_minor: int = 0
    atime: float = 0.0
    mtime: float = 0.0
    ctime: float = 0.0
    device: int = 0

    @classmethod
    def from_stat_result(cls, result: os.stat_result) -> "StatSnapshot":
        rdev = getattr(result, "st_rdev", 0)
        return cls(
            inode=int(result.st_ino),
            size=int(result.st_size),
            blocks=int(getattr(result, "st_blocks", (result.st_size + 511) // 512)),
            nlink=int(result.st_nlink),
            uid=int(result.st_uid),
            gid=int(result.st_gid),
            mode=int(result.st_mode),
            rdev_major=os.major(rdev) if rdev else 0,
            rdev_minor=os.minor(rdev) if rdev else 0,
            atime=float(result.st_atime),
            mtime=float(result.st_mtime),
            ctime=float(result.st_ctime),
            device=int(result.st_dev),
        )

    @property
    def identity(self) -> tuple[int, int]:
        return (self.device, self.inode)

    @property
    def is_device(self) -> bool:
        return stat_module.S_ISCHR(self.mode) or stat_module.S_ISBLK(self.mode)

    @property
    def is_symlink(self) -> bool:
        return stat_module.S_ISLNK(self.mode)


@dataclass(frozen=True)
class Entry:
    """One filesystem object within a directory level.

    ``name`` is the raw byte name (or the operand as given at the root level)
    and ``path`` is the byte path used to access it. ``stat`` is ``None`` when
    the object could not be stat'ed, in which case ``error_code`` carries the
    errno.
    """

    name: bytes
    path: bytes
    level: int
    status: EntryStatus
    stat: StatSnapshot | None = None
    error_code: int | None = None

    @property
    def hidden(self) -> bool:
        return self.name.startswith(b".")

    @property
    def is_root_level(self) -> bool:
        return self.level == ROOT_LEVEL

    @property
    def is_directory(self) -> bool:
        """Whether the entry is a directory the traversal may enter or report on."""
        return self.status in (EntryStatus.DIRECTORY, EntryStatus.UNREADABLE, EntryStatus.CYCLE)

    @property
    def is_failed(self) -> bool:
        return self.status in (EntryStatus.ERROR, EntryStatus.UNREADABLE)


@dataclass(frozen=True)
class LevelBatch:
    """Sorted sibling entries at one directory depth.

    ``directory`` is ``None`` for the batch of root operands. ``error_code`` is
    set when the directory could not be opened; ``entries`` is then empty.
    """

    directory: Entry | None
    path: bytes
    level: int
    entries: tuple[Entry, ...] = ()
    error_code: int | None = None

    @property
    def is_root(self) -> bool:
        return self.directory is None


__all__ = [
    "ROOT_LEVEL",
    "EntryStatus",
    "StatSnapshot",
    "Entry",
    "LevelBatch",
]

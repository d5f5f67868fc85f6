"""Run-wide listing configuration shared by every listing component."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_BLOCK_SIZE = 512
DEFAULT_OUTPUT_WIDTH = 80


class SortMode(Enum):
    UNORDERED = "unordered"
    NAME = "name"
    TIME = "time"
    SIZE = "size"


class TimeField(Enum):
    MODIFIED = "mtime"
    ACCESSED = "atime"
    CHANGED = "ctime"


@dataclass(frozen=True)
class ListingOptions:
    """Flags that shape ordering, field selection and layout for one run."""

    sort_mode: SortMode = SortMode.NAME
    time_field: TimeField = TimeField.MODIFIED
    reverse: bool = False
    print_inode: bool = False
    print_blocks: bool = False
    classify: bool = False
    list_directories: bool = False
    numeric_ids: bool = False
    long_format: bool = False
    human_readable: bool = False
    raw_names: bool = False
    grid: bool = True
    horizontal: bool = False
    show_hidden: bool = False
    show_dot_entries: bool = False
    recursive: bool = False
    block_size: int = DEFAULT_BLOCK_SIZE
    output_width: int = DEFAULT_OUTPUT_WIDTH

    @property
    def uses_grid(self) -> bool:
        """Whether entries are laid out in columns rather than one per line."""
        return self.grid and not self.long_format

    @property
    def follow_root_links(self) -> bool:
        return not (self.long_format or self.classify or self.list_directories)


__all__ = [
    "DEFAULT_BLOCK_SIZE",
    "DEFAULT_OUTPUT_WIDTH",
    "SortMode",
    "TimeField",
    "ListingOptions",
]

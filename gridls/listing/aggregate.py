"""Single-pass field-width aggregation over one level's visible entries."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..entry_model import ROOT_LEVEL, Entry
from ..humanize import MAX_HUMAN_LEN
from ..names import NameResolver
from .options import ListingOptions

STAT_BLOCK_SIZE = 512
# ", " between device major and minor numbers.
DEVICE_SEPARATOR_LEN = 2


def digit_count(value: int) -> int:
    """Number of decimal digits in a non-negative integer (1 for zero)."""
    return len(str(value)) if value > 0 else 1


def convert_blocks(blocks: int, block_size: int) -> int:
    """Convert 512-byte stat blocks to ``block_size`` units, rounding up."""
    return (blocks * STAT_BLOCK_SIZE + block_size - 1) // block_size


@dataclass(frozen=True)
class Maxima:
    """Column widths for one level; zero means the field is not shown."""

    inode_width: int = 0
    blocks_width: int = 0
    nlink_width: int = 0
    owner_width: int = 0
    group_width: int = 0
    size_width: int = 0
    major_width: int = 0
    minor_width: int = 0
    total_blocks: int = 0


def aggregate(
    entries: Iterable[Entry],
    options: ListingOptions,
    names: NameResolver | None = None,
) -> Maxima:
    """Compute field widths and the block total for visible ``entries``.

    Device numbers share the size column: when any device is present the size
    width grows to fit ``major, minor``, or the major width grows to fill a
    wider size column.
    """
    resolver = names or NameResolver()
    max_inode = max_blocks = blocks_sum = max_nlink = 0
    max_uid = max_gid = max_size = max_major = max_minor = 0
    owner_width = group_width = 1
    has_devices = False

    for entry in entries:
        snapshot = entry.stat
        if snapshot is None:
            continue
        max_inode = max(max_inode, snapshot.inode)
        max_blocks = max(max_blocks, snapshot.blocks)
        blocks_sum += snapshot.blocks
        if not options.long_format:
            continue

        max_nlink = max(max_nlink, snapshot.nlink)
        if options.numeric_ids:
            max_uid = max(max_uid, snapshot.uid)
            max_gid = max(max_gid, snapshot.gid)
        else:
            owner = resolver.resolve_owner(snapshot.uid)
            group = resolver.resolve_group(snapshot.gid)
            owner_width = max(owner_width, len(owner) if owner is not None else digit_count(snapshot.uid))
            group_width = max(group_width, len(group) if group is not None else digit_count(snapshot.gid))
        if snapshot.is_device:
            has_devices = True
            max_major = max(max_major, snapshot.rdev_major)
            max_minor = max(max_minor, snapshot.rdev_minor)
        else:
            max_size = max(max_size, snapshot.size)

    inode_width = digit_count(max_inode) if options.print_inode else 0
    blocks_width = 0
    if options.print_blocks:
        blocks_width = MAX_HUMAN_LEN if options.human_readable else digit_count(
            convert_blocks(max_blocks, options.block_size)
        )

    nlink_width = size_width = major_width = minor_width = 0
    if options.long_format:
        nlink_width = digit_count(max_nlink)
        if options.numeric_ids:
            owner_width = digit_count(max_uid)
            group_width = digit_count(max_gid)
        size_width = MAX_HUMAN_LEN if options.human_readable else digit_count(max_size)
        if has_devices:
            major_width = digit_count(max_major)
            minor_width = digit_count(max_minor)
            device_width = major_width + minor_width + DEVICE_SEPARATOR_LEN
            if size_width < device_width:
                size_width = device_width
            else:
                major_width = size_width - minor_width - DEVICE_SEPARATOR_LEN
    else:
        owner_width = group_width = 0

    return Maxima(
        inode_width=inode_width,
        blocks_width=blocks_width,
        nlink_width=nlink_width,
        owner_width=owner_width,
        group_width=group_width,
        size_width=size_width,
        major_width=major_width,
        minor_width=minor_width,
        total_blocks=convert_blocks(blocks_sum, options.block_size),
    )


def shows_block_total(level: int, options: ListingOptions) -> bool:
    """The ``total N`` header belongs to block or long listings below the root level."""
    return (options.print_blocks or options.long_format) and level > ROOT_LEVEL


__all__ = [
    "STAT_BLOCK_SIZE",
    "digit_count",
    "convert_blocks",
    "Maxima",
    "aggregate",
    "shows_block_total",
]

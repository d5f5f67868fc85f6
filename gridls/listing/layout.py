"""Multi-column grid layout: column-count search and cell coordinates.

Entries are assigned to columns either column-major (consecutive entries fill
down a column) or row-major (consecutive entries fill across a row). Output
is always read out row by row through an explicit ``(row, column) -> index``
matrix.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


def ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


def cell_position(index: int, rows: int, columns: int, horizontal: bool) -> tuple[int, int]:
    """Return ``(row, column)`` of the ``index``-th entry."""
    if horizontal:
        return divmod(index, columns)
    column, row = divmod(index, rows)
    return row, column


def column_widths(widths: Sequence[int], columns: int, horizontal: bool = False) -> list[int]:
    """Widest entry per column when ``widths`` are laid out in ``columns``."""
    rows = ceil_div(len(widths), columns)
    result = [0] * columns
    for index, width in enumerate(widths):
        _row, column = cell_position(index, rows, columns, horizontal)
        if result[column] < width:
            result[column] = width
    return result


def packed_width(widths: Sequence[int], overhead: int) -> int:
    return sum(widths) + overhead * len(widths)


def choose_column_count(
    widths: Sequence[int],
    overhead: int,
    output_width: int,
    horizontal: bool = False,
) -> int:
    """Greedy search for the widest column count that still fits.

    Starting at two columns, keep accepting candidates until the first one
    overflows ``output_width``. Once columns outnumber rows, adding a single
    column rarely changes the row count, so the search jumps straight to the
    smallest column count that removes one row.
    """
    count = len(widths)
    best = 1
    columns = 2
    while columns <= count:
        rows = ceil_div(count, columns)
        if packed_width(column_widths(widths, columns, horizontal), overhead) > output_width:
            break
        best = columns
        if columns < rows or horizontal:
            columns += 1
        elif rows > 1:
            columns = ceil_div(count, rows - 1)
        else:
            break
    return best


@dataclass(frozen=True)
class LayoutPlan:
    """Final grid shape plus each entry's ``(row, column)`` coordinate."""

    columns: int
    rows: int
    column_widths: tuple[int, ...]
    coordinates: tuple[tuple[int, int], ...]

    def packed_width(self, overhead: int) -> int:
        return packed_width(self.column_widths, overhead)

    def matrix(self) -> list[list[int | None]]:
        grid: list[list[int | None]] = [[None] * self.columns for _ in range(self.rows)]
        for index, (row, column) in enumerate(self.coordinates):
            grid[row][column] = index
        return grid

    def row_indices(self) -> list[list[int]]:
        """Entry indices per output row, left to right."""
        return [[index for index in row if index is not None] for row in self.matrix()]

    def row_major_order(self) -> list[int]:
        return [index for row in self.row_indices() for index in row]


def layout(
    widths: Sequence[int],
    overhead: int,
    output_width: int,
    horizontal: bool = False,
) -> LayoutPlan:
    """Lay out entries with display ``widths`` (in sorted order) into a grid.

    ``overhead`` is the fixed per-column cost (separator, indicator slot and
    any inode/block fields). A single column is returned when no wider grid
    fits.
    """
    count = len(widths)
    if count == 0:
        return LayoutPlan(columns=1, rows=0, column_widths=(0,), coordinates=())
    columns = choose_column_count(widths, overhead, output_width, horizontal)
    rows = ceil_div(count, columns)
    return LayoutPlan(
        columns=columns,
        rows=rows,
        column_widths=tuple(column_widths(widths, columns, horizontal)),
        coordinates=tuple(cell_position(index, rows, columns, horizontal) for index in range(count)),
    )


__all__ = [
    "ceil_div",
    "cell_position",
    "column_widths",
    "packed_width",
    "choose_column_count",
    "LayoutPlan",
    "layout",
]

"""Automatic grid partitioning shared across CLI and library layers."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import NamedTuple

from .rect import GridError, Rect
from .split import split_columns, split_rows

logger = logging.getLogger("autogrid")


class GridShape(NamedTuple):
    cols: int
    rows: int


@dataclass(frozen=True)
class GridCell:
    """One grid slot: its row-major index, grid position and rectangle."""

    index: int
    row: int
    col: int
    rect: Rect


def _check_count(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise GridError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise GridError(f"{name} must be non-negative, got {value}")


def grid_dimensions(n: int) -> GridShape:
    """
    Choose a near-square grid shape for ``n`` cells.

    Columns are ``ceil(sqrt(n))`` and rows are ``ceil(n / cols)``, so the grid
    is never taller than it is wide and always holds at least ``n`` cells.

    Args:
        n: Number of cells to arrange.

    Returns:
        GridShape: (cols, rows); (0, 0) when ``n`` is zero.
    """
    _check_count("n", n)
    if n == 0:
        return GridShape(0, 0)

    cols = math.ceil(math.sqrt(n))
    rows = math.ceil(n / cols)
    return GridShape(cols, rows)


def grid_shape_for(n: int) -> GridShape | None:
    """Shape used by :func:`auto_grid` for ``n`` cells, or None when no grid is built."""
    if n == 0:
        return None
    return grid_dimensions(n)


def grid_cells(area: Rect, n: int, spacing: int = 0) -> list[GridCell]:
    """
    Partition ``area`` into ``n`` cells, keeping each cell's grid position.

    Rows are split first, then each row band is split into columns, and
    cells are collected in row-major order until ``n`` have been produced.
    """
    if not isinstance(area, Rect):
        raise GridError(f"area must be a Rect, got {type(area).__name__}")
    _check_count("n", n)
    _check_count("spacing", spacing)
    if n == 0:
        return []

    cols, rows = grid_dimensions(n)
    row_bands = split_rows(area, rows, spacing)

    cells: list[GridCell] = []
    for row, band in enumerate(row_bands):
        for col, rect in enumerate(split_columns(band, cols, spacing)):
            if len(cells) == n:
                break
            cells.append(GridCell(index=len(cells), row=row, col=col, rect=rect))

    logger.debug(
        "Partitioned %s into %d cell(s) on a %dx%d grid (spacing %d)",
        area.as_tuple(),
        len(cells),
        cols,
        rows,
        spacing,
    )
    return cells


def auto_grid(area: Rect, n: int, spacing: int = 0) -> list[Rect]:
    """
    Arrange ``n`` equally sized cells in an automatic grid within ``area``.

    Args:
        area: Rectangle to partition.
        n: Number of cells required.
        spacing: Gap between adjacent rows and columns.

    Returns:
        list[Rect]: Exactly ``n`` rectangles in row-major order
        (left-to-right, top-to-bottom); empty when ``n`` is zero.

    Raises:
        GridError: If ``area`` is not a Rect or ``n``/``spacing`` are not
            non-negative integers.
    """
    return [cell.rect for cell in grid_cells(area, n, spacing)]

"""Proportional splitting of a rectangle into bands along one axis."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction

from .rect import GridError, Rect

logger = logging.getLogger("autogrid")


class Direction(Enum):
    """Axis along which a rectangle is split."""

    HORIZONTAL = "horizontal"  # side by side, varies x
    VERTICAL = "vertical"  # stacked, varies y


@dataclass(frozen=True)
class Ratio:
    """A band occupying ``numerator / denominator`` of the divisible extent."""

    numerator: int
    denominator: int

    def __post_init__(self) -> None:
        if self.denominator <= 0:
            raise GridError(f"Ratio denominator must be positive, got {self.denominator}")
        if self.numerator < 0:
            raise GridError(f"Ratio numerator must be non-negative, got {self.numerator}")

    @property
    def fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)


def equal_shares(count: int) -> list[Ratio]:
    """Return ``count`` constraints of ``1/count`` each."""
    if count <= 0:
        return []
    return [Ratio(1, count)] * count


def _band_sizes(available: int, constraints: list[Ratio]) -> list[int]:
    """
    Divide ``available`` units between constraints.

    Each band gets the floor of its share; the units lost to flooring are
    handed back one at a time to the earliest bands with a non-zero share.
    """
    fractions = [constraint.fraction for constraint in constraints]
    total = sum(fractions, Fraction(0))
    if total > 1:
        raise GridError(f"Ratios sum to {total}, which exceeds the available extent")

    sizes = [int(available * fraction) for fraction in fractions]
    leftover = int(available * total) - sum(sizes)
    for index, fraction in enumerate(fractions):
        if leftover <= 0:
            break
        if fraction:
            sizes[index] += 1
            leftover -= 1
    return sizes


def split(area: Rect, direction: Direction, constraints: list[Ratio], spacing: int = 0) -> list[Rect]:
    """
    Split ``area`` into consecutive bands along ``direction``.

    Spacing is removed from the extent before it is shared out, so bands
    shrink as spacing grows. Spacing is capped at the largest gap the extent
    can hold, ``extent // (bands - 1)``; past that cap bands are zero-sized
    and evenly spread, so gaps never shrink and no band leaves ``area``.

    Args:
        area: Rectangle to split.
        direction: HORIZONTAL for columns, VERTICAL for rows.
        constraints: Proportional share of each band, in order.
        spacing: Gap between adjacent bands.

    Returns:
        list[Rect]: One band per constraint, left-to-right or top-to-bottom.
    """
    if isinstance(spacing, bool) or not isinstance(spacing, int) or spacing < 0:
        raise GridError(f"spacing must be a non-negative integer, got {spacing!r}")
    if not constraints:
        return []

    if direction is Direction.HORIZONTAL:
        start, extent = area.x, area.width
    else:
        start, extent = area.y, area.height
    gaps = len(constraints) - 1
    if gaps:
        spacing = min(spacing, extent // gaps)

    available = extent - spacing * gaps
    sizes = _band_sizes(available, constraints)

    bands: list[Rect] = []
    cursor = start
    for size in sizes:
        if direction is Direction.HORIZONTAL:
            bands.append(Rect(cursor, area.y, size, area.height))
        else:
            bands.append(Rect(area.x, cursor, area.width, size))
        cursor += size + spacing

    logger.debug(
        "Split %s %s into %d band(s) with spacing %d: sizes=%s",
        area.as_tuple(),
        direction.value,
        len(bands),
        spacing,
        sizes,
    )
    return bands


def split_rows(area: Rect, rows: int, spacing: int = 0) -> list[Rect]:
    """Split ``area`` into ``rows`` equal-height bands, top to bottom."""
    return split(area, Direction.VERTICAL, equal_shares(rows), spacing)


def split_columns(area: Rect, cols: int, spacing: int = 0) -> list[Rect]:
    """Split ``area`` into ``cols`` equal-width bands, left to right."""
    return split(area, Direction.HORIZONTAL, equal_shares(cols), spacing)

"""Integer rectangle primitive shared by the splitting and grid layers."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import MAX_COORD


class GridError(ValueError):
    """Invalid input to the grid partitioner or one of its primitives."""


def _check_coord(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise GridError(f"Rect.{name} must be an integer, got {value!r}")
    if value < 0:
        raise GridError(f"Rect.{name} must be non-negative, got {value}")
    if value > MAX_COORD:
        raise GridError(f"Rect.{name} must be <= {MAX_COORD}, got {value}")


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned rectangle in terminal cell coordinates.

    ``x``/``y`` locate the top-left corner; ``width``/``height`` extend right
    and down. All four values are non-negative integers within the 16-bit
    coordinate range. Use :meth:`new` to build a rectangle whose size is
    clamped into that range instead of rejected.
    """

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        for name in ('x', 'y', 'width', 'height'):
            _check_coord(name, getattr(self, name))
        if self.x + self.width > MAX_COORD or self.y + self.height > MAX_COORD:
            raise GridError(
                f"Rect {self.as_tuple()} extends beyond the coordinate range 0..{MAX_COORD}"
            )

    @classmethod
    def new(cls, x: int, y: int, width: int, height: int) -> Rect:
        """Build a Rect, saturating position and size at the coordinate limit."""
        x = min(x, MAX_COORD)
        y = min(y, MAX_COORD)
        width = min(width, MAX_COORD - x)
        height = min(height, MAX_COORD - y)
        return cls(x, y, width, height)

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def contains(self, other: Rect) -> bool:
        """Return True when ``other`` lies entirely inside this rectangle."""
        return (
            other.left >= self.left
            and other.top >= self.top
            and other.right <= self.right
            and other.bottom <= self.bottom
        )

    def intersects(self, other: Rect) -> bool:
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )

    def intersection(self, other: Rect) -> Rect:
        """Overlapping region of two rectangles (zero-sized when disjoint)."""
        x0 = max(self.left, other.left)
        y0 = max(self.top, other.top)
        x1 = min(self.right, other.right)
        y1 = min(self.bottom, other.bottom)
        return Rect(x0, y0, max(0, x1 - x0), max(0, y1 - y0))

    def inner(self, margin: int) -> Rect:
        """Shrink by ``margin`` on every side; collapses to zero size if too small."""
        if margin < 0:
            raise GridError(f"margin must be non-negative, got {margin}")
        if self.width < 2 * margin or self.height < 2 * margin:
            return Rect(self.x, self.y, 0, 0)
        return Rect(
            self.x + margin,
            self.y + margin,
            self.width - 2 * margin,
            self.height - 2 * margin,
        )

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.width, self.height)

    def to_dict(self) -> dict[str, int]:
        return {'x': self.x, 'y': self.y, 'width': self.width, 'height': self.height}

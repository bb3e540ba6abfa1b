"""Geometry value objects."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from ...exceptions import InvalidArgumentError


@dataclass(frozen=True, slots=True)
class Point:
    """2D point with real coordinates."""
    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        """Calculate Euclidean distance to another point."""
        return math.sqrt(self.squared_distance_to(other))

    def squared_distance_to(self, other: Point) -> float:
        return (self.x - other.x) ** 2 + (self.y - other.y) ** 2

    def __iter__(self) -> Iterator[float]:
        """Allow unpacking: cx, cy = point"""
        yield self.x
        yield self.y


@dataclass(frozen=True, slots=True)
class Box:
    """Axis-aligned integer box covering [x, x + w) x [y, y + h).

    A box with zero width or height is a placeholder: it has zero area
    and is skipped by the overlap resolver.
    """
    x: int
    y: int
    w: int
    h: int

    def __post_init__(self) -> None:
        if self.w < 0 or self.h < 0:
            raise InvalidArgumentError(
                f"box extent must be >= 0, got w={self.w}, h={self.h}",
                argument="w" if self.w < 0 else "h",
            )

    @classmethod
    def placeholder(cls) -> Box:
        """Zero-area box used to hold a position in an array."""
        return cls(0, 0, 0, 0)

    @classmethod
    def from_sides(cls, left: int, top: int, right: int, bottom: int) -> Box:
        """Create from inclusive pixel edges."""
        return cls(left, top, right - left + 1, bottom - top + 1)

    @property
    def geometry(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.w, self.h)

    @property
    def area(self) -> int:
        return self.w * self.h

    @property
    def is_valid(self) -> bool:
        return self.w > 0 and self.h > 0

    @property
    def right(self) -> int:
        """Last pixel column inside the box."""
        return self.x + self.w - 1

    @property
    def bottom(self) -> int:
        """Last pixel row inside the box."""
        return self.y + self.h - 1

    @property
    def center(self) -> Point:
        return Point(self.x + 0.5 * self.w, self.y + 0.5 * self.h)

    def side_locations(self) -> tuple[int, int, int, int]:
        """Return (left, right, top, bottom) as inclusive pixel edges."""
        return (self.x, self.right, self.y, self.bottom)

    def contains(self, other: Box) -> bool:
        """Check if other lies entirely within this box."""
        return (
            self.x <= other.x and
            self.y <= other.y and
            self.x + self.w >= other.x + other.w and
            self.y + self.h >= other.y + other.h
        )

    def intersects(self, other: Box) -> bool:
        """Check if the boxes share at least one pixel."""
        return not (
            other.bottom < self.y or
            self.bottom < other.y or
            self.right < other.x or
            other.right < self.x
        )

    def overlap_region(self, other: Box) -> Box | None:
        """Return the geometric intersection, or None if there is none."""
        if not self.intersects(other):
            return None
        return Box.from_sides(
            max(self.x, other.x),
            max(self.y, other.y),
            min(self.right, other.right),
            min(self.bottom, other.bottom),
        )

    def bounding_region(self, other: Box) -> Box:
        """Return the smallest box containing both boxes."""
        return Box.from_sides(
            min(self.x, other.x),
            min(self.y, other.y),
            max(self.right, other.right),
            max(self.bottom, other.bottom),
        )

    def contains_point(self, x: float, y: float) -> bool:
        """Check if a point is inside this box (half-open on both axes)."""
        return self.x <= x < self.x + self.w and self.y <= y < self.y + self.h

    def with_geometry(
        self,
        x: int | None = None,
        y: int | None = None,
        w: int | None = None,
        h: int | None = None
    ) -> Box:
        """Return a copy with some of the fields replaced."""
        return Box(
            self.x if x is None else x,
            self.y if y is None else y,
            self.w if w is None else w,
            self.h if h is None else h,
        )

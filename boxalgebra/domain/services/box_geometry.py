"""Pairwise box predicates and derived regions.

All functions take boxes as (x, y, w, h) with pixel edges at x and
x + w - 1. A geometrically valid "no answer" (no overlap, box outside
the clip rectangle, empty collection) is returned as None; missing
or malformed inputs raise InvalidArgumentError.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ...config import GEOMETRY_CONFIG, Side
from ...exceptions import InvalidArgumentError
from ..value_objects.geometry import Box, Point


@dataclass(frozen=True, slots=True)
class LineIntersection:
    """Points where a line crosses the boundary of a box."""
    points: tuple[Point, ...] = ()

    @property
    def count(self) -> int:
        return len(self.points)


@dataclass(frozen=True, slots=True)
class ClipParams:
    """Loop bounds for visiting the pixels of a clipped box.

    xend and yend are one past the last pixel, so
    ``for y in range(p.ystart, p.yend)`` visits every row.
    """
    xstart: int
    ystart: int
    xend: int
    yend: int
    width: int
    height: int


def require_box(box: Box | None, name: str = "box") -> Box:
    """Return box, raising InvalidArgumentError if it is missing."""
    if box is None:
        raise InvalidArgumentError(f"{name} not defined", argument=name)
    if not isinstance(box, Box):
        raise InvalidArgumentError(f"{name} must be a Box, got {type(box).__name__}", argument=name)
    return box


def require_pair(a: Box | None, b: Box | None) -> tuple[Box, Box]:
    return require_box(a, "box1"), require_box(b, "box2")


def contains(a: Box, b: Box) -> bool:
    """Check if b lies entirely within a (edges may coincide)."""
    a, b = require_pair(a, b)
    return a.contains(b)


def intersects(a: Box, b: Box) -> bool:
    """Check if a and b share at least one pixel.

    Boxes that touch along an edge without sharing a pixel do not
    intersect.
    """
    a, b = require_pair(a, b)
    return a.intersects(b)


def overlap_region(a: Box, b: Box) -> Box | None:
    """Geometric intersection of a and b, or None if they do not intersect."""
    a, b = require_pair(a, b)
    return a.overlap_region(b)


def bounding_region(a: Box, b: Box) -> Box:
    """Smallest box enclosing both a and b."""
    a, b = require_pair(a, b)
    return a.bounding_region(b)


def overlap_area(a: Box, b: Box) -> int:
    """Number of pixels shared by a and b."""
    region = overlap_region(a, b)
    if region is None:
        return 0
    return region.area


def overlap_fraction(a: Box, b: Box) -> float:
    """Fraction of b covered by a.

    The result depends on argument order: the overlap is always
    divided by the area of b.
    """
    a, b = require_pair(a, b)
    if a.area == 0 or b.area == 0:
        return 0.0
    region = a.overlap_region(b)
    if region is None:
        return 0.0
    return region.area / b.area


def separation_distance(
    a: Box,
    b: Box,
    horizontal: bool = True,
    vertical: bool = True
) -> tuple[int | None, int | None]:
    """Horizontal and vertical gap between two boxes.

    Boxes touching with no pixels in common are 0 apart; boxes that
    overlap by d pixels along an axis give -d.

    Args:
        a, b: Boxes, in any order
        horizontal: Compute the horizontal separation
        vertical: Compute the vertical separation

    Returns:
        (h_sep, v_sep); a component not requested is None

    Raises:
        InvalidArgumentError: If neither component is requested
    """
    if not horizontal and not vertical:
        raise InvalidArgumentError("nothing to do: no separation requested")
    a, b = require_pair(a, b)

    h_sep: int | None = None
    v_sep: int | None = None
    if horizontal:
        if b.x >= a.x:
            h_sep = b.x - (a.x + a.w)
        else:
            h_sep = a.x - (b.x + b.w)
    if vertical:
        if b.y >= a.y:
            v_sep = b.y - (a.y + a.h)
        else:
            v_sep = a.y - (b.y + b.h)
    return h_sep, v_sep


def contains_point(box: Box, x: float, y: float) -> bool:
    """Check if (x, y) lies inside box, half-open on both axes."""
    return require_box(box).contains_point(x, y)


def center(box: Box) -> Point:
    """Center of box as real coordinates."""
    return require_box(box).center


def nearest_to_point(boxes: Iterable[Box], x: float, y: float) -> Box | None:
    """Box whose center is closest to (x, y).

    Ties go to the first box in iteration order.

    Returns:
        The nearest box, or None if there are no boxes
    """
    if boxes is None:
        raise InvalidArgumentError("boxes not defined", argument="boxes")

    target = Point(x, y)
    nearest: Box | None = None
    min_dist = float("inf")
    for box in boxes:
        dist = box.center.squared_distance_to(target)
        if dist < min_dist:
            nearest = box
            min_dist = dist
    return nearest


def intersect_by_line(box: Box, x: int, y: int, slope: float) -> LineIntersection:
    """Find where the line through (x, y) with the given slope crosses box.

    A vertical line is represented by a very large slope. Crossings
    are truncated to integer pixel positions and only those on the
    box boundary are kept; at most two distinct points are returned.
    A single point means the line touches a corner.
    """
    box = require_box(box)
    bx, by, bw, bh = box.geometry

    if slope == 0.0:
        if by <= y < by + bh:
            return LineIntersection((Point(bx, y), Point(bx + bw - 1, y)))
        return LineIntersection()

    if slope > GEOMETRY_CONFIG.vertical_slope:
        if bx <= x < bx + bw:
            return LineIntersection((Point(x, by), Point(x, by + bh - 1)))
        return LineIntersection()

    candidates: list[tuple[int, int]] = []

    # Top and bottom rows
    invslope = 1.0 / slope
    xp = int(x + invslope * (y - by))
    if bx <= xp < bx + bw:
        candidates.append((xp, by))
    xp = int(x + invslope * (y - by - bh + 1))
    if bx <= xp < bx + bw:
        candidates.append((xp, by + bh - 1))

    # Left and right columns
    yp = int(y + slope * (x - bx))
    if by <= yp < by + bh:
        candidates.append((bx, yp))
    yp = int(y + slope * (x - bx - bw + 1))
    if by <= yp < by + bh:
        candidates.append((bx + bw - 1, yp))

    if not candidates:
        return LineIntersection()

    first = candidates[0]
    for other in candidates[1:]:
        if other != first:
            return LineIntersection((Point(*first), Point(*other)))
    return LineIntersection((Point(*first),))


def clip_to_rectangle(box: Box, width: int, height: int) -> Box | None:
    """Clip box to the rectangle [0, width) x [0, height).

    Returns:
        The clipped box, or None if box lies entirely outside
    """
    box = require_box(box)
    x, y, w, h = box.geometry
    if x >= width or y >= height or x + w <= 0 or y + h <= 0:
        return None

    if x < 0:
        w += x
        x = 0
    if y < 0:
        h += y
        y = 0
    if x + w > width:
        w = width - x
    if y + h > height:
        h = height - y
    return Box(x, y, w, h)


def clip_to_rectangle_params(box: Box | None, width: int, height: int) -> ClipParams:
    """Loop bounds for the part of box inside [0, width) x [0, height).

    Args:
        box: Requested region; None selects the whole rectangle
        width, height: Size of the clipping rectangle, typically an image

    Raises:
        InvalidArgumentError: If box is outside the rectangle or clips
            to zero width or height
    """
    if box is None:
        return ClipParams(0, 0, width, height, width, height)

    clipped = clip_to_rectangle(box, width, height)
    if clipped is None:
        raise InvalidArgumentError("box outside rectangle", argument="box")
    if clipped.w == 0 or clipped.h == 0:
        raise InvalidArgumentError("invalid clipping box", argument="box")
    return ClipParams(
        xstart=clipped.x,
        ystart=clipped.y,
        xend=clipped.x + clipped.w,
        yend=clipped.y + clipped.h,
        width=clipped.w,
        height=clipped.h,
    )


def relocate_one_side(box: Box, loc: int, side: Side | str) -> Box | None:
    """Move a single side of box to loc, keeping the opposite side fixed.

    loc is a pixel edge: the new left/top pixel, or the new last
    right/bottom pixel.

    Returns:
        The new box, or None if its width or height would be <= 0
    """
    box = require_box(box)
    side = coerce_enum(Side, side, "side")
    x, y, w, h = box.geometry

    if side is Side.LEFT:
        x, w = loc, w + x - loc
    elif side is Side.RIGHT:
        w = loc - x + 1
    elif side is Side.TOP:
        y, h = loc, h + y - loc
    else:
        h = loc - y + 1

    if w <= 0 or h <= 0:
        return None
    return Box(x, y, w, h)


def adjust_sides(
    box: Box,
    d_left: int,
    d_right: int,
    d_top: int,
    d_bottom: int
) -> Box | None:
    """Shift each side of box by a signed amount.

    The new left and top are clamped to 0. To grow a box by 20 pixels
    on every side use ``adjust_sides(box, -20, 20, -20, 20)``.

    Returns:
        The new box, or None if its width or height would be < 1
    """
    box = require_box(box)
    x, y, w, h = box.geometry
    left = max(0, x + d_left)
    top = max(0, y + d_top)
    right_edge = x + w + d_right  # one pixel past the right side
    bottom_edge = y + h + d_bottom
    new_w = right_edge - left
    new_h = bottom_edge - top

    if new_w < 1 or new_h < 1:
        return None
    return Box(left, top, new_w, new_h)


def coerce_enum(enum_cls, value, name: str):
    """Convert value to a member of enum_cls.

    Accepts members, their string values, or member names.

    Raises:
        InvalidArgumentError: If value names no member
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.lower())
        except ValueError:
            pass
        try:
            return enum_cls[value.upper()]
        except KeyError:
            pass
    choices = ", ".join(m.value for m in enum_cls)
    raise InvalidArgumentError(f"invalid {name} {value!r}; expected one of: {choices}", argument=name)

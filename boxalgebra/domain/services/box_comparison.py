"""Box and box-array equality and similarity checks."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ...exceptions import InvalidArgumentError, SizeMismatchError
from ..entities.box_array import BoxArray, IndexMap
from ..value_objects.config import SimilarityTolerance, build_validated
from ..value_objects.geometry import Box
from .box_geometry import require_pair

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EqualityResult:
    """Outcome of collections_equal().

    Attributes:
        same: True if every box found an equal partner
        index_map: index_map[i] is the position in the second array
            matched to box i of the first; None unless same
    """
    same: bool
    index_map: IndexMap | None = None

    def __bool__(self) -> bool:
        return self.same


@dataclass(slots=True)
class SimilarityResult:
    """Outcome of collections_similar().

    Attributes:
        similar: True if every pair is within tolerance
        flags: Per-pair results, only when requested
    """
    similar: bool
    flags: list[bool] | None = None

    def __bool__(self) -> bool:
        return self.similar


def boxes_equal(a: Box, b: Box) -> bool:
    """Exact equality of x, y, w and h."""
    a, b = require_pair(a, b)
    return a.geometry == b.geometry


def collections_equal(boxes1: BoxArray, boxes2: BoxArray, maxdist: int = 0) -> EqualityResult:
    """Check that two arrays hold the same boxes, allowing small reorderings.

    Box i of boxes1 may match any unclaimed equal box of boxes2 at a
    position within maxdist of i; the first such position is claimed.
    Use maxdist=0 to require identical ordering. Only geometry is
    compared.

    Args:
        boxes1, boxes2: Arrays to compare
        maxdist: Maximum positional displacement of a matching box

    Returns:
        EqualityResult; arrays of different length are never the same
    """
    if boxes1 is None or boxes2 is None:
        raise InvalidArgumentError("boxes1 and boxes2 not both defined")
    if maxdist < 0:
        raise InvalidArgumentError("maxdist must be >= 0", argument="maxdist")

    n = len(boxes1)
    if n != len(boxes2):
        return EqualityResult(False)

    claimed = [False] * n
    index_map = IndexMap.constant(0, n)
    for i in range(n):
        box1 = boxes1.get(i)
        jstart = max(0, i - maxdist)
        jend = min(n - 1, i + maxdist)
        for j in range(jstart, jend + 1):
            if not claimed[j] and box1.geometry == boxes2.get(j).geometry:
                claimed[j] = True
                index_map[i] = j
                break
        else:
            return EqualityResult(False)

    return EqualityResult(True, index_map)


def boxes_similar(
    a: Box,
    b: Box,
    left: int = 0,
    right: int = 0,
    top: int = 0,
    bottom: int = 0
) -> bool:
    """Check that each side of a is within its tolerance of the same side of b.

    Sides are compared as pixel edges (x, x + w - 1, y, y + h - 1).
    """
    tolerance = build_validated(SimilarityTolerance, left=left, right=right, top=top, bottom=bottom)
    return _within_tolerance(*require_pair(a, b), tolerance)


def collections_similar(
    boxes1: BoxArray,
    boxes2: BoxArray,
    left: int = 0,
    right: int = 0,
    top: int = 0,
    bottom: int = 0,
    debug: bool = False,
    collect_flags: bool = False,
    tolerance: SimilarityTolerance | None = None
) -> SimilarityResult:
    """Compare two arrays position by position with boxes_similar().

    Stops at the first mismatch unless collect_flags or debug is set;
    in debug mode every mismatch is logged.

    Args:
        boxes1, boxes2: Arrays of equal length
        left, right, top, bottom: Per-side tolerances
        debug: Log each dissimilar pair
        collect_flags: Return a per-pair list of results
        tolerance: Prebuilt tolerances; overrides the per-side arguments

    Raises:
        SizeMismatchError: If the arrays differ in length
    """
    if boxes1 is None or boxes2 is None:
        raise InvalidArgumentError("boxes1 and boxes2 not both defined")
    if tolerance is None:
        tolerance = build_validated(
            SimilarityTolerance, left=left, right=right, top=top, bottom=bottom
        )

    n1, n2 = len(boxes1), len(boxes2)
    if n1 != n2:
        raise SizeMismatchError(f"box array counts differ: {n1} vs {n2}", sizes=(n1, n2))

    flags: list[bool] | None = [] if collect_flags else None
    mismatch = False
    for i, (box1, box2) in enumerate(zip(boxes1, boxes2)):
        match = _within_tolerance(box1, box2, tolerance)
        if flags is not None:
            flags.append(match)
        if match:
            continue

        mismatch = True
        if debug:
            logger.info(f"box {i} not similar: {box1.geometry} vs {box2.geometry}")
        elif flags is None:
            return SimilarityResult(False)

    return SimilarityResult(not mismatch, flags)


def _within_tolerance(a: Box, b: Box, tolerance: SimilarityTolerance) -> bool:
    l1, r1, t1, b1 = a.side_locations()
    l2, r2, t2, b2 = b.side_locations()
    return (
        abs(l1 - l2) <= tolerance.left and
        abs(r1 - r2) <= tolerance.right and
        abs(t1 - t2) <= tolerance.top and
        abs(b1 - b2) <= tolerance.bottom
    )

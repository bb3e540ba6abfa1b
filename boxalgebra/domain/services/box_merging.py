"""Box merging service - collapse overlapping boxes into bounding regions."""

from __future__ import annotations

import logging

from ...exceptions import InvalidArgumentError
from ..entities.box_array import BoxArray

logger = logging.getLogger(__name__)


def combine_overlaps(boxes: BoxArray) -> BoxArray:
    """Replace each set of transitively overlapping boxes by its bounding box.

    Algorithm:
        1. Copy the input as the working array
        2. Build a fresh output array: each box is tested against the
           boxes already placed in the output; the first one it
           intersects is replaced by the bounding region of the two,
           otherwise the box is appended
        3. Repeat with the output as the new working array until a
           pass leaves the number of boxes unchanged

    A box is folded into the *first* placed box it overlaps, so the
    grouping within a pass depends on input order; later passes pick
    up the remaining transitive overlaps.

    Args:
        boxes: Boxes to combine; not modified

    Returns:
        New array of combined boxes. With no overlaps this is a copy
        of the input.

    Complexity: O(n^2) per pass; a single pass when nothing overlaps
    """
    if boxes is None:
        raise InvalidArgumentError("boxes not defined", argument="boxes")

    working = boxes.copy()
    n_working = len(working)
    n_passes = 0

    while True:
        n_passes += 1
        merged = _merge_pass(working)
        logger.debug(f"combine_overlaps pass {n_passes}: {n_working} -> {len(merged)} boxes")
        if len(merged) == n_working:
            return merged
        working = merged
        n_working = len(merged)


def _merge_pass(working: BoxArray) -> BoxArray:
    """Run one left-to-right folding pass over working."""
    merged = BoxArray.create(len(working))
    for i, box in enumerate(working):
        if i == 0:
            merged.append(box)
            continue

        for j, placed in enumerate(merged):
            if box.intersects(placed):
                merged.replace(j, box.bounding_region(placed))
                break
        else:
            merged.append(box)
    return merged

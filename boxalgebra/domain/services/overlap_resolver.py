"""Threshold overlap resolver - drop or absorb the smaller box of overlapping pairs."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ...config import OverlapOp
from ...exceptions import InvalidArgumentError
from ..entities.box_array import BoxArray, IndexMap
from ..value_objects.config import OverlapConfig, build_validated

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class OverlapResult:
    """Output of the overlap resolver.

    Attributes:
        boxes: Surviving boxes, in input order
        index_map: For each input position, the index of the larger box
            it was paired with, or IndexMap.UNMAPPED if it survived
    """
    boxes: BoxArray
    index_map: IndexMap

    @property
    def removed(self) -> list[int]:
        """Input positions that were dropped."""
        return [i for i, target in enumerate(self.index_map) if target != IndexMap.UNMAPPED]


def handle_overlaps(
    boxes: BoxArray,
    op: OverlapOp | str = OverlapOp.COMBINE,
    range_: int = 1,
    min_overlap: float = 0.0,
    max_ratio: float = 1.0
) -> OverlapResult:
    """Resolve overlapping pairs within a forward window.

    Each box i is compared with boxes i+1 .. i+range_. A pair
    qualifies when the boxes overlap, the overlap covers at least
    min_overlap of the smaller box, and the small/large area ratio is
    at most max_ratio. The smaller box of a qualifying pair is marked
    for removal; with op == COMBINE the larger box is replaced by the
    bounding region of the pair. When several smaller boxes map to the
    same larger box, the last pair determines its region.

    If the input is spatially sorted a small range_ is enough;
    otherwise use a range_ covering the whole array.

    Args:
        boxes: Input boxes; not modified
        op: COMBINE or REMOVE_SMALL
        range_: Forward comparison window; 0 returns an unmodified copy
        min_overlap: Minimum overlap fraction of the smaller box
            (1.0 only removes fully contained boxes, 0.0 ignores it)
        max_ratio: Maximum small/large area ratio
            (0.0 removes nothing, 1.0 ignores it)

    Returns:
        OverlapResult with the surviving boxes and the index map

    Raises:
        InvalidArgumentError: If boxes is missing or a parameter is invalid
    """
    config = build_validated(
        OverlapConfig, op=op, range_=range_, min_overlap=min_overlap, max_ratio=max_ratio
    )
    return resolve_overlaps(boxes, config)


def resolve_overlaps(boxes: BoxArray, config: OverlapConfig) -> OverlapResult:
    """Run the overlap resolver with a prebuilt configuration.

    See handle_overlaps() for the semantics.
    """
    if boxes is None:
        raise InvalidArgumentError("boxes not defined", argument="boxes")

    n = len(boxes)
    if n == 0:
        return OverlapResult(BoxArray(), IndexMap.unmapped(0))
    if config.range_ == 0:
        logger.warning("handle_overlaps: range is 0, returning a copy of the input")
        return OverlapResult(boxes.copy(), IndexMap.unmapped(n))

    index_map = _mark_smaller_boxes(boxes, config)

    working = boxes.copy()
    if config.op is OverlapOp.COMBINE:
        for i, target in enumerate(index_map):
            if target == IndexMap.UNMAPPED:
                continue
            # Last pair mapped onto a target wins
            working.replace(target, boxes.get(i).bounding_region(boxes.get(target)))

    result = BoxArray.create(n)
    for i, target in enumerate(index_map):
        if target == IndexMap.UNMAPPED:
            result.append(working.get(i))

    logger.debug(
        f"handle_overlaps ({config.op.value}, range={config.range_}): "
        f"{n} -> {len(result)} boxes"
    )
    return OverlapResult(result, index_map)


def _mark_smaller_boxes(boxes: BoxArray, config: OverlapConfig) -> IndexMap:
    """Map the smaller box of each qualifying pair to the larger one.

    Zero-area boxes are never compared. When two boxes have equal
    area the later one counts as the smaller.
    """
    n = len(boxes)
    index_map = IndexMap.unmapped(n)

    for i in range(n):
        box1 = boxes.get(i)
        area1 = box1.area
        if area1 == 0:
            continue

        for j in range(i + 1, min(i + 1 + config.range_, n)):
            box2 = boxes.get(j)
            area2 = box2.area
            if area2 == 0:
                continue
            region = box1.overlap_region(box2)
            if region is None or region.area == 0:
                continue

            if area1 >= area2:
                small, large, small_area, large_area = j, i, area2, area1
            else:
                small, large, small_area, large_area = i, j, area1, area2

            overlap_ratio = region.area / small_area
            area_ratio = small_area / large_area
            if overlap_ratio >= config.min_overlap and area_ratio <= config.max_ratio:
                index_map[small] = large

    return index_map

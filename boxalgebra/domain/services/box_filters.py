"""Collection filters - linear scans that keep or clip boxes against one box."""

from __future__ import annotations

from ...exceptions import InvalidArgumentError
from ..entities.box_array import BoxArray
from ..value_objects.geometry import Box
from .box_geometry import require_box


def contained_in(boxes: BoxArray, box: Box) -> BoxArray:
    """Keep the boxes lying entirely within box.

    Args:
        boxes: Boxes to filter
        box: Container

    Returns:
        New array, input order preserved
    """
    boxes, box = _require_inputs(boxes, box)
    return BoxArray(b for b in boxes if box.contains(b))


def intersecting(boxes: BoxArray, box: Box) -> BoxArray:
    """Keep the boxes sharing at least one pixel with box."""
    boxes, box = _require_inputs(boxes, box)
    return BoxArray(b for b in boxes if box.intersects(b))


def clip_to(boxes: BoxArray, box: Box) -> BoxArray:
    """Clip every box to box, dropping those that do not intersect it.

    The output holds the overlap regions, not the original boxes.
    """
    boxes, box = _require_inputs(boxes, box)
    result = BoxArray.create(len(boxes))
    for b in boxes:
        region = box.overlap_region(b)
        if region is not None:
            result.append(region)
    return result


def _require_inputs(boxes: BoxArray | None, box: Box | None) -> tuple[BoxArray, Box]:
    if boxes is None:
        raise InvalidArgumentError("boxes not defined", argument="boxes")
    return boxes, require_box(box)

"""Batch side relocation and width/height normalization."""

from __future__ import annotations

from ...config import HeightAnchor, Side, WidthAnchor
from ...exceptions import InvalidArgumentError
from ..entities.box_array import BoxArray
from ..value_objects.geometry import Box
from .box_geometry import coerce_enum


def set_side(
    boxes: BoxArray,
    side: Side | str,
    value: int,
    threshold: int = 0,
    in_place: bool = False
) -> BoxArray:
    """Move one side of every box to value.

    Only boxes whose side is at least threshold away from value are
    changed; the opposite side stays put. A relocation that would
    leave a negative extent produces a zero-extent placeholder
    instead.

    Args:
        boxes: Input boxes
        side: Which side to set
        value: New pixel location of that side
        threshold: Minimum absolute difference that triggers a change
        in_place: Modify boxes and return it, instead of a copy

    Returns:
        The adjusted array
    """
    side = coerce_enum(Side, side, "side")
    if value < 0:
        raise InvalidArgumentError("value must be >= 0", argument="value")
    target = _target_array(boxes, in_place)

    for i, box in enumerate(target):
        x, y, w, h = box.geometry
        if side is Side.LEFT:
            diff = x - value
            new = (value, y, w + diff, h)
        elif side is Side.RIGHT:
            diff = box.right - value
            new = (x, y, value - x + 1, h)
        elif side is Side.TOP:
            diff = y - value
            new = (x, value, w, h + diff)
        else:
            diff = box.bottom - value
            new = (x, y, w, value - y + 1)

        if abs(diff) >= threshold:
            nx, ny, nw, nh = new
            target.replace(i, Box(nx, ny, max(0, nw), max(0, nh)))

    return target


def adjust_width_to_target(
    boxes: BoxArray,
    anchor: WidthAnchor | str,
    target: int,
    threshold: int = 0,
    in_place: bool = False
) -> BoxArray:
    """Resize boxes whose width differs from target by threshold or more.

    Args:
        boxes: Input boxes
        anchor: LEFT moves the left side, RIGHT moves the right side,
            BOTH splits the change between them
        target: Width to set; must be >= 1
        threshold: Minimum absolute width difference that triggers a change
        in_place: Modify boxes and return it, instead of a copy
    """
    anchor = coerce_enum(WidthAnchor, anchor, "anchor")
    if target < 1:
        raise InvalidArgumentError("target must be >= 1", argument="target")
    adjusted = _target_array(boxes, in_place)

    for i, box in enumerate(adjusted):
        diff = box.w - target
        if abs(diff) < threshold:
            continue
        if anchor is WidthAnchor.LEFT:
            x = max(0, box.x + diff)
        elif anchor is WidthAnchor.RIGHT:
            x = box.x
        else:
            x = max(0, box.x + int(diff / 2))
        adjusted.replace(i, box.with_geometry(x=x, w=target))

    return adjusted


def adjust_height_to_target(
    boxes: BoxArray,
    anchor: HeightAnchor | str,
    target: int,
    threshold: int = 0,
    in_place: bool = False
) -> BoxArray:
    """Resize boxes whose height differs from target by threshold or more.

    Placeholder boxes (zero width or height) are left alone.

    Args:
        boxes: Input boxes
        anchor: TOP moves the top side, BOTTOM moves the bottom side,
            BOTH splits the change between them
        target: Height to set; must be >= 1
        threshold: Minimum absolute height difference that triggers a change
        in_place: Modify boxes and return it, instead of a copy
    """
    anchor = coerce_enum(HeightAnchor, anchor, "anchor")
    if target < 1:
        raise InvalidArgumentError("target must be >= 1", argument="target")
    adjusted = _target_array(boxes, in_place)

    for i, box in enumerate(adjusted):
        if not box.is_valid:
            continue
        diff = box.h - target
        if abs(diff) < threshold:
            continue
        if anchor is HeightAnchor.TOP:
            y = max(0, box.y + diff)
        elif anchor is HeightAnchor.BOTTOM:
            y = box.y
        else:
            y = max(0, box.y + int(diff / 2))
        adjusted.replace(i, box.with_geometry(y=y, h=target))

    return adjusted


def _target_array(boxes: BoxArray | None, in_place: bool) -> BoxArray:
    if boxes is None:
        raise InvalidArgumentError("boxes not defined", argument="boxes")
    return boxes if in_place else boxes.copy()

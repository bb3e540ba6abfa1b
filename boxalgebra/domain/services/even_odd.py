"""Split a box array by index parity, and merge it back."""

from __future__ import annotations

from ...exceptions import InvalidArgumentError, SizeMismatchError
from ..entities.box_array import BoxArray
from ..value_objects.geometry import Box


def split_even_odd(boxes: BoxArray, fill: bool = False) -> tuple[BoxArray, BoxArray]:
    """Separate the boxes at even and odd positions.

    Args:
        boxes: Input boxes
        fill: If True both outputs keep the full length, with
            placeholder boxes at the positions of the other parity.
            If False each output holds only its own boxes.

    Returns:
        (evens, odds)
    """
    if boxes is None:
        raise InvalidArgumentError("boxes not defined", argument="boxes")

    n = len(boxes)
    evens = BoxArray.create(n)
    odds = BoxArray.create(n)
    for i, box in enumerate(boxes):
        own, other = (evens, odds) if i % 2 == 0 else (odds, evens)
        own.append(box)
        if fill:
            other.append(Box.placeholder())
    return evens, odds


def merge_even_odd(evens: BoxArray, odds: BoxArray, fill: bool = False) -> BoxArray:
    """Interleave evens and odds back into one array.

    Inverse of split_even_odd(); use the same fill flag for both calls.

    Raises:
        SizeMismatchError: Unless len(evens) is len(odds) or len(odds) + 1;
            with fill, also when len(evens) is len(odds) + 1 and even, which
            leaves the last odd position without a box
    """
    if evens is None or odds is None:
        raise InvalidArgumentError("evens and odds not both defined")

    ne, no = len(evens), len(odds)
    if ne < no or ne > no + 1:
        raise SizeMismatchError(f"box array sizes invalid: {ne} evens, {no} odds", sizes=(ne, no))
    if fill and ne > no and ne % 2 == 0:
        # Position ne - 1 is odd but odds has no entry for it
        raise SizeMismatchError(
            f"filled box arrays leave the last odd position empty: {ne} evens, {no} odds",
            sizes=(ne, no),
        )

    merged = BoxArray.create(ne + no)
    if not fill:
        for i in range(ne + no):
            source = evens if i % 2 == 0 else odds
            merged.append(source.get(i // 2))
    else:
        for i in range(ne):
            source = evens if i % 2 == 0 else odds
            merged.append(source.get(i))
    return merged

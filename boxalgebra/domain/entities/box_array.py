"""Box collection entities."""

from __future__ import annotations

from typing import Iterable, Iterator, overload

import numpy as np
import numpy.typing as npt

from ...config import UNMAPPED
from ...exceptions import InvalidArgumentError
from ..value_objects.geometry import Box


class BoxArray:
    """Ordered, index-addressable sequence of boxes.

    Insertion order is significant: windowed algorithms use positions
    to decide which boxes to compare. Boxes are immutable, so handing
    one out is a borrow; changing a box means replacing it by index.
    """

    __slots__ = ("_boxes",)

    def __init__(self, boxes: Iterable[Box] | None = None):
        self._boxes: list[Box] = []
        if boxes is not None:
            for box in boxes:
                self.append(box)

    @classmethod
    def create(cls, capacity_hint: int = 0) -> BoxArray:
        """Create an empty array.

        Python lists grow on demand, so the hint is only validated.
        """
        if capacity_hint < 0:
            raise InvalidArgumentError("capacity_hint must be >= 0", argument="capacity_hint")
        return cls()

    @classmethod
    def from_tuples(cls, geometries: Iterable[tuple[int, int, int, int]]) -> BoxArray:
        """Create from (x, y, w, h) tuples."""
        return cls(Box(*g) for g in geometries)

    @classmethod
    def from_numpy(cls, data: npt.ArrayLike) -> BoxArray:
        """Create from an (n, 4) array of x, y, w, h rows."""
        arr = np.asarray(data)
        if arr.size == 0:
            return cls()
        if arr.ndim != 2 or arr.shape[1] != 4:
            raise InvalidArgumentError(
                f"expected an (n, 4) array, got shape {arr.shape}", argument="data"
            )
        return cls(Box(*(int(v) for v in row)) for row in arr)

    def to_numpy(self) -> npt.NDArray[np.int64]:
        """Return an (n, 4) array of x, y, w, h rows."""
        if not self._boxes:
            return np.zeros((0, 4), dtype=np.int64)
        return np.array([b.geometry for b in self._boxes], dtype=np.int64)

    def to_tuples(self) -> list[tuple[int, int, int, int]]:
        return [b.geometry for b in self._boxes]

    def __len__(self) -> int:
        return len(self._boxes)

    def __iter__(self) -> Iterator[Box]:
        return iter(self._boxes)

    @overload
    def __getitem__(self, index: int) -> Box: ...

    @overload
    def __getitem__(self, index: slice) -> BoxArray: ...

    def __getitem__(self, index: int | slice) -> Box | BoxArray:
        if isinstance(index, slice):
            return BoxArray(self._boxes[index])
        return self.get(index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoxArray):
            return NotImplemented
        return self._boxes == other._boxes

    def __repr__(self) -> str:
        return f"BoxArray({self.to_tuples()!r})"

    def get(self, index: int) -> Box:
        """Return the box at index (negative indices are not accepted)."""
        self._check_index(index)
        return self._boxes[index]

    def append(self, box: Box) -> None:
        if not isinstance(box, Box):
            raise InvalidArgumentError(f"expected Box, got {type(box).__name__}", argument="box")
        self._boxes.append(box)

    def extend(self, boxes: Iterable[Box]) -> None:
        for box in boxes:
            self.append(box)

    def replace(self, index: int, box: Box) -> None:
        """Replace the box at index."""
        self._check_index(index)
        if not isinstance(box, Box):
            raise InvalidArgumentError(f"expected Box, got {type(box).__name__}", argument="box")
        self._boxes[index] = box

    def remove(self, index: int) -> Box:
        """Remove and return the box at index, shifting later boxes down."""
        self._check_index(index)
        return self._boxes.pop(index)

    def copy(self) -> BoxArray:
        """Independent duplicate; changes to either array are not shared."""
        dup = BoxArray()
        dup._boxes = list(self._boxes)
        return dup

    def join(self, other: BoxArray | None, start: int = 0, end: int = -1) -> None:
        """Append boxes other[start..end] (inclusive) to this array.

        A negative start reads from the beginning; a negative or
        too-large end reads to the end. An empty or missing source is
        a no-op.

        Raises:
            InvalidArgumentError: If start is past end
        """
        if other is None or len(other) == 0:
            return

        n = len(other)
        if start < 0:
            start = 0
        if end < 0 or end >= n:
            end = n - 1
        if start > end:
            raise InvalidArgumentError(
                f"start ({start}) > end ({end}); nothing to add", argument="start"
            )
        # other may be self; the slice is taken before extending
        self._boxes.extend(other._boxes[start:end + 1])

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._boxes):
            raise InvalidArgumentError(
                f"index {index} out of range for {len(self._boxes)} boxes", argument="index"
            )


class IndexMap:
    """Integer sequence recording, per array position, a related index.

    Only meaningful against the array it was computed from, and only
    until that array is structurally changed.
    """

    __slots__ = ("_values",)

    UNMAPPED = UNMAPPED

    def __init__(self, values: Iterable[int] | None = None):
        self._values = np.array(list(values) if values is not None else [], dtype=np.int64)

    @classmethod
    def constant(cls, value: int, length: int) -> IndexMap:
        if length < 0:
            raise InvalidArgumentError("length must be >= 0", argument="length")
        im = cls()
        im._values = np.full(length, value, dtype=np.int64)
        return im

    @classmethod
    def unmapped(cls, length: int) -> IndexMap:
        return cls.constant(UNMAPPED, length)

    def __len__(self) -> int:
        return int(self._values.shape[0])

    def __iter__(self) -> Iterator[int]:
        return (int(v) for v in self._values)

    def __getitem__(self, index: int) -> int:
        return self.get(index)

    def __setitem__(self, index: int, value: int) -> None:
        self.set(index, value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IndexMap):
            return bool(np.array_equal(self._values, other._values))
        if isinstance(other, (list, tuple)):
            return self.to_list() == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"IndexMap({self.to_list()!r})"

    def get(self, index: int) -> int:
        self._check_index(index)
        return int(self._values[index])

    def set(self, index: int, value: int) -> None:
        self._check_index(index)
        self._values[index] = value

    def is_mapped(self, index: int) -> bool:
        return self.get(index) != UNMAPPED

    def to_list(self) -> list[int]:
        return [int(v) for v in self._values]

    def to_numpy(self) -> npt.NDArray[np.int64]:
        return self._values.copy()

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self):
            raise InvalidArgumentError(
                f"index {index} out of range for map of length {len(self)}", argument="index"
            )

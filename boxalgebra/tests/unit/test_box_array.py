"""Unit tests for BoxArray and IndexMap."""

import numpy as np
import pytest

from boxalgebra.domain.entities.box_array import BoxArray, IndexMap
from boxalgebra.domain.value_objects.geometry import Box
from boxalgebra.exceptions import InvalidArgumentError


class TestBoxArray:
    """Tests for BoxArray."""

    def test_create_empty(self):
        boxes = BoxArray.create(10)
        assert len(boxes) == 0

    def test_negative_capacity(self):
        with pytest.raises(InvalidArgumentError):
            BoxArray.create(-1)

    def test_append_and_get(self):
        boxes = BoxArray()
        boxes.append(Box(1, 2, 3, 4))
        boxes.append(Box(5, 6, 7, 8))
        assert len(boxes) == 2
        assert boxes.get(1) == Box(5, 6, 7, 8)
        assert boxes[0] == Box(1, 2, 3, 4)

    def test_append_rejects_non_box(self):
        with pytest.raises(InvalidArgumentError):
            BoxArray().append((1, 2, 3, 4))

    def test_get_out_of_range(self):
        boxes = BoxArray.from_tuples([(0, 0, 1, 1)])
        with pytest.raises(InvalidArgumentError):
            boxes.get(1)
        with pytest.raises(InvalidArgumentError):
            boxes.get(-1)

    def test_replace(self):
        boxes = BoxArray.from_tuples([(0, 0, 1, 1), (2, 2, 1, 1)])
        boxes.replace(1, Box(9, 9, 9, 9))
        assert boxes.to_tuples() == [(0, 0, 1, 1), (9, 9, 9, 9)]

    def test_remove(self):
        boxes = BoxArray.from_tuples([(0, 0, 1, 1), (2, 2, 1, 1), (4, 4, 1, 1)])
        removed = boxes.remove(1)
        assert removed == Box(2, 2, 1, 1)
        assert boxes.to_tuples() == [(0, 0, 1, 1), (4, 4, 1, 1)]

    def test_copy_is_independent(self):
        boxes = BoxArray.from_tuples([(0, 0, 1, 1)])
        dup = boxes.copy()
        dup.replace(0, Box(5, 5, 5, 5))
        dup.append(Box(1, 1, 1, 1))
        assert boxes.to_tuples() == [(0, 0, 1, 1)]
        assert len(dup) == 2

    def test_slice(self):
        boxes = BoxArray.from_tuples([(0, 0, 1, 1), (2, 2, 1, 1), (4, 4, 1, 1)])
        assert boxes[1:].to_tuples() == [(2, 2, 1, 1), (4, 4, 1, 1)]

    def test_equality(self):
        a = BoxArray.from_tuples([(0, 0, 1, 1)])
        b = BoxArray([Box(0, 0, 1, 1)])
        assert a == b
        assert a != BoxArray()

    def test_numpy_round_trip(self):
        boxes = BoxArray.from_tuples([(0, 0, 1, 1), (2, 3, 4, 5)])
        arr = boxes.to_numpy()
        assert arr.shape == (2, 4)
        assert BoxArray.from_numpy(arr) == boxes

    def test_to_numpy_empty(self):
        assert BoxArray().to_numpy().shape == (0, 4)

    def test_from_numpy_bad_shape(self):
        with pytest.raises(InvalidArgumentError):
            BoxArray.from_numpy(np.zeros((2, 3)))


class TestJoin:
    """Tests for BoxArray.join."""

    def setup_method(self):
        self.source = BoxArray.from_tuples([(0, 0, 1, 1), (1, 1, 1, 1), (2, 2, 1, 1)])

    def test_join_all(self):
        dest = BoxArray.from_tuples([(9, 9, 1, 1)])
        dest.join(self.source)
        assert len(dest) == 4
        assert dest[3] == Box(2, 2, 1, 1)

    def test_join_range(self):
        dest = BoxArray()
        dest.join(self.source, 1, 1)
        assert dest.to_tuples() == [(1, 1, 1, 1)]

    def test_join_clamps_bounds(self):
        dest = BoxArray()
        dest.join(self.source, -5, 100)
        assert dest == self.source

    def test_join_empty_is_noop(self):
        dest = BoxArray()
        dest.join(None)
        dest.join(BoxArray())
        assert len(dest) == 0

    def test_join_start_past_end(self):
        with pytest.raises(InvalidArgumentError):
            BoxArray().join(self.source, 2, 1)

    def test_join_self(self):
        self.source.join(self.source)
        assert len(self.source) == 6


class TestIndexMap:
    """Tests for IndexMap."""

    def test_constant(self):
        im = IndexMap.constant(7, 3)
        assert im.to_list() == [7, 7, 7]

    def test_unmapped(self):
        im = IndexMap.unmapped(2)
        assert im == [-1, -1]
        assert not im.is_mapped(0)

    def test_set_and_get(self):
        im = IndexMap.unmapped(3)
        im[1] = 2
        im.set(2, 0)
        assert im.get(1) == 2
        assert im[2] == 0
        assert im.is_mapped(1)

    def test_out_of_range(self):
        with pytest.raises(InvalidArgumentError):
            IndexMap.unmapped(2).get(2)

    def test_values_are_python_ints(self):
        im = IndexMap([1, 2])
        assert all(type(v) is int for v in im)

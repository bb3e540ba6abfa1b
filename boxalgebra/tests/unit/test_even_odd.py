"""Unit tests for parity split and merge."""

import pytest

from boxalgebra.domain.entities.box_array import BoxArray
from boxalgebra.domain.services.even_odd import merge_even_odd, split_even_odd
from boxalgebra.domain.value_objects.geometry import Box
from boxalgebra.exceptions import InvalidArgumentError, SizeMismatchError

A, B, C = (1, 1, 2, 2), (3, 3, 2, 2), (5, 5, 2, 2)
PLACEHOLDER = (0, 0, 0, 0)


def make_boxes(n):
    return BoxArray(Box(i, i, i + 1, i + 1) for i in range(n))


class TestSplitEvenOdd:
    """Tests for split_even_odd()."""

    def test_compact(self):
        evens, odds = split_even_odd(BoxArray.from_tuples([A, B, C]))
        assert evens.to_tuples() == [A, C]
        assert odds.to_tuples() == [B]

    def test_fill(self):
        evens, odds = split_even_odd(BoxArray.from_tuples([A, B, C]), fill=True)
        assert evens.to_tuples() == [A, PLACEHOLDER, C]
        assert odds.to_tuples() == [PLACEHOLDER, B, PLACEHOLDER]

    def test_empty(self):
        evens, odds = split_even_odd(BoxArray())
        assert len(evens) == 0
        assert len(odds) == 0

    def test_missing_input(self):
        with pytest.raises(InvalidArgumentError):
            split_even_odd(None)


class TestMergeEvenOdd:
    """Tests for merge_even_odd()."""

    @pytest.mark.parametrize("n", [0, 1, 2, 5, 8])
    @pytest.mark.parametrize("fill", [False, True])
    def test_split_then_merge_restores_order(self, n, fill):
        boxes = make_boxes(n)
        evens, odds = split_even_odd(boxes, fill=fill)
        assert merge_even_odd(evens, odds, fill=fill) == boxes

    def test_compact_interleave(self):
        merged = merge_even_odd(BoxArray.from_tuples([A, C]), BoxArray.from_tuples([B]))
        assert merged.to_tuples() == [A, B, C]

    def test_too_many_odds(self):
        with pytest.raises(SizeMismatchError):
            merge_even_odd(BoxArray.from_tuples([A]), BoxArray.from_tuples([B, C]))

    def test_too_many_evens(self):
        with pytest.raises(SizeMismatchError):
            merge_even_odd(BoxArray.from_tuples([A, B, C]), BoxArray.from_tuples([B]))

    def test_fill_equal_sizes(self):
        evens = BoxArray.from_tuples([A, PLACEHOLDER, C])
        odds = BoxArray.from_tuples([PLACEHOLDER, B, PLACEHOLDER])
        assert merge_even_odd(evens, odds, fill=True).to_tuples() == [A, B, C]

    def test_fill_one_extra_even(self):
        evens = BoxArray.from_tuples([A, PLACEHOLDER, C])
        odds = BoxArray.from_tuples([PLACEHOLDER, B])
        assert merge_even_odd(evens, odds, fill=True).to_tuples() == [A, B, C]

    def test_fill_extra_even_leaves_odd_slot_empty(self):
        with pytest.raises(SizeMismatchError) as exc_info:
            merge_even_odd(BoxArray.from_tuples([A, C]), BoxArray.from_tuples([B]), fill=True)
        assert exc_info.value.sizes == (2, 1)

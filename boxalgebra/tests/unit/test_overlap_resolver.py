"""Unit tests for the threshold overlap resolver."""

import logging

import pytest

from boxalgebra.config import OverlapOp
from boxalgebra.domain.entities.box_array import BoxArray, IndexMap
from boxalgebra.domain.services.overlap_resolver import handle_overlaps, resolve_overlaps
from boxalgebra.domain.value_objects.config import OverlapConfig
from boxalgebra.exceptions import InvalidArgumentError


class TestHandleOverlaps:
    """Tests for handle_overlaps()."""

    def test_remove_small_contained(self):
        boxes = BoxArray.from_tuples([(0, 0, 10, 10), (2, 2, 4, 4)])
        result = handle_overlaps(boxes, OverlapOp.REMOVE_SMALL, 1, 0.0, 1.0)
        assert result.boxes.to_tuples() == [(0, 0, 10, 10)]
        assert result.index_map == [-1, 0]
        assert result.removed == [1]

    def test_smaller_box_first(self):
        boxes = BoxArray.from_tuples([(2, 2, 4, 4), (0, 0, 10, 10)])
        result = handle_overlaps(boxes, "remove_small", 1)
        assert result.boxes.to_tuples() == [(0, 0, 10, 10)]
        assert result.index_map == [1, -1]

    def test_combine_grows_larger(self):
        boxes = BoxArray.from_tuples([(0, 0, 10, 10), (8, 8, 4, 4)])
        result = handle_overlaps(boxes, OverlapOp.COMBINE, 1)
        assert result.boxes.to_tuples() == [(0, 0, 12, 12)]

    def test_equal_areas_drop_later(self):
        boxes = BoxArray.from_tuples([(0, 0, 10, 10), (5, 5, 10, 10)])
        result = handle_overlaps(boxes, OverlapOp.COMBINE, 1)
        assert result.index_map == [-1, 0]
        assert result.boxes.to_tuples() == [(0, 0, 15, 15)]

    def test_one_box_removes_several(self):
        boxes = BoxArray.from_tuples([(0, 0, 10, 10), (8, 0, 4, 4), (0, 8, 4, 4)])
        result = handle_overlaps(boxes, OverlapOp.REMOVE_SMALL, 2)
        assert result.index_map == [-1, 0, 0]
        assert result.boxes.to_tuples() == [(0, 0, 10, 10)]

    def test_combine_last_pair_wins(self):
        # Both small boxes map to box 0; only the last pair's union survives
        boxes = BoxArray.from_tuples([(0, 0, 10, 10), (8, 0, 4, 4), (0, 8, 4, 4)])
        result = handle_overlaps(boxes, OverlapOp.COMBINE, 2)
        assert result.index_map == [-1, 0, 0]
        assert result.boxes.to_tuples() == [(0, 0, 10, 12)]

    def test_ratio_above_one_disables_filter(self):
        boxes = BoxArray.from_tuples([(0, 0, 10, 10), (2, 2, 8, 8)])
        result = handle_overlaps(boxes, OverlapOp.REMOVE_SMALL, 1, max_ratio=1.5)
        assert result.boxes.to_tuples() == [(0, 0, 10, 10)]

    def test_min_overlap_above_one_keeps_all(self):
        boxes = BoxArray.from_tuples([(0, 0, 10, 10), (2, 2, 4, 4)])
        result = handle_overlaps(boxes, OverlapOp.REMOVE_SMALL, 1, min_overlap=1.5)
        assert len(result.boxes) == 2

    def test_range_limits_window(self):
        boxes = BoxArray.from_tuples([(0, 0, 10, 10), (50, 50, 5, 5), (2, 2, 4, 4)])
        assert len(handle_overlaps(boxes, OverlapOp.REMOVE_SMALL, 1).boxes) == 3
        assert len(handle_overlaps(boxes, OverlapOp.REMOVE_SMALL, 2).boxes) == 2

    def test_min_overlap(self):
        # Overlap is 2x2 = 4 pixels, a quarter of the small box
        boxes = BoxArray.from_tuples([(0, 0, 10, 10), (8, 8, 4, 4)])
        kept = handle_overlaps(boxes, OverlapOp.REMOVE_SMALL, 1, min_overlap=0.5)
        removed = handle_overlaps(boxes, OverlapOp.REMOVE_SMALL, 1, min_overlap=0.2)
        assert len(kept.boxes) == 2
        assert len(removed.boxes) == 1

    def test_max_ratio(self):
        # Area ratio is 64 / 100
        boxes = BoxArray.from_tuples([(0, 0, 10, 10), (2, 2, 8, 8)])
        kept = handle_overlaps(boxes, OverlapOp.REMOVE_SMALL, 1, max_ratio=0.5)
        removed = handle_overlaps(boxes, OverlapOp.REMOVE_SMALL, 1, max_ratio=0.7)
        assert len(kept.boxes) == 2
        assert len(removed.boxes) == 1

    def test_zero_area_boxes_skipped(self):
        boxes = BoxArray.from_tuples([(0, 0, 10, 10), (2, 2, 0, 4), (3, 3, 4, 0)])
        result = handle_overlaps(boxes, OverlapOp.COMBINE, 2)
        assert result.boxes == boxes
        assert result.index_map == [-1, -1, -1]

    def test_non_overlapping_kept(self):
        boxes = BoxArray.from_tuples([(0, 0, 10, 10), (10, 0, 10, 10)])
        result = handle_overlaps(boxes, OverlapOp.COMBINE, 1)
        assert result.boxes == boxes

    def test_range_zero_returns_copy(self, caplog):
        boxes = BoxArray.from_tuples([(0, 0, 10, 10), (2, 2, 4, 4)])
        with caplog.at_level(logging.WARNING):
            result = handle_overlaps(boxes, OverlapOp.COMBINE, 0)
        assert result.boxes == boxes
        assert result.boxes is not boxes
        assert "range is 0" in caplog.text

    def test_empty_input(self):
        result = handle_overlaps(BoxArray(), OverlapOp.COMBINE, 3)
        assert len(result.boxes) == 0
        assert len(result.index_map) == 0

    def test_input_not_modified(self):
        boxes = BoxArray.from_tuples([(0, 0, 10, 10), (8, 8, 4, 4)])
        handle_overlaps(boxes, OverlapOp.COMBINE, 1)
        assert boxes.to_tuples() == [(0, 0, 10, 10), (8, 8, 4, 4)]

    @pytest.mark.parametrize("kwargs", [
        {"op": "merge"},
        {"range_": -1},
        {"min_overlap": -0.5},
        {"max_ratio": -0.1},
    ])
    def test_invalid_parameters(self, kwargs):
        boxes = BoxArray.from_tuples([(0, 0, 10, 10)])
        params = {"op": OverlapOp.COMBINE, "range_": 1, **kwargs}
        with pytest.raises(InvalidArgumentError):
            handle_overlaps(boxes, **params)

    def test_missing_input(self):
        with pytest.raises(InvalidArgumentError):
            handle_overlaps(None, OverlapOp.COMBINE, 1)


class TestResolveOverlaps:
    """Tests for resolve_overlaps() with a prebuilt config."""

    def test_with_config(self):
        config = OverlapConfig(op="REMOVE_SMALL", range_=5)
        boxes = BoxArray.from_tuples([(0, 0, 10, 10), (50, 50, 5, 5), (2, 2, 4, 4)])
        result = resolve_overlaps(boxes, config)
        assert result.boxes.to_tuples() == [(0, 0, 10, 10), (50, 50, 5, 5)]
        assert result.index_map == IndexMap([-1, -1, 0])

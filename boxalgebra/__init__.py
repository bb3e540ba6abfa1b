"""boxalgebra - rectangle algebra and overlap resolution for box arrays."""

__version__ = "1.0.0"

from .config import Side, OverlapOp, WidthAnchor, HeightAnchor
from .domain import Box, Point, BoxArray, IndexMap, OverlapConfig, SimilarityTolerance
from .domain.services import (
    contains,
    intersects,
    overlap_region,
    bounding_region,
    overlap_area,
    overlap_fraction,
    separation_distance,
    contains_point,
    center,
    nearest_to_point,
    intersect_by_line,
    clip_to_rectangle,
    clip_to_rectangle_params,
    relocate_one_side,
    adjust_sides,
    contained_in,
    intersecting,
    clip_to,
    combine_overlaps,
    handle_overlaps,
    resolve_overlaps,
    boxes_equal,
    collections_equal,
    boxes_similar,
    collections_similar,
    set_side,
    adjust_width_to_target,
    adjust_height_to_target,
    split_even_odd,
    merge_even_odd,
)
from .exceptions import (
    BoxAlgebraError,
    InvalidArgumentError,
    SizeMismatchError,
)
from .utils.env import setup_logging

__all__ = [
    '__version__',
    'Side',
    'OverlapOp',
    'WidthAnchor',
    'HeightAnchor',
    'Box',
    'Point',
    'BoxArray',
    'IndexMap',
    'OverlapConfig',
    'SimilarityTolerance',
    'setup_logging',
    # Geometry
    'contains',
    'intersects',
    'overlap_region',
    'bounding_region',
    'overlap_area',
    'overlap_fraction',
    'separation_distance',
    'contains_point',
    'center',
    'nearest_to_point',
    'intersect_by_line',
    'clip_to_rectangle',
    'clip_to_rectangle_params',
    'relocate_one_side',
    'adjust_sides',
    # Collections
    'contained_in',
    'intersecting',
    'clip_to',
    'combine_overlaps',
    'handle_overlaps',
    'resolve_overlaps',
    'boxes_equal',
    'collections_equal',
    'boxes_similar',
    'collections_similar',
    'set_side',
    'adjust_width_to_target',
    'adjust_height_to_target',
    'split_even_odd',
    'merge_even_odd',
    # Exceptions
    'BoxAlgebraError',
    'InvalidArgumentError',
    'SizeMismatchError',
]

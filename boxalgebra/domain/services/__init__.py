"""Domain services - pure geometry operations over boxes and box arrays."""

from .box_geometry import (
    LineIntersection,
    ClipParams,
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
)
from .box_filters import contained_in, intersecting, clip_to
from .box_merging import combine_overlaps
from .overlap_resolver import OverlapResult, handle_overlaps, resolve_overlaps
from .box_comparison import (
    EqualityResult,
    SimilarityResult,
    boxes_equal,
    collections_equal,
    boxes_similar,
    collections_similar,
)
from .side_adjustment import set_side, adjust_width_to_target, adjust_height_to_target
from .even_odd import split_even_odd, merge_even_odd

__all__ = [
    # Pairwise predicates and derived regions
    'LineIntersection',
    'ClipParams',
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
    # Collection filters
    'contained_in',
    'intersecting',
    'clip_to',
    # Overlap clustering and resolution
    'combine_overlaps',
    'OverlapResult',
    'handle_overlaps',
    'resolve_overlaps',
    # Equality and similarity
    'EqualityResult',
    'SimilarityResult',
    'boxes_equal',
    'collections_equal',
    'boxes_similar',
    'collections_similar',
    # Side adjustment and split/merge
    'set_side',
    'adjust_width_to_target',
    'adjust_height_to_target',
    'split_even_odd',
    'merge_even_odd',
]

"""Domain layer - pure box geometry, no I/O."""

from .entities.box_array import BoxArray, IndexMap
from .value_objects.config import OverlapConfig, SimilarityTolerance
from .value_objects.geometry import Point, Box

__all__ = [
    # Entities
    'BoxArray',
    'IndexMap',
    # Value Objects
    'OverlapConfig',
    'SimilarityTolerance',
    'Point',
    'Box',
]

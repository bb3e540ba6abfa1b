"""Value objects - immutable data with validation."""

from .geometry import Point, Box
from .config import OverlapConfig, SimilarityTolerance

__all__ = [
    'Point',
    'Box',
    'OverlapConfig',
    'SimilarityTolerance',
]

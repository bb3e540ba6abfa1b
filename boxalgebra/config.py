"""Configuration and constants for the boxalgebra project."""

from dataclasses import dataclass
from enum import Enum


class Side(str, Enum):
    """Box side selector for single-side relocation."""
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


class OverlapOp(str, Enum):
    """What the overlap resolver does with a qualifying pair."""
    COMBINE = "combine"  # larger becomes the bounding region, smaller dropped
    REMOVE_SMALL = "remove_small"  # smaller dropped


class WidthAnchor(str, Enum):
    """Which vertical edges move when normalizing width."""
    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"


class HeightAnchor(str, Enum):
    """Which horizontal edges move when normalizing height."""
    TOP = "top"
    BOTTOM = "bottom"
    BOTH = "both"


@dataclass(frozen=True)
class GeometryConfig:
    """Numeric constants used by the geometry services."""
    # Slopes above this are treated as a vertical line
    vertical_slope: float = 1_000_000.0

    # Index map entry for "no mapping"
    unmapped: int = -1


GEOMETRY_CONFIG = GeometryConfig()

UNMAPPED = GEOMETRY_CONFIG.unmapped


# Environment
LOG_LEVEL_ENV = "BOXALGEBRA_LOG_LEVEL"


# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

"""Configuration value objects with validation."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from pydantic import BaseModel, Field, ValidationError, field_validator

from ...config import OverlapOp
from ...exceptions import InvalidArgumentError

ModelT = TypeVar("ModelT", bound=BaseModel)


class OverlapConfig(BaseModel):
    """Parameters for the threshold overlap resolver."""

    model_config = {"frozen": True}

    op: OverlapOp = OverlapOp.COMBINE

    # Forward window: box i is compared with i+1 .. i+range_
    range_: int = Field(default=1, ge=0)

    # Minimum overlap as a fraction of the smaller box; 0 disables
    min_overlap: float = Field(default=0.0, ge=0.0)

    # Maximum small/large area ratio; 1 or more disables
    max_ratio: float = Field(default=1.0, ge=0.0)

    @field_validator('op', mode='before')
    @classmethod
    def normalize_op(cls, v: Any) -> Any:
        """Accept enum names (``"REMOVE_SMALL"``) as well as values."""
        if isinstance(v, str) and not isinstance(v, OverlapOp):
            return v.strip().lower()
        return v

    @property
    def is_unbounded(self) -> bool:
        """True when neither threshold filters anything."""
        return self.min_overlap == 0.0 and self.max_ratio >= 1.0


class SimilarityTolerance(BaseModel):
    """Maximum allowed per-side deviation between two boxes."""

    model_config = {"frozen": True}

    left: int = Field(default=0, ge=0)
    right: int = Field(default=0, ge=0)
    top: int = Field(default=0, ge=0)
    bottom: int = Field(default=0, ge=0)

    @classmethod
    def uniform(cls, tolerance: int) -> SimilarityTolerance:
        """Same tolerance on every side."""
        return build_validated(
            cls, left=tolerance, right=tolerance, top=tolerance, bottom=tolerance
        )


def build_validated(factory: Callable[..., ModelT], **kwargs: Any) -> ModelT:
    """Build a config model, reporting bad values as InvalidArgumentError.

    Args:
        factory: Model class to instantiate
        **kwargs: Field values

    Raises:
        InvalidArgumentError: If any field fails validation
    """
    try:
        return factory(**kwargs)
    except ValidationError as e:
        first = e.errors()[0]
        field_name = ".".join(str(part) for part in first.get("loc", ())) or None
        raise InvalidArgumentError(first.get("msg", str(e)), argument=field_name) from e

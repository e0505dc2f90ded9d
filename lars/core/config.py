"""
ToleranceConfig — validated bundle of kernel tolerances

Immutable Pydantic model. Operations never read it implicitly: callers pass its fields
as the eps= argument of the operation they call, for example
``m.inverse(eps=cfg.singular)``.
"""

import math
from typing import Any, Mapping

from pydantic import BaseModel, Field, field_validator

from lars.core.math.numerical_safeguards import (
    EPS_COMPARE,
    EPS_DEGENERATE,
    EPS_DIVISION,
    EPS_SINGULAR,
)


class ToleranceConfig(BaseModel):
    """
    Tolerances used by the vector and matrix operations.

    Immutable model (frozen=True). A modified configuration is a new instance
    (``cfg.model_copy(update={...})``).
    """

    compare: float = Field(EPS_COMPARE, gt=0, description="approx_eq / approximately_equal")
    division: float = Field(EPS_DIVISION, gt=0, description="Scalar and component-wise division")
    degenerate: float = Field(EPS_DEGENERATE, gt=0, description="normalize()")
    singular: float = Field(EPS_SINGULAR, gt=0, description="inverse()")

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("compare", "division", "degenerate", "singular")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError(f"tolerance must be finite, got {v}")
        return v

    @classmethod
    def strict(cls) -> "ToleranceConfig":
        """Only exact zeros count as degenerate (smallest positive subnormal as eps)."""
        tiny = 5e-324
        return cls(compare=tiny, division=tiny, degenerate=tiny, singular=tiny)

    @classmethod
    def loose(cls, scale: float = 1e3) -> "ToleranceConfig":
        """
        Defaults multiplied by scale.

        Args:
            scale: Positive multiplier for every default tolerance

        Raises:
            ValueError: If scale is not positive
        """
        if scale <= 0:
            raise ValueError(f"scale must be positive, got {scale}")
        return cls(
            compare=EPS_COMPARE * scale,
            division=EPS_DIVISION * scale,
            degenerate=EPS_DEGENERATE * scale,
            singular=EPS_SINGULAR * scale,
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ToleranceConfig":
        """
        Build a config from a plain mapping (e.g. a parsed settings file).

        Raises:
            pydantic.ValidationError: On unknown keys or invalid values
        """
        return cls.model_validate(dict(data))


DEFAULT_TOLERANCES = ToleranceConfig()

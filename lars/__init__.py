"""
lars — small fixed-size linear algebra kernel.

Immutable 2D/3D vectors and 2×2/3×3 matrices with arithmetic, dot/cross products,
determinants and inversion. Near-zero divisors, zero-length normalization and singular
inversion raise recoverable errors instead of producing Infinity/NaN.
"""

from lars.core.config import DEFAULT_TOLERANCES, ToleranceConfig
from lars.core.log import get_logger, setup_logging
from lars.core.math import (
    EPS_COMPARE,
    EPS_DEGENERATE,
    EPS_DIVISION,
    EPS_SINGULAR,
    DegenerateVectorError,
    DivisionByZeroError,
    LarsError,
    SingularMatrixError,
    approximately_equal,
    safe_divide,
)
from lars.matrix import Mat2, Mat3
from lars.vector import (
    Colour,
    Point2D,
    Point3D,
    Vec2,
    Vec3,
    VectorLike,
    angle_between,
    project,
)

__version__ = "0.1.0"

__all__ = [
    # Value types
    "Vec2",
    "Vec3",
    "Point2D",
    "Point3D",
    "Colour",
    "Mat2",
    "Mat3",
    # Capabilities
    "VectorLike",
    "angle_between",
    "project",
    # Errors
    "LarsError",
    "DivisionByZeroError",
    "DegenerateVectorError",
    "SingularMatrixError",
    # Tolerances
    "EPS_COMPARE",
    "EPS_DEGENERATE",
    "EPS_DIVISION",
    "EPS_SINGULAR",
    "ToleranceConfig",
    "DEFAULT_TOLERANCES",
    "approximately_equal",
    "safe_divide",
    # Logging
    "get_logger",
    "setup_logging",
]

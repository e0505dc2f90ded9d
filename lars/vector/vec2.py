"""
Vec2 — 2D vector value type

Immutable 2-component vector for geometry, graphics and physics code:
- Exact component-wise arithmetic (+, -, unary -, scalar *)
- Dot product and scalar 2D cross product
- Magnitude, squared magnitude, normalization
- Division (scalar and component-wise) that fails on near-zero divisors

CRITICAL INVARIANTS:
1. Every operation returns a new Vec2; instances never change after construction
2. Division by |d| <= eps raises DivisionByZeroError, never yields Infinity/NaN
3. normalize() on |v| <= eps raises DegenerateVectorError
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict, Iterator

from lars.core.contracts.validators import validate_vec2
from lars.core.log import get_logger
from lars.core.math.errors import DegenerateVectorError
from lars.core.math.numerical_safeguards import (
    EPS_COMPARE,
    EPS_DEGENERATE,
    EPS_DIVISION,
    approximately_equal,
    check_divisor,
    validate_eps,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class Vec2:
    """
    A 2-dimensional vector.

    Equality (==) compares components exactly. Use approx_eq() for tolerance-based
    comparison.

    Examples:
        >>> Vec2(3.0, 4.0).mag()
        5.0
        >>> Vec2(1.0, 2.0) + Vec2(3.0, 4.0)
        Vec2(x=4.0, y=6.0)
    """

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar["Vec2"]
    ONE: ClassVar["Vec2"]
    UNIT_X: ClassVar["Vec2"]
    UNIT_Y: ClassVar["Vec2"]

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def add(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def sub(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def neg(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def scale(self, k: float) -> "Vec2":
        """Multiply both components by the scalar k."""
        return Vec2(self.x * k, self.y * k)

    def div(self, k: float, eps: float = EPS_DIVISION) -> "Vec2":
        """
        Divide both components by the scalar k.

        Raises:
            DivisionByZeroError: If abs(k) <= eps
        """
        check_divisor(k, eps)
        return Vec2(self.x / k, self.y / k)

    def mul(self, other: "Vec2") -> "Vec2":
        """Component-wise product."""
        return Vec2(self.x * other.x, self.y * other.y)

    def div_elementwise(self, other: "Vec2", eps: float = EPS_DIVISION) -> "Vec2":
        """
        Component-wise quotient.

        Raises:
            DivisionByZeroError: If any component of other is within eps of zero
        """
        return Vec2(
            self.x / check_divisor(other.x, eps),
            self.y / check_divisor(other.y, eps),
        )

    # =========================================================================
    # GEOMETRIC PRODUCTS
    # =========================================================================

    def dot(self, other: "Vec2") -> float:
        """
        Dot product.

        Examples:
            >>> Vec2(1.0, 2.0).dot(Vec2(3.0, 4.0))
            11.0
        """
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vec2") -> float:
        """
        Scalar 2D cross product: self.x * other.y - self.y * other.x.

        Unlike Vec3.cross, the result is a scalar. It is the z-component of the 3D cross
        product of the two vectors lifted into the z=0 plane. Its value is the signed area
        of the parallelogram they span, positive when other is counter-clockwise from self.

        Examples:
            >>> Vec2(1.0, 0.0).cross(Vec2(0.0, 1.0))
            1.0
            >>> Vec2(1.0, 2.0).cross(Vec2(3.0, 4.0))
            -2.0
        """
        return self.x * other.y - self.y * other.x

    # =========================================================================
    # MAGNITUDE & NORMALIZATION
    # =========================================================================

    def mag_sq(self) -> float:
        """Squared magnitude (dot(self, self)); avoids the square root."""
        return self.x * self.x + self.y * self.y

    def mag(self) -> float:
        """Euclidean length, without overflow for components beyond sqrt(float max)."""
        return math.hypot(self.x, self.y)

    def normalize(self, eps: float = EPS_DEGENERATE) -> "Vec2":
        """
        Unit vector with the same direction.

        Args:
            eps: Smallest magnitude that can be normalized

        Returns:
            self / mag(self)

        Raises:
            DegenerateVectorError: If mag(self) <= eps
        """
        validate_eps(eps)
        m = self.mag()
        if m <= eps:
            logger.debug("normalize on degenerate %r (mag=%g, eps=%g)", self, m, eps)
            raise DegenerateVectorError(m, eps)
        return Vec2(self.x / m, self.y / m)

    def map(self, f: Callable[[float], float]) -> "Vec2":
        """Apply f to each component."""
        return Vec2(f(self.x), f(self.y))

    # =========================================================================
    # POINT HELPERS
    # =========================================================================

    def dist(self, other: "Vec2") -> float:
        """Distance between two points."""
        return (self - other).mag()

    def dist_sq(self, other: "Vec2") -> float:
        """Squared distance between two points."""
        return (self - other).mag_sq()

    # =========================================================================
    # COMPARISON & CONVERSION
    # =========================================================================

    def approx_eq(self, other: "Vec2", eps: float = EPS_COMPARE) -> bool:
        """Component-wise approximately_equal."""
        return approximately_equal(self.x, other.x, eps) and approximately_equal(
            self.y, other.y, eps
        )

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Vec2":
        """
        Build from {"x": ..., "y": ...}.

        Raises:
            jsonschema.ValidationError: If data does not match the vec2 contract
        """
        validate_vec2(data)
        return cls(float(data["x"]), float(data["y"]))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    # =========================================================================
    # OPERATORS
    # =========================================================================

    def __add__(self, other: object) -> "Vec2":
        if isinstance(other, Vec2):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: object) -> "Vec2":
        if isinstance(other, Vec2):
            return self.sub(other)
        return NotImplemented

    def __neg__(self) -> "Vec2":
        return self.neg()

    def __mul__(self, other: object) -> "Vec2":
        if isinstance(other, Vec2):
            return self.mul(other)
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: object) -> "Vec2":
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, other: object) -> "Vec2":
        if isinstance(other, Vec2):
            return self.div_elementwise(other)
        if isinstance(other, (int, float)):
            return self.div(other)
        return NotImplemented


Vec2.ZERO = Vec2(0.0, 0.0)
Vec2.ONE = Vec2(1.0, 1.0)
Vec2.UNIT_X = Vec2(1.0, 0.0)
Vec2.UNIT_Y = Vec2(0.0, 1.0)

# A 2D point shares the vector representation.
Point2D = Vec2

"""
Vec3 — 3D vector value type

Immutable 3-component vector for computer graphics, ray tracing and physics.
Same contract as Vec2; cross() returns a Vec3 perpendicular to both operands.
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict, Iterator

from lars.core.contracts.validators import validate_vec3
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
class Vec3:
    """
    A 3-dimensional vector.

    Examples:
        >>> Vec3(1.0, 0.0, 0.0).cross(Vec3(0.0, 1.0, 0.0))
        Vec3(x=0.0, y=0.0, z=1.0)
        >>> Vec3(1.0, 2.0, 3.0).dot(Vec3(4.0, -5.0, 6.0))
        12.0
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO: ClassVar["Vec3"]
    ONE: ClassVar["Vec3"]
    UNIT_X: ClassVar["Vec3"]
    UNIT_Y: ClassVar["Vec3"]
    UNIT_Z: ClassVar["Vec3"]

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def add(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def neg(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def scale(self, k: float) -> "Vec3":
        return Vec3(self.x * k, self.y * k, self.z * k)

    def div(self, k: float, eps: float = EPS_DIVISION) -> "Vec3":
        """
        Divide every component by the scalar k.

        Raises:
            DivisionByZeroError: If abs(k) <= eps
        """
        check_divisor(k, eps)
        return Vec3(self.x / k, self.y / k, self.z / k)

    def mul(self, other: "Vec3") -> "Vec3":
        """Component-wise product (e.g. colour blending)."""
        return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)

    def div_elementwise(self, other: "Vec3", eps: float = EPS_DIVISION) -> "Vec3":
        """
        Component-wise quotient.

        Raises:
            DivisionByZeroError: If any component of other is within eps of zero
        """
        return Vec3(
            self.x / check_divisor(other.x, eps),
            self.y / check_divisor(other.y, eps),
            self.z / check_divisor(other.z, eps),
        )

    # =========================================================================
    # GEOMETRIC PRODUCTS
    # =========================================================================

    def dot(self, other: "Vec3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vec3") -> "Vec3":
        """
        Cross product, perpendicular to both operands (right-handed).

        Formula:
            (ay*bz - az*by, az*bx - ax*bz, ax*by - ay*bx)
        """
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    # =========================================================================
    # MAGNITUDE & NORMALIZATION
    # =========================================================================

    def mag_sq(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def mag(self) -> float:
        return math.hypot(self.x, self.y, self.z)

    def normalize(self, eps: float = EPS_DEGENERATE) -> "Vec3":
        """
        Unit vector with the same direction.

        Raises:
            DegenerateVectorError: If mag(self) <= eps
        """
        validate_eps(eps)
        m = self.mag()
        if m <= eps:
            logger.debug("normalize on degenerate %r (mag=%g, eps=%g)", self, m, eps)
            raise DegenerateVectorError(m, eps)
        return Vec3(self.x / m, self.y / m, self.z / m)

    def map(self, f: Callable[[float], float]) -> "Vec3":
        return Vec3(f(self.x), f(self.y), f(self.z))

    # =========================================================================
    # POINT HELPERS
    # =========================================================================

    def dist(self, other: "Vec3") -> float:
        return (self - other).mag()

    def dist_sq(self, other: "Vec3") -> float:
        return (self - other).mag_sq()

    # =========================================================================
    # COMPARISON & CONVERSION
    # =========================================================================

    def approx_eq(self, other: "Vec3", eps: float = EPS_COMPARE) -> bool:
        return all(approximately_equal(a, b, eps) for a, b in zip(self, other))

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Vec3":
        """
        Build from {"x": ..., "y": ..., "z": ...}.

        Raises:
            jsonschema.ValidationError: If data does not match the vec3 contract
        """
        validate_vec3(data)
        return cls(float(data["x"]), float(data["y"]), float(data["z"]))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"

    # =========================================================================
    # OPERATORS
    # =========================================================================

    def __add__(self, other: object) -> "Vec3":
        if isinstance(other, Vec3):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: object) -> "Vec3":
        if isinstance(other, Vec3):
            return self.sub(other)
        return NotImplemented

    def __neg__(self) -> "Vec3":
        return self.neg()

    def __mul__(self, other: object) -> "Vec3":
        if isinstance(other, Vec3):
            return self.mul(other)
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: object) -> "Vec3":
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, other: object) -> "Vec3":
        if isinstance(other, Vec3):
            return self.div_elementwise(other)
        if isinstance(other, (int, float)):
            return self.div(other)
        return NotImplemented


Vec3.ZERO = Vec3(0.0, 0.0, 0.0)
Vec3.ONE = Vec3(1.0, 1.0, 1.0)
Vec3.UNIT_X = Vec3(1.0, 0.0, 0.0)
Vec3.UNIT_Y = Vec3(0.0, 1.0, 0.0)
Vec3.UNIT_Z = Vec3(0.0, 0.0, 1.0)

Point3D = Vec3

# RGB colour with channels in [0.0, 1.0]; no clamping is applied.
Colour = Vec3

"""
Mat3 — 3×3 matrix value type

Stored in row-major order:

    | a  b  c |
    | d  e  f |
    | g  h  i |

Determinant by cofactor expansion along the first row:

    det(M) = a(ei - fh) - b(di - fg) + c(dh - eg)

Inverse = transposed cofactor matrix (adjugate) / det:

               1      | ei - fh   ch - bi   bf - ce |
    M⁻¹  =  ------ ×  | fg - di   ai - cg   cd - af |
            det(M)    | dh - eg   bg - ah   ae - bd |
"""

import math
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Iterator, List

from lars.core.contracts.validators import validate_mat3
from lars.core.log import get_logger
from lars.core.math.errors import SingularMatrixError
from lars.core.math.numerical_safeguards import (
    EPS_COMPARE,
    EPS_SINGULAR,
    approximately_equal,
    rescale_factor,
    validate_eps,
)
from lars.vector.vec3 import Vec3

logger = get_logger(__name__)


@dataclass(frozen=True)
class Mat3:
    """
    A 3×3 matrix of floats.

    Examples:
        >>> Mat3(1.0, 2.0, 3.0, 3.0, 2.0, 1.0, 2.0, 1.0, 3.0).determinant()
        -12.0
    """

    a: float
    b: float
    c: float
    d: float
    e: float
    f: float
    g: float
    h: float
    i: float

    IDENTITY: ClassVar["Mat3"]
    ZERO: ClassVar["Mat3"]

    # =========================================================================
    # CONSTRUCTION & ACCESS
    # =========================================================================

    @classmethod
    def from_rows(cls, r0: Vec3, r1: Vec3, r2: Vec3) -> "Mat3":
        return cls(*r0, *r1, *r2)

    @classmethod
    def from_cols(cls, c0: Vec3, c1: Vec3, c2: Vec3) -> "Mat3":
        return cls(c0.x, c1.x, c2.x, c0.y, c1.y, c2.y, c0.z, c1.z, c2.z)

    def row(self, r: int) -> Vec3:
        if not 0 <= r < 3:
            raise IndexError(f"Mat3 row index out of range: {r}")
        return Vec3(*self.rows()[r])

    def col(self, c: int) -> Vec3:
        if not 0 <= c < 3:
            raise IndexError(f"Mat3 column index out of range: {c}")
        return Vec3(*(row[c] for row in self.rows()))

    def __getitem__(self, index: tuple[int, int]) -> float:
        """Entry at (row, col); raises IndexError outside 0..2."""
        r, c = index
        if not (0 <= r < 3 and 0 <= c < 3):
            raise IndexError(f"Mat3 index out of range: {index}")
        return self.rows()[r][c]

    def rows(self) -> List[List[float]]:
        return [
            [self.a, self.b, self.c],
            [self.d, self.e, self.f],
            [self.g, self.h, self.i],
        ]

    def __iter__(self) -> Iterator[float]:
        """Entries in row-major order."""
        return iter((self.a, self.b, self.c, self.d, self.e, self.f, self.g, self.h, self.i))

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def add(self, other: "Mat3") -> "Mat3":
        return Mat3(*(p + q for p, q in zip(self, other)))

    def sub(self, other: "Mat3") -> "Mat3":
        return Mat3(*(p - q for p, q in zip(self, other)))

    def neg(self) -> "Mat3":
        return Mat3(*(-p for p in self))

    def scale(self, k: float) -> "Mat3":
        return Mat3(*(p * k for p in self))

    def mul_vec(self, v: Vec3) -> Vec3:
        return Vec3(
            self.a * v.x + self.b * v.y + self.c * v.z,
            self.d * v.x + self.e * v.y + self.f * v.z,
            self.g * v.x + self.h * v.y + self.i * v.z,
        )

    def mul_mat(self, m: "Mat3") -> "Mat3":
        """Matrix product self × m."""
        return Mat3(
            self.a * m.a + self.b * m.d + self.c * m.g,
            self.a * m.b + self.b * m.e + self.c * m.h,
            self.a * m.c + self.b * m.f + self.c * m.i,
            self.d * m.a + self.e * m.d + self.f * m.g,
            self.d * m.b + self.e * m.e + self.f * m.h,
            self.d * m.c + self.e * m.f + self.f * m.i,
            self.g * m.a + self.h * m.d + self.i * m.g,
            self.g * m.b + self.h * m.e + self.i * m.h,
            self.g * m.c + self.h * m.f + self.i * m.i,
        )

    def transpose(self) -> "Mat3":
        return Mat3(self.a, self.d, self.g, self.b, self.e, self.h, self.c, self.f, self.i)

    def trace(self) -> float:
        return self.a + self.e + self.i

    # =========================================================================
    # DETERMINANT & INVERSE
    # =========================================================================

    def determinant(self) -> float:
        return (
            self.a * (self.e * self.i - self.f * self.h)
            - self.b * (self.d * self.i - self.f * self.g)
            + self.c * (self.d * self.h - self.e * self.g)
        )

    def _scaled_determinant(self) -> tuple[float, float]:
        """
        (det(kM), k) for a power of two k.

        k is 1.0 unless the cofactor expansion overflows; then the entries are first
        brought into [-1, 1] and det(M) = det(kM) / k^3 exactly.
        """
        det = self.determinant()
        if math.isfinite(det):
            return det, 1.0
        k = rescale_factor(self)
        return self.scale(k).determinant(), k

    def is_singular(self, eps: float = EPS_SINGULAR) -> bool:
        det, k = self._scaled_determinant()
        return abs(det) <= eps * k * k * k

    def inverse(self, eps: float = EPS_SINGULAR) -> "Mat3":
        """
        Inverse matrix.

        Matrices whose determinant overflows are inverted through inv(M) = k * inv(kM).

        Raises:
            SingularMatrixError: If abs(det(M)) <= eps
            ValueError: If an entry is NaN or infinite
        """
        validate_eps(eps)
        det, k = self._scaled_determinant()
        if abs(det) <= eps * k * k * k:
            logger.debug("inverse of singular %r (det=%g, eps=%g)", self, det / k / k / k, eps)
            raise SingularMatrixError(det / k / k / k, eps)

        m = self.scale(k)
        adjugate = (
            m.e * m.i - m.f * m.h,
            m.c * m.h - m.b * m.i,
            m.b * m.f - m.c * m.e,
            m.f * m.g - m.d * m.i,
            m.a * m.i - m.c * m.g,
            m.c * m.d - m.a * m.f,
            m.d * m.h - m.e * m.g,
            m.b * m.g - m.a * m.h,
            m.a * m.e - m.b * m.d,
        )
        return Mat3(*(p / det * k for p in adjugate))

    # =========================================================================
    # COMPARISON & CONVERSION
    # =========================================================================

    def approx_eq(self, other: "Mat3", eps: float = EPS_COMPARE) -> bool:
        return all(approximately_equal(p, q, eps) for p, q in zip(self, other))

    def to_dict(self) -> Dict[str, Any]:
        return {"rows": self.rows()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Mat3":
        """
        Build from {"rows": [[a, b, c], [d, e, f], [g, h, i]]}.

        Raises:
            jsonschema.ValidationError: If data does not match the mat3 contract
        """
        validate_mat3(data)
        return cls(*(float(p) for row in data["rows"] for p in row))

    def __str__(self) -> str:
        return "\n".join(f"[{p}, {q}, {r}]" for p, q, r in self.rows())

    # =========================================================================
    # OPERATORS
    # =========================================================================

    def __add__(self, other: object) -> "Mat3":
        if isinstance(other, Mat3):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: object) -> "Mat3":
        if isinstance(other, Mat3):
            return self.sub(other)
        return NotImplemented

    def __neg__(self) -> "Mat3":
        return self.neg()

    def __mul__(self, other: object):
        if isinstance(other, Mat3):
            return self.mul_mat(other)
        if isinstance(other, Vec3):
            return self.mul_vec(other)
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: object) -> "Mat3":
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __matmul__(self, other: object):
        if isinstance(other, Mat3):
            return self.mul_mat(other)
        if isinstance(other, Vec3):
            return self.mul_vec(other)
        return NotImplemented


Mat3.IDENTITY = Mat3(1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)
Mat3.ZERO = Mat3(0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)

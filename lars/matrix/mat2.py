"""
Mat2 — 2×2 matrix value type

Stored in row-major order:

    | a  b |
    | c  d |

Pairs with Vec2 for 2D linear maps. Inversion uses the closed form

    M⁻¹ = 1/det(M) * | d  -b |
                     | -c  a |

and raises SingularMatrixError when |det(M)| <= eps.
"""

import math
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Iterator, List

from lars.core.contracts.validators import validate_mat2
from lars.core.log import get_logger
from lars.core.math.errors import SingularMatrixError
from lars.core.math.numerical_safeguards import (
    EPS_COMPARE,
    EPS_SINGULAR,
    approximately_equal,
    rescale_factor,
    validate_eps,
)
from lars.vector.vec2 import Vec2

logger = get_logger(__name__)


@dataclass(frozen=True)
class Mat2:
    """
    A 2×2 matrix of floats.

    Examples:
        >>> Mat2(1.0, 2.0, 3.0, 4.0) * Vec2(1.0, 1.0)
        Vec2(x=3.0, y=7.0)
        >>> Mat2(7.0, 2.0, 6.0, 2.0).determinant()
        2.0
    """

    a: float
    b: float
    c: float
    d: float

    IDENTITY: ClassVar["Mat2"]
    ZERO: ClassVar["Mat2"]

    # =========================================================================
    # CONSTRUCTION & ACCESS
    # =========================================================================

    @classmethod
    def from_rows(cls, r0: Vec2, r1: Vec2) -> "Mat2":
        return cls(r0.x, r0.y, r1.x, r1.y)

    @classmethod
    def from_cols(cls, c0: Vec2, c1: Vec2) -> "Mat2":
        return cls(c0.x, c1.x, c0.y, c1.y)

    def row(self, i: int) -> Vec2:
        if i == 0:
            return Vec2(self.a, self.b)
        if i == 1:
            return Vec2(self.c, self.d)
        raise IndexError(f"Mat2 row index out of range: {i}")

    def col(self, j: int) -> Vec2:
        if j == 0:
            return Vec2(self.a, self.c)
        if j == 1:
            return Vec2(self.b, self.d)
        raise IndexError(f"Mat2 column index out of range: {j}")

    def __getitem__(self, index: tuple[int, int]) -> float:
        """Entry at (row, col); raises IndexError outside 0..1."""
        r, c = index
        if not (0 <= r < 2 and 0 <= c < 2):
            raise IndexError(f"Mat2 index out of range: {index}")
        return (self.a, self.b, self.c, self.d)[r * 2 + c]

    def rows(self) -> List[List[float]]:
        return [[self.a, self.b], [self.c, self.d]]

    def __iter__(self) -> Iterator[float]:
        """Entries in row-major order."""
        return iter((self.a, self.b, self.c, self.d))

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def add(self, other: "Mat2") -> "Mat2":
        return Mat2(self.a + other.a, self.b + other.b, self.c + other.c, self.d + other.d)

    def sub(self, other: "Mat2") -> "Mat2":
        return Mat2(self.a - other.a, self.b - other.b, self.c - other.c, self.d - other.d)

    def neg(self) -> "Mat2":
        return Mat2(-self.a, -self.b, -self.c, -self.d)

    def scale(self, k: float) -> "Mat2":
        return Mat2(self.a * k, self.b * k, self.c * k, self.d * k)

    def mul_vec(self, v: Vec2) -> Vec2:
        """
        Apply the linear map to v.

            | a  b | | x |   | ax + by |
            | c  d | | y | = | cx + dy |
        """
        return Vec2(self.a * v.x + self.b * v.y, self.c * v.x + self.d * v.y)

    def mul_mat(self, m: "Mat2") -> "Mat2":
        """Matrix product self × m (apply m first, then self)."""
        return Mat2(
            self.a * m.a + self.b * m.c,
            self.a * m.b + self.b * m.d,
            self.c * m.a + self.d * m.c,
            self.c * m.b + self.d * m.d,
        )

    def transpose(self) -> "Mat2":
        return Mat2(self.a, self.c, self.b, self.d)

    def trace(self) -> float:
        return self.a + self.d

    # =========================================================================
    # DETERMINANT & INVERSE
    # =========================================================================

    def determinant(self) -> float:
        """det(M) = ad - bc"""
        return self.a * self.d - self.b * self.c

    def _scaled_determinant(self) -> tuple[float, float]:
        """
        (det(kM), k) for a power of two k.

        k is 1.0 unless ad - bc overflows; then the entries are first brought into [-1, 1]
        and det(M) = det(kM) / k^2 exactly.
        """
        det = self.determinant()
        if math.isfinite(det):
            return det, 1.0
        k = rescale_factor(self)
        return self.scale(k).determinant(), k

    def is_singular(self, eps: float = EPS_SINGULAR) -> bool:
        det, k = self._scaled_determinant()
        return abs(det) <= eps * k * k

    def inverse(self, eps: float = EPS_SINGULAR) -> "Mat2":
        """
        Inverse matrix.

        Matrices whose determinant overflows are inverted through inv(M) = k * inv(kM).

        Args:
            eps: Smallest |determinant| accepted

        Returns:
            adj(M) / det(M)

        Raises:
            SingularMatrixError: If abs(det(M)) <= eps
            ValueError: If an entry is NaN or infinite

        Examples:
            >>> Mat2(7.0, 2.0, 6.0, 2.0).inverse()
            Mat2(a=1.0, b=-1.0, c=-3.0, d=3.5)
        """
        validate_eps(eps)
        det, k = self._scaled_determinant()
        if abs(det) <= eps * k * k:
            logger.debug("inverse of singular %r (det=%g, eps=%g)", self, det / k / k, eps)
            raise SingularMatrixError(det / k / k, eps)
        m = self.scale(k)
        return Mat2(m.d / det, -m.b / det, -m.c / det, m.a / det).scale(k)

    # =========================================================================
    # COMPARISON & CONVERSION
    # =========================================================================

    def approx_eq(self, other: "Mat2", eps: float = EPS_COMPARE) -> bool:
        return all(approximately_equal(p, q, eps) for p, q in zip(self, other))

    def to_dict(self) -> Dict[str, Any]:
        return {"rows": self.rows()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Mat2":
        """
        Build from {"rows": [[a, b], [c, d]]}.

        Raises:
            jsonschema.ValidationError: If data does not match the mat2 contract
        """
        validate_mat2(data)
        (a, b), (c, d) = data["rows"]
        return cls(float(a), float(b), float(c), float(d))

    def __str__(self) -> str:
        return f"[{self.a}, {self.b}]\n[{self.c}, {self.d}]"

    # =========================================================================
    # OPERATORS
    # =========================================================================

    def __add__(self, other: object) -> "Mat2":
        if isinstance(other, Mat2):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: object) -> "Mat2":
        if isinstance(other, Mat2):
            return self.sub(other)
        return NotImplemented

    def __neg__(self) -> "Mat2":
        return self.neg()

    def __mul__(self, other: object):
        if isinstance(other, Mat2):
            return self.mul_mat(other)
        if isinstance(other, Vec2):
            return self.mul_vec(other)
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: object) -> "Mat2":
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __matmul__(self, other: object):
        if isinstance(other, Mat2):
            return self.mul_mat(other)
        if isinstance(other, Vec2):
            return self.mul_vec(other)
        return NotImplemented


Mat2.IDENTITY = Mat2(1.0, 0.0, 0.0, 1.0)
Mat2.ZERO = Mat2(0.0, 0.0, 0.0, 0.0)

"""
Kernel Errors — recoverable numeric failure conditions

Three conditions can occur in the kernel. Each one is raised as an ordinary exception that
the immediate caller can catch:

- DivisionByZeroError: the divisor is within eps of zero
- DegenerateVectorError: normalization of a vector whose magnitude is within eps of zero
- SingularMatrixError: inversion of a matrix whose determinant is within eps of zero

Each error also derives from the closest built-in class, so generic handlers
(``except ZeroDivisionError``, ``except ValueError``) keep working.
"""


class LarsError(Exception):
    """Base error of the kernel."""


class DivisionByZeroError(LarsError, ZeroDivisionError):
    """
    Division by a value within eps of zero.

    Attributes:
        denominator: The rejected divisor
        eps: Tolerance used for the check
    """

    def __init__(self, denominator: float, eps: float, message: str | None = None):
        self.denominator = denominator
        self.eps = eps
        super().__init__(
            message or f"Division by near-zero value {denominator!r} (|d| <= {eps})"
        )


class DegenerateVectorError(LarsError, ValueError):
    """
    Normalization requested on a (near) zero-length vector.

    Attributes:
        magnitude: Magnitude of the rejected vector
        eps: Tolerance used for the check
    """

    def __init__(self, magnitude: float, eps: float):
        self.magnitude = magnitude
        self.eps = eps
        super().__init__(
            f"Cannot normalize vector with magnitude {magnitude!r} (<= {eps})"
        )


class SingularMatrixError(LarsError, ValueError):
    """
    Inversion requested on a (near) singular matrix.

    Attributes:
        determinant: Determinant of the rejected matrix
        eps: Tolerance used for the check
    """

    def __init__(self, determinant: float, eps: float):
        self.determinant = determinant
        self.eps = eps
        super().__init__(
            f"Matrix is singular and cannot be inverted (det={determinant!r}, eps={eps})"
        )

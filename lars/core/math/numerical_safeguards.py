"""
Numerical Safeguards — Scalar Primitives

Shared scalar helpers used by every vector and matrix type:
- Tolerance comparison of floats (absolute epsilon)
- Safe division that fails loudly instead of producing Infinity/NaN
- Validation of tolerance parameters

CRITICAL INVARIANTS:
1. A divisor with |d| <= eps never reaches the division operator (DivisionByZeroError)
2. Tolerance comparisons are symmetric and inclusive: |a - b| <= eps
3. No function in this module keeps state between calls
"""

import math
from typing import Final, Iterable

from lars.core.log import get_logger
from lars.core.math.errors import DivisionByZeroError

logger = get_logger(__name__)

# =============================================================================
# EPSILON PARAMETERS
# =============================================================================

# Tolerance for approximate float comparison (approximately_equal, approx_eq)
EPS_COMPARE: Final[float] = 1e-9

# Smallest divisor magnitude accepted by scalar and component-wise division
EPS_DIVISION: Final[float] = 1e-12

# Smallest vector magnitude accepted by normalize()
EPS_DEGENERATE: Final[float] = 1e-12

# Smallest |determinant| accepted by inverse()
EPS_SINGULAR: Final[float] = 1e-12


# =============================================================================
# VALIDATION
# =============================================================================


def validate_eps(eps: float) -> None:
    """
    Check that a tolerance is usable.

    Args:
        eps: Tolerance to check

    Raises:
        ValueError: If eps is not positive or not finite
    """
    if not math.isfinite(eps):
        raise ValueError(f"eps must be positive and finite, got {eps}")
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")


def is_valid_float(value: float) -> bool:
    """True if value is finite (neither NaN nor Inf)."""
    return math.isfinite(value)


# =============================================================================
# EPSILON COMPARISONS
# =============================================================================


def approximately_equal(a: float, b: float, epsilon: float = EPS_COMPARE) -> bool:
    """
    Absolute-tolerance float comparison.

    Algorithm:
        abs(a - b) <= epsilon

    Args:
        a: First value
        b: Second value
        epsilon: Absolute tolerance (default: 1e-9)

    Returns:
        True if the values lie within epsilon of each other. NaN never compares equal.

    Examples:
        >>> approximately_equal(1.0, 1.0 + 1e-12)
        True
        >>> approximately_equal(1.0, 1.1)
        False
    """
    validate_eps(epsilon)
    return abs(a - b) <= epsilon


def is_zero(value: float, eps: float = EPS_COMPARE) -> bool:
    """
    Check whether a value is within eps of zero.

    Args:
        value: Value to check
        eps: Absolute tolerance

    Returns:
        True if abs(value) <= eps
    """
    validate_eps(eps)
    return abs(value) <= eps


def compare_with_tolerance(a: float, b: float, eps: float = EPS_COMPARE) -> int:
    """
    Three-way comparison of two floats with tolerance.

    Returns:
        -1 if a < b (outside eps)
         0 if a ≈ b (within eps)
        +1 if a > b (outside eps)

    Examples:
        >>> compare_with_tolerance(1.0, 2.0)
        -1
        >>> compare_with_tolerance(1.0, 1.0 + 1e-12)
        0
    """
    validate_eps(eps)
    diff = a - b

    if abs(diff) <= eps:
        return 0
    elif diff < 0:
        return -1
    else:
        return 1


# =============================================================================
# SAFE DIVISION
# =============================================================================


def check_divisor(denominator: float, eps: float = EPS_DIVISION) -> float:
    """
    Return denominator unchanged if it is safe to divide by.

    Args:
        denominator: Divisor to check
        eps: Smallest accepted magnitude

    Returns:
        denominator

    Raises:
        DivisionByZeroError: If abs(denominator) <= eps
        ValueError: If eps is not a valid tolerance
    """
    validate_eps(eps)
    if abs(denominator) <= eps:
        logger.debug("rejected divisor %r (eps=%g)", denominator, eps)
        raise DivisionByZeroError(denominator, eps)
    return denominator


def safe_divide(
    numerator: float,
    denominator: float,
    eps: float = EPS_DIVISION,
) -> float:
    """
    Division that refuses near-zero divisors.

    A silent Infinity or NaN from a vanishing divisor is never returned. The caller decides
    how to recover from DivisionByZeroError.

    Args:
        numerator: Dividend
        denominator: Divisor
        eps: Smallest accepted divisor magnitude (default: 1e-12)

    Returns:
        numerator / denominator

    Raises:
        DivisionByZeroError: If abs(denominator) <= eps

    Examples:
        >>> safe_divide(10.0, 2.0)
        5.0
        >>> safe_divide(10.0, 0.0)
        Traceback (most recent call last):
        ...
        lars.core.math.errors.DivisionByZeroError: Division by near-zero value 0.0 (|d| <= 1e-12)
    """
    return numerator / check_divisor(denominator, eps)


# =============================================================================
# RESCALING
# =============================================================================


def rescale_factor(values: Iterable[float]) -> float:
    """
    Power of two k that brings the largest magnitude of values into [0.5, 1).

    Multiplying by a power of two only shifts the exponent, so k * v keeps every bit of
    v unless it underflows. Used to evaluate products that would overflow on the raw
    values.

    Args:
        values: Finite floats

    Returns:
        k, or 1.0 if every value is zero

    Raises:
        ValueError: If any value is NaN or infinite

    Examples:
        >>> rescale_factor([3.0, -1.0])
        0.25
    """
    magnitudes = [abs(v) for v in values]
    if not all(math.isfinite(m) for m in magnitudes):
        raise ValueError(f"cannot rescale non-finite values: {magnitudes}")

    peak = max(magnitudes, default=0.0)
    if peak == 0.0:
        return 1.0

    _, exponent = math.frexp(peak)
    return math.ldexp(1.0, -exponent)

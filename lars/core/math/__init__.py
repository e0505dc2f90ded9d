"""
Core math modules for lars

Scalar primitives and the error taxonomy shared by the vector and matrix types.
"""

# Errors
from lars.core.math.errors import (
    DegenerateVectorError,
    DivisionByZeroError,
    LarsError,
    SingularMatrixError,
)

# Numerical Safeguards
from lars.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_COMPARE,
    EPS_DEGENERATE,
    EPS_DIVISION,
    EPS_SINGULAR,
    # Epsilon comparisons
    approximately_equal,
    compare_with_tolerance,
    is_zero,
    # Safe division
    check_divisor,
    safe_divide,
    # Rescaling
    rescale_factor,
    # Validation
    is_valid_float,
    validate_eps,
)

__all__ = [
    # Errors
    "LarsError",
    "DivisionByZeroError",
    "DegenerateVectorError",
    "SingularMatrixError",
    # Numerical Safeguards — Epsilon constants
    "EPS_COMPARE",
    "EPS_DEGENERATE",
    "EPS_DIVISION",
    "EPS_SINGULAR",
    # Numerical Safeguards — Epsilon comparisons
    "approximately_equal",
    "compare_with_tolerance",
    "is_zero",
    # Numerical Safeguards — Safe division
    "check_divisor",
    "safe_divide",
    # Numerical Safeguards — Rescaling
    "rescale_factor",
    # Numerical Safeguards — Validation
    "is_valid_float",
    "validate_eps",
]

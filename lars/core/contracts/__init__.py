"""
Contract Validation Module

JSON Schema validation of the dict form of vectors and matrices.
"""

from .validators import (
    ContractValidator,
    Mat2Validator,
    Mat3Validator,
    SchemaLoader,
    Vec2Validator,
    Vec3Validator,
    validate_mat2,
    validate_mat3,
    validate_vec2,
    validate_vec3,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "Vec2Validator",
    "Vec3Validator",
    "Mat2Validator",
    "Mat3Validator",
    # Functions
    "validate_vec2",
    "validate_vec3",
    "validate_mat2",
    "validate_mat3",
]

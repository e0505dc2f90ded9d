"""Matrix value types."""

from lars.matrix.mat2 import Mat2
from lars.matrix.mat3 import Mat3

__all__ = ["Mat2", "Mat3"]

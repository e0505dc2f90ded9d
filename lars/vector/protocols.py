"""
Vector capabilities shared by Vec2 and Vec3.

Generic code types its parameters against VectorLike instead of a concrete class.
The vector types satisfy it structurally; there is no common base class.
"""

import math
from typing import Protocol, TypeVar, runtime_checkable

V = TypeVar("V", bound="VectorLike")


@runtime_checkable
class VectorLike(Protocol):
    """Capability set {dot, mag, mag_sq, normalize}."""

    def dot(self, other): ...

    def mag(self) -> float: ...

    def mag_sq(self) -> float: ...

    def normalize(self, eps: float = ...): ...


def project(v: V, onto: V) -> V:
    """
    Vector projection of v onto `onto`.

    Raises:
        DegenerateVectorError: If onto has (near) zero length
    """
    unit = onto.normalize()
    return unit * v.dot(unit)


def angle_between(a: VectorLike, b: VectorLike) -> float:
    """
    Unsigned angle between two vectors, in radians.

    Raises:
        DegenerateVectorError: If either vector has (near) zero length
    """
    cos = a.normalize().dot(b.normalize())
    return math.acos(max(-1.0, min(1.0, cos)))

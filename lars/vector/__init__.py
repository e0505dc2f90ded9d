"""
Vector value types.

Vec2.cross returns a scalar while Vec3.cross returns a Vec3 (see Vec2.cross).
"""

from lars.vector.protocols import VectorLike, angle_between, project
from lars.vector.vec2 import Point2D, Vec2
from lars.vector.vec3 import Colour, Point3D, Vec3

__all__ = [
    "Vec2",
    "Vec3",
    "Point2D",
    "Point3D",
    "Colour",
    "VectorLike",
    "angle_between",
    "project",
]

"""
Cartesian - 2D Geometry Value Types

Immutable axis-aligned rectangles and points in Cartesian coordinates,
with the geometric queries and transforms built on them.

This package provides:
- Rectangle: normalized bounding boxes with width, height, area, center,
  intersection, containment, translation, scaling and inflation
- Point: coordinates that build rectangles and are extracted from them
- Named operation tables and a command line for evaluating queries
"""

__version__ = "1.0.0"
__license__ = "MIT"

from cartesian.domain.exceptions import GeometryError, ImmutabilityError, NotFoundError
from cartesian.domain.value_objects.point import Point
from cartesian.domain.value_objects.rectangle import Rectangle

__all__ = [
    "GeometryError",
    "ImmutabilityError",
    "NotFoundError",
    "Point",
    "Rectangle",
]

"""Immutable geometric value objects."""

from cartesian.domain.value_objects.point import Point
from cartesian.domain.value_objects.rectangle import Rectangle

__all__ = ["Point", "Rectangle"]

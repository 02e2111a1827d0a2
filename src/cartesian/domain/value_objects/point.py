"""Point value object for representing coordinates."""

from dataclasses import dataclass
from typing import Self

from cartesian.domain.value_objects.base import ValueObject
from cartesian.domain.value_objects.rectangle import Rectangle


@dataclass(init=False, unsafe_hash=True)
class Point(ValueObject):
    """Immutable point representing x, y coordinates in the plane.

    Corner names follow a Y-up convention: ``top`` is ``max_y`` and
    ``bottom`` is ``min_y``. In screen coordinates (Y-down) the names swap.
    """

    x: float
    y: float

    def __init__(self, x: float, y: float) -> None:
        self._assign(x=x, y=y)

    def point_to_rect(self, other: Self) -> Rectangle:
        """Make a rectangle spanning this point and another point."""
        return Rectangle(self.x, self.y, other.x, other.y)

    def make_rect(self, width: float, height: float) -> Rectangle:
        """Make a rectangle anchored at this point.

        Args:
            width: Horizontal extent; negative values extend to the left
            height: Vertical extent; negative values extend downwards

        Returns:
            Normalized Rectangle instance
        """
        return Rectangle(self.x, self.y, self.x + width, self.y + height)

    @classmethod
    def top_left(cls, rect: Rectangle) -> Self:
        return cls(rect.min_x, rect.max_y)

    @classmethod
    def bottom_left(cls, rect: Rectangle) -> Self:
        return cls(rect.min_x, rect.min_y)

    @classmethod
    def top_right(cls, rect: Rectangle) -> Self:
        return cls(rect.max_x, rect.max_y)

    @classmethod
    def bottom_right(cls, rect: Rectangle) -> Self:
        return cls(rect.max_x, rect.min_y)

    @classmethod
    def centre(cls, rect: Rectangle) -> Self:
        """Half the width and half the height of a rectangle.

        This is the rectangle's center only when its lower left corner sits
        on the origin. Use ``midpoint`` for the geometric center.
        """
        return cls((rect.max_x - rect.min_x) / 2, (rect.max_y - rect.min_y) / 2)

    @classmethod
    def midpoint(cls, rect: Rectangle) -> Self:
        """Geometric center of a rectangle."""
        return cls(*rect.center)

    def inside(self, rect: Rectangle) -> bool:
        """Check if the point is within a rectangle, edges included."""
        return rect.min_x <= self.x <= rect.max_x and rect.min_y <= self.y <= rect.max_y

    def borders(self, rect: Rectangle) -> bool:
        """Check if the point lies on an edge of a rectangle.

        Coordinates are compared with exact equality, so any rounding error
        yields False. A point whose x equals ``min_x`` or ``max_x`` counts as
        bordering whatever its y, because the vertical range check on the
        left/right edges accepts every y of a normalized rectangle.
        """
        on_vertical_edge = (self.x == rect.max_x or self.x == rect.min_x) and (
            self.y <= rect.max_y or self.y >= rect.min_y
        )
        on_horizontal_edge = (rect.min_x <= self.x <= rect.max_x) and (
            self.y == rect.max_y or self.y == rect.min_y
        )
        return on_vertical_edge or on_horizontal_edge

    def translate_xy(self, dx: float = 0, dy: float = 0) -> Self:
        """Create a new point offset by the given deltas.

        Args:
            dx: X offset
            dy: Y offset

        Returns:
            New Point instance
        """
        return Point(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        """String representation of the point."""
        return f"Point({self.x}, {self.y})"

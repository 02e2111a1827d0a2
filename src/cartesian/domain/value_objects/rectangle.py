"""Rectangle value object for axis-aligned bounding boxes."""

from dataclasses import dataclass
from typing import Self

from cartesian.domain.value_objects.base import ValueObject


@dataclass(init=False, unsafe_hash=True)
class Rectangle(ValueObject):
    """Immutable axis-aligned rectangle in Cartesian coordinates.

    ``min_x``/``min_y`` define the lower left corner and ``max_x``/``max_y``
    the upper right corner. The constructor normalizes each axis
    independently, so ``min_x <= max_x`` and ``min_y <= max_y`` always hold
    regardless of the order in which the corners are supplied.

    No numeric validation is performed: NaN and infinities propagate with
    IEEE-754 semantics, so comparisons involving NaN are always false.
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __init__(self, min_x: float, min_y: float, max_x: float, max_y: float) -> None:
        self._assign(
            min_x=min(min_x, max_x),
            min_y=min(min_y, max_y),
            max_x=max(min_x, max_x),
            max_y=max(min_y, max_y),
        )

    @property
    def width(self) -> float:
        """Horizontal extent of the rectangle."""
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        """Vertical extent of the rectangle."""
        return self.max_y - self.min_y

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def center(self) -> tuple[float, float]:
        """Center x and y of the rectangle."""
        return (self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2

    def identical_to(self, other: Self) -> bool:
        """Check whether all four boundaries match another rectangle exactly."""
        return (
            self.min_x == other.min_x
            and self.min_y == other.min_y
            and self.max_x == other.max_x
            and self.max_y == other.max_y
        )

    def intersects(self, other: Self) -> bool:
        """Check whether the interiors of two rectangles overlap.

        Rectangles that only share an edge or a corner do not intersect.
        """
        return (
            self.min_x < other.max_x
            and self.max_x > other.min_x
            and self.min_y < other.max_y
            and self.max_y > other.min_y
        )

    def contains(self, other: Self) -> bool:
        """Check whether another rectangle lies fully within this one.

        Shared edges count as contained, so a rectangle contains itself.
        """
        return (
            self.min_x <= other.min_x
            and self.max_x >= other.max_x
            and self.min_y <= other.min_y
            and self.max_y >= other.max_y
        )

    def translated(self, dx: float, dy: float) -> Self:
        """Create a new rectangle shifted by the given deltas.

        Args:
            dx: X offset
            dy: Y offset

        Returns:
            New Rectangle instance
        """
        return Rectangle(self.min_x + dx, self.min_y + dy, self.max_x + dx, self.max_y + dy)

    def scaled_origin(self, sx: float, sy: float) -> Self:
        """Create a new rectangle scaled about the origin.

        Each corner is multiplied by the factors; negative factors mirror the
        rectangle and the constructor restores min/max ordering.

        Args:
            sx: Horizontal scale factor
            sy: Vertical scale factor

        Returns:
            New Rectangle instance
        """
        return Rectangle(self.min_x * sx, self.min_y * sy, self.max_x * sx, self.max_y * sy)

    def scaled_center(self, sx: float, sy: float) -> Self:
        """Create a new rectangle scaled about its own center.

        Args:
            sx: Horizontal scale factor
            sy: Vertical scale factor

        Returns:
            New Rectangle instance with the same center
        """
        center_x, center_y = self.center
        at_origin = self.translated(-center_x, -center_y)
        return at_origin.scaled_origin(sx, sy).translated(center_x, center_y)

    def inflated(self, dx: float, dy: float) -> Self:
        """Create a new rectangle whose sides are pushed outwards.

        Negative amounts shrink the rectangle. Shrinking by more than half a
        dimension crosses the sides over, and the result is re-normalized.

        Args:
            dx: Amount by which to move the left and right sides
            dy: Amount by which to move the top and bottom sides

        Returns:
            New Rectangle instance
        """
        return Rectangle(self.min_x - dx, self.min_y - dy, self.max_x + dx, self.max_y + dy)

    def __str__(self) -> str:
        """String representation of the rectangle."""
        return f"Rectangle({self.min_x}, {self.min_y}, {self.max_x}, {self.max_y})"

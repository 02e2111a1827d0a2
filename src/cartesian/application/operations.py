"""Lookup tables that resolve geometric operations by name."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from cartesian.domain.exceptions import NotFoundError
from cartesian.domain.value_objects.point import Point
from cartesian.domain.value_objects.rectangle import Rectangle

logger = logging.getLogger("cartesian.operations")


class ParameterKind(Enum):
    """Kinds of operation parameters and how many numbers each consumes."""
    NUMBER = "number"
    POINT = "point"
    RECTANGLE = "rectangle"

    @property
    def size(self) -> int:
        return {"number": 1, "point": 2, "rectangle": 4}[self.value]


@dataclass(frozen=True)
class Operation:
    """A named operation applied to a subject value object."""
    name: str
    parameters: tuple[ParameterKind, ...]
    handler: Callable[..., Any]
    description: str = ""
    defaults: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        """Validate defaults."""
        trailing = 0
        for kind in reversed(self.parameters):
            if kind is not ParameterKind.NUMBER:
                break
            trailing += 1
        if len(self.defaults) > trailing:
            raise ValueError("Defaults can only fill trailing number parameters")

    @property
    def arity(self) -> int:
        """Number of values needed when no default is used."""
        return sum(kind.size for kind in self.parameters)

    def decode(self, values: Sequence[float]) -> list[Any]:
        """Turn a flat list of numbers into the operation's arguments.

        Args:
            values: Numbers in parameter order; trailing numbers may be
                omitted when the operation has defaults for them

        Returns:
            List of floats, Points and Rectangles

        Raises:
            ValueError: If the number of values does not fit the parameters
        """
        values = [float(value) for value in values]
        missing = self.arity - len(values)
        if 0 < missing <= len(self.defaults):
            values.extend(self.defaults[len(self.defaults) - missing:])
        if len(values) != self.arity:
            minimum = self.arity - len(self.defaults)
            expected = str(self.arity) if minimum == self.arity else f"{minimum} to {self.arity}"
            raise ValueError(
                f"`{self.name}` expects {expected} values, got {len(values)}"
            )

        arguments: list[Any] = []
        position = 0
        for kind in self.parameters:
            chunk = values[position:position + kind.size]
            position += kind.size
            if kind is ParameterKind.NUMBER:
                arguments.append(chunk[0])
            elif kind is ParameterKind.POINT:
                arguments.append(Point(*chunk))
            else:
                arguments.append(Rectangle(*chunk))
        return arguments


class OperationRegistry:
    """Registry of operations available on one value object type.

    This is the only place where operations are looked up by name; asking
    for an unknown name raises NotFoundError.
    """

    def __init__(self, subject: str) -> None:
        self.subject = subject
        self._operations: dict[str, Operation] = {}

    def register(self, operation: Operation) -> None:
        """Register an operation, replacing any with the same name."""
        self._operations[operation.name] = operation

    def get(self, name: str) -> Operation:
        """Get an operation by name.

        Raises:
            NotFoundError: If no operation has that name
        """
        operation = self._operations.get(name)
        if operation is None:
            raise NotFoundError(f"{self.subject} has no operation named `{name}`.")
        logger.debug("Resolved %s operation %s", self.subject, name)
        return operation

    def names(self) -> list[str]:
        """Get the registered operation names in registration order."""
        return list(self._operations)

    def __contains__(self, name: object) -> bool:
        return name in self._operations

    def __iter__(self):
        return iter(self._operations.values())

    def __len__(self) -> int:
        return len(self._operations)

    def invoke(self, name: str, subject: Any, values: Sequence[float] = ()) -> Any:
        """Apply a named operation to a subject.

        Args:
            name: Operation name
            subject: Value object the operation is applied to
            values: Flat list of numeric arguments

        Returns:
            Whatever the operation produces

        Raises:
            NotFoundError: If no operation has that name
            ValueError: If the argument count does not fit the operation
        """
        operation = self.get(name)
        arguments = operation.decode(values)
        logger.debug("Invoking %s.%s with %s", subject, name, arguments)
        return operation.handler(subject, *arguments)


NUMBER = ParameterKind.NUMBER
RECTANGLE = ParameterKind.RECTANGLE

RECTANGLE_OPERATIONS = OperationRegistry("Rectangle")
POINT_OPERATIONS = OperationRegistry("Point")

for _operation in (
    Operation("width", (), lambda rect: rect.width, "Width of the rectangle"),
    Operation("height", (), lambda rect: rect.height, "Height of the rectangle"),
    Operation("area", (), lambda rect: rect.area, "Area of the rectangle"),
    Operation("center", (), lambda rect: rect.center, "Center x and y"),
    Operation(
        "identical_to", (RECTANGLE,), Rectangle.identical_to,
        "Whether all four boundaries match another rectangle",
    ),
    Operation(
        "intersects", (RECTANGLE,), Rectangle.intersects,
        "Whether the interiors overlap another rectangle",
    ),
    Operation(
        "contains", (RECTANGLE,), Rectangle.contains,
        "Whether another rectangle lies within, edges included",
    ),
    Operation("translated", (NUMBER, NUMBER), Rectangle.translated, "Shift by dx, dy"),
    Operation(
        "scaled_origin", (NUMBER, NUMBER), Rectangle.scaled_origin,
        "Scale by sx, sy about the origin",
    ),
    Operation(
        "scaled_center", (NUMBER, NUMBER), Rectangle.scaled_center,
        "Scale by sx, sy about the center",
    ),
    Operation("inflated", (NUMBER, NUMBER), Rectangle.inflated, "Push sides out by dx, dy"),
):
    RECTANGLE_OPERATIONS.register(_operation)

for _operation in (
    Operation(
        "point_to_rect", (ParameterKind.POINT,), Point.point_to_rect,
        "Rectangle spanning this point and another",
    ),
    Operation(
        "make_rect", (NUMBER, NUMBER), Point.make_rect,
        "Rectangle of width, height anchored here",
    ),
    Operation(
        "top_left", (RECTANGLE,), lambda _, rect: Point.top_left(rect),
        "Top left corner of a rectangle",
    ),
    Operation(
        "bottom_left", (RECTANGLE,), lambda _, rect: Point.bottom_left(rect),
        "Bottom left corner of a rectangle",
    ),
    Operation(
        "top_right", (RECTANGLE,), lambda _, rect: Point.top_right(rect),
        "Top right corner of a rectangle",
    ),
    Operation(
        "bottom_right", (RECTANGLE,), lambda _, rect: Point.bottom_right(rect),
        "Bottom right corner of a rectangle",
    ),
    Operation(
        "centre", (RECTANGLE,), lambda _, rect: Point.centre(rect),
        "Half width and half height of a rectangle",
    ),
    Operation(
        "midpoint", (RECTANGLE,), lambda _, rect: Point.midpoint(rect),
        "Geometric center of a rectangle",
    ),
    Operation("inside", (RECTANGLE,), Point.inside, "Whether the point is within a rectangle"),
    Operation("borders", (RECTANGLE,), Point.borders, "Whether the point is on an edge"),
    Operation(
        "translate_xy", (NUMBER, NUMBER), Point.translate_xy,
        "Shift by dx, dy (both default to 0)", defaults=(0.0, 0.0),
    ),
):
    POINT_OPERATIONS.register(_operation)

del _operation

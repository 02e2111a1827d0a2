"""Application layer - named geometric operations."""

from cartesian.application.operations import (
    POINT_OPERATIONS,
    RECTANGLE_OPERATIONS,
    Operation,
    OperationRegistry,
    ParameterKind,
)

__all__ = [
    "Operation",
    "OperationRegistry",
    "ParameterKind",
    "POINT_OPERATIONS",
    "RECTANGLE_OPERATIONS",
]

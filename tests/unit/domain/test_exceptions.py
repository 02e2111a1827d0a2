"""Tests for the error hierarchy."""

from cartesian.domain.exceptions import GeometryError, ImmutabilityError, NotFoundError


def test_errors_share_a_base() -> None:
    assert issubclass(NotFoundError, GeometryError)
    assert issubclass(ImmutabilityError, GeometryError)


def test_errors_are_attribute_errors() -> None:
    assert issubclass(NotFoundError, AttributeError)
    assert issubclass(ImmutabilityError, AttributeError)
    assert not issubclass(NotFoundError, ImmutabilityError)

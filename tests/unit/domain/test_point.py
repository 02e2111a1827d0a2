"""Tests for point value object behavior."""

import pytest

from cartesian.domain.exceptions import ImmutabilityError, NotFoundError
from cartesian.domain.value_objects.point import Point
from cartesian.domain.value_objects.rectangle import Rectangle


def test_point_to_rect_is_normalized() -> None:
    rect = Point(4, 6).point_to_rect(Point(0, 0))
    assert rect.identical_to(Rectangle(0, 0, 4, 6))
    assert rect.min_x == 0
    assert rect.max_y == 6


def test_make_rect() -> None:
    assert Point(1, 1).make_rect(2, 2).identical_to(Rectangle(1, 1, 3, 3))
    assert Point(1, 1).make_rect(-2, 3).identical_to(Rectangle(-1, 1, 1, 4))
    assert Point(1, 1).make_rect(0, 0).area == 0


def test_corners_use_y_up_naming() -> None:
    rect = Rectangle(0, 0, 4, 6)
    assert Point.top_left(rect) == Point(0, 6)
    assert Point.bottom_left(rect) == Point(0, 0)
    assert Point.top_right(rect) == Point(4, 6)
    assert Point.bottom_right(rect) == Point(4, 0)


def test_corners_round_trip_to_rectangle() -> None:
    rect = Rectangle(-1, 2, 5, 7)
    assert Point.bottom_left(rect).point_to_rect(Point.top_right(rect)) == rect
    assert Point.top_left(rect).point_to_rect(Point.bottom_right(rect)) == rect


def test_centre_is_half_extent() -> None:
    rect = Rectangle(2, 2, 6, 8)
    assert Point.centre(rect) == Point(2, 3)
    assert Point.centre(Rectangle(0, 0, 4, 6)) == Point(2, 3)


def test_midpoint_is_geometric_center() -> None:
    rect = Rectangle(2, 2, 6, 8)
    assert Point.midpoint(rect) == Point(4, 5)
    assert (Point.midpoint(rect).x, Point.midpoint(rect).y) == rect.center


def test_inside_includes_edges() -> None:
    rect = Rectangle(0, 0, 4, 4)
    assert Point(1, 1).inside(rect)
    assert Point(0, 0).inside(rect)
    assert Point(4, 2).inside(rect)
    assert not Point(5, 1).inside(rect)
    assert not Point(1, -0.1).inside(rect)


def test_borders() -> None:
    rect = Rectangle(0, 0, 4, 4)
    assert Point(0, 2).borders(rect)
    assert Point(4, 2).borders(rect)
    assert Point(2, 0).borders(rect)
    assert Point(2, 4).borders(rect)
    assert Point(4, 4).borders(rect)
    assert not Point(2, 2).borders(rect)
    assert not Point(5, 5).borders(rect)
    assert not Point(2, 6).borders(rect)


def test_borders_accepts_any_y_on_vertical_edge_lines() -> None:
    assert Point(4, 10).borders(Rectangle(0, 0, 4, 4))


def test_borders_uses_exact_equality() -> None:
    rect = Rectangle(0, 0, 0.3, 1)
    assert not Point(0.1 + 0.2, 0.5).borders(rect)


def test_translate_xy() -> None:
    point = Point(1, 2)
    assert point.translate_xy(3, -1) == Point(4, 1)
    assert point.translate_xy(dy=3) == Point(1, 5)

    unchanged = point.translate_xy()
    assert unchanged == point
    assert unchanged is not point


def test_points_are_hashable_values() -> None:
    assert Point(1, 2) == Point(1.0, 2.0)
    assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2


def test_assignment_is_rejected() -> None:
    point = Point(1, 2)
    with pytest.raises(ImmutabilityError, match="Points are immutable"):
        point.x = 5
    with pytest.raises(ImmutabilityError):
        del point.y
    assert point == Point(1, 2)


def test_undefined_attribute_raises_not_found() -> None:
    with pytest.raises(NotFoundError, match="Point has no attribute named `z`"):
        Point(1, 2).z


def test_str() -> None:
    assert str(Point(1, 2)) == "Point(1, 2)"

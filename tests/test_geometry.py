import pytest

from melice.geometry import (
    HorizontalAlignment,
    Point,
    Rectangle,
    Size,
    VerticalAlignment,
    origin_for_size_and_alignment,
)


ORIGIN = Point(10.0, 20.0)
SIZE = Size(4.0, 6.0)


def test_rectangle_edges_surround_centre():
    rect = Rectangle(ORIGIN, SIZE)
    assert rect.right() - rect.left() == SIZE.width
    assert rect.bottom() - rect.top() == SIZE.height
    assert (rect.left() + rect.right()) / 2 == ORIGIN.x
    assert (rect.top() + rect.bottom()) / 2 == ORIGIN.y


def test_left_top_alignment_puts_origin_at_top_left_corner():
    centre = origin_for_size_and_alignment(
        ORIGIN, SIZE, HorizontalAlignment.LEFT, VerticalAlignment.TOP
    )
    rect = Rectangle(centre, SIZE)
    assert rect.left() == ORIGIN.x
    assert rect.top() == ORIGIN.y


def test_right_bottom_alignment_puts_origin_at_bottom_right_corner():
    centre = origin_for_size_and_alignment(
        ORIGIN, SIZE, HorizontalAlignment.RIGHT, VerticalAlignment.BOTTOM
    )
    rect = Rectangle(centre, SIZE)
    assert rect.right() == ORIGIN.x
    assert rect.bottom() == ORIGIN.y


def test_centre_alignment_keeps_origin():
    centre = origin_for_size_and_alignment(
        ORIGIN, SIZE, HorizontalAlignment.CENTER, VerticalAlignment.MIDDLE
    )
    assert centre == ORIGIN


@pytest.mark.parametrize("vertical", list(VerticalAlignment))
def test_horizontal_alignment_does_not_move_y_when_middle(vertical):
    centre = origin_for_size_and_alignment(
        ORIGIN, SIZE, HorizontalAlignment.LEFT, vertical
    )
    assert centre.x == ORIGIN.x + SIZE.width / 2
    if vertical == VerticalAlignment.MIDDLE:
        assert centre.y == ORIGIN.y


def test_default_rectangle_is_empty_at_zero():
    rect = Rectangle()
    assert (rect.left(), rect.right(), rect.top(), rect.bottom()) == (0.0, 0.0, 0.0, 0.0)
import pytest

from melice.geometry import Point, Rectangle, Size
from melice.hitbox import Hitbox, HitboxType


FRAME = Rectangle(Point(50.0, 40.0), Size(20.0, 10.0))


def test_hitbox_types_follow_serialised_order():
    assert [HitboxType(index).value for index in range(3)] == [0, 1, 2]
    assert [HitboxType(index) for index in range(3)] == list(HitboxType)
    with pytest.raises(ValueError):
        HitboxType(3)


def test_static_frame_is_returned():
    assert Hitbox(FRAME).frame() == FRAME


def test_callable_frame_follows_its_source():
    state = {"frame": FRAME}
    hitbox = Hitbox(lambda: state["frame"])
    moved = Rectangle(Point(0.0, 0.0), FRAME.size)
    state["frame"] = moved
    assert hitbox.frame() == moved


def test_point_edges_left_inclusive_right_exclusive():
    hitbox = Hitbox(FRAME)
    assert hitbox.collides_with_point(Point(FRAME.left(), FRAME.top()))
    assert not hitbox.collides_with_point(Point(FRAME.right(), FRAME.origin.y))
    assert not hitbox.collides_with_point(Point(FRAME.origin.x, FRAME.bottom()))
    assert hitbox.collides_with_point(FRAME.origin)


def test_touching_rectangles_collide():
    hitbox = Hitbox(FRAME)
    touching = Rectangle(Point(FRAME.origin.x + FRAME.size.width, FRAME.origin.y), FRAME.size)
    assert hitbox.collides_with_rectangle(touching)


def test_separate_rectangles_do_not_collide():
    hitbox = Hitbox(FRAME)
    far = Rectangle(Point(FRAME.origin.x, FRAME.origin.y + 100.0), FRAME.size)
    assert not hitbox.collides_with_rectangle(far)


def test_hitbox_collision_is_symmetric():
    a = Hitbox(FRAME)
    b = Hitbox(Rectangle(Point(55.0, 44.0), Size(4.0, 4.0)))
    c = Hitbox(Rectangle(Point(500.0, 44.0), Size(4.0, 4.0)))
    assert a.collides_with_hitbox(b) and b.collides_with_hitbox(a)
    assert not a.collides_with_hitbox(c) and not c.collides_with_hitbox(a)


def test_top_half_covers_upper_half():
    half = Hitbox(FRAME).top_half_rectangle()
    assert half.top() == FRAME.top()
    assert half.bottom() == FRAME.origin.y
    assert half.left() == FRAME.left() and half.right() == FRAME.right()


def test_bottom_quarter_shape():
    quarter = Hitbox(FRAME).bottom_quarter_rectangle()
    assert quarter.size == Size(FRAME.size.width, FRAME.size.height / 4)
    assert quarter.origin.x == FRAME.origin.x
    assert quarter.origin.y > FRAME.origin.y
from melice.controller import Buttons, Controller
from melice.geometry import Point


def test_no_buttons():
    controller = Controller.from_buttons(Buttons.NONE, Buttons.NONE)
    assert controller == Controller()


def test_directions():
    assert Controller.from_buttons(Buttons.RIGHT | Buttons.DOWN, 0).axe == Point(1.0, 1.0)
    assert Controller.from_buttons(Buttons.LEFT | Buttons.UP, 0).axe == Point(-1.0, -1.0)


def test_left_and_up_win():
    controller = Controller.from_buttons(
        Buttons.LEFT | Buttons.RIGHT | Buttons.UP | Buttons.DOWN, 0
    )
    assert controller.axe == Point(-1.0, -1.0)


def test_pressed_and_pressing():
    controller = Controller.from_buttons(Buttons.A, Buttons.B)
    assert controller.pressing_a
    assert not controller.pressing_b
    assert controller.pressed_b
    assert not controller.pressed_a


def test_accepts_plain_ints():
    controller = Controller.from_buttons(int(Buttons.B), int(Buttons.A))
    assert controller.pressing_b and controller.pressed_a
import pytest

from gbexperience.input import Button, ButtonsPressed, Input


def test_nothing_pressed_initially():
    state = Input()
    assert not any(state.is_pressed(button) for button in Button)
    assert state.snapshot() == ButtonsPressed()


@pytest.mark.parametrize("button", list(Button))
def test_press_and_release_round_trip(button):
    state = Input()
    state.set_button_pressed(button, True)
    assert state.is_pressed(button)
    assert [b for b in Button if state.is_pressed(b)] == [button]
    state.set_button_pressed(button, False)
    assert not state.is_pressed(button)


def test_snapshot_reflects_pressed_buttons():
    state = Input()
    state.set_button_pressed(Button.START, True)
    state.set_button_pressed(Button.LEFT, True)
    assert state.snapshot() == ButtonsPressed(start_pressed=True, left_pressed=True)


def test_snapshot_is_independent_of_later_changes():
    state = Input()
    state.set_button_pressed(Button.A, True)
    before = state.snapshot()
    state.set_button_pressed(Button.A, False)
    assert before.a_pressed is True
    assert state.snapshot().a_pressed is False


def test_releasing_unpressed_button_keeps_state():
    state = Input()
    state.set_button_pressed(Button.B, False)
    assert state.snapshot() == ButtonsPressed()


def test_unknown_button_rejected():
    with pytest.raises(ValueError):
        Input().set_button_pressed("turbo", True)
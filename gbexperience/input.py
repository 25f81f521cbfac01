"""Joypad button state."""

from dataclasses import dataclass
from enum import Enum, IntFlag


class Button(Enum):
    RIGHT = "right"
    LEFT = "left"
    UP = "up"
    DOWN = "down"
    A = "a"
    B = "b"
    SELECT = "select"
    START = "start"


class JoypadPort(IntFlag):
    P10 = 0x01
    P11 = 0x02
    P12 = 0x04
    P13 = 0x08
    P14 = 0x10
    P15 = 0x20


@dataclass(frozen=True)
class ButtonsPressed:
    """A snapshot of which buttons are held down."""

    left_pressed: bool = False
    right_pressed: bool = False
    up_pressed: bool = False
    down_pressed: bool = False
    a_pressed: bool = False
    b_pressed: bool = False
    select_pressed: bool = False
    start_pressed: bool = False


class Input:
    """Tracks which joypad buttons are currently held."""

    def __init__(self):
        self._pressed = set()

    def set_button_pressed(self, button, pressed):
        button = Button(button)
        if pressed:
            self._pressed.add(button)
        else:
            self._pressed.discard(button)

    def is_pressed(self, button):
        return Button(button) in self._pressed

    def snapshot(self):
        """Return the current state of every button."""
        return ButtonsPressed(
            **{f"{button.value}_pressed": button in self._pressed for button in Button}
        )
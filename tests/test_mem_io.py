import pytest

from gbexperience.input import Button, JoypadPort
from gbexperience.mem_io import IO, IORegister, IORegisterError


def test_power_on_defaults():
    io = IO()
    assert io.read(IORegister.LCDC) == 0x91
    assert io.read(IORegister.BGP) == 0xFC
    assert io.read(IORegister.OBP0) == 0xFF
    assert io.read(IORegister.DIV) == 0x0


@pytest.mark.parametrize(
    "register",
    [IORegister.BGP, IORegister.SCX, IORegister.SCY, IORegister.IE, IORegister.IF,
     IORegister.TAC, IORegister.WX, IORegister.STAT, IORegister.DMA],
)
def test_write_read_round_trip(register):
    io = IO()
    assert io.write(register, 0xAB) == register
    assert io.read(register) == 0xAB


def test_writing_ly_resets_it():
    io = IO()
    io.increment_counter(IORegister.LY)
    io.write(IORegister.LY, 0xAB)
    assert io.read(IORegister.LY) == 0


def test_increment_div():
    io = IO()
    io.increment_counter(IORegister.DIV)
    assert io.read(IORegister.DIV) == 0x1


def test_counter_wraps_around():
    io = IO()
    io.write(IORegister.DIV, 0xFF)
    io.increment_counter(IORegister.DIV)
    assert io.read(IORegister.DIV) == io.read(IORegister.TIMA)


def test_increment_non_counter_raises():
    with pytest.raises(IORegisterError):
        IO().increment_counter(IORegister.BGP)


def test_sound_and_serial_are_inert():
    io = IO()
    for register in (IORegister.NR10, IORegister.NR52, IORegister.SB, IORegister.SC):
        assert io.write(register, 0xAB) == register
        assert io.read(register) == io.read(IORegister.SCX)


def test_wave_pattern_ram_is_unusable():
    io = IO()
    assert io.write(0xFF30, 0xAB) == io.read(0xFF30) == io.read(0xFF3F)
    assert io.read(0xFF35) == io.read(IORegister.WY)


@pytest.mark.parametrize("address", [0xFF03, 0xFF4C, 0x1234])
def test_unknown_register_raises(address):
    io = IO()
    with pytest.raises(IORegisterError):
        io.read(address)
    with pytest.raises(IORegisterError):
        io.write(address, 1)


def test_no_group_selected_ignores_buttons():
    io = IO()
    io.set_button_pressed(Button.A, True)
    io.set_button_pressed(Button.RIGHT, True)
    assert not io.dpad_selected()
    assert not io.buttons_selected()
    assert io.joypad_bits() == 0xF


def test_dpad_selection_reports_direction():
    io = IO()
    io.write(IORegister.P1, JoypadPort.P15)
    io.set_button_pressed(Button.RIGHT, True)
    io.set_button_pressed(Button.A, True)
    assert io.dpad_selected() and not io.buttons_selected()
    assert io.joypad_bits() == 0xF & ~JoypadPort.P10
    assert io.read(IORegister.P1) == JoypadPort.P15 | io.joypad_bits()


def test_button_selection_reports_start():
    io = IO()
    io.write(IORegister.P1, JoypadPort.P14)
    io.set_button_pressed(Button.START, True)
    io.set_button_pressed(Button.DOWN, True)
    assert io.buttons_selected() and not io.dpad_selected()
    assert io.joypad_bits() == 0xF & ~JoypadPort.P13


def test_releasing_button_restores_bit():
    io = IO()
    io.write(IORegister.P1, JoypadPort.P15)
    io.set_button_pressed(Button.UP, True)
    io.set_button_pressed(Button.UP, False)
    assert io.joypad_bits() == 0xF
"""The memory-mapped I/O registers, including the joypad port."""

import logging
from enum import IntEnum

from .input import Button, Input, JoypadPort

log = logging.getLogger(__name__)


class IORegister(IntEnum):
    P1 = 0xFF00
    SB = 0xFF01
    SC = 0xFF02
    DIV = 0xFF04
    TIMA = 0xFF05
    TMA = 0xFF06
    TAC = 0xFF07
    IF = 0xFF0F
    NR10 = 0xFF10
    NR11 = 0xFF11
    NR12 = 0xFF12
    NR13 = 0xFF13
    NR14 = 0xFF14
    NR21 = 0xFF16
    NR22 = 0xFF17
    NR23 = 0xFF18
    NR24 = 0xFF19
    NR30 = 0xFF1A
    NR31 = 0xFF1B
    NR32 = 0xFF1C
    NR33 = 0xFF1D
    NR34 = 0xFF1E
    NR41 = 0xFF20
    NR42 = 0xFF21
    NR43 = 0xFF22
    NR44 = 0xFF23
    NR50 = 0xFF24
    NR51 = 0xFF25
    NR52 = 0xFF26
    LCDC = 0xFF40
    STAT = 0xFF41
    SCY = 0xFF42
    SCX = 0xFF43
    LY = 0xFF44
    LYC = 0xFF45
    DMA = 0xFF46
    BGP = 0xFF47
    OBP0 = 0xFF48
    OBP1 = 0xFF49
    WY = 0xFF4A
    WX = 0xFF4B
    IE = 0xFFFF


class IORegisterError(LookupError):
    """Raised for an address that is not an I/O register, or a misuse of one."""


_WAVE_PATTERN_RAM = range(0xFF30, 0xFF40)

# Serial and sound registers are not emulated: reads give 0, writes are dropped.
_UNBACKED = frozenset(
    {IORegister.SB, IORegister.SC}
    | {reg for reg in IORegister if reg.name.startswith("NR")}
)

_DEFAULTS = {
    IORegister.P1: 0xFF,
    IORegister.LCDC: 0x91,
    IORegister.BGP: 0xFC,
    IORegister.OBP0: 0xFF,
    IORegister.OBP1: 0xFF,
}

_COUNTERS = (IORegister.LY, IORegister.DIV)

_DPAD = (
    (Button.RIGHT, JoypadPort.P10),
    (Button.LEFT, JoypadPort.P11),
    (Button.UP, JoypadPort.P12),
    (Button.DOWN, JoypadPort.P13),
)
_BUTTONS = (
    (Button.A, JoypadPort.P10),
    (Button.B, JoypadPort.P11),
    (Button.SELECT, JoypadPort.P12),
    (Button.START, JoypadPort.P13),
)


class IO:
    """Register file for the 0xFF00-0xFF4B range and the interrupt enable register."""

    def __init__(self):
        self._input = Input()
        self._values = {reg: 0 for reg in IORegister if reg not in _UNBACKED}
        self._values.update(_DEFAULTS)

    @staticmethod
    def _lookup(address):
        try:
            return IORegister(address)
        except ValueError:
            raise IORegisterError(f"IO register {address:#06x} does not exist") from None

    def read(self, address):
        """Return the value of the register at ``address``."""
        if address in _WAVE_PATTERN_RAM:
            log.warning("Wave Pattern RAM unusable")
            return 0
        reg = self._lookup(address)
        if reg in _UNBACKED:
            log.warning("%s not implemented", reg.name)
            return 0
        value = self._values[reg]
        if reg is IORegister.P1:
            value |= self.joypad_bits()
        log.debug("IO: Reading %X from %s", value, reg.name)
        return value

    def write(self, address, data):
        """Store ``data`` in the register at ``address`` and return the address."""
        if address in _WAVE_PATTERN_RAM:
            log.warning("Wave Pattern RAM unusable")
            return 0
        reg = self._lookup(address)
        if reg in _UNBACKED:
            log.warning("%s not implemented", reg.name)
            return int(reg)
        if reg is IORegister.LY:
            # LY resets when written to
            data = 0
        log.debug("IO: Writing %X to %s", data, reg.name)
        self._values[reg] = data & 0xFF
        return int(reg)

    def increment_counter(self, register):
        """Advance LY or DIV by one, wrapping at 256."""
        reg = self._lookup(register)
        if reg not in _COUNTERS:
            raise IORegisterError(
                f"IO register {reg.name} is not a counter and cannot be incremented"
            )
        self._values[reg] = (self._values[reg] + 1) & 0xFF

    def set_button_pressed(self, button, pressed):
        self._input.set_button_pressed(button, pressed)

    def joypad_bits(self):
        """Return the low nibble of P1: a cleared bit is a pressed, selected button."""
        bits = 0xF
        groups = []
        if self.dpad_selected():
            groups.append(_DPAD)
        if self.buttons_selected():
            groups.append(_BUTTONS)
        for group in groups:
            for button, port in group:
                if self._input.is_pressed(button):
                    bits &= ~port
        return bits & 0xF

    def dpad_selected(self):
        return (self._values[IORegister.P1] & JoypadPort.P14) == 0

    def buttons_selected(self):
        return (self._values[IORegister.P1] & JoypadPort.P15) == 0
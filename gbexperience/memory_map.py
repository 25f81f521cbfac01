"""The 16-bit address space: cartridge, video RAM, work RAM, OAM, I/O and high RAM."""

import logging
from enum import IntFlag

from .definitions import SPRITE_BYTES, TileMapTableSelect
from .mem_io import IO, IORegister
from .memory import Memory

log = logging.getLogger(__name__)

ROM_START = 0x0000
SWITCHABLE_ROM_START = 0x4000
VRAM_START = 0x8000
SWITCHABLE_RAM_START = 0xA000
INTERNAL_RAM_START = 0xC000
ECHO_RAM_START = 0xE000
OAM_START = 0xFE00
UNUSABLE_START = 0xFEA0
IO_START = 0xFF00
UNUSABLE_IO_START = 0xFF4C
HIGH_RAM_START = 0xFF80
INTERRUPT_ENABLE_ADDRESS = 0xFFFF

DMA_LENGTH = 0xA0


class InterruptFlag(IntFlag):
    VBLANK = 0x01
    LCD_STAT = 0x02
    TIMER = 0x04
    SERIAL = 0x08
    JOYPAD = 0x10


class InvalidAddressError(ValueError):
    """Raised for an address outside the 16-bit address space."""


class Cartridge:
    """A ROM-only cartridge: its contents can be read but not written."""

    rom_only = True

    def __init__(self, rom):
        self._rom = bytes(rom)

    def __len__(self):
        return len(self._rom)

    def read(self, address):
        """Return the ROM byte at ``address``."""
        if not 0 <= address < len(self._rom):
            raise InvalidAddressError(
                f"address {address:#06x} outside a ROM of {len(self._rom)} bytes"
            )
        return self._rom[address]

    def write(self, address, data):
        """Refuse the write: a ROM-only cartridge has nothing writable."""
        raise InvalidAddressError(
            f"cannot write {data:#04x} to read-only ROM at address {address:#06x}"
        )


class MemoryMap:
    """Routes reads and writes to the component that backs each address."""

    def __init__(self):
        self._vram = Memory(SWITCHABLE_RAM_START - VRAM_START)
        self._oam = Memory(UNUSABLE_START - OAM_START)
        self._internal_ram = Memory(ECHO_RAM_START - INTERNAL_RAM_START)
        self._high_ram = Memory(INTERRUPT_ENABLE_ADDRESS - HIGH_RAM_START)
        self._cartridge = None
        self._io = IO()

    def load_rom(self, cartridge):
        """Insert ``cartridge`` into the ROM area."""
        self._cartridge = cartridge

    @property
    def _rom_only(self):
        return self._cartridge is None or self._cartridge.rom_only

    def write(self, address, data):
        """Write one byte and return the address the backing component reports."""
        if ROM_START <= address < VRAM_START:
            if self._rom_only:
                log.warning("Cannot write to ROM")
            else:
                return self._cartridge.write(address, data)
        elif VRAM_START <= address < SWITCHABLE_RAM_START:
            return self.write_vram(address, data)
        elif SWITCHABLE_RAM_START <= address < INTERNAL_RAM_START:
            if self._rom_only:
                log.warning("Cannot write to internal RAM with a ROM_ONLY cartridge")
        elif INTERNAL_RAM_START <= address < ECHO_RAM_START:
            return self._internal_ram.write(address - INTERNAL_RAM_START, data)
        elif ECHO_RAM_START <= address < OAM_START:
            return self._internal_ram.write(address - ECHO_RAM_START, data)
        elif OAM_START <= address < UNUSABLE_START:
            return self.write_oam(address, data)
        elif UNUSABLE_START <= address < IO_START:
            log.warning("Address space unusable: %X", address)
        elif IO_START <= address < UNUSABLE_IO_START:
            if address == IORegister.DMA:
                self.dma_transfer(data)
            return self._io.write(address, data)
        elif UNUSABLE_IO_START <= address < HIGH_RAM_START:
            log.warning("Address space unusable: %X", address)
        elif HIGH_RAM_START <= address < INTERRUPT_ENABLE_ADDRESS:
            return self._high_ram.write(address - HIGH_RAM_START, data)
        elif address == INTERRUPT_ENABLE_ADDRESS:
            return self._io.write(address, data)
        else:
            raise InvalidAddressError(f"invalid address: {address}")
        return 0

    def read(self, address):
        """Return the byte at ``address``; unusable areas read as 0."""
        if ROM_START <= address < VRAM_START:
            if self._cartridge is None:
                log.warning("No cartridge loaded")
                return 0
            return self._cartridge.read(address)
        if VRAM_START <= address < SWITCHABLE_RAM_START:
            return self.read_vram(address)
        if SWITCHABLE_RAM_START <= address < INTERNAL_RAM_START:
            if self._rom_only:
                log.warning("Cannot read from internal RAM with a ROM_ONLY cartridge")
            return 0
        if INTERNAL_RAM_START <= address < ECHO_RAM_START:
            return self._internal_ram.read(address - INTERNAL_RAM_START)
        if ECHO_RAM_START <= address < OAM_START:
            return self._internal_ram.read(address - ECHO_RAM_START)
        if OAM_START <= address < UNUSABLE_START:
            return self.read_oam(address)
        if UNUSABLE_START <= address < IO_START:
            log.warning("Address space unusable: %X", address)
            return 0
        if IO_START <= address < UNUSABLE_IO_START:
            return self._io.read(address)
        if UNUSABLE_IO_START <= address < HIGH_RAM_START:
            log.warning("Address space unusable: %X", address)
            return 0
        if HIGH_RAM_START <= address < INTERRUPT_ENABLE_ADDRESS:
            return self._high_ram.read(address - HIGH_RAM_START)
        if address == INTERRUPT_ENABLE_ADDRESS:
            return self._io.read(address)
        raise InvalidAddressError(f"invalid address: {address}")

    @staticmethod
    def _vram_region(address):
        if address < TileMapTableSelect.MAP_0:
            return "Tile Data Table"
        if address < TileMapTableSelect.MAP_1:
            return "Background Map 0"
        return "Background Map 1"

    def write_vram(self, address, data):
        log.debug(
            "MemoryMap: Writing %X to %s at address %X", data, self._vram_region(address), address
        )
        return self._vram.write(address - VRAM_START, data)

    def read_vram(self, address):
        data = self._vram.read(address - VRAM_START)
        log.debug(
            "MemoryMap: Reading %X from %s at address %X", data, self._vram_region(address), address
        )
        return data

    def write_oam(self, address, data):
        offset = address - OAM_START
        log.debug(
            "MemoryMap: Writing %X to OAM at address %X. Sprite index: %d",
            data, address, offset // SPRITE_BYTES,
        )
        return self._oam.write(offset, data)

    def read_oam(self, address):
        offset = address - OAM_START
        data = self._oam.read(offset)
        log.debug(
            "MemoryMap: Reading %X from OAM at address %X. Sprite index: %d",
            data, address, offset // SPRITE_BYTES,
        )
        return data

    def dma_transfer(self, index):
        """Copy 160 bytes starting at ``index * 0x100`` into OAM."""
        source = (index & 0xFF) * 0x100
        for offset in range(DMA_LENGTH):
            self.write(OAM_START + offset, self.read(source + offset))

    def _get_bit(self, register, flag):
        return (self.read(register) & flag) == flag

    def _set_bit(self, register, flag, value):
        current = self.read(register)
        current = current | flag if value else current & ~flag & 0xFF
        self.write(register, current)

    def get_interrupt_enable_bit(self, flag):
        return self._get_bit(IORegister.IE, flag)

    def get_interrupt_flag_bit(self, flag):
        return self._get_bit(IORegister.IF, flag)

    def set_interrupt_enable_bit(self, flag, value):
        self._set_bit(IORegister.IE, flag, value)

    def set_interrupt_flag_bit(self, flag, value):
        self._set_bit(IORegister.IF, flag, value)

    def set_button_pressed(self, button, pressed):
        self._io.set_button_pressed(button, pressed)

    def increment_io_counter(self, register):
        self._io.increment_counter(register)
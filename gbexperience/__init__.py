"""Game Boy emulator building blocks: memory map, I/O, joypad, timer, tiles, sprites and display."""

__version__ = "1.1.0"
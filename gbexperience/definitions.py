"""Display timings, dimensions and the small enumerations shared by the video code."""

from dataclasses import dataclass
from enum import IntEnum

HBLANK_CLOCKS = 4 * 204  # Mode 0
VBLANK_CLOCKS = 4 * 4560  # Mode 1
OAM_CLOCKS = 4 * 80  # Mode 2
DATA_TRANSFER_CLOCKS = 4 * 172  # Mode 3

VBLANK_SCANLINE_CLOCKS = VBLANK_CLOCKS // 10

LCD_WIDTH = 160
LCD_HEIGHT = 144

PIXEL_SIZE = 4

MAP_SIZE = 256
TILES_PER_LINE = 32

TILE_WIDTH = 8
TILE_HEIGHT = 8

TILE_BYTE_LENGTH = 2 * (TILE_WIDTH * TILE_HEIGHT) // 8

OAM_ADDRESS = 0xFE00

BACKGROUND_TILE_MAP_BYTES = 1023
TILE_DATA_SET_BYTES = 4095
TILE_DATA_ENTIRE_SET_BYTES = 6143

NUM_SPRITES = 40
SPRITE_BYTES = 4


class SpriteSize(IntEnum):
    SPRITEx8 = 0
    SPRITEx16 = 1


class TileDataTableSelect(IntEnum):
    UNSIGNED = 0x8000
    SIGNED = 0x8800


class TileMapTableSelect(IntEnum):
    MAP_0 = 0x9800
    MAP_1 = 0x9C00


class VideoMode(IntEnum):
    HBLANK = 0x00
    VBLANK = 0x01
    OAM = 0x02
    DATA_TRANSFER = 0x03


class Colour(IntEnum):
    """A shade as shown on the screen."""

    WHITE = 0x0
    LIGHT_GRAY = 0x1
    DARK_GRAY = 0x2
    BLACK = 0x3


class PixelColour(IntEnum):
    """A colour number as stored in tile data, before a palette is applied."""

    COLOUR0 = 0
    COLOUR1 = 1
    COLOUR2 = 2
    COLOUR3 = 3


class ObjectPalette(IntEnum):
    OBJECT_PALETTE_0 = 0
    OBJECT_PALETTE_1 = 1


@dataclass
class Palette:
    """Maps the four colour numbers onto screen shades."""

    colour0: Colour = Colour.WHITE
    colour1: Colour = Colour.WHITE
    colour2: Colour = Colour.WHITE
    colour3: Colour = Colour.WHITE
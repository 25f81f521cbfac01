"""Decoding of 8x8 tiles stored as two bit-planes per row."""

from .definitions import TILE_HEIGHT, TILE_WIDTH, PixelColour


def decode_row(low, high):
    """Decode one tile row, leftmost pixel first, from its low and high bit-planes."""
    return [
        PixelColour((((high >> bit) & 1) << 1) | ((low >> bit) & 1))
        for bit in range(TILE_WIDTH - 1, -1, -1)
    ]


class TileRow:
    """One row of a tile, read from two consecutive bytes of memory."""

    def __init__(self, address, memory_map):
        self.pixels = decode_row(memory_map.read(address), memory_map.read(address + 1))

    def get_pixel(self, x):
        return self.pixels[x]


class Tile:
    """An 8x8 tile read from the 16 bytes starting at ``address``."""

    def __init__(self, address, memory_map):
        self._pixels = []
        for row_address in range(address, address + 2 * TILE_HEIGHT, 2):
            self._pixels.extend(TileRow(row_address, memory_map).pixels)

    @property
    def pixels(self):
        """All pixels, row by row."""
        return tuple(self._pixels)

    def get_pixel(self, x, y):
        return self._pixels[self.index(x, y)]

    def clear(self):
        """Set every pixel to colour 0."""
        self._pixels = [PixelColour.COLOUR0] * (TILE_WIDTH * TILE_HEIGHT)

    def index(self, x, y):
        return y * TILE_WIDTH + x
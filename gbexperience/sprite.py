"""Access to one sprite's attributes in object attribute memory."""

from .definitions import (
    OAM_ADDRESS,
    SPRITE_BYTES,
    TILE_BYTE_LENGTH,
    ObjectPalette,
    TileDataTableSelect,
)
from .tile import Tile


class Sprite:
    """The four OAM bytes of sprite ``number``, read live from memory."""

    def __init__(self, number, memory_map):
        self._memory_map = memory_map
        self._address = OAM_ADDRESS + number * SPRITE_BYTES

    def _attributes(self):
        return self._memory_map.read(self._address + 3)

    def x_pos(self):
        return self._memory_map.read(self._address + 1)

    def y_pos(self):
        return self._memory_map.read(self._address)

    def pattern_number(self):
        return self._memory_map.read(self._address + 2)

    def priority(self):
        """True when the sprite is drawn only over background colour 0."""
        return bool((self._attributes() >> 7) & 1)

    def x_flip(self):
        return bool((self._attributes() >> 5) & 1)

    def y_flip(self):
        return bool((self._attributes() >> 6) & 1)

    def palette(self):
        if (self._attributes() >> 4) & 1:
            return ObjectPalette.OBJECT_PALETTE_1
        return ObjectPalette.OBJECT_PALETTE_0

    def tile(self):
        """The tile this sprite shows, from the unsigned tile data table."""
        address = TileDataTableSelect.UNSIGNED + self.pattern_number() * TILE_BYTE_LENGTH
        return Tile(address, self._memory_map)
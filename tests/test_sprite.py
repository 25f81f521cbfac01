import pytest

from gbexperience.definitions import OAM_ADDRESS, ObjectPalette
from gbexperience.memory_map import MemoryMap
from gbexperience.sprite import Sprite
from gbexperience.tile import Tile


def _write_sprite(mem_map, number, y, x, pattern, attributes):
    base = OAM_ADDRESS + number * 4
    for offset, value in enumerate((y, x, pattern, attributes)):
        mem_map.write(base + offset, value)


def test_position_and_pattern():
    mem_map = MemoryMap()
    _write_sprite(mem_map, 3, 0x20, 0x30, 0x05, 0x00)
    sprite = Sprite(3, mem_map)
    assert sprite.y_pos() == 0x20
    assert sprite.x_pos() == 0x30
    assert sprite.pattern_number() == 0x05


def test_last_sprite_reads_end_of_oam():
    mem_map = MemoryMap()
    _write_sprite(mem_map, 39, 0x11, 0x22, 0x33, 0x00)
    sprite = Sprite(39, mem_map)
    assert (sprite.y_pos(), sprite.x_pos(), sprite.pattern_number()) == (0x11, 0x22, 0x33)


@pytest.mark.parametrize(
    "attributes, priority, y_flip, x_flip, palette",
    [
        (0x00, False, False, False, ObjectPalette.OBJECT_PALETTE_0),
        (0x80, True, False, False, ObjectPalette.OBJECT_PALETTE_0),
        (0x40, False, True, False, ObjectPalette.OBJECT_PALETTE_0),
        (0x20, False, False, True, ObjectPalette.OBJECT_PALETTE_0),
        (0x10, False, False, False, ObjectPalette.OBJECT_PALETTE_1),
        (0xF0, True, True, True, ObjectPalette.OBJECT_PALETTE_1),
    ],
)
def test_attribute_flags(attributes, priority, y_flip, x_flip, palette):
    mem_map = MemoryMap()
    _write_sprite(mem_map, 0, 0, 0, 0, attributes)
    sprite = Sprite(0, mem_map)
    assert sprite.priority() is priority
    assert sprite.y_flip() is y_flip
    assert sprite.x_flip() is x_flip
    assert sprite.palette() == palette


def test_tile_comes_from_pattern_number():
    mem_map = MemoryMap()
    pattern = 2
    tile_address = 0x8000 + pattern * 16
    for offset in range(16):
        mem_map.write(tile_address + offset, 0x33 if offset % 2 == 0 else 0x0F)
    _write_sprite(mem_map, 0, 0, 0, pattern, 0)
    assert Sprite(0, mem_map).tile().pixels == Tile(tile_address, mem_map).pixels
    assert Sprite(0, mem_map).tile().pixels != Tile(0x8000, mem_map).pixels
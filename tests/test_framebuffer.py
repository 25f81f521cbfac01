import pytest

from gbexperience.definitions import Colour
from gbexperience.framebuffer import FrameBuffer

WIDTH = 256
HEIGHT = 256


def all_pixels(buffer):
    return {(x, y): buffer.get_pixel(x, y) for x in range(WIDTH) for y in range(HEIGHT)}


def test_init_frame_buffer():
    buffer = FrameBuffer(WIDTH, HEIGHT)
    assert set(all_pixels(buffer).values()) == {Colour.WHITE}


def test_set_pixel():
    x_target, y_target = 10, 25
    buffer = FrameBuffer(WIDTH, HEIGHT)
    buffer.set_pixel(x_target, y_target, Colour.BLACK)

    pixels = all_pixels(buffer)
    assert pixels.pop((x_target, y_target)) == Colour.BLACK
    assert set(pixels.values()) == {Colour.WHITE}


def test_reset_frame_buffer():
    buffer = FrameBuffer(WIDTH, HEIGHT)
    buffer.set_pixel(10, 10, Colour.BLACK)
    buffer.set_pixel(20, 25, Colour.LIGHT_GRAY)
    buffer.set_pixel(50, 100, Colour.LIGHT_GRAY)
    buffer.set_pixel(100, 75, Colour.DARK_GRAY)
    buffer.set_pixel(20, 80, Colour.DARK_GRAY)
    buffer.set_pixel(15, 90, Colour.BLACK)

    buffer.reset()

    assert set(all_pixels(buffer).values()) == {Colour.WHITE}


def test_non_square_buffer_addresses_rows_correctly():
    buffer = FrameBuffer(160, 144)
    buffer.set_pixel(159, 0, Colour.BLACK)
    buffer.set_pixel(0, 143, Colour.DARK_GRAY)
    assert buffer.get_pixel(159, 0) == Colour.BLACK
    assert buffer.get_pixel(0, 1) == Colour.WHITE
    assert buffer.get_pixel(0, 143) == Colour.DARK_GRAY


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (WIDTH, 0), (0, HEIGHT)])
def test_out_of_bounds_raises(x, y):
    buffer = FrameBuffer(WIDTH, HEIGHT)
    with pytest.raises(IndexError):
        buffer.get_pixel(x, y)
    with pytest.raises(IndexError):
        buffer.set_pixel(x, y, Colour.BLACK)
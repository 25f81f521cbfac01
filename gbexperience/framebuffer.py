"""A two-dimensional buffer of screen shades."""

from .definitions import Colour


class FrameBuffer:
    """Pixels of a ``width`` by ``height`` image, all white to begin with."""

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self._pixels = [Colour.WHITE] * (width * height)

    def _index(self, x, y):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        return y * self.width + x

    def get_pixel(self, x, y):
        return self._pixels[self._index(x, y)]

    def set_pixel(self, x, y, colour):
        self._pixels[self._index(x, y)] = Colour(colour)

    def reset(self):
        """Make every pixel white again."""
        self._pixels = [Colour.WHITE] * (self.width * self.height)
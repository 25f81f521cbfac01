"""A window that shows frames with pygame and turns key presses into joypad input."""

import pygame

from .definitions import LCD_HEIGHT, LCD_WIDTH, PIXEL_SIZE, Colour
from .input import Button
from .user_interface import UI

FRAMERATE_LIMIT = 60

_WHITE = (255, 255, 255)
_SHADES = {
    Colour.WHITE: _WHITE,
    Colour.LIGHT_GRAY: (170, 170, 170),
    Colour.DARK_GRAY: (85, 85, 85),
    Colour.BLACK: (0, 0, 0),
}

KEY_BINDINGS = {
    pygame.K_w: Button.UP,
    pygame.K_a: Button.LEFT,
    pygame.K_s: Button.DOWN,
    pygame.K_d: Button.RIGHT,
    pygame.K_COMMA: Button.A,
    pygame.K_PERIOD: Button.B,
    pygame.K_RETURN: Button.START,
    pygame.K_BACKSPACE: Button.SELECT,
}


def pixel_colour(colour):
    """Return the RGB triple for a screen shade; anything unknown is white."""
    return _SHADES.get(colour, _WHITE)


class PygameUI(UI):
    """Draws each frame scaled up by ``PIXEL_SIZE`` in a pygame window."""

    def __init__(self, memory_map, headless=False):
        super().__init__(memory_map, headless)
        self.screen = None
        self._clock = None

    def init_display(self, title):
        if self.headless:
            self.display_enabled = True
            return
        pygame.display.init()
        self.screen = pygame.display.set_mode((PIXEL_SIZE * LCD_WIDTH, PIXEL_SIZE * LCD_HEIGHT))
        pygame.display.set_caption(title)
        pygame.key.set_repeat()
        self._clock = pygame.time.Clock()
        self.display_enabled = True
        self.display_initialized = True

    def render(self, buffer):
        if self.headless or not self.display_enabled:
            return
        self._poll_events()
        if not self.display_enabled:
            return
        frame = bytes(
            channel
            for y in range(LCD_HEIGHT)
            for x in range(LCD_WIDTH)
            for channel in pixel_colour(buffer.get_pixel(x, y))
        )
        image = pygame.image.frombuffer(frame, (LCD_WIDTH, LCD_HEIGHT), "RGB")
        pygame.transform.scale(image, self.screen.get_size(), self.screen)
        pygame.display.flip()
        self.frames_rendered += 1
        self._clock.tick(FRAMERATE_LIMIT)

    def _poll_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.close()
                return
            if event.type == pygame.KEYDOWN:
                self.handle_key(event.key, True)
            elif event.type == pygame.KEYUP:
                self.handle_key(event.key, False)

    def handle_key(self, key, pressed):
        """Press or release the joypad button bound to ``key``, if any."""
        button = KEY_BINDINGS.get(key)
        if button is not None:
            self.set_button_pressed(button, pressed)

    def close(self):
        """Close the window and stop displaying."""
        self.display_enabled = False
        if self.display_initialized:
            pygame.display.quit()
            self.display_initialized = False
            self.screen = None
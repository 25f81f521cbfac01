"""The interface between the emulator and whatever presents it to the player."""


class UI:
    """A display that shows nothing; subclasses draw frames and report input."""

    def __init__(self, memory_map, headless=False):
        self._memory_map = memory_map
        self.headless = headless
        self.display_enabled = False
        self.display_initialized = False
        self.frames_rendered = 0

    def init_display(self, title):
        """Open the display; ``title`` names the window where there is one."""
        self.display_enabled = True

    def render(self, buffer):
        """Present a finished frame."""
        self.frames_rendered += 1

    def set_button_pressed(self, button, pressed):
        self._memory_map.set_button_pressed(button, pressed)
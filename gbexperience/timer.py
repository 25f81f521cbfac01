"""The divider timer."""

from .mem_io import IORegister

DIV_CYCLES = 256


class Timer:
    """Advances the DIV register as CPU cycles pass."""

    def __init__(self, memory_map):
        self._memory_map = memory_map
        self._cycle_counter = 0

    def tick(self, cycles):
        """Count ``cycles``; once more than 256 have passed, bump DIV and start over."""
        self._cycle_counter += cycles
        if self._cycle_counter > DIV_CYCLES:
            self._memory_map.increment_io_counter(IORegister.DIV)
            self._cycle_counter = 0
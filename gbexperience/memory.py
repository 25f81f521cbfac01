"""A flat, fixed-size block of byte-addressable memory."""

import logging

log = logging.getLogger(__name__)


class MemoryAccessError(IndexError):
    """Raised when an address falls outside a memory block."""


class Memory:
    """A zero-initialised block of bytes."""

    def __init__(self, size):
        if size < 0:
            raise ValueError(f"memory size must not be negative: {size}")
        self._data = bytearray(size)

    def _check(self, address):
        if not 0 <= address < len(self._data):
            log.error("Address out of range: address: %d size: %d", address, len(self._data))
            raise MemoryAccessError(
                f"address out of range: address: {address} size: {len(self._data)}"
            )

    def write(self, address, data):
        """Store one byte and return the address written to."""
        self._check(address)
        self._data[address] = data & 0xFF
        return address

    def read(self, address):
        """Return the byte stored at ``address``."""
        self._check(address)
        return self._data[address]

    def __len__(self):
        return len(self._data)
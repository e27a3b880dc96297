"""FIFO index queue for building ring buffers.

Tracks indexes ``0..N`` (``N`` a power of two) with 8-bit wrapping
read and write counters. All operations are O(1).
"""

from __future__ import annotations

_U8 = 0xFF


def _check_u8(val: int) -> int:
    if not 0 <= val <= _U8:
        raise ValueError(f"value must fit in an unsigned byte, got {val}")
    return val


def next_smaller_power_of_two(val: int) -> int:
    """Return ``val`` if it is a power of two, else the next smaller one.

    Zero maps to one.
    """
    _check_u8(val)
    if val > 0 and val & (val - 1) == 0:
        return val
    candidate = (val >> 1) + 1
    return 1 << (candidate - 1).bit_length()


class RingBufferIndex:
    """Hands out slot indexes of a ring buffer in FIFO order."""

    def __init__(self, size: int = 0) -> None:
        self._reads = 0
        self._writes = 0
        self._mask = next_smaller_power_of_two(size) - 1

    def __repr__(self) -> str:
        return (
            f"RingBufferIndex(reads={self._reads}, writes={self._writes}, "
            f"mask={self._mask})"
        )

    def available(self) -> int:
        """Number of indexes ready for :meth:`get`."""
        return (self._writes - self._reads) & _U8

    def is_empty(self) -> bool:
        """True if no index is ready for :meth:`get`."""
        return self.available() == 0

    def is_full(self) -> bool:
        """True if :meth:`put` cannot hand out another index."""
        return self._mask == 0 or self.available() > self._mask

    def get(self) -> int | None:
        """Return the oldest used index and mark it unused, or ``None``."""
        if self.is_empty():
            return None
        reads = self._reads
        self._reads = (reads + 1) & _U8
        return reads & self._mask

    def peek(self) -> int | None:
        """Return the index :meth:`get` would return, without consuming it."""
        if self.is_empty():
            return None
        return self._reads & self._mask

    def put(self) -> int | None:
        """Mark the next free index used and return it, or ``None`` if full."""
        if self.is_full():
            return None
        writes = self._writes
        self._writes = (writes + 1) & _U8
        return writes & self._mask

    def capacity(self) -> int:
        """Total number of indexes this instance tracks."""
        return self._mask + 1 if self._mask > 0 else 0
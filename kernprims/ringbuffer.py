"""Typed FIFO ring buffer with single-element put, get and peek.

A buffer may be created without backing storage; it then holds nothing
until storage is attached with :meth:`RingBuffer.set_backing_size`.
"""

from __future__ import annotations

from typing import Any

from kernprims.rbi import RingBufferIndex


class RingBuffer:
    """Fixed-capacity FIFO of elements."""

    def __init__(self, size: int = 0) -> None:
        self._index = RingBufferIndex(size)
        self._slots: list[Any] = [None] * size

    def __repr__(self) -> str:
        return f"RingBuffer(capacity={self.capacity()}, available={self.available()})"

    def put(self, element: Any) -> bool:
        """Append ``element``; return False if the buffer is full."""
        pos = self._index.put()
        if pos is None:
            return False
        self._slots[pos] = element
        return True

    def get(self) -> Any | None:
        """Remove and return the oldest element, or ``None`` if empty."""
        pos = self._index.get()
        if pos is None:
            return None
        element = self._slots[pos]
        self._slots[pos] = None
        return element

    def peek(self) -> Any | None:
        """Return the oldest element without removing it, or ``None``."""
        pos = self._index.peek()
        if pos is None:
            return None
        return self._slots[pos]

    def available(self) -> int:
        """Number of stored elements."""
        return self._index.available()

    def capacity(self) -> int:
        """Maximum number of elements the buffer can hold."""
        return self._index.capacity()

    def is_full(self) -> bool:
        return self._index.is_full()

    def is_empty(self) -> bool:
        return self._index.is_empty()

    def set_backing_size(self, size: int | None) -> None:
        """Replace the backing storage with ``size`` slots, dropping contents.

        ``None`` detaches the storage entirely.
        """
        size = size or 0
        self._index = RingBufferIndex(size)
        self._slots = [None] * size
"""Multi-producer, multi-consumer channel with a bounded queue.

Items go into a ring buffer while it has room. When it is full, or has no
storage at all, senders block until a receiver takes their item. A receiver
that finds nothing blocks until a sender hands an item over directly.
"""

from __future__ import annotations

import threading
from collections import deque
from typing import Any

from kernprims.ringbuffer import RingBuffer


class ChannelBusyError(RuntimeError):
    """Raised when the queue storage is changed while threads are waiting."""


class _Waiter:
    __slots__ = ("item", "done")

    def __init__(self, item: Any = None) -> None:
        self.item = item
        self.done = False


class BufferedChannel:
    """Blocking channel backed by a ring buffer of ``size`` slots.

    Only a power-of-two part of ``size`` is used, as with :class:`RingBuffer`.
    A channel of size zero is a pure rendezvous channel.
    """

    def __init__(self, size: int = 0) -> None:
        self._rb = RingBuffer(size)
        self._cond = threading.Condition()
        self._senders: deque[_Waiter] = deque()
        self._receivers: deque[_Waiter] = deque()

    def __repr__(self) -> str:
        return (
            f"BufferedChannel(capacity={self.capacity()}, "
            f"available={self.available()})"
        )

    def _wait_for(self, waiter: _Waiter) -> None:
        while not waiter.done:
            self._cond.wait()

    def _hand_to_receiver(self, item: Any) -> None:
        receiver = self._receivers.popleft()
        receiver.item = item
        receiver.done = True
        self._cond.notify_all()

    def _take_with_senders_waiting(self) -> Any:
        # The queue may be empty even with senders waiting if it has no room.
        sender = self._senders.popleft()
        sender.done = True
        self._cond.notify_all()
        if self._rb.is_empty():
            return sender.item
        item = self._rb.get()
        self._rb.put(sender.item)
        return item

    def send(self, item: Any) -> None:
        """Send ``item``, blocking while the queue is full."""
        with self._cond:
            if self._receivers:
                self._hand_to_receiver(item)
                return
            if not self._senders and self._rb.put(item):
                return
            waiter = _Waiter(item)
            self._senders.append(waiter)
            self._wait_for(waiter)

    def try_send(self, item: Any) -> bool:
        """Send ``item`` without blocking; return False if it cannot be taken."""
        with self._cond:
            if self._receivers:
                self._hand_to_receiver(item)
                return True
            if self._senders:
                return False
            return self._rb.put(item)

    def recv(self) -> Any:
        """Receive the next item, blocking until one is available."""
        with self._cond:
            if self._senders:
                return self._take_with_senders_waiting()
            if not self._receivers and not self._rb.is_empty():
                return self._rb.get()
            waiter = _Waiter()
            self._receivers.append(waiter)
            self._wait_for(waiter)
            return waiter.item

    def try_recv(self) -> Any | None:
        """Receive an item without blocking, or return ``None`` if there is none."""
        with self._cond:
            if self._senders:
                return self._take_with_senders_waiting()
            if self._receivers or self._rb.is_empty():
                return None
            return self._rb.get()

    def capacity(self) -> int:
        """Number of items the queue can hold."""
        with self._cond:
            return self._rb.capacity()

    def available(self) -> int:
        """Number of items waiting in the queue."""
        with self._cond:
            return self._rb.available()

    def set_backing_size(self, size: int | None) -> None:
        """Replace the queue storage, dropping queued items.

        Raises :class:`ChannelBusyError` if any sender or receiver is waiting.
        """
        with self._cond:
            if self._senders or self._receivers:
                raise ChannelBusyError(
                    "cannot change backing array unless channel is Idle"
                )
            self._rb.set_backing_size(size)
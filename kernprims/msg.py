"""Per-thread message queues.

Every thread id owns one :class:`BufferedChannel`. The channel starts
without storage, so sending blocks until the target receives, unless the
target has attached a queue with :meth:`MessageQueues.init_queue`.
"""

from __future__ import annotations

from dataclasses import dataclass

from kernprims.channel import BufferedChannel
from kernprims.threadinfo import THREADS_NUMOF


@dataclass(frozen=True)
class Msg:
    """A message: sender, a 16-bit type and a word of content."""

    sender_pid: int = 0
    type_: int = 0
    content: int = 0


class MessageQueues:
    """The message channels of ``threads_numof`` threads, indexed by pid."""

    def __init__(self, threads_numof: int = THREADS_NUMOF) -> None:
        if threads_numof < 0:
            raise ValueError(f"thread count must not be negative, got {threads_numof}")
        self._channels = [BufferedChannel(0) for _ in range(threads_numof)]

    def __repr__(self) -> str:
        return f"MessageQueues(threads_numof={len(self._channels)})"

    def __len__(self) -> int:
        return len(self._channels)

    def _channel(self, pid: int) -> BufferedChannel:
        if not 0 <= pid < len(self._channels):
            raise ValueError(f"invalid thread id: {pid}")
        return self._channels[pid]

    def send(self, msg: Msg, target_pid: int) -> None:
        """Send ``msg`` to ``target_pid``, blocking until it is taken or queued."""
        self._channel(target_pid).send(msg)

    def try_send(self, msg: Msg, target_pid: int) -> bool:
        """Send without blocking; return False if the target cannot take it now."""
        return self._channel(target_pid).try_send(msg)

    def receive(self, pid: int) -> Msg:
        """Block until a message for ``pid`` arrives and return it."""
        return self._channel(pid).recv()

    def try_receive(self, pid: int) -> Msg | None:
        """Return a waiting message for ``pid``, or ``None`` if there is none."""
        return self._channel(pid).try_recv()

    def send_receive(self, msg: Msg, target_pid: int, pid: int) -> Msg:
        """Send ``msg`` to ``target_pid``, then wait for a reply to ``pid``."""
        reply_channel = self._channel(pid)
        self.send(msg, target_pid)
        return reply_channel.recv()

    def init_queue(self, pid: int, size: int) -> None:
        """Give ``pid`` a queue of ``size`` slots (a power-of-two part is used)."""
        self._channel(pid).set_backing_size(size)

    def avail(self, pid: int) -> int:
        """Number of messages queued for ``pid``."""
        return self._channel(pid).available()
"""Thread status names, creation flags and stack helpers."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum, IntFlag

SCHED_PRIO_LEVELS = 8
THREADS_NUMOF = 8

THREAD_FLAG_MSG_WAITING = 1 << 15
THREAD_FLAG_TIMEOUT = 1 << 14

INVALID_PID = 0xFF
WAKEUP_OK = 1
WAKEUP_FAILED = 0xFF

_STACK_ALIGN = 8


class ThreadStatus(IntEnum):
    """Externally visible thread states."""

    INVALID = 0
    RUNNING = 1
    PAUSED = 2
    ZOMBIE = 3
    MUTEX_BLOCKED = 4
    FLAG_BLOCKED_ANY = 5
    FLAG_BLOCKED_ALL = 6
    CHANNEL_RX_BLOCKED = 7
    CHANNEL_TX_BLOCKED = 8
    CHANNEL_REPLY_BLOCKED = 9
    CHANNEL_TX_REPLY_BLOCKED = 10


class CreateFlags(IntFlag):
    """Flags accepted when creating a thread."""

    SLEEPING = 1 << 0
    WITHOUT_YIELD = 1 << 1
    STACKTEST = 1 << 2


_STATUS_NAMES = {
    ThreadStatus.RUNNING: "pending",
    ThreadStatus.ZOMBIE: "zombie",
    ThreadStatus.PAUSED: "sleeping",
    ThreadStatus.MUTEX_BLOCKED: "bl mutex",
    ThreadStatus.FLAG_BLOCKED_ANY: "bl anyfl",
    ThreadStatus.FLAG_BLOCKED_ALL: "bl allfl",
    ThreadStatus.CHANNEL_TX_BLOCKED: "bl send",
    ThreadStatus.CHANNEL_RX_BLOCKED: "bl rx",
    ThreadStatus.CHANNEL_TX_REPLY_BLOCKED: "bl txrx",
    ThreadStatus.CHANNEL_REPLY_BLOCKED: "bl reply",
}


def status_to_string(status: ThreadStatus) -> str:
    """Return the short display name of a thread status."""
    return _STATUS_NAMES.get(ThreadStatus(status), "unknown")


def pid_is_valid(pid: int) -> bool:
    """True if ``pid`` names one of the thread slots."""
    return 0 <= pid < THREADS_NUMOF


def align_stack(address: int, size: int) -> tuple[int, int]:
    """Shrink a stack region so both its ends are 8-byte aligned.

    Returns the aligned start address and size.
    """
    misalign = address & (_STACK_ALIGN - 1)
    if misalign:
        shift = _STACK_ALIGN - misalign
        if size < shift:
            raise ValueError(f"stack of {size} bytes too small to align")
        address += shift
        size -= shift
    size &= ~(_STACK_ALIGN - 1)
    return address, size


def measure_stack_free(
    read_word: Callable[[int], int], start: int, word_size: int = 4
) -> int:
    """Count the bytes from ``start`` that still hold their own address.

    ``read_word`` returns the word stored at an address.
    """
    if start & 0x3:
        raise ValueError(f"stack start {start:#x} is not word aligned")
    pos = start
    while read_word(pos) == pos:
        pos += word_size
    return pos - start


def wakeup_result(woken: bool) -> int:
    """Return the wakeup status code: 1 on success, 0xff otherwise."""
    return WAKEUP_OK if woken else WAKEUP_FAILED


def getpid_result(pid: int | None) -> int:
    """Return ``pid``, or 0xff when no thread is running."""
    return INVALID_PID if pid is None else pid
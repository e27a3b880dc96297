"""Locks, a data-carrying mutex and a statically initialisable raw mutex.

The mutex has no poisoning: a guard left unreleased keeps the mutex locked.
"""

from __future__ import annotations

import threading
from typing import Any

MUTEX_T_SIZEOF = 2
MUTEX_T_ALIGNOF = 1

_STATIC_UNLOCKED = b"\x00\x00"
_STATIC_LOCKED = b"\xff\xff"

_init_guard = threading.Lock()


class Lock:
    """A blocking lock that any thread may release."""

    def __init__(self, locked: bool = False) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._locked = locked

    def __repr__(self) -> str:
        return f"Lock(locked={self._locked})"

    def acquire(self) -> None:
        """Take the lock, blocking while it is held."""
        with self._cond:
            while self._locked:
                self._cond.wait()
            self._locked = True

    def try_acquire(self) -> bool:
        """Take the lock if it is free; return whether it was taken."""
        with self._cond:
            if self._locked:
                return False
            self._locked = True
            return True

    def release(self) -> None:
        """Free the lock and wake one waiter. Releasing a free lock does nothing."""
        with self._cond:
            self._locked = False
            self._cond.notify()

    def is_locked(self) -> bool:
        with self._cond:
            return self._locked


class Mutex:
    """A lock that owns a value, reachable only through a :class:`MutexGuard`."""

    def __init__(self, value: Any) -> None:
        self._lock = Lock()
        self._value = value

    def __repr__(self) -> str:
        return f"Mutex(locked={self._lock.is_locked()})"

    def lock(self) -> MutexGuard:
        """Block until the mutex is free and return a guard for its value."""
        self._lock.acquire()
        return MutexGuard(self)

    def try_lock(self) -> MutexGuard | None:
        """Return a guard if the mutex is free, else ``None``."""
        if self._lock.try_acquire():
            return MutexGuard(self)
        return None


class MutexGuard:
    """Access to a locked :class:`Mutex`'s value; releases it when done."""

    def __init__(self, mutex: Mutex) -> None:
        self._mutex = mutex
        self._released = False

    def _check(self) -> Mutex:
        if self._released:
            raise RuntimeError("mutex guard already released")
        return self._mutex

    @property
    def value(self) -> Any:
        return self._check()._value

    @value.setter
    def value(self, new: Any) -> None:
        self._check()._value = new

    def release(self) -> None:
        """Unlock the mutex. Later releases of the same guard do nothing."""
        if not self._released:
            self._released = True
            self._mutex._lock.release()

    def __enter__(self) -> MutexGuard:
        self._check()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


class RawMutex:
    """A mutex given by its two-byte static initializer.

    ``b"\\x00\\x00"`` starts unlocked, ``b"\\xff\\xff"`` starts locked; the lock
    is set up lazily on first use unless :meth:`init` or :meth:`init_locked`
    is called first.
    """

    def __init__(self, raw: bytes = _STATIC_UNLOCKED) -> None:
        raw = bytes(raw)
        if len(raw) != MUTEX_T_SIZEOF:
            raise ValueError(f"raw mutex must be {MUTEX_T_SIZEOF} bytes, got {len(raw)}")
        if raw not in (_STATIC_UNLOCKED, _STATIC_LOCKED):
            raise ValueError(f"not a static mutex initializer: {raw!r}")
        self._raw = raw
        self._lock: Lock | None = None

    def __repr__(self) -> str:
        state = "uninitialized" if self._lock is None else repr(self._lock)
        return f"RawMutex({state})"

    def _ensure_initialized(self) -> Lock:
        with _init_guard:
            if self._lock is None:
                self._lock = Lock(locked=self._raw == _STATIC_LOCKED)
            return self._lock

    def init(self) -> None:
        """(Re)initialise as unlocked."""
        with _init_guard:
            self._lock = Lock()

    def init_locked(self) -> None:
        """(Re)initialise as locked."""
        with _init_guard:
            self._lock = Lock(locked=True)

    def lock(self) -> None:
        self._ensure_initialized().acquire()

    def trylock(self) -> bool:
        return self._ensure_initialized().try_acquire()

    def unlock(self) -> None:
        self._ensure_initialized().release()
"""Per-collection mutual exclusion for read-modify-write cycles.

Writers to the same collection run one at a time, in the order they
asked for the lock. Different collections never block each other.
"""

import threading
import weakref
from contextlib import contextmanager
from typing import Iterator


class FifoLock:
    """A non-reentrant lock that grants ownership in arrival order."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._next_ticket = 0
        self._serving = 0

    def acquire(self) -> None:
        with self._cond:
            ticket = self._next_ticket
            self._next_ticket += 1
            while ticket != self._serving:
                self._cond.wait()

    def release(self) -> None:
        with self._cond:
            if self._serving >= self._next_ticket:
                raise RuntimeError("release of unlocked FifoLock")
            self._serving += 1
            self._cond.notify_all()

    def locked(self) -> bool:
        with self._cond:
            return self._serving < self._next_ticket

    def __enter__(self) -> "FifoLock":
        self.acquire()
        return self

    def __exit__(self, *exc_info) -> None:
        self.release()


class CollectionLocks:
    """Registry of one :class:`FifoLock` per collection name."""

    def __init__(self) -> None:
        self._registry_lock = threading.Lock()
        # Entries disappear once no caller holds or waits on the lock.
        self._locks: "weakref.WeakValueDictionary[str, FifoLock]" = weakref.WeakValueDictionary()

    def get(self, name: str) -> FifoLock:
        with self._registry_lock:
            lock = self._locks.get(name)
            if lock is None:
                lock = FifoLock()
                self._locks[name] = lock
            return lock

    def __len__(self) -> int:
        with self._registry_lock:
            return len(self._locks)

    @contextmanager
    def hold(self, name: str) -> Iterator[None]:
        with self.get(name):
            yield

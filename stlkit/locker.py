"""Readers-writer locks, including a no-op variant for single-threaded use."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager, nullcontext


class FakeLocker:
    """A locker whose read and write sections do no locking at all."""

    def read(self) -> AbstractContextManager[None]:
        """Return a context manager for a shared section that takes no lock."""
        return nullcontext()

    def write(self) -> AbstractContextManager[None]:
        """Return a context manager for an exclusive section that takes no lock."""
        return nullcontext()


class RWLock:
    """A readers-writer lock: many readers or one writer.

    A waiting writer keeps new readers out, so writers are not starved.
    The lock is not reentrant.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        """Hold the lock shared for the duration of the block."""
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        """Hold the lock exclusively for the duration of the block."""
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


Locker = FakeLocker | RWLock


def make_locker(thread_safe: bool) -> Locker:
    """Return a real lock when ``thread_safe`` is true, else a no-op one."""
    return RWLock() if thread_safe else FakeLocker()
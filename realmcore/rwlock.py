"""A reader/writer lock with context-manager guards."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager


class LockError(RuntimeError):
    """Raised when a lock is released without being held."""


class ReadWriteLock:
    """Many readers or one writer at a time; not re-entrant for writers."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False

    @property
    def readers(self) -> int:
        """Number of read holds currently taken."""
        return self._readers

    @property
    def writing(self) -> bool:
        """Whether the write hold is taken."""
        return self._writer

    def acquire_read(self) -> None:
        with self._cond:
            self._cond.wait_for(lambda: not self._writer)
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            if self._readers == 0:
                raise LockError("read lock released without being held")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._cond.wait_for(lambda: not self._writer and self._readers == 0)
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            if not self._writer:
                raise LockError("write lock released without being held")
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[ReadWriteLock]:
        """Hold a read lock for the duration of the block."""
        self.acquire_read()
        try:
            yield self
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[ReadWriteLock]:
        """Hold the write lock for the duration of the block."""
        self.acquire_write()
        try:
            yield self
        finally:
            self.release_write()
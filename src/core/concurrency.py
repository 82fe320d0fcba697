"""Thread-safe concurrent access primitives."""

import threading
import time
from contextlib import contextmanager
from typing import Iterator, Optional


class ReadWriteLock:
    """Read-write lock with writer priority and timeout support.

    Any number of readers may hold the lock together; a writer holds it
    alone. While a writer is waiting, new readers queue behind it.
    """

    def __init__(self, name: str = "unnamed", writer_priority: bool = True):
        self.name = name
        self.writer_priority = writer_priority

        self._cv = threading.Condition(threading.Lock())
        self._readers_count = 0
        self._writer_active = False
        self._writers_waiting = 0

    @contextmanager
    def read_lock(self, timeout: Optional[float] = None) -> Iterator[None]:
        """Acquire read lock."""
        if not self._acquire_read_lock(timeout):
            raise TimeoutError(f"Failed to acquire read lock on {self.name}")
        try:
            yield
        finally:
            self._release_read_lock()

    @contextmanager
    def write_lock(self, timeout: Optional[float] = None) -> Iterator[None]:
        """Acquire write lock."""
        if not self._acquire_write_lock(timeout):
            raise TimeoutError(f"Failed to acquire write lock on {self.name}")
        try:
            yield
        finally:
            self._release_write_lock()

    @property
    def readers(self) -> int:
        """Number of readers currently holding the lock."""
        with self._cv:
            return self._readers_count

    @property
    def writer_active(self) -> bool:
        """Whether a writer currently holds the lock."""
        with self._cv:
            return self._writer_active

    def _can_acquire_read_lock(self) -> bool:
        return not self._writer_active and (
            not self.writer_priority or self._writers_waiting == 0
        )

    def _can_acquire_write_lock(self) -> bool:
        return not self._writer_active and self._readers_count == 0

    def _wait(self, end_time: Optional[float]) -> bool:
        if end_time is None:
            self._cv.wait()
            return True
        remaining = end_time - time.monotonic()
        if remaining <= 0:
            return False
        self._cv.wait(remaining)
        return True

    def _acquire_read_lock(self, timeout: Optional[float]) -> bool:
        end_time = None if timeout is None else time.monotonic() + timeout
        with self._cv:
            while not self._can_acquire_read_lock():
                if not self._wait(end_time):
                    return False
            self._readers_count += 1
            return True

    def _acquire_write_lock(self, timeout: Optional[float]) -> bool:
        end_time = None if timeout is None else time.monotonic() + timeout
        with self._cv:
            self._writers_waiting += 1
            try:
                while not self._can_acquire_write_lock():
                    if not self._wait(end_time):
                        return False
                self._writer_active = True
                return True
            finally:
                self._writers_waiting -= 1
                # Readers held back by this writer may proceed if it gave up
                self._cv.notify_all()

    def _release_read_lock(self) -> None:
        with self._cv:
            self._readers_count -= 1
            if self._readers_count == 0:
                self._cv.notify_all()

    def _release_write_lock(self) -> None:
        with self._cv:
            self._writer_active = False
            self._cv.notify_all()

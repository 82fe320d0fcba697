"""Tests for the read/write lock."""

import threading
import time

import pytest

from src.core.concurrency import ReadWriteLock


class TestReadWriteLock:
    """Test reader sharing and writer exclusion."""

    def test_readers_share_the_lock(self):
        lock = ReadWriteLock("test")
        inside = threading.Barrier(3, timeout=2)

        def reader():
            with lock.read_lock():
                inside.wait()

        threads = [threading.Thread(target=reader) for _ in range(3)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=5)

        # All three readers reached the barrier while holding the lock
        assert not inside.broken

    def test_writer_excludes_readers(self):
        lock = ReadWriteLock("test")
        events = []

        def reader():
            with lock.read_lock():
                events.append("read")

        with lock.write_lock():
            t = threading.Thread(target=reader)
            t.start()
            time.sleep(0.05)
            assert events == []
            assert lock.writer_active

        t.join(timeout=5)
        assert events == ["read"]

    def test_write_timeout_while_read_held(self):
        lock = ReadWriteLock("test")

        with lock.read_lock():
            with pytest.raises(TimeoutError):
                with lock.write_lock(timeout=0.05):
                    pass

        # The abandoned writer does not block later readers
        with lock.read_lock(timeout=0.5):
            assert lock.readers == 1

    def test_read_timeout_while_write_held(self):
        lock = ReadWriteLock("test")

        with lock.write_lock():
            with pytest.raises(TimeoutError):
                with lock.read_lock(timeout=0.05):
                    pass

    def test_release_after_exception(self):
        lock = ReadWriteLock("test")

        with pytest.raises(ValueError):
            with lock.write_lock():
                raise ValueError("boom")

        assert not lock.writer_active
        with lock.write_lock(timeout=0.5):
            pass

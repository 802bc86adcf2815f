"""Readers-writer lock guarding a Registry's render plan.

Rendering only reads a registry's fragments and functions, so any number of
threads may render concurrently. Patching a registry (set_fragment,
add_function) swaps its compiled Jinja2 environment and must not overlap with
a render in flight.

Semantics:
- Multiple concurrent readers (render)
- Exclusive writer access (set_fragment, add_function, add_functions)
- Writer preference: once a writer waits, new readers queue behind it
- Reentrant reads: rendering a wrapped error bound to the same registry
  re-acquires the read lock on the same thread

Read-to-write upgrades and write-to-read downgrades are rejected with
RuntimeError. A formatter function that tries to patch the registry it is
being rendered with would otherwise deadlock.

Python 3.13+.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

__all__ = ["RWLock"]


class RWLock:
    """Readers-writer lock with writer preference.

    Example:
        >>> lock = RWLock()
        >>> with lock.read():
        ...     pass
        >>> with lock.write():
        ...     pass
    """

    __slots__ = (
        "_active_readers",
        "_active_writer",
        "_condition",
        "_reader_threads",
        "_waiting_writers",
    )

    def __init__(self) -> None:
        """Initialize readers-writer lock."""
        self._condition = threading.Condition(threading.Lock())
        self._active_readers: int = 0
        # Thread ID holding the write lock, if any
        self._active_writer: int | None = None
        self._waiting_writers: int = 0
        # Thread ID -> reentrant read count
        self._reader_threads: dict[int, int] = {}

    @contextmanager
    def read(self) -> Generator[None]:
        """Acquire read lock (shared access).

        Raises:
            RuntimeError: If the thread holds the write lock.
        """
        self._acquire_read()
        try:
            yield
        finally:
            self._release_read()

    @contextmanager
    def write(self) -> Generator[None]:
        """Acquire write lock (exclusive access).

        Raises:
            RuntimeError: If the thread holds a read lock or already holds
                the write lock.
        """
        self._acquire_write()
        try:
            yield
        finally:
            self._release_write()

    def _acquire_read(self) -> None:
        current_thread_id = threading.get_ident()

        with self._condition:
            if current_thread_id in self._reader_threads:
                self._reader_threads[current_thread_id] += 1
                return

            if self._active_writer == current_thread_id:
                msg = (
                    "Cannot acquire read lock while holding write lock. "
                    "Release the write lock before acquiring a read lock."
                )
                raise RuntimeError(msg)

            while self._active_writer is not None or self._waiting_writers > 0:
                self._condition.wait()

            self._active_readers += 1
            self._reader_threads[current_thread_id] = 1

    def _release_read(self) -> None:
        current_thread_id = threading.get_ident()

        with self._condition:
            if current_thread_id not in self._reader_threads:
                msg = "Thread does not hold read lock"
                raise RuntimeError(msg)

            self._reader_threads[current_thread_id] -= 1
            if self._reader_threads[current_thread_id] == 0:
                del self._reader_threads[current_thread_id]
                self._active_readers -= 1
                if self._active_readers == 0:
                    self._condition.notify_all()

    def _acquire_write(self) -> None:
        current_thread_id = threading.get_ident()

        with self._condition:
            if current_thread_id in self._reader_threads:
                msg = (
                    "Cannot upgrade read lock to write lock. "
                    "Release read lock before acquiring write lock."
                )
                raise RuntimeError(msg)

            if self._active_writer == current_thread_id:
                msg = (
                    "Cannot acquire write lock: already holding write lock. "
                    "Release the write lock before acquiring it again."
                )
                raise RuntimeError(msg)

            self._waiting_writers += 1
            try:
                while self._active_readers > 0 or self._active_writer is not None:
                    self._condition.wait()
                self._active_writer = current_thread_id
            finally:
                self._waiting_writers -= 1
                self._condition.notify_all()

    def _release_write(self) -> None:
        current_thread_id = threading.get_ident()

        with self._condition:
            if self._active_writer != current_thread_id:
                msg = "Thread does not hold write lock"
                raise RuntimeError(msg)

            self._active_writer = None
            self._condition.notify_all()

    @property
    def reader_count(self) -> int:
        """Number of distinct threads currently holding read locks."""
        with self._condition:
            return self._active_readers

    @property
    def writer_active(self) -> bool:
        """True if any thread currently holds the write lock."""
        with self._condition:
            return self._active_writer is not None

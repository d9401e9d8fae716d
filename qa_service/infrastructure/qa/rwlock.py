"""
Reader/writer lock for asyncio.

Any number of coroutines may hold the lock for reading, or exactly one
for writing. A waiting writer blocks new readers so writes are not
starved. Release is synchronous, so leaving a critical section can
never be interrupted by cancellation.

Thread-Safety: Not thread-safe. All users must share one event loop.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager


class ReadWriteLock:
    """Many concurrent readers or a single writer.

    Usage:
        lock = ReadWriteLock()
        async with lock.read():
            ...
        async with lock.write():
            ...
    """

    def __init__(self) -> None:
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0
        self._released = asyncio.Event()

    @property
    def readers(self) -> int:
        return self._readers

    @property
    def writer_active(self) -> bool:
        return self._writer

    def _notify(self) -> None:
        # Wake every waiter; each re-checks its own condition.
        self._released.set()
        self._released = asyncio.Event()

    async def _wait(self) -> None:
        await self._released.wait()

    async def acquire_read(self) -> None:
        while self._writer or self._waiting_writers:
            await self._wait()
        self._readers += 1

    def release_read(self) -> None:
        if self._readers <= 0:
            raise RuntimeError("release_read() called without a reader")
        self._readers -= 1
        if self._readers == 0:
            self._notify()

    async def acquire_write(self) -> None:
        self._waiting_writers += 1
        try:
            while self._writer or self._readers:
                await self._wait()
        except BaseException:
            self._waiting_writers -= 1
            self._notify()
            raise
        self._waiting_writers -= 1
        self._writer = True

    def release_write(self) -> None:
        if not self._writer:
            raise RuntimeError("release_write() called without a writer")
        self._writer = False
        self._notify()

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        """Hold the lock for reading for the duration of the block."""
        await self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        """Hold the lock exclusively for the duration of the block."""
        await self.acquire_write()
        try:
            yield
        finally:
            self.release_write()

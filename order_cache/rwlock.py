"""Reader-writer lock for coroutines sharing one event loop."""

import asyncio
from collections import deque
from contextlib import asynccontextmanager
from typing import AsyncIterator


class ReadWriteLock:
    """Multiple-readers / single-writer lock for asyncio tasks.

    Any number of readers may hold the lock at once; a writer holds it alone.
    Waiters are admitted in arrival order: readers that arrive while a writer
    is queued wait behind it, and consecutive queued readers are admitted
    together once the writer is done.

    Releasing is synchronous, so a release in a ``finally`` block cannot be
    interrupted by cancellation.

    Example:
        lock = ReadWriteLock()
        async with lock.read():
            ...
        async with lock.write():
            ...
    """

    def __init__(self) -> None:
        self._readers = 0
        self._writer = False
        self._waiters: deque[tuple[bool, asyncio.Future]] = deque()

    @property
    def readers(self) -> int:
        """Number of readers currently holding the lock."""
        return self._readers

    @property
    def locked(self) -> bool:
        """True while a writer holds the lock."""
        return self._writer

    async def acquire_read(self) -> None:
        """Acquire the lock for shared reading."""
        if not self._writer and not self._waiters:
            self._readers += 1
            return
        await self._wait(is_writer=False)

    async def acquire_write(self) -> None:
        """Acquire the lock for exclusive writing."""
        if not self._writer and not self._readers and not self._waiters:
            self._writer = True
            return
        await self._wait(is_writer=True)

    def release_read(self) -> None:
        """Release a shared hold.

        Raises:
            RuntimeError: If no reader holds the lock.
        """
        if self._readers <= 0:
            raise RuntimeError("Read lock released without being held")
        self._readers -= 1
        self._wake()

    def release_write(self) -> None:
        """Release the exclusive hold.

        Raises:
            RuntimeError: If no writer holds the lock.
        """
        if not self._writer:
            raise RuntimeError("Write lock released without being held")
        self._writer = False
        self._wake()

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        """Hold the lock for shared reading inside an ``async with`` block."""
        await self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        """Hold the lock exclusively inside an ``async with`` block."""
        await self.acquire_write()
        try:
            yield
        finally:
            self.release_write()

    async def _wait(self, is_writer: bool) -> None:
        waiter = (is_writer, asyncio.get_running_loop().create_future())
        self._waiters.append(waiter)
        fut = waiter[1]
        try:
            await fut
        except asyncio.CancelledError:
            if fut.done() and not fut.cancelled():
                # Granted before the cancellation was delivered
                if is_writer:
                    self.release_write()
                else:
                    self.release_read()
            else:
                if waiter in self._waiters:
                    self._waiters.remove(waiter)
                self._wake()
            raise

    def _wake(self) -> None:
        """Grant the lock to as many queued waiters as the current state allows."""
        while self._waiters and not self._writer:
            is_writer, fut = self._waiters[0]
            if fut.done():
                self._waiters.popleft()
                continue
            if is_writer:
                if self._readers:
                    break
                self._waiters.popleft()
                self._writer = True
                fut.set_result(None)
                break
            self._waiters.popleft()
            self._readers += 1
            fut.set_result(None)

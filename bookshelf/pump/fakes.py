"""
Deterministic test doubles for the pump seams.

FakeClock and FakeDelay let retry/backoff runs complete instantly while
still recording how much simulated time passed.
"""

import asyncio
from collections.abc import AsyncIterator, Callable, Iterable
from datetime import datetime, timedelta, timezone
from typing import Generic, TypeVar

from bookshelf.core.errors import SinkWriteError, SourceReadError

from .cancellation import CancellationToken
from .contracts import AsyncDelay, AsyncReader, AsyncWriter, Clock, IdGenerator

T = TypeVar("T")

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class FakeClock(Clock):
    """
    Clock that advances by ``tick`` seconds every time it is read.

    Args:
        start: Initial reading (defaults to the Unix epoch, UTC)
        tick: Seconds added after each now() call
    """

    def __init__(self, start: datetime | None = None, tick: float = 0.01):
        self._now = start or EPOCH
        self._tick = timedelta(seconds=tick)
        self.reads = 0

    def now(self) -> datetime:
        current = self._now
        self._now = self._now + self._tick
        self.reads += 1
        return current

    def peek(self) -> datetime:
        """Current reading without advancing."""
        return self._now

    def advance(self, seconds: float) -> None:
        self._now = self._now + timedelta(seconds=seconds)


class FakeDelay(AsyncDelay):
    """Advances a FakeClock instead of sleeping and records every request."""

    def __init__(self, clock: FakeClock):
        self._clock = clock
        self.requested: list[float] = []

    async def delay(self, seconds: float, token: CancellationToken) -> None:
        token.raise_if_cancelled()
        self.requested.append(seconds)
        self._clock.advance(seconds)


class FakeIdGenerator(IdGenerator):
    """Sequential ids: id-1, id-2, ..."""

    def __init__(self) -> None:
        self._counter = 0

    def new_id(self) -> str:
        self._counter += 1
        return f"id-{self._counter}"


class FakeReader(AsyncReader[T]):
    """
    Yields a fixed list of items, optionally failing at a given index.

    Args:
        items: Items to yield in order
        fail_at_index: Raise SourceReadError instead of yielding this index
    """

    def __init__(self, items: Iterable[T], fail_at_index: int | None = None):
        self._items = list(items)
        self._fail_at_index = fail_at_index

    async def read(self, token: CancellationToken) -> AsyncIterator[T]:
        for index, item in enumerate(self._items):
            token.raise_if_cancelled()

            if index == self._fail_at_index:
                raise SourceReadError("Reader failure")

            yield item
            await asyncio.sleep(0)


class FakeWriter(AsyncWriter[T]):
    """
    Records written items, failing the first ``fail_count`` attempts.

    Args:
        fail_count: Number of initial write attempts that raise SinkWriteError
        on_write: Callback invoked on every attempt, or only after a
            successful write when invoke_after_success is True
        invoke_after_success: See on_write
    """

    def __init__(
        self,
        fail_count: int = 0,
        on_write: Callable[[], None] | None = None,
        invoke_after_success: bool = False,
    ):
        self._remaining_failures = fail_count
        self._on_write = on_write
        self._invoke_after_success = invoke_after_success
        self.written: list[T] = []
        self.attempts = 0

    async def write(self, item: T, token: CancellationToken) -> None:
        self.attempts += 1

        if self._on_write and not self._invoke_after_success:
            self._on_write()

        token.raise_if_cancelled()

        if self._remaining_failures > 0:
            self._remaining_failures -= 1
            raise SinkWriteError("Writer failure")

        await asyncio.sleep(0)
        self.written.append(item)

        if self._on_write and self._invoke_after_success:
            self._on_write()

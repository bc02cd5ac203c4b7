"""
Adapters connecting the pump to ordinary iterables, CSV files and repositories.
"""

import asyncio
from collections.abc import AsyncIterator, Iterable
from pathlib import Path
from typing import TypeVar

from bookshelf.core.errors import SinkWriteError, SourceReadError
from bookshelf.core.models import Book
from bookshelf.repositories.base import WriteRepository
from bookshelf.storage.csv_codec import deserialize_books

from .cancellation import CancellationToken
from .contracts import AsyncReader, AsyncWriter

T = TypeVar("T")


class IterableReader(AsyncReader[T]):
    """Async source over any synchronous iterable."""

    def __init__(self, items: Iterable[T]):
        self._items = items

    async def read(self, token: CancellationToken) -> AsyncIterator[T]:
        for item in self._items:
            token.raise_if_cancelled()
            yield item
            await asyncio.sleep(0)


class CsvFileReader(AsyncReader[Book]):
    """
    Source yielding books parsed from a catalog CSV file.

    The file is read when iteration starts; malformed rows are skipped by
    the codec.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    async def read(self, token: CancellationToken) -> AsyncIterator[Book]:
        token.raise_if_cancelled()
        try:
            with open(self.path, encoding="utf-8-sig", newline="") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(f"Cannot read {self.path}: {e}") from e

        for book in deserialize_books(content):
            token.raise_if_cancelled()
            yield book
            await asyncio.sleep(0)


class RepositoryWriter(AsyncWriter[T]):
    """
    Sink adding each item to a repository (upsert).

    The blocking add runs in a worker thread, one item at a time, so the
    event loop stays free for delays and cancellation.

    Storage errors surface as SinkWriteError so the pump can retry them.
    """

    def __init__(self, repository: WriteRepository[T, object]):
        self._repository = repository

    async def write(self, item: T, token: CancellationToken) -> None:
        token.raise_if_cancelled()
        try:
            await asyncio.to_thread(self._repository.add, item)
        except OSError as e:
            raise SinkWriteError(f"Repository write failed: {e}") from e

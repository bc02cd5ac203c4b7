"""
CSV-file-backed book repository.
"""

from pathlib import Path

from bookshelf.core.models import Book
from bookshelf.observability.logger import get_logger
from bookshelf.observability.metrics import MetricsCollector, default_collector
from bookshelf.storage.csv_codec import deserialize_books, serialize_books

from .base import Repository

logger = get_logger(__name__)


class CsvBookRepository(Repository[Book, int]):
    """
    Repository persisting books to a UTF-8 CSV file.

    Every operation reloads the whole file; every successful mutation
    rewrites it completely, ordered by id. Nothing is cached between calls
    and writes are plain overwrites, so a crash mid-write can truncate the
    file. No locking is done: concurrent writers race and the last one wins.
    """

    backend = "csv"

    def __init__(self, path: str | Path, metrics: MetricsCollector | None = None):
        """
        Args:
            path: CSV file location (created on first write)
            metrics: Metrics collector (defaults to the module collector)

        Raises:
            ValueError: If path is blank
        """
        if path is None or not str(path).strip():
            raise ValueError("path must be a non-empty file path")

        self.path = Path(path)
        self._metrics = metrics or default_collector

    def add(self, entity: Book) -> Book:
        if entity is None:
            raise ValueError("entity must not be None")

        self._metrics.record_repository_operation(self.backend, "add")
        books = [b for b in self._load() if b.id != entity.id]
        books.append(entity)
        self._save(books)
        return entity

    def get_by_id(self, entity_id: int) -> Book | None:
        self._metrics.record_repository_operation(self.backend, "get_by_id")
        return next((b for b in self._load() if b.id == entity_id), None)

    def list_all(self) -> list[Book]:
        self._metrics.record_repository_operation(self.backend, "list_all")
        return self._load()

    def update(self, entity: Book) -> bool:
        if entity is None:
            raise ValueError("entity must not be None")

        self._metrics.record_repository_operation(self.backend, "update")
        books = self._load()
        for index, book in enumerate(books):
            if book.id == entity.id:
                books[index] = entity
                self._save(books)
                return True
        return False

    def remove(self, entity_id: int) -> bool:
        self._metrics.record_repository_operation(self.backend, "remove")
        books = self._load()
        remaining = [b for b in books if b.id != entity_id]
        if len(remaining) == len(books):
            return False

        self._save(remaining)
        return True

    def _load(self) -> list[Book]:
        if not self.path.exists():
            return []

        with open(self.path, encoding="utf-8-sig", newline="") as f:
            return deserialize_books(f.read())

    def _save(self, books: list[Book]) -> None:
        # newline="" on both ends keeps CRs inside quoted fields untranslated
        with open(self.path, "w", encoding="utf-8", newline="") as f:
            f.write(serialize_books(books))
        logger.debug("Persisted CSV snapshot", extra={"path": str(self.path), "count": len(books)})

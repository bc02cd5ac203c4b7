"""
JSON-file-backed book repository.
"""

import codecs
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from bookshelf.core.models import Book
from bookshelf.observability.logger import get_logger
from bookshelf.observability.metrics import MetricsCollector, default_collector

from .base import Repository

logger = get_logger(__name__)

_BOOK_LIST = TypeAdapter(list[Book])


class JsonBookRepository(Repository[Book, int]):
    """
    Repository persisting books as a pretty-printed JSON array.

    Objects use camelCase keys and omit null fields. A file that is not
    valid JSON, or does not describe a list of books, reads as an empty
    catalog rather than raising.
    """

    backend = "json"

    def __init__(self, path: str | Path, metrics: MetricsCollector | None = None):
        """
        Args:
            path: JSON file location (created on first write)
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

        content = self.path.read_bytes().removeprefix(codecs.BOM_UTF8)
        if not content.strip():
            return []

        try:
            return _BOOK_LIST.validate_json(content)
        except ValidationError as e:
            logger.warning(
                "Unreadable JSON catalog treated as empty",
                extra={"path": str(self.path), "error_count": e.error_count()},
            )
            self._metrics.record_discarded_json_document()
            return []

    def _save(self, books: list[Book]) -> None:
        payload = _BOOK_LIST.dump_json(books, indent=2, by_alias=True, exclude_none=True)
        self.path.write_bytes(payload)
        logger.debug("Persisted JSON snapshot", extra={"path": str(self.path), "count": len(books)})

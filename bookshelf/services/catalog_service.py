"""
Catalog service: business rules on top of the repository contracts.
"""

from collections.abc import Sequence

from bookshelf.core.errors import DuplicateBookError
from bookshelf.core.models import Book
from bookshelf.core.validators import (
    DEFAULT_BOOK_RULES,
    BaseValidator,
    RequiredFieldValidator,
    validate_book,
)
from bookshelf.observability.logger import get_logger
from bookshelf.repositories.base import ReadRepository, WriteRepository

logger = get_logger(__name__)

_TITLE_REQUIRED = RequiredFieldValidator("title")


class CatalogService:
    """
    Catalog operations that validate before touching storage.

    Depends only on the read and write contracts it needs, so the same
    repository object is usually passed for both.
    """

    def __init__(
        self,
        read: ReadRepository[Book, int],
        write: WriteRepository[Book, int],
        rules: Sequence[BaseValidator] = DEFAULT_BOOK_RULES,
    ):
        if read is None:
            raise ValueError("read repository must not be None")
        if write is None:
            raise ValueError("write repository must not be None")

        self._read = read
        self._write = write
        self._rules = rules

    def register(self, book: Book) -> Book:
        """
        Add a new book.

        Raises:
            ValidationError: If the book breaks a business rule
            DuplicateBookError: If a book with the same id is already stored
        """
        validate_book(book, self._rules)

        if self._read.get_by_id(book.id) is not None:
            raise DuplicateBookError(book.id)

        stored = self._write.add(book)
        logger.info("Registered book", extra={"book_id": book.id})
        return stored

    def list_all(self) -> list[Book]:
        return self._read.list_all()

    def find_by_id(self, book_id: int) -> Book | None:
        return self._read.get_by_id(book_id)

    def find_by_author(self, author: str) -> list[Book]:
        """Case-insensitive substring match on author; blank query matches nothing."""
        if not author or not author.strip():
            return []

        needle = author.casefold()
        return [b for b in self._read.list_all() if needle in b.author.casefold()]

    def find_by_title(self, title: str) -> list[Book]:
        """Case-insensitive substring match on title; blank query matches nothing."""
        if not title or not title.strip():
            return []

        needle = title.casefold()
        return [b for b in self._read.list_all() if needle in b.title.casefold()]

    def find_by_year(self, year: int) -> list[Book]:
        return [b for b in self._read.list_all() if b.year == year]

    def update(self, book: Book) -> bool:
        """
        Replace an existing book after validating it.

        Returns:
            False if no book with that id exists
        """
        validate_book(book, self._rules)
        return self._write.update(book)

    def update_title(self, book_id: int, new_title: str) -> bool:
        """
        Change the title of a stored book.

        Returns:
            False if the book does not exist

        Raises:
            ValidationError: If new_title is blank
        """
        book = self._read.get_by_id(book_id)
        if book is None:
            return False

        _TITLE_REQUIRED.validate(new_title)
        return self._write.update(book.with_title(new_title))

    def remove_book(self, book_id: int) -> bool:
        removed = self._write.remove(book_id)
        if removed:
            logger.info("Removed book", extra={"book_id": book_id})
        return removed

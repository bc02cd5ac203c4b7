"""
Error types shared across the catalog, repositories and pump.
"""


class BookshelfError(Exception):
    """Base class for all bookshelf errors."""


class DuplicateBookError(BookshelfError):
    """Raised when registering a book whose id already exists."""

    def __init__(self, book_id: int):
        self.book_id = book_id
        super().__init__(f"Book with id {book_id} already exists")


class OperationCancelledError(BookshelfError):
    """Raised when a cancellation token has been triggered."""

    def __init__(self, message: str = "Operation was cancelled"):
        super().__init__(message)


class SourceReadError(BookshelfError):
    """Raised when a pump source fails while producing items."""


class SinkWriteError(BookshelfError):
    """Raised when a pump sink fails to accept an item."""


class ConfigurationError(BookshelfError, ValueError):
    """Raised when settings are missing or malformed."""

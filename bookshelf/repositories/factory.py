"""
Factory selecting a book repository backend from settings.
"""

from bookshelf.config import CatalogSettings
from bookshelf.core.models import Book
from bookshelf.observability.logger import get_logger

from .base import Repository
from .csv_repository import CsvBookRepository
from .in_memory import InMemoryRepository
from .json_repository import JsonBookRepository

logger = get_logger(__name__)


def create_repository(settings: CatalogSettings) -> Repository[Book, int]:
    """
    Build the repository described by settings.

    Args:
        settings: Resolved catalog settings

    Returns:
        Repository instance for the configured backend

    Raises:
        ValueError: If the backend is unknown or a file backend has no path

    Example:
        >>> repo = create_repository(CatalogSettings(backend="memory"))
        >>> repo.list_all()
        []
    """
    backend = settings.backend

    if backend == "memory":
        repository: Repository[Book, int] = InMemoryRepository(lambda book: book.id)
    elif backend in ("csv", "json"):
        if not settings.path:
            raise ValueError(f"Backend '{backend}' requires a storage path")
        if backend == "csv":
            repository = CsvBookRepository(settings.path)
        else:
            repository = JsonBookRepository(settings.path)
    else:
        raise ValueError(f"Unsupported repository backend: {backend}")

    logger.info("Created repository", extra={"backend": backend, "path": settings.path})
    return repository

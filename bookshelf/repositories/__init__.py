"""
Repository contracts and their in-memory, CSV and JSON implementations.
"""

from .base import ReadRepository, Repository, WriteRepository
from .csv_repository import CsvBookRepository
from .factory import create_repository
from .in_memory import InMemoryRepository
from .json_repository import JsonBookRepository

__all__ = [
    "ReadRepository",
    "WriteRepository",
    "Repository",
    "InMemoryRepository",
    "CsvBookRepository",
    "JsonBookRepository",
    "create_repository",
]

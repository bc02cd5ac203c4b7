"""
Core data models for the book catalog.

Models use Pydantic for runtime validation and type safety.
"""

from .book import Book

__all__ = [
    "Book",
]

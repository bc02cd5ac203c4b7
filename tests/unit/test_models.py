"""
Unit tests for the Book model.
"""

import pytest
from pydantic import ValidationError

from bookshelf.core.models import Book


@pytest.mark.unit
class TestBook:
    """Tests for Book model"""

    def test_equality_is_by_value(self):
        """Two books with the same fields are equal and hash alike"""
        a = Book(id=1, title="Clean Code", author="Robert C. Martin", year=2008)
        b = Book(id=1, title="Clean Code", author="Robert C. Martin", year=2008)
        assert a == b
        assert hash(a) == hash(b)
        assert a != a.with_year(2009)

    def test_book_is_immutable(self):
        """Assigning a field raises"""
        book = Book(id=1, title="T", author="A", year=2000)
        with pytest.raises(ValidationError):
            book.title = "Other"

    def test_with_helpers_return_copies(self):
        """with_* leave the original untouched"""
        book = Book(id=1, title="Old", author="A", year=2000)
        renamed = book.with_title("New").with_author("B").with_year(2001)

        assert book.title == "Old"
        assert renamed == Book(id=1, title="New", author="B", year=2001)

    def test_defaults_allow_stored_placeholders(self):
        """Missing text fields default to empty and year to 0"""
        book = Book(id=7)
        assert book.title == ""
        assert book.author == ""
        assert book.year == 0

    def test_id_is_required(self):
        with pytest.raises(ValidationError) as exc_info:
            Book(title="No id")
        assert "id" in str(exc_info.value)

    def test_json_uses_camel_case_aliases(self):
        """Dumping by alias keeps the lower camelCase keys"""
        book = Book(id=1, title="T", author="A", year=2000)
        assert book.model_dump(by_alias=True) == {"id": 1, "title": "T", "author": "A", "year": 2000}
        assert Book.model_validate({"id": 1, "title": "T", "author": "A", "year": 2000}) == book

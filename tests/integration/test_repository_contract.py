"""
Contract tests run against every repository backend.

Each backend must behave identically for the keyed-store operations:
upsert on add, update only when present, remove reporting absence.
"""

import pytest

from bookshelf.core.models import Book
from bookshelf.repositories import CsvBookRepository, InMemoryRepository, JsonBookRepository


@pytest.fixture(params=["memory", "csv", "json"])
def repository(request, tmp_path):
    if request.param == "memory":
        return InMemoryRepository(lambda book: book.id)
    if request.param == "csv":
        return CsvBookRepository(tmp_path / "books.csv")
    return JsonBookRepository(tmp_path / "books.json")


def _ids(repository):
    return sorted(b.id for b in repository.list_all())


@pytest.mark.integration
class TestRepositoryContract:
    """Behaviour shared by all backends"""

    def test_starts_empty(self, repository):
        assert repository.list_all() == []
        assert repository.get_by_id(1) is None

    def test_add_then_get(self, repository, sample_books):
        for book in sample_books:
            assert repository.add(book) == book

        for book in sample_books:
            assert repository.get_by_id(book.id) == book
        assert _ids(repository) == [1, 2, 3]

    def test_add_with_existing_id_replaces(self, repository):
        repository.add(Book(id=1, title="First", author="A", year=2000))
        repository.add(Book(id=1, title="Second", author="B", year=2001))

        assert len(repository.list_all()) == 1
        assert repository.get_by_id(1).title == "Second"

    def test_update_existing(self, repository, sample_books):
        for book in sample_books:
            repository.add(book)

        changed = sample_books[1].with_year(2009)
        assert repository.update(changed) is True
        assert repository.get_by_id(1) == changed

    def test_update_missing_leaves_store_unchanged(self, repository, sample_books):
        for book in sample_books:
            repository.add(book)
        before = sorted(repository.list_all(), key=lambda b: b.id)

        assert repository.update(Book(id=99, title="Ghost", author="Nobody", year=2000)) is False
        assert sorted(repository.list_all(), key=lambda b: b.id) == before

    def test_remove(self, repository, sample_books):
        for book in sample_books:
            repository.add(book)

        assert repository.remove(2) is True
        assert repository.get_by_id(2) is None
        assert repository.remove(2) is False
        assert _ids(repository) == [1, 3]

    def test_none_entity_rejected(self, repository):
        with pytest.raises(ValueError):
            repository.add(None)
        with pytest.raises(ValueError):
            repository.update(None)

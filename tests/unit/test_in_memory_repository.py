"""
Unit tests for InMemoryRepository.
"""

import pytest

from bookshelf.core.models import Book
from bookshelf.repositories import InMemoryRepository, Repository


@pytest.fixture
def repo() -> InMemoryRepository[Book, int]:
    return InMemoryRepository(lambda book: book.id)


@pytest.mark.unit
class TestInMemoryRepository:
    """Tests for the dict-backed repository"""

    def test_is_a_repository(self, repo):
        assert isinstance(repo, Repository)

    def test_requires_id_selector(self):
        with pytest.raises(ValueError):
            InMemoryRepository(None)

    def test_add_then_get(self, repo):
        book = Book(id=1, title="T", author="A", year=2000)
        assert repo.add(book) is book
        assert repo.get_by_id(1) == book

    def test_add_existing_id_overwrites(self, repo):
        repo.add(Book(id=1, title="Old", author="A", year=2000))
        repo.add(Book(id=1, title="New", author="A", year=2000))

        assert len(repo.list_all()) == 1
        assert repo.get_by_id(1).title == "New"

    def test_get_missing_returns_none(self, repo):
        assert repo.get_by_id(42) is None

    def test_list_all_returns_a_copy(self, repo):
        repo.add(Book(id=1, title="T", author="A", year=2000))

        snapshot = repo.list_all()
        snapshot.clear()

        assert len(repo.list_all()) == 1

    def test_update_missing_returns_false_and_changes_nothing(self, repo):
        repo.add(Book(id=1, title="T", author="A", year=2000))
        before = repo.list_all()

        assert repo.update(Book(id=2, title="X", author="Y", year=2001)) is False
        assert repo.list_all() == before

    def test_update_existing_replaces(self, repo):
        repo.add(Book(id=1, title="T", author="A", year=2000))
        assert repo.update(Book(id=1, title="T2", author="A", year=2000)) is True
        assert repo.get_by_id(1).title == "T2"

    def test_remove(self, repo):
        repo.add(Book(id=1, title="T", author="A", year=2000))
        repo.add(Book(id=2, title="U", author="B", year=2001))

        assert repo.remove(3) is False
        assert repo.remove(1) is True
        assert [b.id for b in repo.list_all()] == [2]
        assert repo.remove(1) is False

    def test_none_entity_rejected(self, repo):
        with pytest.raises(ValueError):
            repo.add(None)
        with pytest.raises(ValueError):
            repo.update(None)

    def test_helpers_and_operation_count(self, repo):
        repo.add(Book(id=1, title="T", author="A", year=2000))
        repo.update(Book(id=1, title="T2", author="A", year=2000))
        repo.update(Book(id=9, title="X", author="A", year=2000))
        repo.remove(9)

        assert repo.exists(1)
        assert not repo.exists(9)
        assert repo.count() == 1
        assert repo.operation_count == 2

        repo.clear()
        assert repo.count() == 0

    def test_works_with_any_entity_type(self):
        repo = InMemoryRepository(lambda pair: pair[0])
        repo.add(("a", 1))
        repo.add(("a", 2))
        assert repo.get_by_id("a") == ("a", 2)

"""
Integration tests for the JSON-file-backed repository.
"""

import json

import pytest

from bookshelf.core.models import Book
from bookshelf.observability.metrics import get_sample_value
from bookshelf.repositories import JsonBookRepository


@pytest.mark.integration
class TestJsonBookRepository:
    """Tests for JSON persistence"""

    def test_blank_path_rejected(self):
        with pytest.raises(ValueError):
            JsonBookRepository(" ")

    def test_document_uses_camel_case_array(self, json_path, sample_books):
        repo = JsonBookRepository(json_path)
        for book in sample_books:
            repo.add(book)

        document = json.loads(json_path.read_text(encoding="utf-8"))

        assert isinstance(document, list)
        assert {tuple(sorted(entry)) for entry in document} == {("author", "id", "title", "year")}
        assert {entry["id"] for entry in document} == {1, 2, 3}

    def test_document_is_indented(self, json_path):
        JsonBookRepository(json_path).add(Book(id=1, title="T", author="A", year=2000))
        text = json_path.read_text(encoding="utf-8")
        assert "\n  {" in text

    def test_round_trip_through_new_instance(self, json_path, sample_books):
        writer = JsonBookRepository(json_path)
        for book in sample_books:
            writer.add(book)

        reader = JsonBookRepository(json_path)
        assert sorted(reader.list_all(), key=lambda b: b.id) == sorted(sample_books, key=lambda b: b.id)

    @pytest.mark.parametrize(
        "content",
        [
            "",
            "   \n",
            "{not json",
            '{"id": 1}',
            '[{"title": "no id"}]',
        ],
    )
    def test_unreadable_document_reads_as_empty(self, json_path, content):
        json_path.write_text(content, encoding="utf-8")
        assert JsonBookRepository(json_path).list_all() == []

    def test_unreadable_document_counted(self, json_path):
        json_path.write_text("{broken", encoding="utf-8")
        before = get_sample_value("bookshelf_json_documents_discarded_total")

        JsonBookRepository(json_path).list_all()

        assert get_sample_value("bookshelf_json_documents_discarded_total") == before + 1

    def test_add_overwrites_unreadable_document(self, json_path):
        json_path.write_text("garbage", encoding="utf-8")
        repo = JsonBookRepository(json_path)

        repo.add(Book(id=1, title="T", author="A", year=2000))

        assert [b.id for b in JsonBookRepository(json_path).list_all()] == [1]

    def test_accepts_missing_optional_fields(self, json_path):
        json_path.write_text('[{"id": 5}]', encoding="utf-8")
        assert JsonBookRepository(json_path).get_by_id(5) == Book(id=5)

    def test_invalid_utf8_reads_as_empty_and_is_counted(self, json_path):
        json_path.write_bytes(b'[{"id": 1, "title": "\xff\xfe bad"}]')
        before = get_sample_value("bookshelf_json_documents_discarded_total")

        assert JsonBookRepository(json_path).list_all() == []
        assert get_sample_value("bookshelf_json_documents_discarded_total") == before + 1

    def test_add_overwrites_invalid_utf8_document(self, json_path):
        json_path.write_bytes(b"\xff\xfe\x00garbage")
        repo = JsonBookRepository(json_path)

        repo.add(Book(id=1, title="T", author="A", year=2000))

        assert [b.id for b in repo.list_all()] == [1]

    def test_byte_order_mark_is_ignored(self, json_path):
        json_path.write_bytes(b"\xef\xbb\xbf" + b'[{"id": 1, "title": "T", "author": "A", "year": 2000}]')
        assert JsonBookRepository(json_path).list_all() == [Book(id=1, title="T", author="A", year=2000)]

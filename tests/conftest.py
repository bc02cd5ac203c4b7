"""
Pytest configuration and fixtures for bookshelf tests

Provides shared fixtures for unit, integration, and E2E tests.
"""
import os
from pathlib import Path

import pytest

from bookshelf.core.models import Book
from bookshelf.pump import FakeClock, FakeDelay


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't touch the filesystem"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that combine several components or use files"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests through the command-line interface"
    )
    config.addinivalue_line(
        "markers", "slow: Tests that take more than 5 seconds to run"
    )


# =======================
# DOMAIN FIXTURES
# =======================

@pytest.fixture
def sample_books() -> list[Book]:
    """A small catalog with ids out of order and awkward characters"""
    return [
        Book(id=3, title='The "Pragmatic" Programmer', author="Andrew Hunt, David Thomas", year=1999),
        Book(id=1, title="Clean Code", author="Robert C. Martin", year=2008),
        Book(id=2, title="Refactoring\nSecond Edition", author="Martin Fowler", year=2018),
    ]


# =======================
# FILE FIXTURES
# =======================

@pytest.fixture(scope="session")
def test_data_dir() -> Path:
    """Path to tests/fixtures"""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def csv_path(tmp_path) -> Path:
    return tmp_path / "books.csv"


@pytest.fixture
def json_path(tmp_path) -> Path:
    return tmp_path / "books.json"


# =======================
# PUMP FIXTURES
# =======================

@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock(tick=0.001)


@pytest.fixture
def fake_delay(fake_clock) -> FakeDelay:
    return FakeDelay(fake_clock)


# =======================
# ENVIRONMENT FIXTURES
# =======================

@pytest.fixture
def clean_env(monkeypatch):
    """Remove bookshelf-related environment variables for the test"""
    for key in list(os.environ):
        if key.startswith("BOOKSHELF_") or key in ("LOG_LEVEL", "LOG_FORMAT"):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch

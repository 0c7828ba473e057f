# ABOUTME: Shared pytest fixtures for Bookshelf tests.
# ABOUTME: Provides temporary gateways and a five-book sample catalog.

from collections.abc import Iterator
from pathlib import Path

import pytest

from bookshelf.db.gateway import BookGateway
from bookshelf.db.mapping import BookRecord


def make_sample_books() -> list[BookRecord]:
    """Five books across two authors, with publisher ids AB-1001..AB-1005."""
    return [
        BookRecord("Test Book1", "AB-1001", "somepath1", "Author X", True, False),
        BookRecord("Test Book2", "AB-1002", "somepath2", "Author X", False, False),
        BookRecord("Test Book3", "AB-1003", "somepath3", "Author Y", True, True),
        BookRecord("Test Book4", "AB-1004", "somepath4", "Author Y", False, False),
        BookRecord("Test Book5", "AB-1005", "somepath5", "Author Y", False, False),
    ]


@pytest.fixture
def sample_books() -> list[BookRecord]:
    return make_sample_books()


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path for a temporary catalog database."""
    return tmp_path / "test.db"


@pytest.fixture
def gateway(db_path: Path) -> Iterator[BookGateway]:
    """An empty catalog, closed after the test."""
    with BookGateway(db_path) as gw:
        yield gw


@pytest.fixture
def seeded_gateway(gateway: BookGateway, sample_books: list[BookRecord]) -> BookGateway:
    """The sample catalog, inserted in publisher-id order."""
    for record in sample_books:
        gateway.insert(record)
    return gateway

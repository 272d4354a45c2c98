"""Pytest configuration and fixtures."""

import random
from collections.abc import Callable

import pytest

from bookshelf.config import Settings
from bookshelf.repositories.memory import InMemoryCatalog
from bookshelf.schemas.book import CatalogBook, ReadingHistoryEntry

BookFactory = Callable[..., CatalogBook]


@pytest.fixture
def settings() -> Settings:
    """Settings with the production recommendation constants."""
    return Settings(_env_file=None)


@pytest.fixture
def make_book() -> BookFactory:
    """Build catalog books with sequential ids."""
    counter = iter(range(1, 10_000))

    def factory(
        genre_id: str | None = "general",
        genre_name: str | None = None,
        average_rating: float = 3.0,
        total_shelves: int = 10,
        book_id: str | None = None,
    ) -> CatalogBook:
        return CatalogBook(
            id=book_id or f"book-{next(counter)}",
            genre_id=genre_id,
            genre_name=genre_name or (genre_id.title() if genre_id else None),
            title="Untitled",
            average_rating=average_rating,
            total_shelves=total_shelves,
            pages=300,
        )

    return factory


@pytest.fixture
def finished() -> Callable[[list[CatalogBook]], list[ReadingHistoryEntry]]:
    """Wrap books as finished-history entries."""

    def wrap(books: list[CatalogBook]) -> list[ReadingHistoryEntry]:
        return [ReadingHistoryEntry(book=book) for book in books]

    return wrap


@pytest.fixture
def catalog_factory() -> Callable[..., InMemoryCatalog]:
    """Build a seeded in-memory catalog."""

    def factory(books, history=None, seed: int = 42) -> InMemoryCatalog:
        return InMemoryCatalog(books, history=history, rng=random.Random(seed))

    return factory

"""In-memory catalog for tests, seeding and local development."""

import random
from collections.abc import Collection, Iterable, Sequence

from bookshelf.repositories.base import CatalogAccessors, ReadingHistorySource
from bookshelf.schemas.book import CatalogBook, ReadingHistoryEntry


class InMemoryCatalog(CatalogAccessors, ReadingHistorySource):
    """List-backed catalog with the same ordering rules as the SQL catalog."""

    def __init__(
        self,
        books: Iterable[CatalogBook] = (),
        history: dict[str, list[ReadingHistoryEntry]] | None = None,
        rng: random.Random | None = None,
    ):
        self.books = list(books)
        self.history = history or {}
        self.rng = rng or random.Random()

    def _eligible(self, exclude_ids: Collection[str]) -> list[CatalogBook]:
        excluded = set(exclude_ids)
        return [book for book in self.books if book.id not in excluded]

    async def fetch_by_genres(
        self,
        genre_ids: Sequence[str],
        exclude_ids: Collection[str],
        limit: int,
    ) -> list[CatalogBook]:
        genres = set(genre_ids)
        matches = [book for book in self._eligible(exclude_ids) if book.genre_id in genres]
        matches.sort(key=lambda book: (book.average_rating, book.total_shelves), reverse=True)
        return matches[: max(limit, 0)]

    async def fetch_popular(
        self,
        exclude_ids: Collection[str],
        limit: int,
    ) -> list[CatalogBook]:
        books = self._eligible(exclude_ids)
        books.sort(key=lambda book: (book.total_shelves, book.average_rating), reverse=True)
        return books[: max(limit, 0)]

    async def fetch_random(
        self,
        exclude_ids: Collection[str],
        limit: int,
    ) -> list[CatalogBook]:
        books = self._eligible(exclude_ids)
        return self.rng.sample(books, min(max(limit, 0), len(books)))

    async def list_finished(self, user_id: str) -> list[ReadingHistoryEntry]:
        return list(self.history.get(user_id, []))

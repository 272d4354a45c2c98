"""Data-source abstractions consumed by the recommendation engine."""

from abc import ABC, abstractmethod
from collections.abc import Collection, Sequence

from bookshelf.schemas.book import CatalogBook, ReadingHistoryEntry


class CatalogAccessors(ABC):
    """Abstract catalog queries used to source recommendation candidates.

    This abstraction allows switching between the SQL catalog, an
    in-memory catalog, or any other backend. Implementations must never
    return a book whose id is in ``exclude_ids`` and must let backend
    failures propagate.
    """

    @abstractmethod
    async def fetch_by_genres(
        self,
        genre_ids: Sequence[str],
        exclude_ids: Collection[str],
        limit: int,
    ) -> list[CatalogBook]:
        """Fetch books in any of the given genres.

        Args:
            genre_ids: Genres to draw from
            exclude_ids: Book ids that must not be returned
            limit: Maximum number of books

        Returns:
            Books ordered by average rating desc, then total shelves desc
        """
        pass

    @abstractmethod
    async def fetch_popular(
        self,
        exclude_ids: Collection[str],
        limit: int,
    ) -> list[CatalogBook]:
        """Fetch the most shelved books.

        Returns:
            Books ordered by total shelves desc, then average rating desc
        """
        pass

    @abstractmethod
    async def fetch_random(
        self,
        exclude_ids: Collection[str],
        limit: int,
    ) -> list[CatalogBook]:
        """Fetch a uniform random sample of books."""
        pass


class ReadingHistorySource(ABC):
    """Abstract source of a user's finished books."""

    @abstractmethod
    async def list_finished(self, user_id: str) -> list[ReadingHistoryEntry]:
        """List books on the user's ``read`` shelf, most recent first."""
        pass

"""Catalog repository for recommendation candidate queries."""

import uuid
from collections.abc import Collection, Sequence

import structlog
from sqlalchemy import Select, and_, func, not_, select, true
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bookshelf.core.exceptions import DataSourceError, ValidationError
from bookshelf.models.book import Book
from bookshelf.models.reading_log import ReadingLog
from bookshelf.repositories.base import CatalogAccessors, ReadingHistorySource
from bookshelf.schemas.book import CatalogBook, ReadingHistoryEntry, Shelf

logger = structlog.get_logger(__name__)


def to_catalog_book(book: Book) -> CatalogBook:
    """Convert a Book row to the engine's catalog record."""
    return CatalogBook(
        id=str(book.id),
        genre_id=str(book.genre_id) if book.genre_id else None,
        genre_name=book.genre.name if book.genre else None,
        title=book.title,
        author=book.author,
        average_rating=book.average_rating,
        total_shelves=book.total_shelves,
        pages=book.pages,
    )


def _as_uuid(value: str, field: str) -> uuid.UUID:
    try:
        return uuid.UUID(str(value))
    except ValueError as exc:
        raise ValidationError(f"Invalid {field}: {value!r}", details={"field": field}) from exc


def _not_excluded(exclude_ids: Collection[str]):
    if not exclude_ids:
        return true()
    return not_(Book.id.in_([_as_uuid(book_id, "book_id") for book_id in exclude_ids]))


class CatalogRepository(CatalogAccessors, ReadingHistorySource):
    """Repository for catalog and reading-history queries."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _fetch_books(self, stmt: Select, operation: str) -> list[CatalogBook]:
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error("Catalog query failed", operation=operation, error=str(exc))
            raise DataSourceError(operation) from exc
        return [to_catalog_book(book) for book in result.scalars().all()]

    async def fetch_by_genres(
        self,
        genre_ids: Sequence[str],
        exclude_ids: Collection[str],
        limit: int,
    ) -> list[CatalogBook]:
        """Get unread books in the given genres, best rated first."""
        if not genre_ids or limit <= 0:
            return []

        stmt = (
            select(Book)
            .where(
                and_(
                    Book.genre_id.in_([_as_uuid(genre_id, "genre_id") for genre_id in genre_ids]),
                    _not_excluded(exclude_ids),
                )
            )
            .order_by(Book.average_rating.desc(), Book.total_shelves.desc())
            .limit(limit)
        )
        return await self._fetch_books(stmt, "fetch_by_genres")

    async def fetch_popular(
        self,
        exclude_ids: Collection[str],
        limit: int,
    ) -> list[CatalogBook]:
        """Get the most shelved books."""
        if limit <= 0:
            return []

        stmt = (
            select(Book)
            .where(_not_excluded(exclude_ids))
            .order_by(Book.total_shelves.desc(), Book.average_rating.desc())
            .limit(limit)
        )
        return await self._fetch_books(stmt, "fetch_popular")

    async def fetch_random(
        self,
        exclude_ids: Collection[str],
        limit: int,
    ) -> list[CatalogBook]:
        """Get a random sample of books."""
        if limit <= 0:
            return []

        stmt = (
            select(Book)
            .where(_not_excluded(exclude_ids))
            .order_by(func.random())
            .limit(limit)
        )
        return await self._fetch_books(stmt, "fetch_random")

    async def list_finished(self, user_id: str) -> list[ReadingHistoryEntry]:
        """Get books on the user's read shelf, most recently finished first."""
        stmt = (
            select(ReadingLog)
            .where(
                and_(
                    ReadingLog.user_id == _as_uuid(user_id, "user_id"),
                    ReadingLog.shelf == Shelf.READ.value,
                )
            )
            .order_by(ReadingLog.finish_date.desc().nulls_last())
        )
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error("Reading history query failed", user_id=user_id, error=str(exc))
            raise DataSourceError("list_finished") from exc

        return [
            ReadingHistoryEntry(book=to_catalog_book(log.book), finished_at=log.finish_date)
            for log in result.scalars().all()
        ]

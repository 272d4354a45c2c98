"""SQLAlchemy models package."""

from bookshelf.models.base import Base
from bookshelf.models.book import Book, Genre
from bookshelf.models.reading_log import ReadingLog

__all__ = [
    "Base",
    "Genre",
    "Book",
    "ReadingLog",
]

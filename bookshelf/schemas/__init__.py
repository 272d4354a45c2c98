"""Pydantic schemas package."""

from bookshelf.schemas.book import CatalogBook, ReadingHistoryEntry, Shelf
from bookshelf.schemas.recommendation import (
    GeneratedReason,
    GenreAffinity,
    ReasonDetails,
    RecommendationEntry,
)

__all__ = [
    # Book
    "Shelf",
    "CatalogBook",
    "ReadingHistoryEntry",
    # Recommendation
    "ReasonDetails",
    "GeneratedReason",
    "GenreAffinity",
    "RecommendationEntry",
]

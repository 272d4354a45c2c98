"""Recommendation schemas."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from bookshelf.schemas.book import CatalogBook


class ReasonDetails(BaseModel):
    """Structured signals behind a recommendation.

    This is the source of truth for analytics and tests; the headline
    ``reason`` string is picked at random and may highlight a weaker signal.
    """

    fallback: bool | None = None
    matched_genre: str | None = None
    read_count_for_genre: int | None = None
    community_rating: float = 0.0
    popularity: int = 0


class GeneratedReason(BaseModel):
    """Headline reason plus its structured details."""

    reason: str
    reason_details: ReasonDetails


class RecommendationEntry(BaseModel):
    """Recommended book with reasoning."""

    book: CatalogBook
    reason: str  # Why this book was recommended
    reason_details: ReasonDetails
    match_score: int = Field(..., ge=50, le=98)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "book": {
                    "id": "6650c0ffee0000000000a001",
                    "genre_id": "6650c0ffee0000000000b001",
                    "genre_name": "Mystery",
                    "title": "The Hollow Lantern",
                    "average_rating": 4.3,
                    "total_shelves": 812,
                },
                "reason": "Matches your preference for Mystery (4 reads)",
                "reason_details": {
                    "matched_genre": "Mystery",
                    "read_count_for_genre": 4,
                    "community_rating": 4.3,
                    "popularity": 812,
                },
                "match_score": 98,
            }
        }
    )


@dataclass(frozen=True)
class GenreAffinity:
    """How many finished books a user has in one genre."""

    genre_id: str
    genre_name: str | None
    count: int

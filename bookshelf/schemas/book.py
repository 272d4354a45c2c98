"""Book schemas."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class Shelf(str, Enum):
    """Reading shelves a user can put a book on."""

    WANT_TO_READ = "want_to_read"
    CURRENTLY_READING = "currently_reading"
    READ = "read"


class CatalogBook(BaseModel):
    """Catalog record as seen by the recommendation engine.

    Numeric signals are lenient: a missing value reads as zero so that
    partially populated catalog rows never break scoring.
    """

    id: str
    genre_id: str | None = None
    genre_name: str | None = None
    title: str | None = None
    author: str | None = None
    average_rating: float = 0.0
    total_shelves: int = 0
    pages: int = 0

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "6650c0ffee0000000000a001",
                "genre_id": "6650c0ffee0000000000b001",
                "genre_name": "Mystery",
                "title": "The Hollow Lantern",
                "author": "R. Amsel",
                "average_rating": 4.3,
                "total_shelves": 812,
                "pages": 352,
            }
        },
    )

    @field_validator("id", "genre_id", mode="before")
    @classmethod
    def stringify_identifier(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @field_validator("average_rating", "total_shelves", "pages", mode="before")
    @classmethod
    def none_as_zero(cls, value: Any) -> Any:
        return 0 if value is None else value


class ReadingHistoryEntry(BaseModel):
    """A book the user has finished."""

    book: CatalogBook
    finished_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)

"""Catalog database models."""

import uuid

from sqlalchemy import (
    CheckConstraint,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookshelf.models.base import Base, TimestampMixin, UUIDMixin


class Genre(Base, UUIDMixin, TimestampMixin):
    """Catalog genre."""

    __tablename__ = "genres"

    name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    slug: Mapped[str] = mapped_column(String(60), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)

    books: Mapped[list["Book"]] = relationship("Book", back_populates="genre")

    def __repr__(self) -> str:
        return f"<Genre {self.name}>"


class Book(Base, UUIDMixin, TimestampMixin):
    """Catalog book with cached community signals."""

    __tablename__ = "books"

    title: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    author: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    genre_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("genres.id", ondelete="RESTRICT"),
        nullable=False,
    )
    pages: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    # Stats (cached aggregations)
    average_rating: Mapped[float] = mapped_column(Float, default=0.0, server_default="0")
    total_reviews: Mapped[int] = mapped_column(Integer, default=0, server_default="0")
    total_shelves: Mapped[int] = mapped_column(Integer, default=0, server_default="0")

    # Relationships
    genre: Mapped["Genre"] = relationship("Genre", back_populates="books", lazy="joined")

    __table_args__ = (
        Index("idx_books_genre", "genre_id"),
        Index("idx_books_average_rating", "average_rating"),
        Index("idx_books_total_shelves", "total_shelves"),
        CheckConstraint(
            "average_rating >= 0 AND average_rating <= 5",
            name="check_book_average_rating",
        ),
        CheckConstraint("pages >= 1", name="check_book_pages_positive"),
    )

    def __repr__(self) -> str:
        return f"<Book {self.title[:30]} ({self.id})>"

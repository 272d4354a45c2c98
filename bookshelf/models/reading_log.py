"""Reading log database model."""

import uuid
from datetime import datetime

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    String,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookshelf.models.base import Base, TimestampMixin, UUIDMixin
from bookshelf.models.book import Book


class ReadingLog(Base, UUIDMixin, TimestampMixin):
    """A book on one of a user's shelves."""

    __tablename__ = "reading_logs"

    # Users live in the account service; only the id is stored here
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    book_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("books.id", ondelete="CASCADE"),
        nullable=False,
    )

    # Shelf: want_to_read, currently_reading, read
    shelf: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="want_to_read",
        server_default="want_to_read",
    )
    finish_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    book: Mapped["Book"] = relationship("Book", lazy="joined")

    __table_args__ = (
        # One log per user per book
        UniqueConstraint("user_id", "book_id", name="uq_reading_log_user_book"),
        CheckConstraint(
            "shelf IN ('want_to_read', 'currently_reading', 'read')",
            name="check_reading_log_shelf",
        ),
        Index("idx_reading_logs_user_shelf", "user_id", "shelf"),
    )

    def __repr__(self) -> str:
        return f"<ReadingLog user={self.user_id} book={self.book_id} {self.shelf}>"

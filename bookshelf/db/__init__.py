"""Database package."""

from bookshelf.db.session import async_session_factory, close_db

__all__ = ["async_session_factory", "close_db"]

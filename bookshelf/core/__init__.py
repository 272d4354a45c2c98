"""Core utilities package."""

from bookshelf.core.exceptions import BookshelfError, DataSourceError, ValidationError

__all__ = [
    "BookshelfError",
    "DataSourceError",
    "ValidationError",
]

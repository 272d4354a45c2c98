"""Repository package for data access."""

from bookshelf.repositories.base import CatalogAccessors, ReadingHistorySource
from bookshelf.repositories.catalog_repo import CatalogRepository
from bookshelf.repositories.memory import InMemoryCatalog

__all__ = [
    "CatalogAccessors",
    "ReadingHistorySource",
    "CatalogRepository",
    "InMemoryCatalog",
]

"""Unit tests for the recommendation service."""

import random

import pytest

from bookshelf.core.exceptions import DataSourceError
from bookshelf.repositories.memory import InMemoryCatalog
from bookshelf.services.recommendation_service import RecommendationService


class BrokenHistory(InMemoryCatalog):
    """History source whose backend is down."""

    async def list_finished(self, user_id):
        raise DataSourceError("list_finished")


class TestRecommendationService:
    """Test loading history and running the pipeline."""

    async def test_unknown_user_gets_cold_start(self, make_book, catalog_factory, settings):
        catalog = catalog_factory([make_book(total_shelves=i) for i in range(20)])
        service = RecommendationService(catalog, catalog, settings=settings)

        recommendations = await service.get_recommendations("nobody")

        assert len(recommendations) == settings.recommendation_min_limit
        assert all(rec.reason_details.fallback for rec in recommendations)

    async def test_reader_gets_genre_matches(self, make_book, finished, catalog_factory, settings):
        read = [make_book("mystery") for _ in range(4)]
        mysteries = [make_book("mystery", average_rating=4.8) for _ in range(3)]
        others = [make_book("cooking") for _ in range(20)]
        catalog = catalog_factory(read + mysteries + others, history={"u1": finished(read)})
        service = RecommendationService(catalog, catalog, settings=settings, rng=random.Random(3))

        recommendations = await service.get_recommendations("u1", limit=15)

        assert len(recommendations) == 15
        assert [rec.book.id for rec in recommendations[:3]] == [b.id for b in mysteries]
        assert all(rec.reason_details.matched_genre == "Mystery" for rec in recommendations[:3])
        assert all(rec.reason_details.read_count_for_genre == 4 for rec in recommendations[:3])

    async def test_seeded_service_is_reproducible(self, make_book, finished, settings):
        read = [make_book("mystery") for _ in range(3)]
        books = read + [make_book("mystery", average_rating=4.0) for _ in range(12)]

        async def run():
            catalog = InMemoryCatalog(books, history={"u1": finished(read)}, rng=random.Random(1))
            service = RecommendationService(catalog, catalog, settings=settings, rng=random.Random(9))
            return await service.get_recommendations("u1")

        first, second = await run(), await run()

        assert [rec.reason for rec in first] == [rec.reason for rec in second]

    async def test_history_failure_propagates(self, make_book, settings):
        catalog = BrokenHistory([make_book() for _ in range(20)])
        service = RecommendationService(catalog, catalog, settings=settings)

        with pytest.raises(DataSourceError) as exc_info:
            await service.get_recommendations("u1")

        assert exc_info.value.code == "DATA_SOURCE_UNAVAILABLE"

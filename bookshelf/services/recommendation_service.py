"""Recommendation service for personalized book suggestions."""

import random

import structlog

from bookshelf.config import Settings, settings as default_settings
from bookshelf.repositories.base import CatalogAccessors, ReadingHistorySource
from bookshelf.schemas.recommendation import RecommendationEntry
from bookshelf.services.selection import select_recommendations

logger = structlog.get_logger(__name__)


class RecommendationService:
    """Service for generating personalized book recommendations."""

    def __init__(
        self,
        catalog: CatalogAccessors,
        history: ReadingHistorySource,
        settings: Settings | None = None,
        rng: random.Random | None = None,
    ):
        self.catalog = catalog
        self.history = history
        self.settings = settings or default_settings
        self.rng = rng

    async def get_recommendations(
        self,
        user_id: str,
        limit: int | None = None,
    ) -> list[RecommendationEntry]:
        """Get personalized book recommendations for a user.

        Algorithm:
        1. Fewer than 3 finished books: popular books plus a random sample
        2. Otherwise: unread books in the user's top 3 genres
        3. Popular books to fill any gap
        4. A random sample for whatever is still missing
        """
        finished = await self.history.list_finished(user_id)

        recommendations = await select_recommendations(
            finished,
            limit,
            self.catalog,
            settings=self.settings,
            rng=self.rng,
        )

        logger.info(
            "Generated recommendations",
            user_id=user_id,
            count=len(recommendations),
            finished_books=len(finished),
            cold_start=len(finished) < self.settings.cold_start_threshold,
        )

        return recommendations

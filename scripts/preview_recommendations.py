#!/usr/bin/env python3
"""Print recommendations for a user straight from the database.

Useful for checking how the tiers behave against real catalog data
without going through the API.

Usage:
    python scripts/preview_recommendations.py USER_ID [--limit N] [--seed N]

Environment variables:
    BOOKSHELF_DATABASE_URL: Async SQLAlchemy URL of the catalog database
"""

import argparse
import asyncio
import json
import random
import sys
import uuid

from bookshelf.config import settings
from bookshelf.core.exceptions import BookshelfError
from bookshelf.core.logging import configure_logging
from bookshelf.db.session import async_session_factory, close_db
from bookshelf.repositories.catalog_repo import CatalogRepository
from bookshelf.services.recommendation_service import RecommendationService


async def main(user_id: str, limit: int | None, seed: int | None, as_json: bool) -> int:
    """Fetch and print recommendations.

    Returns:
        Exit code (0 for success)
    """
    rng = random.Random(seed) if seed is not None else None

    try:
        async with async_session_factory() as session:
            repository = CatalogRepository(session)
            service = RecommendationService(repository, repository, rng=rng)
            recommendations = await service.get_recommendations(user_id, limit)
    except BookshelfError as e:
        print(f"Error: {e.error_message}", file=sys.stderr)
        return 1
    finally:
        await close_db()

    if as_json:
        print(json.dumps([r.model_dump(exclude_none=True) for r in recommendations], indent=2))
        return 0

    print(f"\n{settings.app_name} - recommendations for {user_id}")
    print(f"{'=' * 60}")
    for rec in recommendations:
        title = rec.book.title or rec.book.id
        print(f"{rec.match_score:>3}%  {title}")
        print(f"      {rec.reason}")
    print(f"{'=' * 60}")
    print(f"{len(recommendations)} recommendations")

    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Preview recommendations for a user"
    )
    parser.add_argument("user_id", type=uuid.UUID, help="User UUID")
    parser.add_argument("--limit", type=int, default=None, help="Requested count (clamped)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reason templates")
    parser.add_argument("--json", action="store_true", help="Print entries as JSON")

    args = parser.parse_args()

    configure_logging()
    exit_code = asyncio.run(main(str(args.user_id), args.limit, args.seed, args.json))
    sys.exit(exit_code)

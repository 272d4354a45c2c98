"""Tiered candidate selection for recommendations.

Tiers run strictly in order and each one threads a ``SelectionState``
through to the next:

1. Cold start (too little history): popular books, then a random sample.
2. Genre affinity: unread books in the user's top genres.
3. Popularity backfill.
4. Random backfill.

A tier only runs while the state is short of its limit. Accessor errors
are not caught here.
"""

import math
import random
from collections import Counter
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field, replace

import structlog

from bookshelf.config import Settings, settings as default_settings
from bookshelf.repositories.base import CatalogAccessors
from bookshelf.schemas.book import CatalogBook, ReadingHistoryEntry
from bookshelf.schemas.recommendation import GenreAffinity, RecommendationEntry
from bookshelf.services.reasons import generate_reason
from bookshelf.services.scoring import score_book

logger = structlog.get_logger(__name__)

EntryBuilder = Callable[[CatalogBook], RecommendationEntry]


@dataclass(frozen=True)
class SelectionState:
    """Exclusion set and accepted entries carried between tiers."""

    limit: int
    exclude_ids: frozenset[str] = frozenset()
    entries: tuple[RecommendationEntry, ...] = field(default=())

    @property
    def remaining(self) -> int:
        return max(self.limit - len(self.entries), 0)

    @property
    def is_full(self) -> bool:
        return self.remaining == 0

    def merge(self, books: Iterable[CatalogBook], build: EntryBuilder) -> "SelectionState":
        """Return a new state with the unseen books appended, up to the limit."""
        seen = set(self.exclude_ids)
        entries = list(self.entries)
        for book in books:
            if len(entries) >= self.limit:
                break
            if book.id in seen:
                continue
            seen.add(book.id)
            entries.append(build(book))

        return replace(self, exclude_ids=frozenset(seen), entries=tuple(entries))


def clamp_limit(limit: int | None, settings: Settings | None = None) -> int:
    """Clamp a requested limit into the configured range."""
    settings = settings or default_settings
    if limit is None:
        return settings.recommendation_min_limit
    return min(
        max(limit, settings.recommendation_min_limit),
        settings.recommendation_max_limit,
    )


def compute_genre_affinity(history: Iterable[ReadingHistoryEntry]) -> list[GenreAffinity]:
    """Count finished books per genre, most read first.

    Ties keep the order in which genres first appear in the history.
    Books without a genre are ignored.
    """
    counts: Counter[str] = Counter()
    names: dict[str, str | None] = {}
    for entry in history:
        genre_id = entry.book.genre_id
        if not genre_id:
            continue
        counts[genre_id] += 1
        if names.get(genre_id) is None:
            names[genre_id] = entry.book.genre_name

    # Counter.most_common is stable for equal counts (insertion order)
    return [
        GenreAffinity(genre_id=genre_id, genre_name=names[genre_id], count=count)
        for genre_id, count in counts.most_common()
    ]


def top_genres(affinity: Sequence[GenreAffinity], count: int) -> list[GenreAffinity]:
    return list(affinity[:count])


def _fallback_builder(settings: Settings) -> EntryBuilder:
    def build(book: CatalogBook) -> RecommendationEntry:
        generated = generate_reason(book, fallback=True)
        return RecommendationEntry(
            book=book,
            reason=generated.reason,
            reason_details=generated.reason_details,
            match_score=score_book(book, base=settings.fallback_match_base),
        )

    return build


def _genre_builder(
    affinity: Sequence[GenreAffinity],
    settings: Settings,
    rng: random.Random | None,
) -> EntryBuilder:
    by_genre = {item.genre_id: item for item in affinity}

    def build(book: CatalogBook) -> RecommendationEntry:
        matched = by_genre.get(book.genre_id or "")
        read_count = matched.count if matched else 0
        genre_name = book.genre_name or (matched.genre_name if matched else None)
        generated = generate_reason(
            book,
            matched_genre=genre_name,
            read_count_for_genre=read_count,
            rng=rng,
        )
        return RecommendationEntry(
            book=book,
            reason=generated.reason,
            reason_details=generated.reason_details,
            match_score=score_book(
                book,
                read_count_for_genre=read_count,
                base=settings.default_match_base,
            ),
        )

    return build


async def cold_start_tier(
    state: SelectionState,
    catalog: CatalogAccessors,
    settings: Settings,
) -> SelectionState:
    """Fill from popularity ranking, then top up with a random sample."""
    build = _fallback_builder(settings)

    popular_target = min(
        int(math.floor(state.limit * settings.cold_start_popular_share + 0.5)),
        state.remaining,
    )
    if popular_target > 0:
        popular = await catalog.fetch_popular(state.exclude_ids, popular_target)
        state = state.merge(popular, build)

    if not state.is_full:
        sample = await catalog.fetch_random(state.exclude_ids, state.remaining)
        state = state.merge(sample, build)

    return state


async def genre_tier(
    state: SelectionState,
    catalog: CatalogAccessors,
    affinity: Sequence[GenreAffinity],
    settings: Settings,
    rng: random.Random | None = None,
) -> SelectionState:
    """Fill from the user's most read genres."""
    favorites = top_genres(affinity, settings.top_genre_count)
    if not favorites or state.is_full:
        return state

    books = await catalog.fetch_by_genres(
        [item.genre_id for item in favorites],
        state.exclude_ids,
        state.remaining,
    )
    return state.merge(books, _genre_builder(favorites, settings, rng))


async def popular_backfill_tier(
    state: SelectionState,
    catalog: CatalogAccessors,
    settings: Settings,
) -> SelectionState:
    """Top up with popular books, over-fetching to absorb duplicates."""
    if state.is_full:
        return state

    books = await catalog.fetch_popular(
        state.exclude_ids,
        state.remaining * settings.popular_backfill_factor,
    )
    return state.merge(books, _fallback_builder(settings))


async def random_backfill_tier(
    state: SelectionState,
    catalog: CatalogAccessors,
    settings: Settings,
) -> SelectionState:
    """Top up with a random sample."""
    if state.is_full:
        return state

    books = await catalog.fetch_random(state.exclude_ids, state.remaining)
    return state.merge(books, _fallback_builder(settings))


async def select_recommendations(
    history: Sequence[ReadingHistoryEntry],
    limit: int | None,
    catalog: CatalogAccessors,
    *,
    settings: Settings | None = None,
    rng: random.Random | None = None,
) -> list[RecommendationEntry]:
    """Select up to ``limit`` unique, unread recommendations.

    Args:
        history: Books the user has finished
        limit: Requested count, clamped to the configured range
        catalog: Candidate sources
        settings: Overrides for the tier constants
        rng: Random source for reason templates

    Returns:
        Entries in tier order; fewer than ``limit`` if the catalog runs out
    """
    settings = settings or default_settings
    state = SelectionState(
        limit=clamp_limit(limit, settings),
        exclude_ids=frozenset(entry.book.id for entry in history),
    )

    if len(history) < settings.cold_start_threshold:
        state = await cold_start_tier(state, catalog, settings)
        logger.debug("Cold start tier complete", selected=len(state.entries))
    else:
        affinity = compute_genre_affinity(history)
        state = await genre_tier(state, catalog, affinity, settings, rng)
        genre_count = len(state.entries)
        state = await popular_backfill_tier(state, catalog, settings)
        popular_count = len(state.entries) - genre_count
        state = await random_backfill_tier(state, catalog, settings)
        logger.debug(
            "Recommendation tiers complete",
            genre=genre_count,
            popular=popular_count,
            random=len(state.entries) - genre_count - popular_count,
        )

    return list(state.entries)

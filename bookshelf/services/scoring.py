"""Match score calculation."""

import math

from bookshelf.schemas.book import CatalogBook

DEFAULT_BASE = 65
MIN_SCORE = 50
MAX_SCORE = 98

RATING_WEIGHT = 4
RATING_BONUS_CAP = 20
POPULARITY_DIVISOR = 100
POPULARITY_BONUS_CAP = 10
GENRE_WEIGHT = 3
GENRE_BOOST_CAP = 10


def calculate_match_score(
    average_rating: float | None = 0,
    total_shelves: float | None = 0,
    read_count_for_genre: float | None = 0,
    base: float | None = DEFAULT_BASE,
) -> int:
    """Blend rating, popularity and genre affinity into a match percentage.

    Each signal is capped on its own, and the sum is clamped to
    [MIN_SCORE, MAX_SCORE]. Missing signals count as zero.
    """
    if base is None:
        base = DEFAULT_BASE

    rating_bonus = min((average_rating or 0) * RATING_WEIGHT, RATING_BONUS_CAP)
    popularity_bonus = min((total_shelves or 0) / POPULARITY_DIVISOR, POPULARITY_BONUS_CAP)
    genre_boost = 0
    if read_count_for_genre and read_count_for_genre > 0:
        genre_boost = min(read_count_for_genre * GENRE_WEIGHT, GENRE_BOOST_CAP)

    raw_score = base + rating_bonus + popularity_bonus + genre_boost
    clamped = min(max(raw_score, MIN_SCORE), MAX_SCORE)
    # Round half up, 72.5 -> 73
    return int(math.floor(clamped + 0.5))


def score_book(
    book: CatalogBook,
    read_count_for_genre: int = 0,
    base: float = DEFAULT_BASE,
) -> int:
    """Score a catalog book using its community signals."""
    return calculate_match_score(
        average_rating=book.average_rating,
        total_shelves=book.total_shelves,
        read_count_for_genre=read_count_for_genre,
        base=base,
    )

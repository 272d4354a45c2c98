"""Human-readable recommendation reasons."""

import random
from decimal import ROUND_HALF_UP, Decimal

from bookshelf.schemas.book import CatalogBook
from bookshelf.schemas.recommendation import GeneratedReason, ReasonDetails

_rng = random.Random()


def format_rating(rating: float) -> str:
    """Format a rating to one decimal, rounding halves up (4.25 -> "4.3")."""
    return str(Decimal(rating).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _fallback_reason(book: CatalogBook) -> GeneratedReason:
    reason = "Popular or trending"
    if book.average_rating:
        reason = f"{reason} — {format_rating(book.average_rating)}★"

    return GeneratedReason(
        reason=reason,
        reason_details=ReasonDetails(
            fallback=True,
            community_rating=book.average_rating,
            popularity=book.total_shelves,
        ),
    )


def generate_reason(
    book: CatalogBook,
    matched_genre: str | None = None,
    read_count_for_genre: int | None = None,
    fallback: bool = False,
    rng: random.Random | None = None,
) -> GeneratedReason:
    """Explain why a book is being recommended.

    In fallback mode (cold start or backfill) the reason is a fixed
    popularity template. Otherwise one of four templates is picked with
    ``rng``; the details carry every signal whichever template wins.
    """
    if fallback:
        return _fallback_reason(book)

    read_count = read_count_for_genre or 0
    reasons = [
        f"Matches your preference for {matched_genre or 'this genre'} ({read_count} reads)",
        f"Highly rated by the community ({format_rating(book.average_rating)}★)",
        f"Popular among readers ({book.total_shelves} adds)",
        "Similar to books you've enjoyed",
    ]
    rng = rng or _rng

    return GeneratedReason(
        reason=reasons[rng.randrange(len(reasons))],
        reason_details=ReasonDetails(
            matched_genre=matched_genre,
            read_count_for_genre=read_count,
            community_rating=book.average_rating,
            popularity=book.total_shelves,
        ),
    )

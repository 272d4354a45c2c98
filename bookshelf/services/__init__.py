"""Services package for recommendation logic."""

from bookshelf.services.reasons import generate_reason
from bookshelf.services.recommendation_service import RecommendationService
from bookshelf.services.scoring import calculate_match_score, score_book
from bookshelf.services.selection import (
    SelectionState,
    clamp_limit,
    compute_genre_affinity,
    select_recommendations,
)

__all__ = [
    "RecommendationService",
    "SelectionState",
    "calculate_match_score",
    "clamp_limit",
    "compute_genre_affinity",
    "generate_reason",
    "score_book",
    "select_recommendations",
]

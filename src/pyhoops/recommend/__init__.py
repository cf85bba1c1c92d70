"""Pipeline glue: period selection, fetch, scoring and result wrapping."""

from .service import (
    RecommendationFailure,
    RecommendationResult,
    RecommendationSuccess,
    build_board,
    period_window,
    recommend,
    recommend_window,
)

__all__ = [
    "RecommendationFailure",
    "RecommendationResult",
    "RecommendationSuccess",
    "build_board",
    "period_window",
    "recommend",
    "recommend_window",
]

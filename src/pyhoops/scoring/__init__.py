"""Fantasy scoring and per-position selection."""

from .aggregate import MISSING_TEAM, aggregate_stats, fantasy_score
from .selection import best_by_position

__all__ = [
    "MISSING_TEAM",
    "aggregate_stats",
    "best_by_position",
    "fantasy_score",
]

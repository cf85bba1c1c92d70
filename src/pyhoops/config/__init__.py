"""Configuration helpers for scoring rules and the stats API."""

from .scoring import (
    CANONICAL_POSITIONS,
    DEFAULT_WEIGHTS,
    PERIOD_DAYS,
    ScoringWeights,
    get_period_days,
)
from .settings import DEFAULT_STATS_URL, PER_PAGE, Settings, load_settings

__all__ = [
    "CANONICAL_POSITIONS",
    "DEFAULT_STATS_URL",
    "DEFAULT_WEIGHTS",
    "PERIOD_DAYS",
    "PER_PAGE",
    "ScoringWeights",
    "Settings",
    "get_period_days",
    "load_settings",
]

"""Scoring weights, canonical positions and lookback periods."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


CANONICAL_POSITIONS: Tuple[str, ...] = ("PG", "SG", "SF", "PF", "C")

PERIOD_DAYS: Dict[str, int] = {
    "week": 7,
    "month": 30,
}


@dataclass(frozen=True)
class ScoringWeights:
    points: float
    rebounds: float
    assists: float
    steals: float
    blocks: float
    turnovers: float


DEFAULT_WEIGHTS = ScoringWeights(
    points=1.0,
    rebounds=1.2,
    assists=1.5,
    steals=3.0,
    blocks=3.0,
    turnovers=-1.0,
)


def get_period_days(period: str) -> int:
    """Return the lookback length for a period selector, raising ValueError if unknown."""

    if period not in PERIOD_DAYS:
        choices = ", ".join(sorted(PERIOD_DAYS))
        raise ValueError(f"Unknown period {period!r}; expected one of: {choices}")
    return PERIOD_DAYS[period]

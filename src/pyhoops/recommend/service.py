"""Run the fetch -> aggregate -> select pipeline for a lookback period."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Optional, Union

import httpx

from pyhoops.config.scoring import DEFAULT_WEIGHTS, ScoringWeights, get_period_days
from pyhoops.config.settings import DEFAULT_STATS_URL
from pyhoops.ingest import FetchFailure, fetch_all_stats, resolve_window
from pyhoops.models import PositionBoard
from pyhoops.scoring import aggregate_stats, best_by_position


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecommendationSuccess:
    board: PositionBoard
    start_date: date
    end_date: date
    records_fetched: int
    players_ranked: int

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class RecommendationFailure:
    error: FetchFailure
    start_date: date
    end_date: date

    @property
    def ok(self) -> bool:
        return False


RecommendationResult = Union[RecommendationSuccess, RecommendationFailure]


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


def period_window(period: str, today: Optional[date] = None) -> tuple[date, date]:
    """Translate ``"week"`` / ``"month"`` into an inclusive ``(start, end)`` window ending today."""

    days = get_period_days(period)
    end = today or _utc_today()
    return end - timedelta(days=days), end


async def _run_pipeline(
    start: date,
    end: date,
    *,
    client: httpx.AsyncClient | None,
    base_url: str,
    weights: ScoringWeights,
) -> RecommendationSuccess:
    records = await fetch_all_stats(start, end, client=client, base_url=base_url)
    aggregates = aggregate_stats(records, weights)
    board = best_by_position(aggregates)
    return RecommendationSuccess(
        board=board,
        start_date=start,
        end_date=end,
        records_fetched=len(records),
        players_ranked=len(aggregates),
    )


async def build_board(
    start_date: date | str,
    end_date: date | str,
    *,
    client: httpx.AsyncClient | None = None,
    base_url: str = DEFAULT_STATS_URL,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> PositionBoard:
    """Fetch, aggregate and select for an explicit window; raises FetchFailure."""

    start, end = resolve_window(start_date, end_date)
    outcome = await _run_pipeline(start, end, client=client, base_url=base_url, weights=weights)
    return outcome.board


async def recommend_window(
    start_date: date | str,
    end_date: date | str,
    *,
    client: httpx.AsyncClient | None = None,
    base_url: str = DEFAULT_STATS_URL,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> RecommendationResult:
    start, end = resolve_window(start_date, end_date)
    try:
        return await _run_pipeline(start, end, client=client, base_url=base_url, weights=weights)
    except FetchFailure as exc:
        logger.warning("Recommendation for %s..%s failed: %s", start.isoformat(), end.isoformat(), exc)
        return RecommendationFailure(error=exc, start_date=start, end_date=end)


async def recommend(
    period: str,
    *,
    today: Optional[date] = None,
    client: httpx.AsyncClient | None = None,
    base_url: str = DEFAULT_STATS_URL,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> RecommendationResult:
    """Build the position board for the last week or month.

    Fetch failures come back as :class:`RecommendationFailure` rather than
    being raised; an unknown period still raises ``ValueError``.
    """

    start, end = period_window(period, today)
    return await recommend_window(start, end, client=client, base_url=base_url, weights=weights)

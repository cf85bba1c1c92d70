"""Fold per-game box scores into per-player fantasy totals."""

from __future__ import annotations

import logging
from typing import Dict, Iterable

from pyhoops.config.scoring import DEFAULT_WEIGHTS, ScoringWeights
from pyhoops.models import PlayerAggregate, StatRecord


logger = logging.getLogger(__name__)

MISSING_TEAM = "N/A"


def fantasy_score(record: StatRecord, weights: ScoringWeights = DEFAULT_WEIGHTS) -> float:
    """Score a single game: pts + 1.2 reb + 1.5 ast + 3 stl + 3 blk - tov by default."""

    return (
        weights.points * record.points
        + weights.rebounds * record.rebounds
        + weights.assists * record.assists
        + weights.steals * record.steals
        + weights.blocks * record.blocks
        + weights.turnovers * record.turnovers
    )


def aggregate_stats(
    records: Iterable[StatRecord],
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> Dict[int, PlayerAggregate]:
    """Return ``player_id -> PlayerAggregate`` in order of first appearance.

    Rows without a usable position are dropped before scoring, so a player
    listed without one never shows up, however many games they logged. Name,
    team and position are taken from the first row seen for a player; later
    rows only add to the score and the game count.
    """

    aggregates: Dict[int, PlayerAggregate] = {}
    skipped = 0

    for record in records:
        player = record.player
        if not player.has_position:
            skipped += 1
            continue

        score = fantasy_score(record, weights)
        existing = aggregates.get(player.id)
        if existing is not None:
            existing.add_game(score)
            continue

        aggregates[player.id] = PlayerAggregate(
            player_id=player.id,
            name=f"{player.first_name} {player.last_name}",
            team=record.team_name or MISSING_TEAM,
            position=player.position or "",
            score=score,
            games=1,
        )

    if skipped:
        logger.debug("Skipped %s stat rows without a player position", skipped)
    logger.info("Aggregated %s players", len(aggregates))
    return aggregates

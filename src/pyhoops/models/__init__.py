"""Canonical models shared across ingestion, scoring and presentation."""

from .board import PositionBoard
from .player import PlayerAggregate, StatPlayer, StatRecord, StatTeam

__all__ = [
    "PlayerAggregate",
    "PositionBoard",
    "StatPlayer",
    "StatRecord",
    "StatTeam",
]

"""Pydantic models for API I/O."""

from .board import PlayerSummaryResponse, PositionSlotResponse, RecommendationResponse

__all__ = [
    "PlayerSummaryResponse",
    "PositionSlotResponse",
    "RecommendationResponse",
]

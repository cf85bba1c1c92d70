from __future__ import annotations

from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class PlayerSummaryResponse(BaseModel):
    player_id: int
    name: str
    team: str
    position: str
    score: float
    games: int = Field(..., ge=1)


class PositionSlotResponse(BaseModel):
    position: str
    player: Optional[PlayerSummaryResponse] = None
    display: str


class RecommendationResponse(BaseModel):
    period: Optional[Literal["week", "month"]] = None
    start_date: date
    end_date: date
    records_fetched: int
    players_ranked: int
    slots: List[PositionSlotResponse]

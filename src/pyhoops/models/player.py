"""Player box-score and aggregate models shared across the pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class StatPlayer(BaseModel):
    """Player reference embedded in a box-score row."""

    id: int
    first_name: Optional[str] = ""
    last_name: Optional[str] = ""
    position: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("first_name", "last_name", mode="before")
    @classmethod
    def _null_name_is_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def has_position(self) -> bool:
        return bool(self.position and self.position.strip())


class StatTeam(BaseModel):
    full_name: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class StatRecord(BaseModel):
    """One player's statistics for one game, as served by the stats API."""

    player: StatPlayer
    team: Optional[StatTeam] = None
    points: float = Field(default=0.0, alias="pts")
    rebounds: float = Field(default=0.0, alias="reb")
    assists: float = Field(default=0.0, alias="ast")
    steals: float = Field(default=0.0, alias="stl")
    blocks: float = Field(default=0.0, alias="blk")
    turnovers: float = Field(default=0.0, alias="turnover")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("points", "rebounds", "assists", "steals", "blocks", "turnovers", mode="before")
    @classmethod
    def _null_counter_is_zero(cls, value: Any) -> Any:
        # Players listed without minutes come back with null counters.
        return 0.0 if value is None else value

    @property
    def team_name(self) -> Optional[str]:
        if self.team is None:
            return None
        return self.team.full_name


@dataclass
class PlayerAggregate:
    """Cumulative fantasy output for one player across a date window."""

    player_id: int
    name: str
    team: str
    position: str
    score: float
    games: int = 1

    def add_game(self, score: float) -> None:
        self.score += score
        self.games += 1

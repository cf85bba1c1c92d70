"""Turn a position board into display lines for the UI and the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from pyhoops.models import PlayerAggregate, PositionBoard


NO_DATA = "No data available."


@dataclass(frozen=True)
class BoardLine:
    """One rendered slot: ``PG: Name (Team)`` plus a score summary."""

    position: str
    headline: Optional[str]
    detail: str
    player: Optional[PlayerAggregate] = None

    @property
    def has_data(self) -> bool:
        return self.player is not None

    def as_text(self) -> str:
        if self.headline is None:
            return f"{self.position}: {self.detail}"
        return f"{self.position}: {self.headline} - {self.detail}"


def _score_summary(player: PlayerAggregate) -> str:
    return f"Total Fantasy Score: {player.score:.2f} over {player.games} game(s)"


def render_board(board: PositionBoard) -> List[BoardLine]:
    lines: List[BoardLine] = []
    for position, player in board.items():
        if player is None:
            lines.append(BoardLine(position=position, headline=None, detail=NO_DATA))
            continue
        lines.append(
            BoardLine(
                position=position,
                headline=f"{player.name} ({player.team})",
                detail=_score_summary(player),
                player=player,
            )
        )
    return lines


def format_board(board: PositionBoard) -> str:
    return "\n".join(line.as_text() for line in render_board(board))


def format_failure(error: Exception) -> str:
    return f"Error fetching data: {error}"

"""Pick the top fantasy scorer at each canonical position."""

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional, Union

from pyhoops.config.scoring import CANONICAL_POSITIONS
from pyhoops.models import PlayerAggregate, PositionBoard


def best_by_position(
    aggregates: Union[Mapping[int, PlayerAggregate], Iterable[PlayerAggregate]],
) -> PositionBoard:
    """Return the highest scoring aggregate for each of PG, SG, SF, PF and C.

    Positions must match exactly; combined labels such as ``"SG-SF"`` are not
    split and never fill a slot. On equal scores the aggregate seen first wins.
    """

    players: Iterable[PlayerAggregate]
    if isinstance(aggregates, Mapping):
        players = aggregates.values()
    else:
        players = aggregates

    best: Dict[str, Optional[PlayerAggregate]] = {position: None for position in CANONICAL_POSITIONS}
    for player in players:
        if player.position not in best:
            continue
        current = best[player.position]
        if current is None or player.score > current.score:
            best[player.position] = player

    return PositionBoard(best)

"""Immutable best-player-per-position board."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import ItemsView, Iterator, Mapping, Optional

from pyhoops.config.scoring import CANONICAL_POSITIONS
from pyhoops.models.player import PlayerAggregate


@dataclass(frozen=True)
class PositionBoard:
    """Canonical position code -> best aggregate, or None when nobody qualified."""

    slots: Mapping[str, Optional[PlayerAggregate]]

    def __post_init__(self) -> None:
        unknown = sorted(set(self.slots) - set(CANONICAL_POSITIONS))
        if unknown:
            raise ValueError(f"PositionBoard only holds canonical positions, got {unknown}")
        ordered = {position: self.slots.get(position) for position in CANONICAL_POSITIONS}
        object.__setattr__(self, "slots", MappingProxyType(ordered))

    @classmethod
    def empty(cls) -> "PositionBoard":
        return cls({})

    def __getitem__(self, position: str) -> Optional[PlayerAggregate]:
        return self.slots[position]

    def __iter__(self) -> Iterator[str]:
        return iter(self.slots)

    def __len__(self) -> int:
        return len(self.slots)

    def items(self) -> ItemsView[str, Optional[PlayerAggregate]]:
        return self.slots.items()

    @property
    def filled_positions(self) -> tuple[str, ...]:
        return tuple(position for position, player in self.slots.items() if player is not None)

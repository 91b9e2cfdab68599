"""Team model for the scoring engine."""

from typing import Iterable, List

from pydantic import Field, field_validator

from ..errors import UnknownPlayerError
from .base import ScoringModel
from .players import Player


class Team(ScoringModel):
    """A named, ordered roster. The first two players open the batting."""

    name: str = Field(..., min_length=1, description="Team name")
    players: List[Player] = Field(default_factory=list, description="Roster in batting order")

    @field_validator("players")
    @classmethod
    def validate_unique_names(cls, v: List[Player]) -> List[Player]:
        """Validate that player names are unique within the roster."""
        seen = set()
        for player in v:
            if player.name in seen:
                raise ValueError(f"Duplicate player name in roster: {player.name}")
            seen.add(player.name)
        return v

    @classmethod
    def from_names(cls, name: str, player_names: Iterable[str]) -> "Team":
        return cls(name=name, players=[Player(name=p) for p in player_names])

    def index_of(self, name: str) -> int:
        for idx, player in enumerate(self.players):
            if player.name == name:
                return idx
        raise UnknownPlayerError(name, self.name)

    def get_player(self, name: str) -> Player:
        return self.players[self.index_of(name)]

    def __contains__(self, name: object) -> bool:
        return any(player.name == name for player in self.players)

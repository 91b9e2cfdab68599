"""Player model for the scoring engine."""

from typing import Optional

from pydantic import Field, model_validator

from .ball_by_ball import DismissalKind
from .base import ScoringModel


class Player(ScoringModel):
    """A named participant with running batting and bowling figures."""

    name: str = Field(..., min_length=1, description="Player name, unique within a team")

    # Batting
    runs: int = Field(0, ge=0, description="Runs off the bat")
    balls_faced: int = Field(0, ge=0, description="Legal deliveries faced")
    fours: int = Field(0, ge=0)
    sixes: int = Field(0, ge=0)
    out: bool = Field(False, description="Whether the player has been dismissed")
    dismissal: Optional[DismissalKind] = Field(None, description="How the player was dismissed")

    # Bowling
    balls_bowled: int = Field(0, ge=0, description="Legal deliveries bowled")
    runs_conceded: int = Field(0, ge=0)
    wickets_taken: int = Field(0, ge=0)
    maidens: int = Field(0, ge=0)
    wides_bowled: int = Field(0, ge=0)
    no_balls_bowled: int = Field(0, ge=0)

    @model_validator(mode="after")
    def validate_dismissal(self) -> "Player":
        """A dismissal kind is recorded exactly when the player is out."""
        if self.out != (self.dismissal is not None):
            raise ValueError("dismissal must be set if and only if the player is out")
        return self

    def dismiss(self, kind: DismissalKind) -> None:
        self.out = True
        self.dismissal = kind

    @property
    def did_bat(self) -> bool:
        return self.out or self.balls_faced > 0

    @property
    def did_bowl(self) -> bool:
        return self.balls_bowled > 0 or self.wides_bowled > 0 or self.no_balls_bowled > 0

    @property
    def strike_rate(self) -> float:
        if self.balls_faced == 0:
            return 0.0
        return round(self.runs * 100 / self.balls_faced, 2)

    @property
    def overs_bowled(self) -> str:
        """Overs bowled in cricket notation, e.g. ``3.4`` for 22 balls."""
        return f"{self.balls_bowled // 6}.{self.balls_bowled % 6}"

    @property
    def economy(self) -> float:
        if self.balls_bowled == 0:
            return 0.0
        return round(self.runs_conceded * 6 / self.balls_bowled, 2)

    def summary(self) -> str:
        not_out = "" if self.out else "*"
        return f"{self.name}: {self.runs}{not_out}({self.balls_faced}), {self.fours} 4s, {self.sixes} 6s"

    def __str__(self) -> str:
        return self.summary()

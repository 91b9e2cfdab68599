"""Running score for a single innings."""

from pydantic import Field

from ..config import settings
from ..errors import AllOutError
from .ball_by_ball import BallOutcome
from .base import ScoringModel


def _default_wickets() -> int:
    return settings.scoring.wickets_per_innings


class CurrentScore(ScoringModel):
    """Numeric aggregate of one innings: total, wickets, extras and position."""

    wickets_left: int = Field(default_factory=_default_wickets, ge=0)
    wickets_lost: int = Field(0, ge=0)
    runs: int = Field(0, ge=0)

    # Extras breakdown
    byes: int = Field(0, ge=0)
    leg_byes: int = Field(0, ge=0)
    wides: int = Field(0, ge=0)
    no_balls: int = Field(0, ge=0)

    # Position: completed overs and legal balls in the current over
    overs: int = Field(0, ge=0)
    ball: int = Field(0, ge=0)

    def score_ball(self, outcome: BallOutcome) -> None:
        """Add one delivery to the totals.

        Raises AllOutError, leaving the score untouched, when the ball would
        take more wickets than the innings has left.
        """
        wickets = sum(1 for d in outcome.dismissals if d.kind.counts_as_wicket)
        if wickets > self.wickets_left:
            raise AllOutError(self.wickets_left, wickets)

        if outcome.is_legal:
            self.ball += 1
        self.runs += outcome.runs

        for dismissal in outcome.dismissals:
            if dismissal.kind.counts_as_wicket:
                self.wickets_lost += 1
                self.wickets_left -= 1

        if outcome.wide is not None:
            # runs taken while a wide is signalled are wides as well
            self.wides += outcome.wide + outcome.runs
            self.runs += outcome.wide
        if outcome.no_ball is not None:
            self.no_balls += outcome.no_ball
            self.runs += outcome.no_ball
        if outcome.byes is not None:
            self.byes += outcome.byes
            self.runs += outcome.byes
        if outcome.leg_byes is not None:
            self.leg_byes += outcome.leg_byes
            self.runs += outcome.leg_byes
        if outcome.penalty is not None:
            self.runs += outcome.penalty

    def over(self) -> None:
        """Move to the next over."""
        self.overs += 1
        self.ball = 0

    @property
    def total_extras(self) -> int:
        return self.byes + self.leg_byes + self.wides + self.no_balls

    @property
    def overs_decimal(self) -> float:
        """Get overs in decimal format (e.g. 45.5 for 45 overs 3 balls)."""
        return self.overs + (self.ball / 6.0)

    @property
    def run_rate(self) -> float:
        if self.overs_decimal == 0:
            return 0.0
        return round(self.runs / self.overs_decimal, 2)

    def summary(self) -> str:
        return (
            f"{self.wickets_lost}/{self.runs}\n"
            f"{self.wides} wides, {self.no_balls} no balls, {self.byes} byes, {self.leg_byes} leg byes\n"
            f"{self.overs}.{self.ball}"
        )

    def __str__(self) -> str:
        return f"{self.wickets_lost}/{self.runs} ({self.overs}.{self.ball} overs)"

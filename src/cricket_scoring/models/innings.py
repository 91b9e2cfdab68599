"""Innings model: applies deliveries to the score, the players and the crease."""

from typing import List, Optional

from loguru import logger
from pydantic import Field, field_validator

from ..errors import InningsFinishedError, UnknownPlayerError
from .ball_by_ball import BallOutcome
from .base import ScoringModel
from .players import Player
from .score import CurrentScore
from .teams import Team


class Innings(ScoringModel):
    """One team's batting effort.

    ``on_strike`` and ``off_strike`` index into the batting roster. They are
    re-derived from the names carried by every ``BallOutcome``, so the ball
    being scored is always the authority on who is at the crease.
    """

    score: CurrentScore = Field(default_factory=CurrentScore)
    batting_team: Team
    bowling_team: Team
    on_strike: int = Field(0, ge=0)
    off_strike: int = Field(1, ge=0)
    finished: bool = False
    declared: bool = False

    # Bowler of the over in progress, with the legal balls they have bowled
    # in it and the runs charged to them
    over_bowler: Optional[str] = None
    over_balls: int = Field(0, ge=0)
    over_runs: int = Field(0, ge=0)

    @field_validator("batting_team", "bowling_team")
    @classmethod
    def copy_team(cls, v: Team) -> Team:
        """Each innings keeps its own copy of the rosters."""
        return v.model_copy(deep=True)

    @classmethod
    def start(cls, batting_team: Team, bowling_team: Team, wickets: Optional[int] = None) -> "Innings":
        score = CurrentScore() if wickets is None else CurrentScore(wickets_left=wickets)
        return cls(score=score, batting_team=batting_team, bowling_team=bowling_team)

    @property
    def striker(self) -> Optional[Player]:
        return self._at(self.on_strike)

    @property
    def non_striker(self) -> Optional[Player]:
        return self._at(self.off_strike)

    def _at(self, index: int) -> Optional[Player]:
        if index < len(self.batting_team.players):
            return self.batting_team.players[index]
        return None

    @property
    def is_all_out(self) -> bool:
        return self.score.wickets_left <= 0

    def _check_open(self) -> None:
        if self.finished:
            raise InningsFinishedError(f"{self.batting_team.name} innings has already finished")

    def score_ball(self, outcome: BallOutcome) -> None:
        """Apply one delivery to the score, the players and the crease.

        Raises UnknownPlayerError for a name missing from either roster and
        AllOutError when the ball takes more wickets than remain. Nothing is
        changed in either case.
        """
        self._check_open()
        # The outcome says who was at the crease; resync the cached indices.
        on_strike = self.batting_team.index_of(outcome.on_strike)
        off_strike = self.batting_team.index_of(outcome.off_strike)
        bowler = self.bowling_team.get_player(outcome.bowler)

        self.score.score_ball(outcome)
        self.on_strike, self.off_strike = on_strike, off_strike

        striker = self.batting_team.players[on_strike]
        if outcome.is_legal:
            striker.balls_faced += 1
            bowler.balls_bowled += 1
            if not outcome.is_bye_or_leg_bye:
                striker.runs += outcome.runs
                if outcome.four:
                    striker.fours += 1
                if outcome.six:
                    striker.sixes += 1
        if outcome.is_wide:
            bowler.wides_bowled += 1
        if outcome.is_no_ball:
            bowler.no_balls_bowled += 1
        bowler.runs_conceded += outcome.total_runs
        bowler.wickets_taken += len(outcome.dismissals)

        if self.over_bowler != bowler.name:
            self.over_bowler = bowler.name
            self.over_balls = 0
            self.over_runs = 0
        if outcome.is_legal:
            self.over_balls += 1
        self.over_runs += outcome.bowler_runs

        if outcome.runs % 2 == 1:
            self.on_strike, self.off_strike = self.off_strike, self.on_strike

        for dismissal in outcome.dismissals:
            next_in = max(self.on_strike, self.off_strike) + 1
            at_strike = self.striker
            if at_strike is not None and at_strike.name in dismissal.player_out:
                at_strike.dismiss(dismissal.kind)
                self.on_strike = next_in
            else:
                at_other_end = self.non_striker
                if at_other_end is None:
                    raise UnknownPlayerError(dismissal.player_out, self.batting_team.name)
                at_other_end.dismiss(dismissal.kind)
                self.off_strike = next_in
            logger.debug(f"{dismissal.player_out} out ({dismissal.kind.value}), {self.score}")

        logger.debug(f"{outcome.bowler} to {outcome.on_strike}: {outcome.total_runs} run(s), {self.score}")

    def over(self) -> None:
        """End the over: credit a maiden, reset the ball count and change ends.

        A maiden needs one bowler to have bowled all six legal balls without
        conceding bat runs, wides or no-balls.
        """
        self._check_open()
        if self.over_bowler is not None and self.over_balls == 6 and self.over_runs == 0:
            self.bowling_team.get_player(self.over_bowler).maidens += 1
            logger.debug(f"Maiden over for {self.over_bowler}")
        self.score.over()
        self.over_bowler = None
        self.over_balls = 0
        self.over_runs = 0
        self.on_strike, self.off_strike = self.off_strike, self.on_strike

    def finish(self) -> None:
        self.finished = True
        logger.debug(f"{self.batting_team.name} innings closed at {self.score}")

    def declare(self) -> None:
        self.declared = True
        self.finish()

    def batters(self) -> List[Player]:
        """Players who came to the crease, in batting order."""
        return [p for p in self.batting_team.players if p.did_bat]

    def bowlers(self) -> List[Player]:
        return [p for p in self.bowling_team.players if p.did_bowl]

    def __str__(self) -> str:
        lines = [self.score.summary()]
        lines.extend(str(batter) for batter in self.batters())
        return "\n".join(lines)

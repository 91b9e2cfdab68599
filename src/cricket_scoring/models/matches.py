"""Match model: innings bookkeeping and result calculation."""

from collections import Counter
from enum import Enum
from typing import Dict, List, Optional

from loguru import logger
from pydantic import Field, model_validator

from .base import ScoringModel, ValueModel
from .innings import Innings
from .teams import Team


class MatchType(str, Enum):
    """Enumeration of cricket match types."""
    TEST = "test"
    ODI = "odi"
    T20 = "t20"
    OTHER = "other"


class MatchStatus(str, Enum):
    """Enumeration of cricket match statuses."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    ABANDONED = "abandoned"
    NO_RESULT = "no_result"


class ResultType(str, Enum):
    TEAM1_WON = "team1_won"
    TEAM2_WON = "team2_won"
    TIE = "tie"
    DRAW = "draw"
    NO_RESULT = "no_result"


class MarginType(str, Enum):
    RUNS = "runs"
    WICKETS = "wickets"
    AWARD = "award"  # forfeit, disqualification: no playing margin


class WinMargin(ValueModel):
    """Margin of victory: runs, wickets in hand, or an award with no value."""

    kind: MarginType
    value: Optional[int] = Field(None, ge=0)

    @model_validator(mode="after")
    def validate_value(self) -> "WinMargin":
        if self.kind == MarginType.AWARD and self.value is not None:
            raise ValueError("An award margin carries no value")
        if self.kind != MarginType.AWARD and self.value is None:
            raise ValueError(f"A {self.kind.value} margin needs a value")
        return self

    @classmethod
    def runs(cls, value: int) -> "WinMargin":
        return cls(kind=MarginType.RUNS, value=value)

    @classmethod
    def wickets(cls, value: int) -> "WinMargin":
        return cls(kind=MarginType.WICKETS, value=value)

    @classmethod
    def award(cls) -> "WinMargin":
        return cls(kind=MarginType.AWARD)

    def __str__(self) -> str:
        if self.kind == MarginType.AWARD:
            return "award"
        unit = self.kind.value[:-1] if self.value == 1 else self.kind.value
        return f"{self.value} {unit}"


class MatchResult(ValueModel):
    """Final result of a match. ``method`` names an adjustment such as D/L."""

    result_type: ResultType
    margin: Optional[WinMargin] = None
    method: Optional[str] = None

    @model_validator(mode="after")
    def validate_margin(self) -> "MatchResult":
        if self.is_win and self.margin is None:
            raise ValueError("A win needs a margin")
        if not self.is_win and self.margin is not None:
            raise ValueError(f"A {self.result_type.value} result has no margin")
        if self.result_type in (ResultType.DRAW, ResultType.NO_RESULT) and self.method is not None:
            raise ValueError(f"A {self.result_type.value} result has no method")
        return self

    @classmethod
    def team1_won(cls, margin: WinMargin, method: Optional[str] = None) -> "MatchResult":
        return cls(result_type=ResultType.TEAM1_WON, margin=margin, method=method)

    @classmethod
    def team2_won(cls, margin: WinMargin, method: Optional[str] = None) -> "MatchResult":
        return cls(result_type=ResultType.TEAM2_WON, margin=margin, method=method)

    @classmethod
    def tie(cls, method: Optional[str] = None) -> "MatchResult":
        return cls(result_type=ResultType.TIE, method=method)

    @classmethod
    def draw(cls) -> "MatchResult":
        return cls(result_type=ResultType.DRAW)

    @classmethod
    def no_result(cls) -> "MatchResult":
        return cls(result_type=ResultType.NO_RESULT)

    @property
    def is_win(self) -> bool:
        return self.result_type in (ResultType.TEAM1_WON, ResultType.TEAM2_WON)

    def with_method(self, method: Optional[str]) -> "MatchResult":
        """Copy of this result carrying ``method``; draws and no-results take none."""
        if self.result_type in (ResultType.DRAW, ResultType.NO_RESULT):
            return self
        return self.model_copy(update={"method": method})


class Match(ScoringModel):
    """A complete match: two teams, the innings in order and the result."""

    id: str = Field(..., description="Match identifier")
    title: str = Field("", description="Match title")
    venue: Optional[str] = None
    date: Optional[str] = Field(None, description="ISO date")
    match_type: MatchType = MatchType.OTHER
    team1: Team
    team2: Team
    innings: List[Innings] = Field(default_factory=list)
    status: MatchStatus = MatchStatus.NOT_STARTED
    result: Optional[MatchResult] = None
    # Set when the result came from outside rather than from calculate_result
    result_is_external: bool = False

    def with_venue(self, venue: str) -> "Match":
        self.venue = venue
        return self

    def with_date(self, date: str) -> "Match":
        self.date = date
        return self

    def add_innings(self, innings: Innings) -> None:
        self.innings.append(innings)
        if self.status == MatchStatus.NOT_STARTED:
            self.status = MatchStatus.IN_PROGRESS

    def set_status(self, status: MatchStatus) -> None:
        self.status = status

    def set_result(self, result: MatchResult) -> None:
        """Record an externally decided result (method-adjusted, abandoned, awarded)."""
        self.result = result
        self.result_is_external = True
        if result.result_type == ResultType.NO_RESULT:
            self.status = MatchStatus.NO_RESULT
        else:
            self.status = MatchStatus.COMPLETED
        logger.info(f"{self.id}: result set to {self.describe_result()}")

    def set_result_with_method(self, result: MatchResult, method: Optional[str]) -> None:
        self.set_result(result.with_method(method))

    @property
    def is_completed(self) -> bool:
        return self.status == MatchStatus.COMPLETED

    @property
    def is_in_progress(self) -> bool:
        return self.status == MatchStatus.IN_PROGRESS

    def team_total_runs(self, team_name: str) -> int:
        """Runs scored by a team across all of its innings."""
        return sum(i.score.runs for i in self.innings if i.batting_team.name == team_name)

    @property
    def team1_total_runs(self) -> int:
        return self.team_total_runs(self.team1.name)

    @property
    def team2_total_runs(self) -> int:
        return self.team_total_runs(self.team2.name)

    @property
    def winner(self) -> Optional[Team]:
        if self.result is None:
            return None
        if self.result.result_type == ResultType.TEAM1_WON:
            return self.team1
        if self.result.result_type == ResultType.TEAM2_WON:
            return self.team2
        return None

    def is_innings_victory(self) -> bool:
        """True when one side won without batting as many times as the other."""
        if len(self.innings) < 3:
            return False
        counts = Counter(i.batting_team.name for i in self.innings)
        return len(counts) == 2 and len(set(counts.values())) == 2

    def calculate_result(self) -> None:
        """Decide the result from the recorded innings.

        Runs are totalled per team across all innings. If the side batting
        last is behind with wickets in hand the match is drawn. Otherwise the
        higher total wins: by runs for an innings victory or when the winner
        bowled last, by the wickets left in the final innings when the winner
        batted last.
        """
        if not self.innings:
            return
        if self.result is not None and (self.result_is_external or self.result.method is not None):
            logger.debug(f"{self.id}: keeping externally set result")
            return

        scores: Dict[str, List[int]] = {}
        for innings in self.innings:
            scores.setdefault(innings.batting_team.name, []).append(innings.score.runs)
        last = self.innings[-1]
        batting_last = last.batting_team.name
        bowling_last = last.bowling_team.name
        wickets_left = last.score.wickets_left

        totals = {team: sum(runs) for team, runs in scores.items()}

        if len(scores) < 2:
            result = MatchResult.draw()
        elif totals.get(batting_last, 0) < totals.get(bowling_last, 0) and wickets_left > 0:
            result = MatchResult.draw()
        else:
            team_a, team_b = list(scores)[:2]
            if totals[team_a] == totals[team_b]:
                result = MatchResult.tie()
            else:
                winner, loser = (team_a, team_b) if totals[team_a] > totals[team_b] else (team_b, team_a)
                if self.is_innings_victory() or winner != batting_last:
                    margin = WinMargin.runs(totals[winner] - totals[loser])
                else:
                    margin = WinMargin.wickets(wickets_left)
                if winner == self.team1.name:
                    result = MatchResult.team1_won(margin)
                else:
                    result = MatchResult.team2_won(margin)

        self.result = result
        self.result_is_external = False
        self.status = MatchStatus.COMPLETED
        logger.info(f"{self.id}: {self.describe_result()}")

    def describe_result(self) -> str:
        if self.result is None:
            return "No result yet"
        result = self.result
        if result.result_type == ResultType.TIE:
            text = "Match tied"
        elif result.result_type == ResultType.DRAW:
            text = "Match drawn"
        elif result.result_type == ResultType.NO_RESULT:
            text = "No result"
        else:
            winner = self.team1.name if result.result_type == ResultType.TEAM1_WON else self.team2.name
            if result.margin.kind == MarginType.AWARD:
                text = f"{winner} won (awarded)"
            elif result.margin.kind == MarginType.RUNS and self.is_innings_victory():
                text = f"{winner} won by an innings and {result.margin}"
            else:
                text = f"{winner} won by {result.margin}"
        if result.method:
            text += f" ({result.method})"
        return text

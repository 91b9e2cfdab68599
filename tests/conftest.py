from typing import Iterable, Optional

import pytest

from cricket_scoring import BallOutcome, Innings, Team


def make_team(name: str, prefix: str, size: int = 11) -> Team:
    return Team.from_names(name, [f"{prefix}{idx + 1}" for idx in range(size)])


def make_ball(
    innings: Innings,
    runs: int = 0,
    events: Iterable = (),
    bowler: Optional[str] = None,
) -> BallOutcome:
    """Ball bowled to whoever the innings currently has at the crease."""
    outcome = BallOutcome.build(
        runs,
        list(events),
        innings.striker,
        innings.non_striker,
        bowler or innings.bowling_team.players[-1].name,
    )
    outcome.validate()
    return outcome


@pytest.fixture
def team_a() -> Team:
    return make_team("Team A", "A")


@pytest.fixture
def team_b() -> Team:
    return make_team("Team B", "B")


@pytest.fixture
def innings(team_a: Team, team_b: Team) -> Innings:
    return Innings(batting_team=team_a, bowling_team=team_b)

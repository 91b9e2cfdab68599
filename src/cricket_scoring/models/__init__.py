"""Scoring state models."""

from .ball_by_ball import (
    BallEvent,
    BallOutcome,
    Bye,
    Dismissal,
    DismissalKind,
    Four,
    LegBye,
    NoBall,
    Penalty,
    Six,
    WicketEvent,
    Wide,
)
from .innings import Innings
from .matches import MarginType, Match, MatchResult, MatchStatus, MatchType, ResultType, WinMargin
from .players import Player
from .score import CurrentScore
from .teams import Team

__all__ = [
    "BallEvent",
    "BallOutcome",
    "Bye",
    "CurrentScore",
    "Dismissal",
    "DismissalKind",
    "Four",
    "Innings",
    "LegBye",
    "MarginType",
    "Match",
    "MatchResult",
    "MatchStatus",
    "MatchType",
    "NoBall",
    "Penalty",
    "Player",
    "ResultType",
    "Six",
    "Team",
    "WicketEvent",
    "Wide",
    "WinMargin",
]

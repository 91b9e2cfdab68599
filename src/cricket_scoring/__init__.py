"""Cricket scoring engine - ball-by-ball state and match results."""

from loguru import logger

from .config import settings
from .errors import (
    AllOutError,
    BallStringError,
    CricketScoringError,
    DoubleOutcomeError,
    DuplicateBallEventError,
    InningsFinishedError,
    UnknownPlayerError,
)
from .models import (
    BallOutcome,
    CurrentScore,
    Dismissal,
    DismissalKind,
    Innings,
    Match,
    MatchResult,
    MatchStatus,
    MatchType,
    Player,
    ResultType,
    Team,
    WinMargin,
)

# Silent until an application calls log.setup_logging()
logger.disable("cricket_scoring")

__all__ = [
    "settings",
    "AllOutError",
    "BallStringError",
    "CricketScoringError",
    "DoubleOutcomeError",
    "DuplicateBallEventError",
    "InningsFinishedError",
    "UnknownPlayerError",
    "BallOutcome",
    "CurrentScore",
    "Dismissal",
    "DismissalKind",
    "Innings",
    "Match",
    "MatchResult",
    "MatchStatus",
    "MatchType",
    "Player",
    "ResultType",
    "Team",
    "WinMargin",
]

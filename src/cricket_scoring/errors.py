"""Exceptions raised by the scoring engine.

Malformed input (ball notation, contradictory ball outcomes) surfaces as
``ValueError`` subclasses the caller can report. Unknown players and scoring
into a closed innings are caller bugs and are not meant to be recovered from.
"""


class CricketScoringError(Exception):
    """Base class for every error raised by this package."""


class BallStringError(CricketScoringError, ValueError):
    """A free-text ball description could not be understood."""


class EmptyBallStringError(BallStringError):
    def __init__(self) -> None:
        super().__init__("Ball string can't be empty")


class InvalidBallCharacterError(BallStringError):
    def __init__(self, character: str) -> None:
        self.character = character
        super().__init__(f"Ball string can't contain {character!r}")


class MissingByeRunsError(BallStringError):
    def __init__(self) -> None:
        super().__init__(
            "If byes are indicated, the number of runs to be added to the total must be indicated"
        )


class InvalidBallDescriptionError(BallStringError):
    def __init__(self, detail: str = "Only zero or one of F/S, or L/B can appear") -> None:
        self.detail = detail
        super().__init__(detail)


class DoubleOutcomeError(CricketScoringError, ValueError):
    """Two mutually exclusive outcomes were recorded on the same ball."""

    def __init__(self, first: str, second: str) -> None:
        self.first = first
        self.second = second
        super().__init__(f"Incompatible double outcomes {first} and {second} given.")


class DuplicateBallEventError(CricketScoringError, ValueError):
    """The same kind of event was supplied twice for one ball."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Ball event {kind!r} supplied more than once")


class UnknownPlayerError(CricketScoringError, LookupError):
    """A delivery referenced a player who is not on the roster."""

    def __init__(self, name: str, team: str) -> None:
        self.name = name
        self.team = team
        super().__init__(f"Player {name!r} is not in team {team!r}")


class InningsFinishedError(CricketScoringError, RuntimeError):
    """A ball or over was applied to an innings that has already ended."""


class AllOutError(InningsFinishedError):
    """A wicket fell after the batting side had no wickets left to lose."""

    def __init__(self, wickets_left: int, wickets: int) -> None:
        self.wickets_left = wickets_left
        self.wickets = wickets
        super().__init__(f"{wickets} wicket(s) on a ball with only {wickets_left} left")

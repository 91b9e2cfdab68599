"""Ball-by-ball outcome model for the scoring engine.

A ``BallOutcome`` is built from the runs taken off the bat plus a list of
tagged events (``Bye(2)``, ``Wide(1)``, ``WicketEvent([...])``, ``Four()`` ...)
and the names of the striker, non-striker and bowler. Each event kind may
appear at most once per ball.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Iterable, Optional, Tuple, Union

from pydantic import Field, NonNegativeInt
from pydantic.dataclasses import dataclass

from ..errors import DoubleOutcomeError, DuplicateBallEventError
from .base import ValueModel

if TYPE_CHECKING:
    from .players import Player


class DismissalKind(str, Enum):
    """Enumeration of the ways a batter can leave the crease."""
    BOWLED = "bowled"
    CAUGHT = "caught"
    CAUGHT_AND_BOWLED = "caught and bowled"
    LBW = "lbw"
    RUN_OUT = "run out"
    STUMPED = "stumped"
    HIT_WICKET = "hit wicket"
    HANDLED_BALL = "handled the ball"
    OBSTRUCTING_FIELD = "obstructing the field"
    HIT_BALL_TWICE = "hit the ball twice"
    TIMED_OUT = "timed out"
    RETIRED_HURT = "retired hurt"
    RETIRED_NOT_OUT = "retired not out"
    RETIRED_OUT = "retired out"
    UNKNOWN = "unknown"

    @property
    def counts_as_wicket(self) -> bool:
        """Whether the batting side loses a wicket. Only "retired out" among the retirements does."""
        return self not in (DismissalKind.RETIRED_HURT, DismissalKind.RETIRED_NOT_OUT)

    @classmethod
    def from_text(cls, text: str) -> "DismissalKind":
        """Parse a free-text kind. Unrecognised retirements are not wickets."""
        normalized = " ".join(text.replace("_", " ").replace("-", " ").lower().split())
        try:
            return cls(normalized)
        except ValueError:
            if "retired" in normalized:
                return cls.RETIRED_NOT_OUT
            raise ValueError(f"Unrecognised dismissal kind: {text!r}") from None


class Dismissal(ValueModel):
    """One batter dismissed on a delivery."""

    player_out: str = Field(..., min_length=1, description="Name of the dismissed player")
    kind: DismissalKind = Field(DismissalKind.UNKNOWN, description="How the player was dismissed")


# Ball events. Each is folded into one field of BallOutcome by BallOutcome.build.

@dataclass(frozen=True)
class Bye:
    runs: NonNegativeInt


@dataclass(frozen=True)
class LegBye:
    runs: NonNegativeInt


@dataclass(frozen=True)
class NoBall:
    runs: NonNegativeInt = 1


@dataclass(frozen=True)
class Wide:
    runs: NonNegativeInt = 1


@dataclass(frozen=True)
class Penalty:
    runs: NonNegativeInt = 5


@dataclass(frozen=True)
class WicketEvent:
    dismissals: Tuple[Dismissal, ...]


@dataclass(frozen=True)
class Four:
    pass


@dataclass(frozen=True)
class Six:
    pass


BallEvent = Union[Bye, LegBye, NoBall, Wide, Penalty, WicketEvent, Four, Six]

PlayerLike = Union[str, "Player"]


def _identity(player: PlayerLike) -> str:
    return player if isinstance(player, str) else player.name


class BallOutcome(ValueModel):
    """Immutable description of a single delivery."""

    runs: int = Field(0, ge=0, description="Runs off the bat (or run while a wide was signalled)")
    byes: Optional[int] = Field(None, ge=0)
    leg_byes: Optional[int] = Field(None, ge=0)
    wide: Optional[int] = Field(None, ge=0)
    no_ball: Optional[int] = Field(None, ge=0)
    penalty: Optional[int] = Field(None, ge=0)
    wicket: Optional[Tuple[Dismissal, ...]] = None
    four: bool = False
    six: bool = False
    on_strike: str = Field(..., min_length=1, description="Striker's name")
    off_strike: str = Field(..., min_length=1, description="Non-striker's name")
    bowler: str = Field(..., min_length=1, description="Bowler's name")

    @classmethod
    def build(
        cls,
        runs: int,
        events: Iterable[BallEvent],
        striker: PlayerLike,
        non_striker: PlayerLike,
        bowler: PlayerLike,
    ) -> "BallOutcome":
        """Fold a list of tagged events into a ball outcome.

        Raises DuplicateBallEventError when an event kind is repeated and
        TypeError for anything that is not a ball event.
        """
        fields: dict = {}

        def put(key: str, value) -> None:
            if key in fields:
                raise DuplicateBallEventError(key)
            fields[key] = value

        for event in events:
            if isinstance(event, Bye):
                put("byes", event.runs)
            elif isinstance(event, LegBye):
                put("leg_byes", event.runs)
            elif isinstance(event, NoBall):
                put("no_ball", event.runs)
            elif isinstance(event, Wide):
                put("wide", event.runs)
            elif isinstance(event, Penalty):
                put("penalty", event.runs)
            elif isinstance(event, WicketEvent):
                put("wicket", event.dismissals)
            elif isinstance(event, Four):
                put("four", True)
            elif isinstance(event, Six):
                put("six", True)
            else:
                raise TypeError(f"Not a ball event: {event!r}")

        return cls(
            runs=runs,
            on_strike=_identity(striker),
            off_strike=_identity(non_striker),
            bowler=_identity(bowler),
            **fields,
        )

    def validate(self) -> None:
        """Raise DoubleOutcomeError if mutually exclusive outcomes are both set."""
        if self.four and self.six:
            raise DoubleOutcomeError("Four", "Six")
        if self.byes is not None and self.leg_byes is not None:
            raise DoubleOutcomeError("Bye", "Leg Bye")

    @property
    def is_wide(self) -> bool:
        return self.wide is not None

    @property
    def is_no_ball(self) -> bool:
        return self.no_ball is not None

    @property
    def is_legal(self) -> bool:
        """Wides and no-balls do not count towards the over."""
        return not (self.is_wide or self.is_no_ball)

    @property
    def is_bye_or_leg_bye(self) -> bool:
        return self.byes is not None or self.leg_byes is not None

    @property
    def dismissals(self) -> Tuple[Dismissal, ...]:
        return self.wicket or ()

    @property
    def extras(self) -> int:
        return (self.wide or 0) + (self.no_ball or 0) + (self.byes or 0) + (self.leg_byes or 0)

    @property
    def total_runs(self) -> int:
        """Everything this delivery added to the batting side's total."""
        return self.runs + self.extras + (self.penalty or 0)

    @property
    def bowler_runs(self) -> int:
        """Runs that spoil a maiden: bat runs, wides and no-balls."""
        return self.runs + (self.wide or 0) + (self.no_ball or 0)

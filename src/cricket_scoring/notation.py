"""Shorthand ball notation for manual scoring.

A ball is written as optional runs followed by event markers::

    .    dot ball                 4F   four off the bat
    1    one run                  6S   six off the bat
    W    wicket, striker out      X    one wide
    4X   four wides               O    no-ball
    3L   three leg byes           2B   two byes
    1OB  no-ball plus one bye     WX   wicket off a wide

``N`` on its own ends the over. Markers are case-insensitive and each may
appear once.
"""

import re
from typing import List, Optional

from loguru import logger

from .errors import (
    EmptyBallStringError,
    InningsFinishedError,
    InvalidBallCharacterError,
    InvalidBallDescriptionError,
    MissingByeRunsError,
)
from .models.ball_by_ball import (
    BallEvent,
    BallOutcome,
    Bye,
    Dismissal,
    DismissalKind,
    Four,
    LegBye,
    NoBall,
    PlayerLike,
    Six,
    WicketEvent,
    Wide,
)
from .models.innings import Innings

MARKERS = "WXBLOFS"
NEW_OVER = "N"

_BALL_PATTERN = re.compile(r"^(?P<runs>\.|\d+)?(?P<markers>[WXBLOFS]*)$")


def _check(text: str) -> re.Match:
    if not text:
        raise EmptyBallStringError()
    for ch in text:
        if not (ch.isdigit() or ch == "." or ch in MARKERS):
            raise InvalidBallCharacterError(ch)
    if ("B" in text or "L" in text) and not text[0].isdigit():
        raise MissingByeRunsError()
    if ("F" in text and "S" in text) or ("B" in text and "L" in text):
        raise InvalidBallDescriptionError()

    match = _BALL_PATTERN.match(text)
    if match is None:
        raise InvalidBallDescriptionError(f"Runs must come before event markers: {text!r}")
    markers = match.group("markers")
    if len(set(markers)) != len(markers):
        raise InvalidBallDescriptionError(f"Repeated event marker in {text!r}")
    if "X" in markers and any(m in markers for m in "OBL"):
        raise InvalidBallDescriptionError(f"A wide cannot also be a no-ball or byes: {text!r}")
    return match


def parse_ball(
    text: str,
    striker: PlayerLike,
    non_striker: PlayerLike,
    bowler: PlayerLike,
) -> BallOutcome:
    """Parse one ball of shorthand notation into a validated BallOutcome."""
    text = text.strip().upper()
    match = _check(text)
    runs_text = match.group("runs")
    markers = match.group("markers")
    runs = int(runs_text) if runs_text and runs_text != "." else 0

    events: List[BallEvent] = []
    if "W" in markers:
        striker_name = striker if isinstance(striker, str) else striker.name
        events.append(WicketEvent(dismissals=(Dismissal(player_out=striker_name, kind=DismissalKind.UNKNOWN),)))
    if "X" in markers:
        # "4X" is four wides in all: the wide itself plus three run
        events.append(Wide(runs=1))
        runs = max(runs - 1, 0)
    if "O" in markers:
        events.append(NoBall(runs=1))
    if "B" in markers:
        events.append(Bye(runs=runs))
        runs = 0
    if "L" in markers:
        events.append(LegBye(runs=runs))
        runs = 0
    if "F" in markers:
        events.append(Four())
    if "S" in markers:
        events.append(Six())

    outcome = BallOutcome.build(runs, events, striker, non_striker, bowler)
    outcome.validate()
    return outcome


def apply_notation(innings: Innings, text: str, bowler: PlayerLike) -> Optional[BallOutcome]:
    """Score one line of notation against the batters currently at the crease.

    Returns the scored outcome, or None when the line ended the over.
    """
    if text.strip().upper() == NEW_OVER:
        innings.over()
        logger.debug(f"End of over: {innings.score}")
        return None
    striker, non_striker = innings.striker, innings.non_striker
    if striker is None or non_striker is None:
        raise InningsFinishedError(f"{innings.batting_team.name} have no batters left")
    outcome = parse_ball(text, striker, non_striker, bowler)
    innings.score_ball(outcome)
    return outcome

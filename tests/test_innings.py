import pytest

from cricket_scoring import AllOutError, BallOutcome, DismissalKind, InningsFinishedError, UnknownPlayerError
from cricket_scoring.models import Bye, Dismissal, Four, Innings, LegBye, NoBall, Six, WicketEvent, Wide

from .conftest import make_ball


def out(name, kind=DismissalKind.BOWLED):
    return WicketEvent((Dismissal(player_out=name, kind=kind),))


def test_new_innings(innings, team_a):
    assert innings.on_strike == 0
    assert innings.off_strike == 1
    assert innings.finished is False
    assert innings.striker.name == "A1"
    assert innings.non_striker.name == "A2"
    assert innings.score.wickets_left == 10


def test_innings_keeps_its_own_copy_of_the_teams(innings, team_a):
    innings.score_ball(make_ball(innings, 4, [Four()]))

    assert innings.batting_team.players[0].runs == 4
    assert team_a.players[0].runs == 0


def test_striker_credited_with_runs_and_boundaries(innings):
    innings.score_ball(make_ball(innings, 4, [Four()]))
    innings.score_ball(make_ball(innings, 6, [Six()]))

    a1 = innings.batting_team.get_player("A1")
    assert (a1.runs, a1.balls_faced, a1.fours, a1.sixes) == (10, 2, 1, 1)


def test_wide_is_not_a_ball_faced(innings):
    innings.score_ball(make_ball(innings, 0, [Wide(1)]))

    assert innings.batting_team.players[0].balls_faced == 0
    assert innings.score.ball == 0


def test_no_ball_is_not_a_ball_faced(innings):
    innings.score_ball(make_ball(innings, 2, [NoBall(1)]))

    a1 = innings.batting_team.players[0]
    assert a1.balls_faced == 0
    assert a1.runs == 0
    assert innings.score.runs == 3


def test_byes_count_as_ball_faced_without_runs(innings):
    innings.score_ball(make_ball(innings, 0, [Bye(4), Four()]))
    innings.score_ball(make_ball(innings, 0, [LegBye(2)]))

    a1 = innings.batting_team.players[0]
    assert a1.balls_faced == 2
    assert a1.runs == 0
    assert a1.fours == 0


@pytest.mark.parametrize("runs, swapped", [(0, False), (1, True), (2, False), (3, True), (4, False)])
def test_odd_runs_rotate_strike(innings, runs, swapped):
    innings.score_ball(make_ball(innings, runs))

    assert innings.striker.name == ("A2" if swapped else "A1")
    assert innings.non_striker.name == ("A1" if swapped else "A2")


def test_even_bat_runs_with_extras_do_not_rotate(innings):
    innings.score_ball(make_ball(innings, 0, [Bye(1)]))

    assert innings.striker.name == "A1"


def test_over_always_swaps_strike(innings):
    for _ in range(5):
        innings.score_ball(make_ball(innings, 0))
    innings.score_ball(make_ball(innings, 1))
    assert innings.striker.name == "A2"

    innings.over()

    assert innings.striker.name == "A1"
    assert innings.score.ball == 0
    assert innings.score.overs == 1


def test_bowler_figures(innings):
    innings.score_ball(make_ball(innings, 4, [Four()], bowler="B11"))
    innings.score_ball(make_ball(innings, 0, [Wide(1)], bowler="B11"))
    innings.score_ball(make_ball(innings, 1, [NoBall(1)], bowler="B11"))
    innings.score_ball(make_ball(innings, 0, [LegBye(2)], bowler="B11"))
    innings.score_ball(make_ball(innings, 0, [out("A2")], bowler="B11"))

    b11 = innings.bowling_team.get_player("B11")
    assert b11.balls_bowled == 3
    assert b11.wides_bowled == 1
    assert b11.no_balls_bowled == 1
    assert b11.runs_conceded == 4 + 1 + 2 + 2
    assert b11.wickets_taken == 1
    assert b11.overs_bowled == "0.3"


def test_maiden_credited_when_no_runs_charged_to_bowler(innings):
    for _ in range(5):
        innings.score_ball(make_ball(innings, 0, bowler="B10"))
    innings.score_ball(make_ball(innings, 0, [LegBye(1)], bowler="B10"))
    innings.over()

    for _ in range(6):
        innings.score_ball(make_ball(innings, 0, bowler="B11"))
    innings.score_ball(make_ball(innings, 0, [Wide(1)], bowler="B11"))
    innings.over()

    assert innings.bowling_team.get_player("B10").maidens == 1
    assert innings.bowling_team.get_player("B11").maidens == 0


def test_no_maiden_for_bowler_who_took_over_mid_over(innings):
    innings.score_ball(make_ball(innings, 4, [Four()], bowler="B10"))
    for _ in range(5):
        innings.score_ball(make_ball(innings, 0, bowler="B11"))
    innings.over()

    b11 = innings.bowling_team.get_player("B11")
    assert b11.balls_bowled == 5
    assert b11.maidens == 0
    assert innings.bowling_team.get_player("B10").maidens == 0


def test_striker_dismissed_is_replaced_at_the_same_end(innings):
    innings.score_ball(make_ball(innings, 0, [out("A1")]))

    a1 = innings.batting_team.get_player("A1")
    assert a1.out is True
    assert a1.dismissal == DismissalKind.BOWLED
    assert innings.striker.name == "A3"
    assert innings.non_striker.name == "A2"
    assert innings.score.wickets_lost == 1


def test_non_striker_run_out(innings):
    innings.score_ball(make_ball(innings, 0, [out("A2", DismissalKind.RUN_OUT)]))

    assert innings.batting_team.get_player("A2").dismissal == DismissalKind.RUN_OUT
    assert innings.striker.name == "A1"
    assert innings.non_striker.name == "A3"


def test_rotation_applied_before_replacing_dismissed_batter(innings):
    # A1 takes a single and A1 is run out at the far end: A3 comes in there.
    innings.score_ball(make_ball(innings, 1, [out("A1", DismissalKind.RUN_OUT)]))

    assert innings.batting_team.get_player("A1").out is True
    assert innings.striker.name == "A2"
    assert innings.non_striker.name == "A3"
    assert innings.batting_team.get_player("A1").runs == 1


def test_two_dismissals_on_one_ball(innings):
    dismissals = (
        Dismissal(player_out="A1", kind=DismissalKind.CAUGHT),
        Dismissal(player_out="A2", kind=DismissalKind.RUN_OUT),
    )
    innings.score_ball(make_ball(innings, 0, [WicketEvent(dismissals)]))

    assert innings.striker.name == "A3"
    assert innings.non_striker.name == "A4"
    assert innings.score.wickets_lost == 2


def test_retired_hurt_is_replaced_but_no_wicket_falls(innings):
    innings.score_ball(make_ball(innings, 0, [out("A1", DismissalKind.RETIRED_HURT)]))

    assert innings.batting_team.get_player("A1").dismissal == DismissalKind.RETIRED_HURT
    assert innings.striker.name == "A3"
    assert innings.score.wickets_lost == 0


def test_event_identities_override_drifted_indices(innings):
    innings.on_strike, innings.off_strike = 7, 8
    outcome = BallOutcome.build(1, [], "A1", "A2", "B11")
    innings.score_ball(outcome)

    assert innings.batting_team.get_player("A1").runs == 1
    assert innings.striker.name == "A2"
    assert innings.non_striker.name == "A1"


def test_unknown_batter_is_fatal(innings):
    with pytest.raises(UnknownPlayerError):
        innings.score_ball(BallOutcome.build(0, [], "Nobody", "A2", "B11"))


def test_unknown_bowler_is_fatal(innings):
    with pytest.raises(UnknownPlayerError):
        innings.score_ball(BallOutcome.build(0, [], "A1", "A2", "A11"))


def test_all_out(innings):
    for _ in range(10):
        innings.score_ball(make_ball(innings, 0, [out(innings.striker.name)]))

    assert innings.is_all_out
    assert innings.score.wickets_lost == 10
    assert innings.striker is None
    assert innings.non_striker.name == "A2"


def test_finished_innings_rejects_balls(innings):
    innings.declare()

    assert innings.finished and innings.declared
    with pytest.raises(InningsFinishedError):
        innings.score_ball(make_ball(innings, 1))
    with pytest.raises(InningsFinishedError):
        innings.over()


def test_start_with_reduced_side(team_a, team_b):
    innings = Innings.start(team_a, team_b, wickets=5)

    assert innings.score.wickets_left == 5


def test_reduced_side_rejects_wicket_after_all_out(team_a, team_b):
    innings = Innings.start(team_a, team_b, wickets=5)
    for _ in range(5):
        innings.score_ball(make_ball(innings, 0, [out(innings.striker.name)]))
    assert innings.is_all_out
    striker = innings.striker.name

    with pytest.raises(AllOutError):
        innings.score_ball(make_ball(innings, 1, [out(striker)]))

    assert innings.batting_team.get_player(striker).out is False
    assert (innings.score.wickets_left, innings.score.wickets_lost) == (0, 5)
    assert Innings.model_validate_json(innings.model_dump_json()) == innings


def test_display_lists_batters_who_batted(innings):
    innings.score_ball(make_ball(innings, 4, [Four()]))
    innings.score_ball(make_ball(innings, 0, [out("A1")]))

    text = str(innings)
    assert text.startswith("1/4\n")
    assert "A1: 4(2), 1 4s, 0 6s" in text
    assert "A3" not in text

"""Rich scorecard rendering for an innings."""

from typing import Optional

from rich.console import Console
from rich.table import Table

from .models.innings import Innings


def batting_table(innings: Innings) -> Table:
    table = Table(title=f"{innings.batting_team.name} batting")
    table.add_column("Batter", style="cyan")
    table.add_column("Dismissal")
    table.add_column("R", justify="right", style="bold")
    table.add_column("B", justify="right")
    table.add_column("4s", justify="right")
    table.add_column("6s", justify="right")
    table.add_column("SR", justify="right")

    for batter in innings.batters():
        dismissal = batter.dismissal.value if batter.dismissal else "not out"
        table.add_row(
            batter.name,
            dismissal,
            str(batter.runs),
            str(batter.balls_faced),
            str(batter.fours),
            str(batter.sixes),
            f"{batter.strike_rate:.2f}",
        )

    score = innings.score
    table.add_section()
    table.add_row(
        "Extras",
        f"b {score.byes}, lb {score.leg_byes}, w {score.wides}, nb {score.no_balls}",
        str(score.total_extras),
        "", "", "", "",
    )
    table.add_row("Total", f"{score.wickets_lost} wkts, {score.overs}.{score.ball} ov", str(score.runs), "", "", "", "")
    return table


def bowling_table(innings: Innings) -> Table:
    table = Table(title=f"{innings.bowling_team.name} bowling")
    table.add_column("Bowler", style="cyan")
    table.add_column("O", justify="right")
    table.add_column("M", justify="right")
    table.add_column("R", justify="right")
    table.add_column("W", justify="right", style="bold")
    table.add_column("Wd", justify="right")
    table.add_column("Nb", justify="right")
    table.add_column("Econ", justify="right")

    for bowler in innings.bowlers():
        table.add_row(
            bowler.name,
            bowler.overs_bowled,
            str(bowler.maidens),
            str(bowler.runs_conceded),
            str(bowler.wickets_taken),
            str(bowler.wides_bowled),
            str(bowler.no_balls_bowled),
            f"{bowler.economy:.2f}",
        )
    return table


def print_scorecard(innings: Innings, console: Optional[Console] = None) -> None:
    """Print the batting and bowling cards for an innings."""
    console = console or Console()
    console.print(batting_table(innings))
    console.print(bowling_table(innings))

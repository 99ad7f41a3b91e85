"""Round driver: runs every player's turn and reports the final ranking.

Data flow per round:
1. Ask each player for a name (blank names get a default)
2. Run the player's quiz turn
3. Insert the finished Player into the RankingList
4. Trim the ranking to the top 5, show it, announce the winner
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field

from rich.console import Console
from rich.markup import escape

from quicksums.config import GameConfig
from quicksums.models import TurnResult
from quicksums.quiz import AskFn, ClockFn, describe_outcome, run_turn
from quicksums.ranking import RankingList, render_ranking

logger = logging.getLogger(__name__)


@dataclass
class RoundResult:
    """Everything a finished round produced."""

    turns: list[TurnResult] = field(default_factory=list)
    ranking: RankingList = field(default_factory=RankingList)


def default_ask(console: Console) -> AskFn:
    """Read answers from the console; end of input counts as a blank line."""

    def ask(prompt: str) -> str:
        try:
            return console.input(prompt)
        except EOFError:
            return ""

    return ask


def _read_name(number: int, console: Console, ask: AskFn) -> str:
    name = ask("Enter your name: ").strip()
    if not name:
        name = f"Player{number}"
        console.print(f"[yellow]Invalid name.[/yellow] Using: {escape(name)}")
    return name


def announce_winner(ranking: RankingList, console: Console) -> None:
    winner = ranking.get_winner()
    if winner is None:
        return
    console.print(
        f"\n[bold green]THE WINNER IS: {escape(winner.name)} "
        f"with {winner.score} points![/bold green]"
    )


def run_round(
    console: Console,
    config: GameConfig,
    rng: random.Random,
    ask: AskFn,
    clock: ClockFn = time.monotonic,
    plain: bool = False,
) -> RoundResult:
    """Play a full round and print the final report.

    Args:
        console: Rich Console for all game output.
        config: Game settings; config.players turns are played.
        rng: Random source shared by every turn.
        ask: Reads one line of input, given a prompt.
        clock: Monotonic clock used to time answers.
        plain: Print the ranking as plain text instead of a table.

    Returns:
        RoundResult with each turn and the trimmed ranking.
    """
    result = RoundResult()

    console.print(f"[bold]QUICK SUMS - {config.players} PLAYERS[/bold]")
    console.print("Each player takes a turn. Good luck!\n")

    for number in range(1, config.players + 1):
        console.print(f"[bold cyan]=== PLAYER {number} ===[/bold cyan]")
        name = _read_name(number, console, ask)

        turn = run_turn(name, console, config, rng, ask, clock)
        result.turns.append(turn)

        console.print(
            f"\n{escape(name)}'s turn is over ({describe_outcome(turn.outcome)})."
        )
        console.print(f"Score: [bold]{turn.score}[/bold] points.\n")

        result.ranking.insert_sorted(turn.to_player())

    result.ranking.keep_top5()
    logger.info("Round finished with %d players", len(result.turns))

    if plain:
        console.print(escape(result.ranking.display_top5()), highlight=False)
    else:
        render_ranking(result.ranking, console)

    announce_winner(result.ranking, console)
    console.print("\nThanks for playing, everyone.")
    return result

"""CLI for the Quick Sums game.

Usage:
    python -m quicksums play                      # Classic round, 5 players
    python -m quicksums play --players 3 --seed 7 # Shorter, reproducible round
    python -m quicksums play --plain              # Plain-text ranking
    python -m quicksums rules                     # Show rules and settings
"""

from __future__ import annotations

import random
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from quicksums.config import ConfigError, GameConfig
from quicksums.game import default_ask, run_round
from quicksums.logging_config import configure_logging

app = typer.Typer(
    name="quicksums",
    help="Timed addition quiz for a round of players",
    no_args_is_help=True,
)
console = Console()


def _load_config(**overrides: Optional[int]) -> GameConfig:
    """Environment settings plus CLI overrides, validated; exits 1 on bad input."""
    try:
        return GameConfig.from_env().with_overrides(**overrides).validate()
    except ConfigError as e:
        console.print(f"[red]Invalid configuration:[/red] {e}")
        raise typer.Exit(1)


@app.command("play")
def cmd_play(
    players: Optional[int] = typer.Option(None, "--players", "-p", help="Number of players in the round"),
    time_limit: Optional[int] = typer.Option(None, "--time-limit", "-t", help="Seconds per sum on level 1"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed the problem generator for a reproducible round"),
    plain: bool = typer.Option(False, "--plain", help="Print the ranking as plain text instead of a table"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr"),
) -> None:
    """Play one round."""
    configure_logging(verbose)
    config = _load_config(players=players, initial_time_limit=time_limit, seed=seed)
    rng = random.Random(config.seed)
    run_round(console, config, rng, default_ask(console), plain=plain)


@app.command("rules")
def cmd_rules() -> None:
    """Show the rules and the current settings."""
    config = _load_config()

    console.print("\n[bold]How to play[/bold]")
    console.print(
        f"Each player answers sums in levels of {config.questions_per_level}. "
        f"Every correct answer is worth {config.points_per_correct} points.\n"
        "A wrong, blank, non-numeric or late answer ends the turn. Clearing a level "
        f"cuts {config.time_limit_step}s from the time per sum, down to {config.min_time_limit}s."
    )

    table = Table(title="Settings", show_header=True, header_style="bold")
    table.add_column("Setting", style="green", min_width=20)
    table.add_column("Value", justify="right")

    table.add_row("Players", str(config.players))
    table.add_row("Sums per level", str(config.questions_per_level))
    table.add_row("Time on level 1", f"{config.initial_time_limit}s")
    table.add_row("Minimum time", f"{config.min_time_limit}s")
    table.add_row("Operands", f"{config.operand_min}..{config.operand_max}")
    table.add_row("Seed", str(config.seed) if config.seed is not None else "[dim]random[/dim]")

    console.print()
    console.print(table)
    console.print()


if __name__ == "__main__":
    app()

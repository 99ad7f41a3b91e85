"""Quiz turn: one player works through timed levels of addition problems.

Flow per turn:
1. Start at level 1 with the initial time budget per question
2. Ask questions_per_level sums; time each answer with the injected clock
3. First failure (late, blank, not a number, wrong) ends the turn
4. A clean level advances to the next one with a shorter time budget
5. Return a TurnResult with the score and how the turn ended
"""

from __future__ import annotations

import logging
import random
import time
from typing import Callable, Optional

from rich.console import Console

from quicksums.config import GameConfig
from quicksums.models import AnswerResult, TurnOutcome, TurnResult
from quicksums.problems import generate_problem, parse_answer

logger = logging.getLogger(__name__)

AskFn = Callable[[str], str]
ClockFn = Callable[[], float]


def _ask_question(
    result: TurnResult,
    time_limit: int,
    console: Console,
    config: GameConfig,
    rng: random.Random,
    ask: AskFn,
    clock: ClockFn,
) -> Optional[TurnOutcome]:
    """Ask one sum and score it. Returns the failure outcome, or None if correct."""
    problem = generate_problem(rng, config.operand_min, config.operand_max)
    console.print(f"\nSum: [bold]{problem.text}[/bold]")

    start = clock()
    raw = ask("> ").strip()
    elapsed = clock() - start

    answer = AnswerResult(problem=problem, raw_answer=raw, elapsed_s=elapsed)
    result.answers.append(answer)
    logger.debug("%s answered %r to %s in %.2fs", result.name, raw, problem.text, elapsed)

    if elapsed > time_limit:
        console.print(f"[red]Time's up![/red] ({elapsed:.2f} seconds)")
        return TurnOutcome.TIMEOUT

    if not raw:
        console.print("[yellow]Empty answer. Turn over.[/yellow]")
        return TurnOutcome.EMPTY

    value = parse_answer(raw)
    answer.value = value
    if value is None:
        console.print("[yellow]Invalid input. You must enter a whole number.[/yellow]")
        return TurnOutcome.INVALID

    if value != problem.answer:
        console.print(f"[red]Wrong.[/red] The correct answer was: {problem.answer}")
        return TurnOutcome.WRONG

    answer.correct = True
    result.score += config.points_per_correct
    console.print("[green]Correct![/green]")
    return None


def run_turn(
    name: str,
    console: Console,
    config: GameConfig,
    rng: random.Random,
    ask: AskFn,
    clock: ClockFn = time.monotonic,
) -> TurnResult:
    """Play one player's turn until their first failure.

    Args:
        name: Player name, already validated.
        console: Rich Console for questions and feedback.
        config: Game settings (time budgets, points, operand range).
        rng: Random source for the problems.
        ask: Reads one line of input, given a prompt.
        clock: Monotonic clock in seconds, read around each answer.

    Returns:
        TurnResult with score, levels and the outcome that ended the turn.
    """
    result = TurnResult(name=name)
    time_limit = config.initial_time_limit

    while result.outcome is None:
        console.print(f"\n[bold]--- Level {result.level} ---[/bold]")
        console.print(f"You have {time_limit} seconds per sum.")

        for _ in range(config.questions_per_level):
            outcome = _ask_question(result, time_limit, console, config, rng, ask, clock)
            if outcome is not None:
                result.outcome = outcome
                break
        else:
            console.print(f"\n[bold green]Level {result.level} complete![/bold green]")
            result.levels_completed += 1
            result.level += 1
            time_limit = config.next_time_limit(time_limit)
            logger.debug("%s advanced to level %d (%ds per sum)", name, result.level, time_limit)

    logger.info(
        "%s finished: %d points, level %d, ended by %s",
        name, result.score, result.level, result.outcome.value,
    )
    return result


def describe_outcome(outcome: TurnOutcome) -> str:
    """Short human-readable reason a turn ended."""
    return {
        TurnOutcome.WRONG: "wrong answer",
        TurnOutcome.TIMEOUT: "ran out of time",
        TurnOutcome.EMPTY: "no answer",
        TurnOutcome.INVALID: "not a number",
    }[outcome]

"""Data models for the Quick Sums game.

Player, TurnOutcome, AnswerResult, TurnResult: the typed structures that
flow through quiz → game → ranking.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from quicksums.problems import AdditionProblem


@dataclass(frozen=True)
class Player:
    """A finished participant: name plus final score. Never changes once built."""

    name: str
    score: int = 0

    def __str__(self) -> str:
        return f"{self.name} - {self.score} points"


class TurnOutcome(str, Enum):
    """Why a player's turn ended."""

    WRONG = "wrong"
    TIMEOUT = "timeout"
    EMPTY = "empty"
    INVALID = "invalid"


@dataclass
class AnswerResult:
    """A single answered question."""

    problem: AdditionProblem
    raw_answer: str
    elapsed_s: float
    value: Optional[int] = None
    correct: bool = False


@dataclass
class TurnResult:
    """Complete result of one player's turn."""

    name: str
    score: int = 0
    level: int = 1
    levels_completed: int = 0
    outcome: Optional[TurnOutcome] = None
    answers: list[AnswerResult] = field(default_factory=list)

    @property
    def correct_answers(self) -> int:
        return sum(1 for a in self.answers if a.correct)

    def to_player(self) -> Player:
        """Freeze the turn into the Player record that goes into the ranking."""
        return Player(name=self.name, score=self.score)

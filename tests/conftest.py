"""Shared fixtures: scripted players, a fake clock and a capturing console."""

import io
import random

import pytest
from rich.console import Console

from quicksums.config import GameConfig
from quicksums.problems import generate_problem

SEED = 1234

# Script token: answer the current problem correctly.
CORRECT = object()


class ScriptedInput:
    """Feeds canned answers and advances a fake clock by each answer's delay.

    Entries are (text, seconds). Text may be CORRECT, in which case the right
    sum is computed from a twin of the game's random source.
    """

    def __init__(self, entries, config=None, seed=SEED):
        self.entries = list(entries)
        self.config = config or GameConfig()
        self.twin = random.Random(seed)
        self.now = 0.0
        self.prompts = []

    def ask(self, prompt):
        self.prompts.append(prompt)
        if not self.entries:
            raise AssertionError("script ran out of answers")
        text, seconds = self.entries.pop(0)
        self.now += seconds
        if text is CORRECT:
            problem = generate_problem(self.twin, self.config.operand_min, self.config.operand_max)
            return str(problem.answer)
        if prompt == "> ":
            # Keep the twin in step with problems answered wrongly.
            generate_problem(self.twin, self.config.operand_min, self.config.operand_max)
        return text

    def clock(self):
        return self.now


def correct(n, seconds=1.0):
    return [(CORRECT, seconds)] * n


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def rng():
    return random.Random(SEED)


@pytest.fixture
def console():
    """Console writing to an in-memory buffer; read it with console.file.getvalue()."""
    return Console(file=io.StringIO(), width=120, color_system=None)

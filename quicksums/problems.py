"""Addition problem generation and answer parsing.

Problems are drawn from an explicit random source so a round can be replayed
with a fixed seed.
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from typing import Optional

# Optional sign followed by digits only: no underscores, decimals or spaces.
# Leading zeros are split off so the digit count reflects the magnitude.
_INTEGER_RE = re.compile(r"^([+-]?)0*(\d+)$")

# Answers must fit a 32-bit signed int, like a classic integer parse.
_INT_MIN, _INT_MAX = -2**31, 2**31 - 1
_MAX_DIGITS = len(str(_INT_MAX))


@dataclass(frozen=True)
class AdditionProblem:
    """Two operands to be summed."""

    a: int
    b: int

    @property
    def answer(self) -> int:
        return self.a + self.b

    @property
    def text(self) -> str:
        return f"{self.a} + {self.b} = ?"


def generate_problem(rng: random.Random, low: int = 1, high: int = 50) -> AdditionProblem:
    """Draw a problem with both operands uniform in [low, high].

    Args:
        rng: Random source owned by the caller.
        low: Smallest operand (inclusive).
        high: Largest operand (inclusive).

    Returns:
        AdditionProblem with freshly drawn operands.
    """
    return AdditionProblem(a=rng.randint(low, high), b=rng.randint(low, high))


def parse_answer(raw: str) -> Optional[int]:
    """Parse a typed answer as a 32-bit signed integer, or None if it is not one."""
    match = _INTEGER_RE.match(raw.strip())
    if not match:
        return None
    sign, digits = match.groups()
    if len(digits) > _MAX_DIGITS:
        return None
    value = int(sign + digits)
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value

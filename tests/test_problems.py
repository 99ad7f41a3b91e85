"""Tests for problem generation and answer parsing."""

import random

import pytest

from quicksums.problems import AdditionProblem, generate_problem, parse_answer


def test_problem_answer_and_text():
    problem = AdditionProblem(12, 30)
    assert problem.answer == 42
    assert problem.text == "12 + 30 = ?"


def test_operands_stay_in_range():
    rng = random.Random(0)
    for _ in range(200):
        problem = generate_problem(rng)
        assert 1 <= problem.a <= 50
        assert 1 <= problem.b <= 50


def test_same_seed_same_problems():
    first, second = random.Random(9), random.Random(9)
    for _ in range(5):
        assert generate_problem(first) == generate_problem(second)


@pytest.mark.parametrize("raw,expected", [
    ("42", 42),
    ("  7 ", 7),
    ("+5", 5),
    ("-3", -3),
    ("", None),
    ("abc", None),
    ("3.0", None),
    ("1_000", None),
    ("4 2", None),
    ("2147483647", 2147483647),
    ("-2147483648", -2147483648),
    ("2147483648", None),
    ("99999999999", None),
    ("00000000000042", 42),
    ("9" * 5000, None),
])
def test_parse_answer(raw, expected):
    assert parse_answer(raw) == expected

"""Tests for game settings and environment overrides."""

import pytest

from quicksums.config import ConfigError, GameConfig


def test_defaults_match_classic_game():
    config = GameConfig()
    assert config.players == 5
    assert config.questions_per_level == 5
    assert config.initial_time_limit == 10
    assert config.min_time_limit == 2
    assert config.points_per_correct == 100
    assert (config.operand_min, config.operand_max) == (1, 50)
    assert config.seed is None


def test_from_env_overrides():
    config = GameConfig.from_env({
        "QUICKSUMS_PLAYERS": "3",
        "QUICKSUMS_SEED": " 42 ",
        "QUICKSUMS_TIME_LIMIT": "20",
        "HOME": "/root",
    })
    assert config.players == 3
    assert config.seed == 42
    assert config.initial_time_limit == 20


def test_from_env_ignores_unknown_keys():
    config = GameConfig.from_env({"QUICKSUMS_COLOR": "blue"})
    assert config == GameConfig()


def test_from_env_rejects_non_integer():
    with pytest.raises(ConfigError, match="QUICKSUMS_PLAYERS"):
        GameConfig.from_env({"QUICKSUMS_PLAYERS": "five"})


def test_with_overrides_skips_none():
    config = GameConfig(players=3).with_overrides(players=None, seed=7)
    assert config.players == 3
    assert config.seed == 7


@pytest.mark.parametrize("kwargs", [
    {"players": 0},
    {"questions_per_level": -1},
    {"time_limit_step": -2},
    {"min_time_limit": 12},
    {"operand_min": 60},
])
def test_validate_rejects_unplayable(kwargs):
    with pytest.raises(ConfigError):
        GameConfig(**kwargs).validate()


def test_validate_returns_self():
    config = GameConfig()
    assert config.validate() is config


def test_next_time_limit_floor():
    config = GameConfig()
    assert config.next_time_limit(10) == 8
    assert config.next_time_limit(4) == 2
    assert config.next_time_limit(3) == 2
    assert config.next_time_limit(2) == 2

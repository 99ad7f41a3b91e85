"""Game settings with environment-variable overrides.

Defaults reproduce the classic game: five players, five sums per level,
10 seconds per sum shrinking by 2 each level down to 2, 100 points a sum.
Any field can be overridden with a QUICKSUMS_<FIELD> variable, e.g.
QUICKSUMS_PLAYERS=3 or QUICKSUMS_SEED=42.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Mapping, Optional

ENV_PREFIX = "QUICKSUMS_"

# Short aliases accepted alongside the full field names.
_ENV_ALIASES = {
    "TIME_LIMIT": "initial_time_limit",
}


class ConfigError(ValueError):
    """Raised for settings that cannot produce a playable round."""


@dataclass(frozen=True)
class GameConfig:
    players: int = 5
    questions_per_level: int = 5
    initial_time_limit: int = 10
    time_limit_step: int = 2
    min_time_limit: int = 2
    points_per_correct: int = 100
    operand_min: int = 1
    operand_max: int = 50
    seed: Optional[int] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> GameConfig:
        """Build a config from QUICKSUMS_* variables on top of the defaults."""
        env = os.environ if environ is None else environ
        known = {f.name for f in fields(cls)}
        overrides: dict[str, int] = {}

        for key, raw in env.items():
            if not key.startswith(ENV_PREFIX):
                continue
            suffix = key[len(ENV_PREFIX):]
            name = _ENV_ALIASES.get(suffix, suffix.lower())
            if name not in known:
                continue
            try:
                overrides[name] = int(raw.strip())
            except ValueError:
                raise ConfigError(f"{key} must be an integer, got {raw!r}") from None

        return cls(**overrides)

    def with_overrides(self, **values: Optional[int]) -> GameConfig:
        """Return a copy with every non-None value applied (CLI options)."""
        return replace(self, **{k: v for k, v in values.items() if v is not None})

    def validate(self) -> GameConfig:
        """Check the settings describe a playable round. Returns self."""
        for name in ("players", "questions_per_level", "initial_time_limit",
                     "min_time_limit", "points_per_correct"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)}")
        if self.time_limit_step < 0:
            raise ConfigError(f"time_limit_step cannot be negative, got {self.time_limit_step}")
        if self.min_time_limit > self.initial_time_limit:
            raise ConfigError(
                f"min_time_limit ({self.min_time_limit}) is above "
                f"initial_time_limit ({self.initial_time_limit})"
            )
        if self.operand_min > self.operand_max:
            raise ConfigError(
                f"operand range is empty: {self.operand_min}..{self.operand_max}"
            )
        return self

    def next_time_limit(self, current: int) -> int:
        """Time budget for the level after one with `current` seconds."""
        return max(self.min_time_limit, current - self.time_limit_step)

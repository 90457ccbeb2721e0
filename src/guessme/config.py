"""Engine defaults for the guessing game."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

SEED = 7

MAX_LIVES = 5
LIFE_REGEN_SECONDS = 7200
REGEN_CHECK_INTERVAL_SECONDS = 60

BASE_POINTS = 10

CHOICE_COUNT = 4
BOOLEAN_CHOICE_COUNT = 2
MIN_DISTRACTORS = CHOICE_COUNT - 1
DISTRACTOR_ATTEMPT_LIMIT = 50


@dataclass(frozen=True)
class GameRules:
    max_lives: int = MAX_LIVES
    regen_seconds: int = LIFE_REGEN_SECONDS
    base_points: int = BASE_POINTS

    @property
    def regen_period(self) -> timedelta:
        return timedelta(seconds=self.regen_seconds)


DEFAULT_RULES = GameRules()

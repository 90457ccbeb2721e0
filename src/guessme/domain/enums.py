"""Shared enums for the engine and its callers."""

from __future__ import annotations

from enum import StrEnum


class QuestionCategory(StrEnum):
    AGE = "age"
    OCCUPATION = "occupation"
    EDUCATION = "education"
    HEIGHT = "height"
    WEIGHT = "weight"
    SMOKER = "smoker"
    FAVORITE_COLOR = "favorite_color"
    FAVORITE_MOVIE = "favorite_movie"
    FAVORITE_FOOD = "favorite_food"
    FAVORITE_FLOWER = "favorite_flower"
    FAVORITE_SPORT = "favorite_sport"
    FAVORITE_HOBBY = "favorite_hobby"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


NUMERIC_CATEGORIES = frozenset(
    {QuestionCategory.AGE, QuestionCategory.HEIGHT, QuestionCategory.WEIGHT}
)
BOOLEAN_CATEGORIES = frozenset({QuestionCategory.SMOKER})


class AchievementKind(StrEnum):
    CORRECT_GUESSES = "correct_guesses"
    STREAK = "streak"
    TOTAL_GUESSES = "total_guesses"


class AchievementTier(StrEnum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    ULTIMATE = "ultimate"


class LivesPhase(StrEnum):
    FULL = "full"
    DEPLETING = "depleting"
    REGENERATING = "regenerating"
    EMPTY = "empty"


class SessionPhase(StrEnum):
    AWAITING_QUESTION = "awaiting_question"
    QUESTION_ACTIVE = "question_active"
    GAME_OVER = "game_over"

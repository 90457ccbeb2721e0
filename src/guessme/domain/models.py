"""Domain models for subjects and generated questions."""

from __future__ import annotations

from typing import Any, Tuple
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from guessme import config
from guessme.domain.enums import BOOLEAN_CATEGORIES, QuestionCategory


class Subject(BaseModel):
    """Profile of the person a question is about.

    Every attribute is optional; an absent attribute cannot be asked about.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str
    profile_image_url: str | None = None
    age: int | None = Field(default=None, ge=0)
    occupation: str | None = None
    education: str | None = None
    height: float | None = Field(default=None, gt=0)
    weight: float | None = Field(default=None, gt=0)
    smoker: bool | None = None
    favorite_color: str | None = None
    favorite_movie: str | None = None
    favorite_food: str | None = None
    favorite_flower: str | None = None
    favorite_sport: str | None = None
    favorite_hobby: str | None = None

    @field_validator(
        "profile_image_url",
        "occupation",
        "education",
        "favorite_color",
        "favorite_movie",
        "favorite_food",
        "favorite_flower",
        "favorite_sport",
        "favorite_hobby",
        mode="before",
    )
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    def attribute(self, category: QuestionCategory) -> Any:
        return getattr(self, category.value)

    def askable_categories(self) -> list[QuestionCategory]:
        return [category for category in QuestionCategory if self.attribute(category) is not None]


class Question(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: UUID = Field(default_factory=uuid4)
    category: QuestionCategory
    text: str
    choices: Tuple[str, ...]
    correct_answer: str
    image_url: str | None = None
    subject_id: str | None = None

    @model_validator(mode="after")
    def _check_choices(self) -> "Question":
        expected = (
            config.BOOLEAN_CHOICE_COUNT
            if self.category in BOOLEAN_CATEGORIES
            else config.CHOICE_COUNT
        )
        if len(self.choices) != expected:
            raise ValueError(f"{self.category} questions need {expected} choices, got {len(self.choices)}")
        if len(set(self.choices)) != len(self.choices):
            raise ValueError("choices must be unique")
        if self.choices.count(self.correct_answer) != 1:
            raise ValueError("correct answer must appear exactly once in choices")
        return self

    def is_correct(self, choice: str) -> bool:
        return choice == self.correct_answer

"""Build multiple-choice questions from a subject's profile."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Callable, Sequence

from guessme import config
from guessme.catalog.distractors import distractors_for
from guessme.domain.enums import BOOLEAN_CATEGORIES, NUMERIC_CATEGORIES, QuestionCategory
from guessme.domain.models import Question, Subject
from guessme.errors import GenerationImpossible
from guessme.util.rng import Rng

logger = logging.getLogger(__name__)

QUESTION_TEXT = {
    QuestionCategory.AGE: "How old do you think this person is?",
    QuestionCategory.OCCUPATION: "What do you think this person does for a living?",
    QuestionCategory.EDUCATION: "What is this person's education level?",
    QuestionCategory.HEIGHT: "How tall do you think this person is (in cm)?",
    QuestionCategory.WEIGHT: "What do you think this person weighs (in kg)?",
    QuestionCategory.SMOKER: "Do you think this person is a smoker?",
    QuestionCategory.FAVORITE_COLOR: "What is this person's favorite color?",
    QuestionCategory.FAVORITE_MOVIE: "What is this person's favorite movie?",
    QuestionCategory.FAVORITE_FOOD: "What is this person's favorite food?",
    QuestionCategory.FAVORITE_FLOWER: "What is this person's favorite flower?",
    QuestionCategory.FAVORITE_SPORT: "What is this person's favorite sport?",
    QuestionCategory.FAVORITE_HOBBY: "What is this person's favorite hobby?",
}

YES = "Yes"
NO = "No"


@dataclass(frozen=True)
class NumericRule:
    spread: int
    minimum: int | None = None
    unit: str | None = None

    def clamp(self, value: int) -> int:
        if self.minimum is None:
            return value
        return max(self.minimum, value)

    def format(self, value: int) -> str:
        return f"{value} {self.unit}" if self.unit else str(value)


NUMERIC_RULES = {
    QuestionCategory.AGE: NumericRule(spread=10, minimum=18),
    QuestionCategory.HEIGHT: NumericRule(spread=15, unit="cm"),
    QuestionCategory.WEIGHT: NumericRule(spread=15, minimum=45, unit="kg"),
}


def format_answer(category: QuestionCategory, value: Any) -> str:
    """Render an attribute value the way it appears among the choices."""
    if category in NUMERIC_RULES:
        return NUMERIC_RULES[category].format(int(round(value)))
    if category in BOOLEAN_CATEGORIES:
        return YES if value else NO
    return str(value)


@dataclass
class QuestionGenerator:
    rng: Rng
    catalog: Callable[[QuestionCategory], Sequence[str]] = distractors_for
    max_attempts: int = config.DISTRACTOR_ATTEMPT_LIMIT

    def generate(self, subject: Subject) -> Question | None:
        """Return a question about the subject, or None when it cannot be asked about."""
        categories = subject.askable_categories()
        if not categories:
            logger.debug("Subject %s has no askable attributes", subject.id)
            return None
        category = self.rng.choice(categories)
        try:
            return self.build_question(subject, category)
        except GenerationImpossible as exc:
            logger.warning("Skipping subject: %s", exc)
            return None

    def build_question(self, subject: Subject, category: QuestionCategory) -> Question:
        value = subject.attribute(category)
        if value is None:
            raise GenerationImpossible(subject.id, f"{category.label.lower()} is not set")
        correct = format_answer(category, value)
        if category in BOOLEAN_CATEGORIES:
            choices = [YES, NO]
        elif category in NUMERIC_CATEGORIES:
            choices = self._numeric_choices(subject, category, int(round(value)))
        else:
            choices = self._catalog_choices(subject, category, correct)
        self.rng.shuffle(choices)
        return Question(
            category=category,
            text=QUESTION_TEXT[category],
            choices=tuple(choices),
            correct_answer=correct,
            image_url=subject.profile_image_url,
            subject_id=subject.id,
        )

    def _numeric_choices(self, subject: Subject, category: QuestionCategory, actual: int) -> list[str]:
        rule = NUMERIC_RULES[category]
        values = [actual]
        attempts = 0
        while len(values) < config.CHOICE_COUNT:
            if attempts >= self.max_attempts:
                raise GenerationImpossible(
                    subject.id, f"no unique {category.label.lower()} values after {attempts} attempts"
                )
            attempts += 1
            candidate = rule.clamp(actual + self.rng.offset(rule.spread))
            if candidate not in values:
                values.append(candidate)
        return [rule.format(value) for value in values]

    def _catalog_choices(self, subject: Subject, category: QuestionCategory, correct: str) -> list[str]:
        pool = list(self.catalog(category))
        alternatives = {entry.casefold() for entry in pool} - {correct.casefold()}
        needed = config.MIN_DISTRACTORS
        if len(alternatives) < needed:
            raise GenerationImpossible(
                subject.id, f"only {len(alternatives)} distractors available for {category.label.lower()}"
            )
        choices = [correct]
        seen = {correct.casefold()}
        attempts = 0
        while len(choices) < config.CHOICE_COUNT:
            if attempts >= self.max_attempts:
                raise GenerationImpossible(
                    subject.id, f"no unique {category.label.lower()} distractors after {attempts} attempts"
                )
            attempts += 1
            candidate = self.rng.choice(pool)
            if candidate.casefold() in seen:
                continue
            seen.add(candidate.casefold())
            choices.append(candidate)
        return choices

"""Game session: ties questions, lives, scoring and achievements together."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
import logging
from typing import Callable, Iterable, Sequence

from guessme import config
from guessme.catalog.achievements import AchievementDefinition, load_achievements
from guessme.config import DEFAULT_RULES, GameRules
from guessme.domain.enums import SessionPhase
from guessme.domain.models import Question, Subject
from guessme.engine.achievements import evaluate_achievements
from guessme.engine.lives import LivesLedger, LivesState
from guessme.engine.scoring import ScoreState, ScoreTracker
from guessme.errors import ExhaustedInput, PreconditionViolation
from guessme.persistence.snapshot import GameSnapshot, SnapshotStore
from guessme.questions.generator import QuestionGenerator
from guessme.util.clock import Clock, SystemClock
from guessme.util.rng import Rng

logger = logging.getLogger(__name__)

SubjectSupplier = Callable[[], Sequence[Subject]]


@dataclass(frozen=True)
class AnswerResult:
    choice: str
    is_correct: bool
    correct_answer: str
    points_awarded: int
    lives: int
    streak: int
    game_over: bool
    needs_subjects: bool
    next_question: Question | None = None
    new_achievements: list[AchievementDefinition] = field(default_factory=list)


class GameSession:
    """One player's round of guessing.

    The session is not thread-safe; a single caller drives it. Collaborators
    (store, clock, random source, subject supplier) are passed in.
    """

    def __init__(
        self,
        user_id: str,
        *,
        store: SnapshotStore | None = None,
        clock: Clock | None = None,
        rng: Rng | None = None,
        generator: QuestionGenerator | None = None,
        rules: GameRules = DEFAULT_RULES,
        subject_supplier: SubjectSupplier | None = None,
        achievements: Sequence[AchievementDefinition] | None = None,
    ) -> None:
        self.user_id = user_id
        self.store = store
        self.clock = clock or SystemClock()
        self.rules = rules
        self.generator = generator or QuestionGenerator(rng or Rng(config.SEED))
        self.subject_supplier = subject_supplier
        self.achievements = tuple(achievements) if achievements is not None else load_achievements()
        self.lives = LivesLedger(
            lives=rules.max_lives,
            max_lives=rules.max_lives,
            regen_period=rules.regen_period,
        )
        self.scores = ScoreTracker()
        self.unlocked: list[str] = []
        self.subjects: list[Subject] = []
        self.index = 0
        self.question: Question | None = None
        self.phase = SessionPhase.AWAITING_QUESTION
        self.needs_subjects = False
        if store is not None:
            snapshot = store.load(user_id)
            if snapshot is not None:
                self._restore(snapshot)
        self.tick()

    @property
    def is_game_over(self) -> bool:
        return self.phase == SessionPhase.GAME_OVER

    def start(self, subjects: Iterable[Subject], reset_score: bool = False) -> Question | None:
        """Begin a round over a fresh subject queue."""
        self.subjects = list(subjects)
        logger.info("Starting session for %s with %s subjects", self.user_id, len(self.subjects))
        return self._begin_round(reset_score=reset_score, reset_streak=True)

    def restart(self) -> Question | None:
        """Play the same queue again from the top. Lives, score and streak carry over."""
        return self._begin_round(reset_score=False, reset_streak=False)

    def supply_subjects(self, subjects: Iterable[Subject]) -> Question | None:
        """Append subjects to the queue, resuming play if the session was waiting for them."""
        self.subjects.extend(subjects)
        if not self.needs_subjects or self.lives.is_empty:
            return None
        self.phase = SessionPhase.AWAITING_QUESTION
        question = self._next_question()
        self.save()
        return question

    def submit_answer(self, choice: str) -> AnswerResult:
        question = self.question
        if self.phase != SessionPhase.QUESTION_ACTIVE or question is None:
            raise PreconditionViolation(f"no active question (session is {self.phase})")
        if choice not in question.choices:
            raise PreconditionViolation(f"{choice!r} is not one of the offered choices")

        now = self.clock.now()
        new_achievements: list[AchievementDefinition] = []
        points = 0
        is_correct = question.is_correct(choice)
        if is_correct:
            points = self.scores.on_correct(self.rules.base_points)
            new_achievements = evaluate_achievements(self.scores.stats(), self.unlocked, self.achievements)
            self.unlocked.extend(definition.id for definition in new_achievements)
        else:
            self.scores.on_incorrect()
            self.lives.consume_life(now)

        self.question = None
        next_question = None
        if self.lives.is_empty:
            self._enter_game_over(now)
        else:
            self.phase = SessionPhase.AWAITING_QUESTION
            self.index += 1
            next_question = self._next_question()
        self.save()
        return AnswerResult(
            choice=choice,
            is_correct=is_correct,
            correct_answer=question.correct_answer,
            points_awarded=points,
            lives=self.lives.lives,
            streak=self.scores.streak,
            game_over=self.is_game_over,
            needs_subjects=self.needs_subjects,
            next_question=next_question,
            new_achievements=new_achievements,
        )

    def require_question(self) -> Question:
        if self.question is not None:
            return self.question
        if self.needs_subjects:
            raise ExhaustedInput("subject queue is exhausted; supply more subjects")
        raise PreconditionViolation(f"no active question (session is {self.phase})")

    def tick(self, now: datetime | None = None) -> bool:
        """Run the regeneration check. Callers drive this from their own clock."""
        moment = now or self.clock.now()
        restored = self.lives.check_regeneration(moment)
        if restored:
            self._leave_game_over()
            self.save()
        return restored

    def grant_life(self) -> bool:
        added = self.lives.add_life()
        if added:
            self._leave_game_over()
            self.save()
        return added

    def time_until_next_life(self) -> timedelta | None:
        return self.lives.time_until_next_life(self.clock.now())

    def lives_state(self) -> LivesState:
        return self.lives.state(self.clock.now())

    def score_state(self) -> ScoreState:
        return self.scores.state()

    def unlocked_achievements(self) -> list[AchievementDefinition]:
        by_id = {definition.id: definition for definition in self.achievements}
        return [by_id[achievement_id] for achievement_id in self.unlocked if achievement_id in by_id]

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            lives=self.lives.lives,
            regen_started_at=self.lives.regen_started_at,
            streak=self.scores.streak,
            highest_streak=self.scores.highest_streak,
            score=self.scores.score,
            correct_count=self.scores.correct_count,
            total_count=self.scores.total_count,
            game_over=self.is_game_over,
            unlocked_achievement_ids=list(self.unlocked),
        )

    def save(self) -> None:
        if self.store is not None:
            self.store.save(self.user_id, self.snapshot())

    def _begin_round(self, reset_score: bool, reset_streak: bool) -> Question | None:
        now = self.clock.now()
        self.lives.check_regeneration(now)
        self.index = 0
        self.question = None
        self.needs_subjects = False
        self.scores.reset_round(reset_score=reset_score, reset_streak=reset_streak)
        if self.lives.is_empty:
            self._enter_game_over(now)
            self.save()
            return None
        self.phase = SessionPhase.AWAITING_QUESTION
        question = self._next_question()
        if question is None:
            logger.info("No askable subjects for %s; round cannot start", self.user_id)
            self.phase = SessionPhase.GAME_OVER
        self.save()
        return question

    def _next_question(self) -> Question | None:
        supplied = False
        while True:
            while self.index < len(self.subjects):
                question = self.generator.generate(self.subjects[self.index])
                if question is not None:
                    self.question = question
                    self.phase = SessionPhase.QUESTION_ACTIVE
                    self.needs_subjects = False
                    return question
                logger.debug("Skipping subject %s", self.subjects[self.index].id)
                self.index += 1
            if supplied or self.subject_supplier is None:
                break
            supplied = True
            more = list(self.subject_supplier())
            if not more:
                break
            self.subjects.extend(more)
        self.question = None
        self.needs_subjects = True
        return None

    def _enter_game_over(self, now: datetime) -> None:
        self.lives.start_regeneration(now)
        self.question = None
        if self.phase != SessionPhase.GAME_OVER:
            logger.info("Game over for %s with score %s", self.user_id, self.scores.score)
        self.phase = SessionPhase.GAME_OVER

    def _leave_game_over(self) -> None:
        if self.phase == SessionPhase.GAME_OVER and not self.lives.is_empty:
            self.phase = SessionPhase.AWAITING_QUESTION

    def _restore(self, snapshot: GameSnapshot) -> None:
        self.lives = LivesLedger(
            lives=snapshot.lives,
            regen_started_at=snapshot.regen_started_at,
            max_lives=self.rules.max_lives,
            regen_period=self.rules.regen_period,
        )
        correct = snapshot.correct_count
        if correct > snapshot.total_count:
            logger.warning("Snapshot for %s has more correct than total answers", self.user_id)
            correct = snapshot.total_count
        self.scores = ScoreTracker(
            score=snapshot.score,
            streak=snapshot.streak,
            highest_streak=snapshot.highest_streak,
            correct_count=correct,
            total_count=snapshot.total_count,
        )
        self.unlocked = list(dict.fromkeys(snapshot.unlocked_achievement_ids))
        if self.lives.is_empty:
            self._enter_game_over(self.clock.now())
        elif snapshot.game_over:
            # Round ended with nothing left to ask about; wait for more subjects.
            self.phase = SessionPhase.GAME_OVER
            self.needs_subjects = True

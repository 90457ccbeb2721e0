"""Score and streak bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PlayerStats:
    correct: int = 0
    total: int = 0
    current_streak: int = 0
    highest_streak: int = 0


@dataclass(frozen=True)
class ScoreState:
    score: int
    streak: int
    highest_streak: int
    correct_count: int
    total_count: int
    round_correct: int
    round_total: int
    accuracy: float


@dataclass
class ScoreTracker:
    score: int = 0
    streak: int = 0
    highest_streak: int = 0
    correct_count: int = 0
    total_count: int = 0
    round_correct: int = 0
    round_total: int = 0

    def __post_init__(self) -> None:
        for name in ("score", "streak", "highest_streak", "correct_count", "total_count"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} cannot be negative")
        if self.correct_count > self.total_count:
            raise ValueError("correct_count cannot exceed total_count")
        self.highest_streak = max(self.highest_streak, self.streak)

    def on_correct(self, base_points: int) -> int:
        """Score a correct answer; the multiplier is the streak before this answer plus one."""
        if base_points < 0:
            raise ValueError("base_points cannot be negative")
        awarded = base_points * (self.streak + 1)
        self.streak += 1
        self.highest_streak = max(self.highest_streak, self.streak)
        self.correct_count += 1
        self.total_count += 1
        self.round_correct += 1
        self.round_total += 1
        self.score += awarded
        return awarded

    def on_incorrect(self) -> None:
        self.streak = 0
        self.total_count += 1
        self.round_total += 1

    def reset_round(self, reset_score: bool = False, reset_streak: bool = True) -> None:
        if reset_streak:
            self.streak = 0
        self.round_correct = 0
        self.round_total = 0
        if reset_score:
            self.score = 0

    @property
    def accuracy(self) -> float:
        if self.total_count == 0:
            return 0.0
        return round(100.0 * self.correct_count / self.total_count, 1)

    def stats(self) -> PlayerStats:
        return PlayerStats(
            correct=self.correct_count,
            total=self.total_count,
            current_streak=self.streak,
            highest_streak=self.highest_streak,
        )

    def state(self) -> ScoreState:
        return ScoreState(
            score=self.score,
            streak=self.streak,
            highest_streak=self.highest_streak,
            correct_count=self.correct_count,
            total_count=self.total_count,
            round_correct=self.round_correct,
            round_total=self.round_total,
            accuracy=self.accuracy,
        )

"""Game session engine."""

from guessme.engine.achievements import (
    achievement_progress,
    evaluate_achievements,
    is_requirement_met,
    progress_label,
)
from guessme.engine.lives import LivesLedger, LivesState
from guessme.engine.scoring import PlayerStats, ScoreState, ScoreTracker
from guessme.engine.session import AnswerResult, GameSession

__all__ = [
    "AnswerResult",
    "GameSession",
    "LivesLedger",
    "LivesState",
    "PlayerStats",
    "ScoreState",
    "ScoreTracker",
    "achievement_progress",
    "evaluate_achievements",
    "is_requirement_met",
    "progress_label",
]

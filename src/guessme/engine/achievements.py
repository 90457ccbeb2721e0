"""Decide which achievements a player's statistics unlock."""

from __future__ import annotations

from typing import Iterable, Sequence

from guessme.catalog.achievements import AchievementDefinition, load_achievements
from guessme.domain.enums import AchievementKind
from guessme.engine.scoring import PlayerStats


def _progress_value(definition: AchievementDefinition, stats: PlayerStats) -> int:
    if definition.kind == AchievementKind.CORRECT_GUESSES:
        return stats.correct
    if definition.kind == AchievementKind.STREAK:
        return max(stats.current_streak, stats.highest_streak)
    return stats.total


def is_requirement_met(definition: AchievementDefinition, stats: PlayerStats) -> bool:
    return _progress_value(definition, stats) >= definition.requirement


def evaluate_achievements(
    stats: PlayerStats,
    unlocked: Iterable[str],
    catalog: Sequence[AchievementDefinition] | None = None,
) -> list[AchievementDefinition]:
    """Return definitions whose threshold is met and that are not yet unlocked.

    Nothing is recorded; the caller merges the result into its unlocked set.
    """
    unlocked_ids = set(unlocked)
    definitions = load_achievements() if catalog is None else catalog
    return [
        definition
        for definition in definitions
        if definition.id not in unlocked_ids and is_requirement_met(definition, stats)
    ]


def achievement_progress(definition: AchievementDefinition, stats: PlayerStats) -> float:
    return min(1.0, _progress_value(definition, stats) / definition.requirement)


def progress_label(definition: AchievementDefinition, stats: PlayerStats) -> str:
    current = min(_progress_value(definition, stats), definition.requirement)
    return f"{current}/{definition.requirement}"

"""Static catalogs: distractors and achievements."""

from .achievements import AchievementDefinition, achievement_by_id, load_achievements
from .distractors import distractors_for, load_distractor_catalog

__all__ = [
    "AchievementDefinition",
    "achievement_by_id",
    "distractors_for",
    "load_achievements",
    "load_distractor_catalog",
]

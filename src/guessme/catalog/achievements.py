"""Achievement definitions shipped with the engine."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from guessme.domain.enums import AchievementKind, AchievementTier
from guessme.errors import CatalogError


@dataclass(frozen=True)
class AchievementDefinition:
    id: str
    name: str
    description: str
    icon: str
    requirement: int
    kind: AchievementKind
    tier: AchievementTier


_ACHIEVEMENT_CACHE: tuple[AchievementDefinition, ...] | None = None


def _achievements_path() -> Path:
    return Path(__file__).resolve().parent / "data" / "achievements.yml"


def _parse_definition(item: dict[str, Any]) -> AchievementDefinition:
    try:
        definition = AchievementDefinition(
            id=str(item["id"]),
            name=str(item["name"]),
            description=str(item.get("description", "")),
            icon=str(item.get("icon", "")),
            requirement=int(item["requirement"]),
            kind=AchievementKind(item["kind"]),
            tier=AchievementTier(item.get("tier", AchievementTier.EASY.value)),
        )
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise CatalogError(f"malformed achievement entry {item!r}: {exc}") from exc
    if definition.requirement < 1:
        raise CatalogError(f"achievement {definition.id!r} needs a positive requirement")
    return definition


def load_achievements(path: Path | None = None) -> tuple[AchievementDefinition, ...]:
    """Load achievement definitions from YAML once and cache them."""
    global _ACHIEVEMENT_CACHE
    if path is None and _ACHIEVEMENT_CACHE is not None:
        return _ACHIEVEMENT_CACHE
    achievements_path = path or _achievements_path()
    try:
        data = yaml.safe_load(achievements_path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise CatalogError(f"cannot read achievements {achievements_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise CatalogError("achievement catalog needs an 'achievements' list")
    definitions = tuple(_parse_definition(item) for item in data.get("achievements", []) or [])
    ids = [definition.id for definition in definitions]
    if len(set(ids)) != len(ids):
        raise CatalogError("achievement ids must be unique")
    if path is None:
        _ACHIEVEMENT_CACHE = definitions
    return definitions


def achievement_by_id(achievement_id: str) -> AchievementDefinition | None:
    for definition in load_achievements():
        if definition.id == achievement_id:
            return definition
    return None

"""Persisted game snapshot and the store interface the session talks to."""

from __future__ import annotations

from datetime import datetime
from typing import List, Protocol

from pydantic import BaseModel, ConfigDict, Field

from guessme import config


class GameSnapshot(BaseModel):
    model_config = ConfigDict(extra="forbid")

    lives: int = Field(default=config.MAX_LIVES, ge=0)
    regen_started_at: datetime | None = None
    streak: int = Field(default=0, ge=0)
    highest_streak: int = Field(default=0, ge=0)
    score: int = Field(default=0, ge=0)
    correct_count: int = Field(default=0, ge=0)
    total_count: int = Field(default=0, ge=0)
    game_over: bool = False
    unlocked_achievement_ids: List[str] = Field(default_factory=list)


class SnapshotStore(Protocol):
    def load(self, user_id: str) -> GameSnapshot | None: ...

    def save(self, user_id: str, snapshot: GameSnapshot) -> None: ...


class MemorySnapshotStore:
    """Keeps snapshots in a dict. Useful for tests and throwaway sessions."""

    def __init__(self) -> None:
        self._snapshots: dict[str, GameSnapshot] = {}

    def load(self, user_id: str) -> GameSnapshot | None:
        snapshot = self._snapshots.get(user_id)
        return snapshot.model_copy(deep=True) if snapshot is not None else None

    def save(self, user_id: str, snapshot: GameSnapshot) -> None:
        self._snapshots[user_id] = snapshot.model_copy(deep=True)

    def delete(self, user_id: str) -> None:
        self._snapshots.pop(user_id, None)

"""Snapshot persistence for game sessions."""

from .db import SQLiteSnapshotStore
from .snapshot import GameSnapshot, MemorySnapshotStore, SnapshotStore

__all__ = [
    "GameSnapshot",
    "MemorySnapshotStore",
    "SQLiteSnapshotStore",
    "SnapshotStore",
]

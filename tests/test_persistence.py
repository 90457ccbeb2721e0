from datetime import datetime, timezone

from guessme.persistence.db import SQLiteSnapshotStore
from guessme.persistence.snapshot import GameSnapshot, MemorySnapshotStore


def _snapshot(**overrides) -> GameSnapshot:
    values = dict(
        lives=0,
        regen_started_at=datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc),
        streak=0,
        highest_streak=7,
        score=420,
        correct_count=21,
        total_count=30,
        game_over=True,
        unlocked_achievement_ids=["first_guess", "people_reader", "hot_streak"],
    )
    values.update(overrides)
    return GameSnapshot(**values)


def test_sqlite_store_round_trip(tmp_path):
    store = SQLiteSnapshotStore(tmp_path / "guessme.db")
    try:
        assert store.load("nobody") is None
        snapshot = _snapshot()
        store.save("player-1", snapshot)
        assert store.load("player-1") == snapshot
    finally:
        store.close()


def test_sqlite_store_overwrites_and_deletes(tmp_path):
    path = tmp_path / "guessme.db"
    store = SQLiteSnapshotStore(path)
    store.save("player-1", _snapshot())
    store.save("player-1", _snapshot(lives=5, regen_started_at=None, game_over=False))
    store.close()

    reopened = SQLiteSnapshotStore(path)
    try:
        loaded = reopened.load("player-1")
        assert loaded is not None
        assert loaded.lives == 5
        assert loaded.regen_started_at is None
        assert not loaded.game_over
        reopened.delete("player-1")
        assert reopened.load("player-1") is None
    finally:
        reopened.close()


def test_memory_store_returns_copies():
    store = MemorySnapshotStore()
    snapshot = _snapshot()
    store.save("player-1", snapshot)
    snapshot.unlocked_achievement_ids.append("oracle")
    loaded = store.load("player-1")
    assert loaded is not None
    assert "oracle" not in loaded.unlocked_achievement_ids

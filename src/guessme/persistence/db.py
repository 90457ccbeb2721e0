"""SQLite persistence for per-user game snapshots."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
import json
import logging
import sqlite3

from guessme.persistence.snapshot import GameSnapshot

logger = logging.getLogger(__name__)


class SQLiteSnapshotStore:
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self.conn = sqlite3.connect(self.path)
        self.conn.row_factory = sqlite3.Row
        self._ensure_schema()

    def close(self) -> None:
        self.conn.close()

    def load(self, user_id: str) -> GameSnapshot | None:
        cur = self.conn.cursor()
        cur.execute(
            "SELECT lives, regen_started_at, streak, highest_streak, score, correct_count, "
            "total_count, game_over, unlocked_achievement_ids FROM game_snapshot WHERE user_id = ?",
            (user_id,),
        )
        row = cur.fetchone()
        if row is None:
            return None
        regen_started_at = row["regen_started_at"]
        return GameSnapshot(
            lives=int(row["lives"]),
            regen_started_at=datetime.fromisoformat(regen_started_at) if regen_started_at else None,
            streak=int(row["streak"]),
            highest_streak=int(row["highest_streak"]),
            score=int(row["score"]),
            correct_count=int(row["correct_count"]),
            total_count=int(row["total_count"]),
            game_over=bool(row["game_over"]),
            unlocked_achievement_ids=json.loads(row["unlocked_achievement_ids"] or "[]"),
        )

    def save(self, user_id: str, snapshot: GameSnapshot) -> None:
        cur = self.conn.cursor()
        cur.execute(
            """
            INSERT INTO game_snapshot (
                user_id,
                lives,
                regen_started_at,
                streak,
                highest_streak,
                score,
                correct_count,
                total_count,
                game_over,
                unlocked_achievement_ids
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(user_id) DO UPDATE SET
                lives = excluded.lives,
                regen_started_at = excluded.regen_started_at,
                streak = excluded.streak,
                highest_streak = excluded.highest_streak,
                score = excluded.score,
                correct_count = excluded.correct_count,
                total_count = excluded.total_count,
                game_over = excluded.game_over,
                unlocked_achievement_ids = excluded.unlocked_achievement_ids
            """,
            (
                user_id,
                snapshot.lives,
                snapshot.regen_started_at.isoformat() if snapshot.regen_started_at else None,
                snapshot.streak,
                snapshot.highest_streak,
                snapshot.score,
                snapshot.correct_count,
                snapshot.total_count,
                int(snapshot.game_over),
                json.dumps(snapshot.unlocked_achievement_ids),
            ),
        )
        self.conn.commit()
        logger.debug("Saved snapshot for %s", user_id)

    def delete(self, user_id: str) -> None:
        cur = self.conn.cursor()
        cur.execute("DELETE FROM game_snapshot WHERE user_id = ?", (user_id,))
        self.conn.commit()

    def _ensure_schema(self) -> None:
        cur = self.conn.cursor()
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS game_snapshot (
                user_id TEXT PRIMARY KEY,
                lives INTEGER NOT NULL,
                regen_started_at TEXT,
                streak INTEGER NOT NULL,
                highest_streak INTEGER NOT NULL,
                score INTEGER NOT NULL,
                correct_count INTEGER NOT NULL,
                total_count INTEGER NOT NULL,
                game_over INTEGER NOT NULL,
                unlocked_achievement_ids TEXT
            )
            """
        )
        self.conn.commit()

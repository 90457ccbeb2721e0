"""Lives ledger: a scarce resource that refills all at once after a fixed period."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
import logging

from guessme import config
from guessme.domain.enums import LivesPhase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LivesState:
    lives: int
    max_lives: int
    regen_started_at: datetime | None
    is_regenerating: bool
    phase: LivesPhase
    time_until_next_life: timedelta | None = None


@dataclass
class LivesLedger:
    """Tracks remaining lives and the regeneration timer.

    The ledger owns no clock: every time-dependent call takes ``now``.
    """

    lives: int = config.MAX_LIVES
    regen_started_at: datetime | None = None
    max_lives: int = config.MAX_LIVES
    regen_period: timedelta = timedelta(seconds=config.LIFE_REGEN_SECONDS)

    def __post_init__(self) -> None:
        if self.max_lives < 1:
            raise ValueError("max_lives must be at least 1")
        if self.regen_period <= timedelta(0):
            raise ValueError("regen_period must be positive")
        if not 0 <= self.lives <= self.max_lives:
            logger.warning("Clamping lives %s into 0..%s", self.lives, self.max_lives)
            self.lives = max(0, min(self.max_lives, self.lives))
        if self.lives == self.max_lives:
            self.regen_started_at = None

    @property
    def is_full(self) -> bool:
        return self.lives >= self.max_lives

    @property
    def is_empty(self) -> bool:
        return self.lives <= 0

    @property
    def is_regenerating(self) -> bool:
        return self.regen_started_at is not None and not self.is_full

    @property
    def phase(self) -> LivesPhase:
        if self.is_full:
            return LivesPhase.FULL
        if self.is_empty:
            return LivesPhase.EMPTY
        if self.is_regenerating:
            return LivesPhase.REGENERATING
        return LivesPhase.DEPLETING

    def consume_life(self, now: datetime) -> bool:
        """Spend one life. Returns False, changing nothing, when none are left."""
        if self.is_empty:
            return False
        self.lives -= 1
        if self.is_empty:
            self.start_regeneration(now)
        return True

    def start_regeneration(self, now: datetime) -> None:
        if self.is_full or self.regen_started_at is not None:
            return
        self.regen_started_at = now
        logger.debug("Life regeneration started at %s", now.isoformat())

    def check_regeneration(self, now: datetime) -> bool:
        """Restore every missing life once the period has elapsed since the timer started."""
        if self.regen_started_at is None:
            return False
        if self.is_full:
            self.regen_started_at = None
            return False
        if now - self.regen_started_at < self.regen_period:
            return False
        restored = self.max_lives - self.lives
        self.lives = self.max_lives
        self.regen_started_at = None
        logger.info("Restored %s lives", restored)
        return True

    def add_life(self) -> bool:
        if self.is_full:
            return False
        self.lives += 1
        if self.is_full:
            self.regen_started_at = None
        return True

    def time_until_next_life(self, now: datetime) -> timedelta | None:
        if self.regen_started_at is None or self.is_full:
            return None
        elapsed = now - self.regen_started_at
        remaining = self.regen_period - (elapsed % self.regen_period)
        return max(remaining, timedelta(0))

    def reset_to_full(self) -> None:
        self.lives = self.max_lives
        self.regen_started_at = None

    def state(self, now: datetime | None = None) -> LivesState:
        return LivesState(
            lives=self.lives,
            max_lives=self.max_lives,
            regen_started_at=self.regen_started_at,
            is_regenerating=self.is_regenerating,
            phase=self.phase,
            time_until_next_life=self.time_until_next_life(now) if now is not None else None,
        )

"""Clock port. The engine never reads the wall clock directly."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


@dataclass
class ManualClock:
    """Clock that only moves when told to."""

    current: datetime = field(default_factory=lambda: datetime(2024, 1, 1, tzinfo=timezone.utc))

    def now(self) -> datetime:
        return self.current

    def advance(self, seconds: float = 0, **kwargs: float) -> datetime:
        self.current = self.current + timedelta(seconds=seconds, **kwargs)
        return self.current

    def set(self, moment: datetime) -> None:
        self.current = moment

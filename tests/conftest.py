"""Shared fixtures for engine tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from guessme.config import GameRules
from guessme.domain.models import Subject
from guessme.engine.session import GameSession
from guessme.persistence.snapshot import MemorySnapshotStore
from guessme.util.clock import ManualClock
from guessme.util.rng import Rng

ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def rng() -> Rng:
    return Rng(1234)


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def store() -> MemorySnapshotStore:
    return MemorySnapshotStore()


@pytest.fixture
def rules() -> GameRules:
    return GameRules()


@pytest.fixture
def sample_subjects_path() -> Path:
    return ROOT / "data" / "sample_subjects.yml"


@pytest.fixture
def age_subjects() -> list[Subject]:
    return [Subject(id=f"age-{idx}", age=20 + idx, profile_image_url=f"img-{idx}") for idx in range(8)]


@pytest.fixture
def make_session(store, clock, rules):
    def _make(seed: int = 99, **kwargs) -> GameSession:
        kwargs.setdefault("store", store)
        kwargs.setdefault("clock", clock)
        kwargs.setdefault("rules", rules)
        return GameSession("player-1", rng=Rng(seed), **kwargs)

    return _make

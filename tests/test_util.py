from datetime import timedelta

import pytest

from guessme.util.clock import ManualClock, SystemClock
from guessme.util.rng import Rng


def test_manual_clock_moves_only_when_advanced():
    clock = ManualClock()
    start = clock.now()
    assert clock.now() == start
    clock.advance(minutes=5)
    assert clock.now() - start == timedelta(minutes=5)


def test_system_clock_is_timezone_aware():
    assert SystemClock().now().tzinfo is not None


def test_rng_replays_from_seed():
    first, second = Rng(1), Rng(1)
    assert [first.offset(10) for _ in range(5)] == [second.offset(10) for _ in range(5)]


def test_rng_offset_stays_within_spread():
    rng = Rng(3)
    offsets = {rng.offset(2) for _ in range(200)}
    assert offsets <= {-2, -1, 0, 1, 2}
    assert rng.offset(0) == 0
    with pytest.raises(ValueError):
        rng.offset(-1)


def test_rng_choice_rejects_empty():
    with pytest.raises(ValueError, match="nothing to pick from"):
        Rng(1).choice([])

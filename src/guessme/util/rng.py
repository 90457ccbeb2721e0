"""Random source for question generation.

Everything random about a question goes through here: which attribute is asked
about, how far numeric distractors sit from the real value, which catalog
entries are offered, and the order of the choices. Seeding it replays a round
question for question.
"""

from __future__ import annotations

from dataclasses import dataclass
import random
from typing import Sequence, TypeVar

T = TypeVar("T")


@dataclass
class Rng:
    seed: int

    def __post_init__(self) -> None:
        self._random = random.Random(self.seed)

    def offset(self, spread: int) -> int:
        """Signed distance from the real value, within +/- spread."""
        if spread < 0:
            raise ValueError("spread cannot be negative")
        return self._random.randint(-spread, spread)

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise ValueError("nothing to pick from: no askable categories or distractors")
        return self._random.choice(seq)

    def shuffle(self, choices: list[T]) -> None:
        self._random.shuffle(choices)

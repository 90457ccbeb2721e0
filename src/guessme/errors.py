"""Error types raised by the game engine."""

from __future__ import annotations


class GuessMeError(Exception):
    """Base class for engine errors."""


class PreconditionViolation(GuessMeError):
    """An operation was called outside the state it is valid in.

    The object the operation was called on is left unchanged.
    """


class ExhaustedInput(GuessMeError):
    """The subject queue ran out before a question could be produced."""


class GenerationImpossible(GuessMeError):
    """A subject cannot yield a question with enough unique choices."""

    def __init__(self, subject_id: str, reason: str) -> None:
        super().__init__(f"cannot build a question for subject {subject_id!r}: {reason}")
        self.subject_id = subject_id
        self.reason = reason


class CatalogError(GuessMeError):
    """A bundled catalog file is missing or malformed."""

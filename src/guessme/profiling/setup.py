"""Product rules for when a player's own profile is complete enough to play."""

from __future__ import annotations

from dataclasses import dataclass

from guessme.domain.models import Subject


@dataclass(frozen=True)
class SetupPolicy:
    require_photo: bool = True
    require_age: bool = True
    require_any_of: tuple[str, ...] = ("education", "occupation")


DEFAULT_SETUP_POLICY = SetupPolicy()


def is_setup_complete(subject: Subject, policy: SetupPolicy = DEFAULT_SETUP_POLICY) -> bool:
    if policy.require_photo and subject.profile_image_url is None:
        return False
    if policy.require_age and subject.age is None:
        return False
    if policy.require_any_of:
        return any(getattr(subject, name, None) is not None for name in policy.require_any_of)
    return True


def is_profile_complete(subject: Subject) -> bool:
    """True when at least one attribute can be asked about."""
    return bool(subject.askable_categories())

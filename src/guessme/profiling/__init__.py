"""Profile completeness rules."""

from .setup import DEFAULT_SETUP_POLICY, SetupPolicy, is_profile_complete, is_setup_complete

__all__ = [
    "DEFAULT_SETUP_POLICY",
    "SetupPolicy",
    "is_profile_complete",
    "is_setup_complete",
]

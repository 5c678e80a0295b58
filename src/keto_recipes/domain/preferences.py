"""Domain models for user preferences."""

from dataclasses import dataclass
from uuid import UUID

GLOBAL_OWNER_KEY = "global"


@dataclass(frozen=True)
class UserPreference:
    """Target keto ratio for a user, or the global row in single-tenant mode."""

    id: UUID | None
    user_id: UUID | None
    target_ratio: float


def owner_key(user_id: UUID | None) -> str:
    """Return the unique storage key for a preference row."""
    return str(user_id) if user_id is not None else GLOBAL_OWNER_KEY

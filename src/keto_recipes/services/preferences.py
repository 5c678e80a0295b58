"""Target ratio preferences."""

import logging
import math
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from keto_recipes.domain.actors import Actor
from keto_recipes.domain.preferences import UserPreference
from keto_recipes.errors import ValidationError
from keto_recipes.services.access import AccessPolicy

DEFAULT_TARGET_RATIO = 3.0

_logger = logging.getLogger(__name__)


class PreferenceRepository(Protocol):
    """Persistence interface for preferences keyed by owner."""

    def get_preference(self, user_id: UUID | None) -> UserPreference | None:
        """Return the preference row for the owner, if present."""

    def create_if_absent(
        self, user_id: UUID | None, target_ratio: float
    ) -> UserPreference:
        """Insert a row unless one exists, then return the stored row."""

    def upsert_preference(
        self, user_id: UUID | None, target_ratio: float
    ) -> UserPreference:
        """Insert or update the owner's row and return it."""


@dataclass
class PreferenceService:
    """Service for the per-user (or global) target keto ratio."""

    repository: PreferenceRepository
    access_policy: AccessPolicy
    default_target_ratio: float = DEFAULT_TARGET_RATIO

    def get_preference(self, actor: Actor) -> UserPreference:
        """Return the actor's preference, creating the default on first read."""
        if self.access_policy.ownership_enabled and not actor.is_authenticated:
            # Signed-out visitors see the default without a stored row.
            return UserPreference(
                id=None, user_id=None, target_ratio=self.default_target_ratio
            )
        user_id = self.access_policy.owner_for_new(actor)
        existing = self.repository.get_preference(user_id)
        if existing is not None:
            return existing
        created = self.repository.create_if_absent(user_id, self.default_target_ratio)
        _logger.info("Created default preference for owner %s", user_id or "global")
        return created

    def set_preference(self, actor: Actor, target_ratio: float) -> UserPreference:
        """Create or update the actor's target ratio."""
        self.access_policy.require_writer(actor, "update preferences")
        _validate_ratio(target_ratio)
        user_id = self.access_policy.owner_for_new(actor)
        return self.repository.upsert_preference(user_id, target_ratio)

    def target_ratio_for(self, actor: Actor) -> float:
        """Return the ratio recipes should be classified against."""
        return self.get_preference(actor).target_ratio


def _validate_ratio(target_ratio: float) -> None:
    if not math.isfinite(target_ratio) or target_ratio <= 0:
        raise ValidationError("Target ratio must be a positive number")

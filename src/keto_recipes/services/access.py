"""Recipe visibility and ownership rules for each operating mode."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from keto_recipes.config import OperatingMode
from keto_recipes.domain.actors import Actor, AuthenticatedUser
from keto_recipes.domain.recipes import ListScope, Recipe
from keto_recipes.errors import UnauthorizedError


@dataclass(frozen=True)
class RecipeQuery:
    """Storage-level filter for recipe list views."""

    is_public: bool | None = None
    created_by: UUID | None = None


class AccessPolicy(Protocol):
    """Decides what an actor may list, read and write."""

    ownership_enabled: bool

    def is_listable(self, recipe: Recipe, actor: Actor, scope: ListScope) -> bool:
        """Return True when the recipe belongs in the actor's list view."""

    def list_query(self, actor: Actor, scope: ListScope) -> RecipeQuery | None:
        """Return the storage filter for a list view, or None for an empty list."""

    def can_read(self, recipe: Recipe, actor: Actor) -> bool:
        """Return True when the actor may fetch the recipe by id."""

    def can_mutate(self, recipe: Recipe, actor: Actor) -> bool:
        """Return True when the actor may update or delete the recipe."""

    def require_writer(self, actor: Actor, action: str) -> None:
        """Raise UnauthorizedError when the actor may not write at all."""

    def owner_for_new(self, actor: Actor) -> UUID | None:
        """Return the owner recorded on records the actor creates."""


class CommunityAccessPolicy:
    """Owned recipes: lists are visibility-gated and writes owner-only."""

    ownership_enabled = True

    def is_listable(self, recipe: Recipe, actor: Actor, scope: ListScope) -> bool:
        if scope is ListScope.PUBLIC:
            return recipe.is_public
        return _owns(recipe, actor)

    def list_query(self, actor: Actor, scope: ListScope) -> RecipeQuery | None:
        if scope is ListScope.PUBLIC:
            return RecipeQuery(is_public=True)
        if isinstance(actor, AuthenticatedUser):
            return RecipeQuery(created_by=actor.id)
        return None

    def can_read(self, recipe: Recipe, actor: Actor) -> bool:
        # Visibility only gates list views; any id can be fetched directly.
        return True

    def can_mutate(self, recipe: Recipe, actor: Actor) -> bool:
        return _owns(recipe, actor)

    def require_writer(self, actor: Actor, action: str) -> None:
        if not actor.is_authenticated:
            raise UnauthorizedError(f"You must be signed in to {action}")

    def owner_for_new(self, actor: Actor) -> UUID | None:
        if isinstance(actor, AuthenticatedUser):
            return actor.id
        return None


class SingleTenantAccessPolicy:
    """Shared data: no ownership, no sign-in gate."""

    ownership_enabled = False

    def is_listable(self, recipe: Recipe, actor: Actor, scope: ListScope) -> bool:
        return True

    def list_query(self, actor: Actor, scope: ListScope) -> RecipeQuery | None:
        return RecipeQuery()

    def can_read(self, recipe: Recipe, actor: Actor) -> bool:
        return True

    def can_mutate(self, recipe: Recipe, actor: Actor) -> bool:
        return True

    def require_writer(self, actor: Actor, action: str) -> None:
        return None

    def owner_for_new(self, actor: Actor) -> UUID | None:
        return None


def build_access_policy(mode: OperatingMode) -> AccessPolicy:
    """Return the policy implementing the given operating mode."""
    if mode is OperatingMode.SINGLE_TENANT:
        return SingleTenantAccessPolicy()
    return CommunityAccessPolicy()


def _owns(recipe: Recipe, actor: Actor) -> bool:
    # Ownerless legacy recipes never match.
    return (
        isinstance(actor, AuthenticatedUser)
        and recipe.created_by is not None
        and recipe.created_by == actor.id
    )

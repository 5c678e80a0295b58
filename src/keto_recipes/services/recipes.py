"""Recipe service: visibility-aware reads, owner-guarded writes, nutrition."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from keto_recipes.domain.actors import Actor
from keto_recipes.domain.recipes import (
    IngredientInput,
    ListScope,
    Recipe,
    RecipeChanges,
    RecipeDraft,
    RecipeView,
)
from keto_recipes.errors import ForbiddenError, NotFoundError, ValidationError
from keto_recipes.services.access import AccessPolicy, RecipeQuery
from keto_recipes.services.foods import FoodItemRepository
from keto_recipes.services.macros import classify_ratio, compute_recipe_macros

_logger = logging.getLogger(__name__)


class RecipeRepository(Protocol):
    """Persistence interface for recipes and their ingredients."""

    def create_recipe(self, draft: RecipeDraft, created_by: UUID | None) -> Recipe:
        """Create a recipe with its ingredients and return it."""

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe with ingredients, if present."""

    def list_recipes(self, query: RecipeQuery) -> list[Recipe]:
        """Return recipes matching the query, newest first."""

    def replace_recipe(
        self,
        recipe_id: UUID,
        updates: dict[str, object],
        ingredients: list[IngredientInput] | None,
    ) -> Recipe | None:
        """Atomically update fields and, when given, swap the whole ingredient set."""

    def delete_recipe(self, recipe_id: UUID) -> bool:
        """Delete a recipe and its ingredients; False when it does not exist."""


@dataclass
class RecipeService:
    """Application service for recipe operations."""

    repository: RecipeRepository
    food_repository: FoodItemRepository
    access_policy: AccessPolicy

    def list_recipes(
        self,
        actor: Actor,
        scope: ListScope = ListScope.PUBLIC,
        target_ratio: float | None = None,
    ) -> list[RecipeView]:
        """Return the recipes visible to the actor in the given scope."""
        query = self.access_policy.list_query(actor, scope)
        if query is None:
            return []
        recipes = self.repository.list_recipes(query)
        return [
            _build_view(recipe, target_ratio)
            for recipe in recipes
            if self.access_policy.is_listable(recipe, actor, scope)
        ]

    def get_recipe(
        self, actor: Actor, recipe_id: UUID, target_ratio: float | None = None
    ) -> RecipeView:
        """Return a single recipe by id."""
        recipe = self._load(recipe_id)
        if not self.access_policy.can_read(recipe, actor):
            raise ForbiddenError("You do not have permission to view this recipe")
        return _build_view(recipe, target_ratio)

    def create_recipe(
        self, actor: Actor, draft: RecipeDraft, target_ratio: float | None = None
    ) -> RecipeView:
        """Create a recipe owned by the actor."""
        self.access_policy.require_writer(actor, "create recipes")
        _validate_name(draft.name)
        _validate_servings(draft.servings)
        self._validate_ingredients(draft.ingredients)
        recipe = self.repository.create_recipe(
            draft, created_by=self.access_policy.owner_for_new(actor)
        )
        return _build_view(recipe, target_ratio)

    def update_recipe(
        self,
        actor: Actor,
        recipe_id: UUID,
        changes: RecipeChanges,
        target_ratio: float | None = None,
    ) -> RecipeView:
        """Update a recipe, replacing its ingredients wholesale when provided."""
        self.access_policy.require_writer(actor, "update recipes")
        recipe = self._load(recipe_id)
        if not self.access_policy.can_mutate(recipe, actor):
            raise ForbiddenError("You do not have permission to update this recipe")
        if changes.name is not None:
            _validate_name(changes.name)
        if changes.servings is not None:
            _validate_servings(changes.servings)
        if changes.ingredients is not None:
            self._validate_ingredients(changes.ingredients)
            _logger.info(
                "Replacing ingredients for recipe %s: %s -> %s",
                recipe_id,
                len(recipe.ingredients),
                len(changes.ingredients),
            )
        updated = self.repository.replace_recipe(
            recipe_id, changes.field_updates(), changes.ingredients
        )
        if updated is None:
            raise NotFoundError("Recipe not found")
        return _build_view(updated, target_ratio)

    def delete_recipe(self, actor: Actor, recipe_id: UUID) -> None:
        """Delete a recipe owned by the actor."""
        self.access_policy.require_writer(actor, "delete recipes")
        recipe = self._load(recipe_id)
        if not self.access_policy.can_mutate(recipe, actor):
            raise ForbiddenError("You do not have permission to delete this recipe")
        if not self.repository.delete_recipe(recipe_id):
            raise NotFoundError("Recipe not found")

    def _load(self, recipe_id: UUID) -> Recipe:
        recipe = self.repository.get_recipe(recipe_id)
        if recipe is None:
            raise NotFoundError("Recipe not found")
        return recipe

    def _validate_ingredients(self, ingredients: list[IngredientInput]) -> None:
        for ingredient in ingredients:
            if ingredient.grams < 0:
                raise ValidationError("Ingredient grams must not be negative")
        requested = {ingredient.food_item_id for ingredient in ingredients}
        if not requested:
            return
        found = {food.id for food in self.food_repository.get_foods(list(requested))}
        missing = requested - found
        if missing:
            missing_ids = ", ".join(sorted(str(food_id) for food_id in missing))
            raise ValidationError(f"Unknown food items: {missing_ids}")


def _build_view(recipe: Recipe, target_ratio: float | None) -> RecipeView:
    macros = compute_recipe_macros(recipe)
    severity = (
        classify_ratio(macros.keto_ratio, target_ratio)
        if target_ratio is not None
        else None
    )
    return RecipeView(recipe=recipe, macros=macros, severity=severity)


def _validate_name(name: str) -> None:
    if not name or not name.strip():
        raise ValidationError("Missing required fields")


def _validate_servings(servings: int) -> None:
    if servings < 1:
        raise ValidationError("Servings must be at least 1")

"""Domain models for recipes and their ingredients."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID

from keto_recipes.domain.foods import FoodItem
from keto_recipes.domain.nutrition import MacroSummary, Severity


class ListScope(StrEnum):
    """Which recipes a list view shows."""

    PUBLIC = "public"
    MINE = "mine"


@dataclass(frozen=True)
class Ingredient:
    """A weighted quantity of one food item inside a recipe."""

    id: UUID
    food_item: FoodItem
    grams: float


@dataclass(frozen=True)
class IngredientInput:
    """Ingredient as submitted by a caller."""

    food_item_id: UUID
    grams: float


@dataclass(frozen=True)
class Recipe:
    """A recipe with its full ingredient set."""

    id: UUID
    name: str
    instructions: str | None
    servings: int
    is_public: bool
    created_by: UUID | None
    created_at: datetime
    ingredients: list[Ingredient] = field(default_factory=list)


@dataclass(frozen=True)
class RecipeDraft:
    """Fields needed to create a recipe."""

    name: str
    instructions: str | None
    servings: int
    ingredients: list[IngredientInput]
    is_public: bool = False


@dataclass(frozen=True)
class RecipeChanges:
    """Partial recipe update; None means leave the field untouched."""

    name: str | None = None
    instructions: str | None = None
    servings: int | None = None
    is_public: bool | None = None
    ingredients: list[IngredientInput] | None = None

    def field_updates(self) -> dict[str, object]:
        """Return the scalar columns to write."""
        updates: dict[str, object] = {}
        if self.name:
            updates["name"] = self.name
        if self.instructions is not None:
            updates["instructions"] = self.instructions or None
        if self.servings is not None:
            updates["servings"] = self.servings
        if self.is_public is not None:
            updates["is_public"] = self.is_public
        return updates


@dataclass(frozen=True)
class RecipeView:
    """A recipe with its computed nutrition."""

    recipe: Recipe
    macros: MacroSummary
    severity: Severity | None = None

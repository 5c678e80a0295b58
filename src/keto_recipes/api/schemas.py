"""Pydantic request models validated before any domain logic runs."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from keto_recipes.domain.foods import FoodItemDraft
from keto_recipes.domain.recipes import IngredientInput, RecipeChanges, RecipeDraft


class _Request(BaseModel):
    """Accepts both snake_case and the web client's camelCase keys."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class FoodItemCreate(_Request):
    """Body for creating a food item."""

    name: str = Field(min_length=1)
    protein: float
    fat: float
    carbs: float

    def to_draft(self) -> FoodItemDraft:
        return FoodItemDraft(
            name=self.name, protein=self.protein, fat=self.fat, carbs=self.carbs
        )


class FoodItemUpdate(_Request):
    """Body for a partial food item update."""

    name: str | None = None
    protein: float | None = None
    fat: float | None = None
    carbs: float | None = None


class IngredientPayload(_Request):
    """A single ingredient line."""

    food_item_id: UUID = Field(alias="foodItemId")
    grams: float = Field(ge=0)

    def to_input(self) -> IngredientInput:
        return IngredientInput(food_item_id=self.food_item_id, grams=self.grams)


class RecipeCreate(_Request):
    """Body for creating a recipe."""

    name: str = Field(min_length=1)
    instructions: str | None = None
    servings: int = Field(ge=1)
    is_public: bool = Field(default=False, alias="isPublic")
    ingredients: list[IngredientPayload]

    def to_draft(self) -> RecipeDraft:
        return RecipeDraft(
            name=self.name,
            instructions=self.instructions or None,
            servings=self.servings,
            is_public=self.is_public,
            ingredients=[ingredient.to_input() for ingredient in self.ingredients],
        )


class RecipeUpdate(_Request):
    """Body for a partial recipe update; ingredients replace the whole set."""

    name: str | None = None
    instructions: str | None = None
    servings: int | None = Field(default=None, ge=1)
    is_public: bool | None = Field(default=None, alias="isPublic")
    ingredients: list[IngredientPayload] | None = None

    def to_changes(self) -> RecipeChanges:
        instructions = None
        if "instructions" in self.model_fields_set:
            # Sent explicitly: empty or null clears the stored text.
            instructions = self.instructions or ""
        return RecipeChanges(
            name=self.name,
            instructions=instructions,
            servings=self.servings,
            is_public=self.is_public,
            ingredients=(
                [ingredient.to_input() for ingredient in self.ingredients]
                if self.ingredients is not None
                else None
            ),
        )


class PreferenceUpdate(_Request):
    """Body for setting the target keto ratio."""

    target_ratio: float = Field(alias="targetRatio", gt=0)

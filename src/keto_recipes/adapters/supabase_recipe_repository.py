"""Supabase repository for recipes and recipe ingredients."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from keto_recipes.adapters.supabase_food_repository import parse_food
from keto_recipes.domain.recipes import (
    Ingredient,
    IngredientInput,
    Recipe,
    RecipeDraft,
)
from keto_recipes.services.access import RecipeQuery
from keto_recipes.services.recipes import RecipeRepository

RECIPES_TABLE = "recipes"
RECIPE_COLUMNS = (
    "id, name, instructions, servings, is_public, created_by, created_at, "
    "recipe_ingredients(id, grams, food_items(*))"
)


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase implementation for recipes.

    Multi-row writes go through Postgres functions so a recipe and its
    ingredient set change in one transaction.
    """

    client: Client

    def create_recipe(self, draft: RecipeDraft, created_by: UUID | None) -> Recipe:
        """Create a recipe and its ingredients in one call."""
        response = self.client.rpc(
            "create_recipe",
            {
                "p_name": draft.name,
                "p_instructions": draft.instructions or None,
                "p_servings": draft.servings,
                "p_is_public": draft.is_public,
                "p_created_by": str(created_by) if created_by else None,
                "p_ingredients": _ingredients_payload(draft.ingredients),
            },
        ).execute()
        if not response.data:
            raise RuntimeError("Failed to create recipe")
        recipe = self.get_recipe(UUID(str(response.data)))
        if recipe is None:
            raise RuntimeError("Created recipe could not be loaded")
        return recipe

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe with ingredients, if present."""
        response = (
            self.client.table(RECIPES_TABLE)
            .select(RECIPE_COLUMNS)
            .eq("id", str(recipe_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_recipe(response.data[0])

    def list_recipes(self, query: RecipeQuery) -> list[Recipe]:
        """Return recipes matching the query, newest first."""
        request = self.client.table(RECIPES_TABLE).select(RECIPE_COLUMNS)
        if query.is_public is not None:
            request = request.eq("is_public", query.is_public)
        if query.created_by is not None:
            request = request.eq("created_by", str(query.created_by))
        response = request.order("created_at", desc=True).execute()
        return [_parse_recipe(row) for row in response.data or []]

    def replace_recipe(
        self,
        recipe_id: UUID,
        updates: dict[str, object],
        ingredients: list[IngredientInput] | None,
    ) -> Recipe | None:
        """Update fields and swap the ingredient set inside one transaction."""
        response = self.client.rpc(
            "replace_recipe",
            {
                "p_recipe_id": str(recipe_id),
                "p_updates": updates,
                "p_ingredients": (
                    _ingredients_payload(ingredients)
                    if ingredients is not None
                    else None
                ),
            },
        ).execute()
        if not response.data:
            return None
        return self.get_recipe(recipe_id)

    def delete_recipe(self, recipe_id: UUID) -> bool:
        """Delete a recipe; ingredients cascade."""
        response = (
            self.client.table(RECIPES_TABLE)
            .delete()
            .eq("id", str(recipe_id))
            .execute()
        )
        return bool(response.data)


def _ingredients_payload(ingredients: list[IngredientInput]) -> list[dict[str, object]]:
    return [
        {"food_item_id": str(ingredient.food_item_id), "grams": ingredient.grams}
        for ingredient in ingredients
    ]


def _parse_recipe(row: dict[str, object]) -> Recipe:
    created_by = row.get("created_by")
    ingredients = [
        Ingredient(
            id=UUID(str(item["id"])),
            food_item=parse_food(item["food_items"]),
            grams=float(item.get("grams", 0.0)),
        )
        for item in row.get("recipe_ingredients") or []
        if item.get("food_items")
    ]
    return Recipe(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        instructions=row.get("instructions"),
        servings=int(row.get("servings", 1)),
        is_public=bool(row.get("is_public", False)),
        created_by=UUID(str(created_by)) if created_by else None,
        created_at=datetime.fromisoformat(str(row["created_at"])),
        ingredients=ingredients,
    )

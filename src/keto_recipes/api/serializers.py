"""JSON serialization for API responses."""

from keto_recipes.domain.foods import FoodItem, ImportReport
from keto_recipes.domain.nutrition import MacroSummary
from keto_recipes.domain.preferences import UserPreference
from keto_recipes.domain.recipes import RecipeView


def serialize_food(food: FoodItem) -> dict[str, object]:
    """Serialize a food item for API responses."""
    return {
        "id": str(food.id),
        "name": food.name,
        "protein": food.protein,
        "fat": food.fat,
        "carbs": food.carbs,
    }


def serialize_macros(macros: MacroSummary) -> dict[str, object]:
    """Serialize a macro summary."""
    return {
        "total_protein": macros.total_protein,
        "total_fat": macros.total_fat,
        "total_carbs": macros.total_carbs,
        "total_calories": macros.total_calories,
        "calories_per_serving": macros.calories_per_serving,
        "keto_ratio": macros.keto_ratio,
    }


def serialize_recipe(view: RecipeView) -> dict[str, object]:
    """Serialize a recipe with its ingredients, macros and ratio severity."""
    recipe = view.recipe
    return {
        "id": str(recipe.id),
        "name": recipe.name,
        "instructions": recipe.instructions,
        "servings": recipe.servings,
        "is_public": recipe.is_public,
        "created_by": str(recipe.created_by) if recipe.created_by else None,
        "created_at": recipe.created_at.isoformat(),
        "ingredients": [
            {
                "id": str(ingredient.id),
                "grams": ingredient.grams,
                "food_item": serialize_food(ingredient.food_item),
            }
            for ingredient in recipe.ingredients
        ],
        "macros": serialize_macros(view.macros),
        "ratio_severity": view.severity.value if view.severity else None,
    }


def serialize_preference(preference: UserPreference) -> dict[str, object]:
    """Serialize a target ratio preference."""
    return {
        "id": str(preference.id) if preference.id else None,
        "user_id": str(preference.user_id) if preference.user_id else None,
        "target_ratio": preference.target_ratio,
    }


def serialize_import_report(report: ImportReport) -> dict[str, object]:
    """Serialize a CSV import summary; errors appear only when there are any."""
    payload: dict[str, object] = {
        "success": True,
        "imported": report.imported_count,
        "total": report.total_lines_considered,
    }
    if report.errors:
        payload["errors"] = report.errors
    return payload

"""Nutrient aggregation and keto ratio classification."""

import math
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from keto_recipes.domain.foods import FoodItem
from keto_recipes.domain.nutrition import MacroSummary, Severity
from keto_recipes.domain.recipes import Recipe

CALORIES_PER_GRAM_PROTEIN = 4
CALORIES_PER_GRAM_FAT = 9
CALORIES_PER_GRAM_CARBS = 4

ON_TARGET_TOLERANCE = 0.5
CAUTION_TOLERANCE = 1.0


def compute_macros(
    ingredients: Iterable[tuple[FoodItem, float]], servings: int
) -> MacroSummary:
    """Sum macros over weighted ingredients and derive calories and keto ratio.

    Food items carry grams of each macro per 100 g, so every ingredient
    contributes ``density * grams / 100``. Totals are accumulated unrounded and
    rounded once when building the summary.
    """
    if servings < 1:
        raise ValueError("servings must be at least 1")

    protein_parts: list[float] = []
    fat_parts: list[float] = []
    carbs_parts: list[float] = []
    for food_item, grams in ingredients:
        multiplier = grams / 100
        protein_parts.append(food_item.protein * multiplier)
        fat_parts.append(food_item.fat * multiplier)
        carbs_parts.append(food_item.carbs * multiplier)

    total_protein = math.fsum(protein_parts)
    total_fat = math.fsum(fat_parts)
    total_carbs = math.fsum(carbs_parts)
    total_calories = (
        total_protein * CALORIES_PER_GRAM_PROTEIN
        + total_fat * CALORIES_PER_GRAM_FAT
        + total_carbs * CALORIES_PER_GRAM_CARBS
    )

    return MacroSummary(
        total_protein=_round_half_up(total_protein, 1),
        total_fat=_round_half_up(total_fat, 1),
        total_carbs=_round_half_up(total_carbs, 1),
        total_calories=int(_round_half_up(total_calories, 0)),
        calories_per_serving=int(_round_half_up(total_calories / servings, 0)),
        keto_ratio=_round_half_up(keto_ratio(total_fat, total_protein, total_carbs), 2),
    )


def compute_recipe_macros(recipe: Recipe) -> MacroSummary:
    """Compute the macro summary for a stored recipe."""
    return compute_macros(
        ((ingredient.food_item, ingredient.grams) for ingredient in recipe.ingredients),
        recipe.servings,
    )


def keto_ratio(fat: float, protein: float, carbs: float) -> float:
    """Return fat / (protein + carbs), or 0 when there is nothing to divide by."""
    denominator = protein + carbs
    if denominator == 0:
        return 0.0
    return fat / denominator


def classify_ratio(computed_ratio: float, target_ratio: float) -> Severity:
    """Bucket the distance between a recipe ratio and the target ratio."""
    diff = abs(computed_ratio - target_ratio)
    if diff <= ON_TARGET_TOLERANCE:
        return Severity.ON_TARGET
    if diff <= CAUTION_TOLERANCE:
        return Severity.CAUTION
    return Severity.OFF_TARGET


def _round_half_up(value: float, places: int) -> float:
    """Round ties away from zero, as the recipe screens display values."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))

"""Nutrition domain models."""

from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True)
class MacroSummary:
    """Aggregate nutrition for a recipe, rounded for display."""

    total_protein: float
    total_fat: float
    total_carbs: float
    total_calories: int
    calories_per_serving: int
    keto_ratio: float


class Severity(StrEnum):
    """How far a recipe's keto ratio is from the target."""

    ON_TARGET = "on_target"
    CAUTION = "caution"
    OFF_TARGET = "off_target"

"""Domain models for the food item catalog."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class FoodItem:
    """A food with macro density in grams per 100 g."""

    id: UUID
    name: str
    protein: float
    fat: float
    carbs: float
    created_by: UUID | None = None


@dataclass(frozen=True)
class FoodItemDraft:
    """Fields needed to create a food item."""

    name: str
    protein: float
    fat: float
    carbs: float


@dataclass(frozen=True)
class CsvParseResult:
    """Outcome of scanning a CSV upload."""

    items: list[FoodItemDraft]
    errors: list[str]
    total_lines: int


@dataclass(frozen=True)
class ImportReport:
    """Summary of a committed CSV import."""

    imported_count: int
    total_lines_considered: int
    errors: list[str]

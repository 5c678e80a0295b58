"""Services for the shared food item catalog."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from keto_recipes.domain.actors import Actor
from keto_recipes.domain.foods import FoodItem, FoodItemDraft, ImportReport
from keto_recipes.errors import CsvImportError, NotFoundError, ValidationError
from keto_recipes.services.access import AccessPolicy
from keto_recipes.services.csv_import import parse_food_csv

_logger = logging.getLogger(__name__)


class FoodItemRepository(Protocol):
    """Persistence interface for food items."""

    def create_food(self, draft: FoodItemDraft, created_by: UUID | None) -> FoodItem:
        """Create a food item; an exact duplicate returns the stored row."""

    def get_food(self, food_id: UUID) -> FoodItem | None:
        """Return a food item by id, if present."""

    def get_foods(self, food_ids: list[UUID]) -> list[FoodItem]:
        """Return the food items that exist among the given ids."""

    def update_food(
        self, food_id: UUID, payload: dict[str, object]
    ) -> FoodItem | None:
        """Merge fields into a food item; None when it does not exist.

        Raises ValidationError when the result would duplicate another item.
        """

    def delete_food(self, food_id: UUID) -> bool:
        """Delete a food item; False when it does not exist."""

    def list_foods(self) -> list[FoodItem]:
        """Return all food items ordered by name."""

    def bulk_create_foods(
        self, drafts: list[FoodItemDraft], created_by: UUID | None
    ) -> int:
        """Insert food items, skipping duplicates, and return the inserted count."""


@dataclass
class FoodCatalogService:
    """Application service for catalog operations."""

    repository: FoodItemRepository
    access_policy: AccessPolicy

    def create(self, actor: Actor, draft: FoodItemDraft) -> FoodItem:
        """Create a food item."""
        self.access_policy.require_writer(actor, "create food items")
        _validate_name(draft.name)
        return self.repository.create_food(
            draft, created_by=self.access_policy.owner_for_new(actor)
        )

    def get(self, food_id: UUID) -> FoodItem:
        """Return a food item or raise NotFoundError."""
        food = self.repository.get_food(food_id)
        if food is None:
            raise NotFoundError("Food item not found")
        return food

    def update(
        self, actor: Actor, food_id: UUID, changes: dict[str, object]
    ) -> FoodItem:
        """Apply a partial update to a food item."""
        self.access_policy.require_writer(actor, "update food items")
        payload = {key: value for key, value in changes.items() if value is not None}
        if "name" in payload:
            # An empty name leaves the stored one untouched.
            if not str(payload["name"]).strip():
                payload.pop("name")
        if not payload:
            return self.get(food_id)
        food = self.repository.update_food(food_id, payload)
        if food is None:
            raise NotFoundError("Food item not found")
        return food

    def delete(self, actor: Actor, food_id: UUID) -> None:
        """Delete a food item."""
        self.access_policy.require_writer(actor, "delete food items")
        if not self.repository.delete_food(food_id):
            raise NotFoundError("Food item not found")

    def list_all(self) -> list[FoodItem]:
        """Return the catalog sorted by name."""
        return self.repository.list_foods()

    def import_csv(self, actor: Actor, text: str) -> ImportReport:
        """Parse a CSV upload and bulk insert the valid rows."""
        self.access_policy.require_writer(actor, "upload food items")
        parsed = parse_food_csv(text)
        if not parsed.items:
            _logger.info(
                "CSV import rejected: lines=%s errors=%s",
                parsed.total_lines,
                len(parsed.errors),
            )
            raise CsvImportError("No valid food items found in CSV", parsed.errors)

        imported = self.repository.bulk_create_foods(
            parsed.items, created_by=self.access_policy.owner_for_new(actor)
        )
        _logger.info(
            "CSV import committed: imported=%s parsed=%s lines=%s errors=%s",
            imported,
            len(parsed.items),
            parsed.total_lines,
            len(parsed.errors),
        )
        return ImportReport(
            imported_count=imported,
            total_lines_considered=parsed.total_lines,
            errors=parsed.errors,
        )


def _validate_name(name: str) -> None:
    if not name or not name.strip():
        raise ValidationError("Missing required fields")

"""Supabase implementation for the food item catalog."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client, PostgrestAPIError

from keto_recipes.domain.foods import FoodItem, FoodItemDraft
from keto_recipes.errors import ValidationError
from keto_recipes.services.foods import FoodItemRepository

FOOD_ITEMS_TABLE = "food_items"
DUPLICATE_KEY = "name,protein,fat,carbs"
UNIQUE_VIOLATION = "23505"


@dataclass
class SupabaseFoodItemRepository(FoodItemRepository):
    """Supabase-backed repository for food items."""

    client: Client

    def create_food(self, draft: FoodItemDraft, created_by: UUID | None) -> FoodItem:
        """Create a food item; an identical existing row is returned instead."""
        response = (
            self.client.table(FOOD_ITEMS_TABLE)
            .upsert(
                _draft_payload(draft, created_by),
                on_conflict=DUPLICATE_KEY,
                ignore_duplicates=True,
            )
            .execute()
        )
        if response.data:
            return parse_food(response.data[0])
        existing = self._find_duplicate(draft)
        if existing is None:
            raise RuntimeError("Failed to create food item")
        return existing

    def get_food(self, food_id: UUID) -> FoodItem | None:
        """Return a food item by id, if present."""
        response = (
            self.client.table(FOOD_ITEMS_TABLE)
            .select("*")
            .eq("id", str(food_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_food(response.data[0])

    def get_foods(self, food_ids: list[UUID]) -> list[FoodItem]:
        """Return the food items that exist among the given ids."""
        if not food_ids:
            return []
        response = (
            self.client.table(FOOD_ITEMS_TABLE)
            .select("*")
            .in_("id", [str(food_id) for food_id in food_ids])
            .execute()
        )
        return [parse_food(row) for row in response.data or []]

    def update_food(
        self, food_id: UUID, payload: dict[str, object]
    ) -> FoodItem | None:
        """Merge fields into a food item."""
        try:
            response = (
                self.client.table(FOOD_ITEMS_TABLE)
                .update(payload)
                .eq("id", str(food_id))
                .execute()
            )
        except PostgrestAPIError as exc:
            if exc.code == UNIQUE_VIOLATION:
                raise ValidationError(
                    "A food item with the same name and macros already exists"
                ) from exc
            raise
        if not response.data:
            return None
        return parse_food(response.data[0])

    def delete_food(self, food_id: UUID) -> bool:
        """Delete a food item."""
        response = (
            self.client.table(FOOD_ITEMS_TABLE)
            .delete()
            .eq("id", str(food_id))
            .execute()
        )
        return bool(response.data)

    def list_foods(self) -> list[FoodItem]:
        """Return all food items ordered by name."""
        response = (
            self.client.table(FOOD_ITEMS_TABLE)
            .select("*")
            .order("name", desc=False)
            .execute()
        )
        return [parse_food(row) for row in response.data or []]

    def bulk_create_foods(
        self, drafts: list[FoodItemDraft], created_by: UUID | None
    ) -> int:
        """Insert food items, ignoring rows that collide on every macro field."""
        if not drafts:
            return 0
        response = (
            self.client.table(FOOD_ITEMS_TABLE)
            .upsert(
                [_draft_payload(draft, created_by) for draft in drafts],
                on_conflict=DUPLICATE_KEY,
                ignore_duplicates=True,
            )
            .execute()
        )
        return len(response.data or [])

    def _find_duplicate(self, draft: FoodItemDraft) -> FoodItem | None:
        response = (
            self.client.table(FOOD_ITEMS_TABLE)
            .select("*")
            .eq("name", draft.name)
            .eq("protein", draft.protein)
            .eq("fat", draft.fat)
            .eq("carbs", draft.carbs)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_food(response.data[0])


def _draft_payload(draft: FoodItemDraft, created_by: UUID | None) -> dict[str, object]:
    return {
        "name": draft.name,
        "protein": draft.protein,
        "fat": draft.fat,
        "carbs": draft.carbs,
        "created_by": str(created_by) if created_by else None,
    }


def parse_food(row: dict[str, object]) -> FoodItem:
    """Parse a food item row into a domain model."""
    created_by = row.get("created_by")
    return FoodItem(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        protein=float(row.get("protein", 0.0)),
        fat=float(row.get("fat", 0.0)),
        carbs=float(row.get("carbs", 0.0)),
        created_by=UUID(str(created_by)) if created_by else None,
    )

"""Supabase repository for target ratio preferences."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from keto_recipes.domain.preferences import UserPreference, owner_key
from keto_recipes.services.preferences import PreferenceRepository

PREFERENCES_TABLE = "user_preferences"


@dataclass
class SupabasePreferenceRepository(PreferenceRepository):
    """Supabase implementation keyed by the unique ``owner_key`` column."""

    client: Client

    def get_preference(self, user_id: UUID | None) -> UserPreference | None:
        """Return the stored preference for an owner."""
        response = (
            self.client.table(PREFERENCES_TABLE)
            .select("id, user_id, target_ratio")
            .eq("owner_key", owner_key(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_preference(response.data[0])

    def create_if_absent(
        self, user_id: UUID | None, target_ratio: float
    ) -> UserPreference:
        """Insert the default row; a concurrent winner's row is returned instead."""
        self.client.table(PREFERENCES_TABLE).upsert(
            _payload(user_id, target_ratio),
            on_conflict="owner_key",
            ignore_duplicates=True,
        ).execute()
        stored = self.get_preference(user_id)
        if stored is None:
            raise RuntimeError("Failed to create preference")
        return stored

    def upsert_preference(
        self, user_id: UUID | None, target_ratio: float
    ) -> UserPreference:
        """Insert or update the owner's target ratio."""
        response = (
            self.client.table(PREFERENCES_TABLE)
            .upsert(_payload(user_id, target_ratio), on_conflict="owner_key")
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save preference")
        return _parse_preference(response.data[0])


def _payload(user_id: UUID | None, target_ratio: float) -> dict[str, object]:
    return {
        "owner_key": owner_key(user_id),
        "user_id": str(user_id) if user_id else None,
        "target_ratio": target_ratio,
        "updated_at": datetime.now(tz=UTC).isoformat(),
    }


def _parse_preference(row: dict[str, object]) -> UserPreference:
    user_id = row.get("user_id")
    return UserPreference(
        id=UUID(str(row["id"])),
        user_id=UUID(str(user_id)) if user_id else None,
        target_ratio=float(row.get("target_ratio", 0.0)),
    )

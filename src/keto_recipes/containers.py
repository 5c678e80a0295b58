"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from keto_recipes.adapters.supabase_food_repository import SupabaseFoodItemRepository
from keto_recipes.adapters.supabase_identity import (
    IdentityProvider,
    SupabaseIdentityProvider,
)
from keto_recipes.adapters.supabase_preference_repository import (
    SupabasePreferenceRepository,
)
from keto_recipes.adapters.supabase_recipe_repository import SupabaseRecipeRepository
from keto_recipes.config import OperatingMode, Settings, parse_operating_mode
from keto_recipes.services.access import AccessPolicy, build_access_policy
from keto_recipes.services.foods import FoodCatalogService
from keto_recipes.services.preferences import PreferenceService
from keto_recipes.services.recipes import RecipeService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    operating_mode: OperatingMode
    access_policy: AccessPolicy
    identity_provider: IdentityProvider
    food_catalog_service: FoodCatalogService
    recipe_service: RecipeService
    preference_service: PreferenceService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    operating_mode = parse_operating_mode(resolved_settings.operating_mode)
    access_policy = build_access_policy(operating_mode)
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    food_repository = SupabaseFoodItemRepository(supabase_client)
    recipe_repository = SupabaseRecipeRepository(supabase_client)
    preference_repository = SupabasePreferenceRepository(supabase_client)

    return AppContainer(
        settings=resolved_settings,
        operating_mode=operating_mode,
        access_policy=access_policy,
        identity_provider=SupabaseIdentityProvider(supabase_client),
        food_catalog_service=FoodCatalogService(
            repository=food_repository, access_policy=access_policy
        ),
        recipe_service=RecipeService(
            repository=recipe_repository,
            food_repository=food_repository,
            access_policy=access_policy,
        ),
        preference_service=PreferenceService(
            repository=preference_repository,
            access_policy=access_policy,
            default_target_ratio=resolved_settings.default_target_ratio,
        ),
    )

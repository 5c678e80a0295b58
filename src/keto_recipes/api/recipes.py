"""Recipe endpoints with nutrition and ratio classification."""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from keto_recipes.api.dependencies import get_actor, get_container
from keto_recipes.api.schemas import RecipeCreate, RecipeUpdate
from keto_recipes.api.serializers import serialize_recipe
from keto_recipes.containers import AppContainer
from keto_recipes.domain.actors import Actor
from keto_recipes.domain.recipes import ListScope

router = APIRouter(prefix="/recipes", tags=["recipes"])


@router.get("")
def list_recipes(
    scope: ListScope = ListScope.PUBLIC,
    actor: Actor = Depends(get_actor),
    container: AppContainer = Depends(get_container),
) -> list[dict[str, object]]:
    """Return the recipes the caller may see in the requested scope."""
    target_ratio = container.preference_service.target_ratio_for(actor)
    views = container.recipe_service.list_recipes(
        actor, scope, target_ratio=target_ratio
    )
    return [serialize_recipe(view) for view in views]


@router.post("", status_code=status.HTTP_201_CREATED)
def create_recipe(
    body: RecipeCreate,
    actor: Actor = Depends(get_actor),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Create a recipe owned by the caller."""
    view = container.recipe_service.create_recipe(
        actor,
        body.to_draft(),
        target_ratio=container.preference_service.target_ratio_for(actor),
    )
    return serialize_recipe(view)


@router.get("/{recipe_id}")
def get_recipe(
    recipe_id: UUID,
    actor: Actor = Depends(get_actor),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return a recipe by id."""
    view = container.recipe_service.get_recipe(
        actor,
        recipe_id,
        target_ratio=container.preference_service.target_ratio_for(actor),
    )
    return serialize_recipe(view)


@router.patch("/{recipe_id}")
def update_recipe(
    recipe_id: UUID,
    body: RecipeUpdate,
    actor: Actor = Depends(get_actor),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Update a recipe; a submitted ingredient list replaces the old one."""
    view = container.recipe_service.update_recipe(
        actor,
        recipe_id,
        body.to_changes(),
        target_ratio=container.preference_service.target_ratio_for(actor),
    )
    return serialize_recipe(view)


@router.delete("/{recipe_id}")
def delete_recipe(
    recipe_id: UUID,
    actor: Actor = Depends(get_actor),
    container: AppContainer = Depends(get_container),
) -> dict[str, bool]:
    """Delete a recipe owned by the caller."""
    container.recipe_service.delete_recipe(actor, recipe_id)
    return {"success": True}

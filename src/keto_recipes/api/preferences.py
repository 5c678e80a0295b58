"""Target ratio preference endpoints."""

from fastapi import APIRouter, Depends

from keto_recipes.api.dependencies import get_actor, get_container
from keto_recipes.api.schemas import PreferenceUpdate
from keto_recipes.api.serializers import serialize_preference
from keto_recipes.containers import AppContainer
from keto_recipes.domain.actors import Actor

router = APIRouter(prefix="/preferences", tags=["preferences"])


@router.get("")
def get_preference(
    actor: Actor = Depends(get_actor),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the caller's target ratio, creating the default on first read."""
    return serialize_preference(container.preference_service.get_preference(actor))


@router.patch("")
def update_preference(
    body: PreferenceUpdate,
    actor: Actor = Depends(get_actor),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Set the caller's target ratio."""
    preference = container.preference_service.set_preference(actor, body.target_ratio)
    return serialize_preference(preference)

"""Food item catalog endpoints, including CSV bulk upload."""

from uuid import UUID

from fastapi import APIRouter, Depends, File, UploadFile, status
from fastapi.concurrency import run_in_threadpool

from keto_recipes.api.dependencies import get_actor, get_container
from keto_recipes.api.schemas import FoodItemCreate, FoodItemUpdate
from keto_recipes.api.serializers import serialize_food, serialize_import_report
from keto_recipes.containers import AppContainer
from keto_recipes.domain.actors import Actor
from keto_recipes.errors import ValidationError

router = APIRouter(prefix="/food-items", tags=["food-items"])


@router.get("")
def list_food_items(
    container: AppContainer = Depends(get_container),
) -> list[dict[str, object]]:
    """Return every food item ordered by name."""
    return [serialize_food(food) for food in container.food_catalog_service.list_all()]


@router.post("", status_code=status.HTTP_201_CREATED)
def create_food_item(
    body: FoodItemCreate,
    actor: Actor = Depends(get_actor),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Create a single food item."""
    food = container.food_catalog_service.create(actor, body.to_draft())
    return serialize_food(food)


@router.post("/bulk-upload")
async def bulk_upload_food_items(
    file: UploadFile | None = File(default=None),
    actor: Actor = Depends(get_actor),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Import food items from an uploaded CSV file."""
    if file is None:
        raise ValidationError("No file uploaded")
    raw = await file.read()
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ValidationError("CSV file must be UTF-8 encoded") from exc
    report = await run_in_threadpool(
        container.food_catalog_service.import_csv, actor, text
    )
    return serialize_import_report(report)


@router.get("/{food_id}")
def get_food_item(
    food_id: UUID, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    """Return a single food item."""
    return serialize_food(container.food_catalog_service.get(food_id))


@router.patch("/{food_id}")
def update_food_item(
    food_id: UUID,
    body: FoodItemUpdate,
    actor: Actor = Depends(get_actor),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Apply a partial update to a food item."""
    food = container.food_catalog_service.update(
        actor, food_id, body.model_dump(exclude_unset=True)
    )
    return serialize_food(food)


@router.delete("/{food_id}")
def delete_food_item(
    food_id: UUID,
    actor: Actor = Depends(get_actor),
    container: AppContainer = Depends(get_container),
) -> dict[str, bool]:
    """Delete a food item."""
    container.food_catalog_service.delete(actor, food_id)
    return {"success": True}

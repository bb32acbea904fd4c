# =============================================================================
# app/routers/items.py - Item CRUD Endpoints
# =============================================================================
# Items are the user's lists (shopping, movies, dramas, manga, places,
# goals). Same ownership rules as todos.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path, Query

from app.dependencies import CurrentUserDep, DbDep
from core.models import DeleteResponse, ItemCategory, ItemRequest, ItemResponse
from core.services.resources import item_service

router = APIRouter()

ItemId = Annotated[int, Path(description="Item ID")]


@router.get("", response_model=list[ItemResponse])
def list_items(
    user: CurrentUserDep,
    db: DbDep,
    category: Annotated[ItemCategory | None, Query(description="Only items in this category")] = None,
):
    """
    List the current user's items, newest first.

    Pass ?category= to get a single list.
    """
    return item_service.list(
        db,
        owner_id=user.id,
        category=category.value if category else None,
    )


@router.get("/{item_id}", response_model=ItemResponse)
def get_item(item_id: ItemId, user: CurrentUserDep, db: DbDep):
    """Get one item."""
    return item_service.get(db, owner_id=user.id, resource_id=item_id)


@router.post("", response_model=ItemResponse)
def create_item(request: ItemRequest, user: CurrentUserDep, db: DbDep):
    """Create an item (not completed)."""
    return item_service.create(db, owner_id=user.id, payload=request)


@router.put("/{item_id}", response_model=ItemResponse)
def update_item(item_id: ItemId, request: ItemRequest, user: CurrentUserDep, db: DbDep):
    """Replace an item's fields. `completed` is left as is."""
    return item_service.update(db, owner_id=user.id, resource_id=item_id, payload=request)


@router.delete("/{item_id}", response_model=DeleteResponse)
def delete_item(item_id: ItemId, user: CurrentUserDep, db: DbDep):
    """Delete an item."""
    return item_service.delete(db, owner_id=user.id, resource_id=item_id)


@router.patch("/{item_id}/toggle", response_model=ItemResponse)
def toggle_item(item_id: ItemId, user: CurrentUserDep, db: DbDep):
    """Flip an item between done and not done."""
    return item_service.toggle(db, owner_id=user.id, resource_id=item_id)

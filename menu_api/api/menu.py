from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends

from menu_api.api.dependencies import get_menu_store
from menu_api.core.errors import NotFoundError
from menu_api.models.schemas import DeletedResponse, MenuItem, MenuItemFields
from menu_api.services.menu_store import MenuStore
from menu_api.services.validation import valid_item_id, valid_menu_item, valid_menu_update

router = APIRouter(prefix="/api", tags=["menu"])

logger = structlog.get_logger(__name__)


def _not_found(item_id: int) -> NotFoundError:
    return NotFoundError(f"Menu item {item_id} not found.")


@router.get("/menu", response_model=list[MenuItem])
async def list_menu_items(store: MenuStore = Depends(get_menu_store)) -> list[MenuItem]:
    return store.list()


@router.get("/menu/{item_id}", response_model=MenuItem)
async def get_menu_item(
    menu_item_id: int = Depends(valid_item_id),
    store: MenuStore = Depends(get_menu_store),
) -> MenuItem:
    item = store.get(menu_item_id)
    if item is None:
        raise _not_found(menu_item_id)
    return item


@router.post("/menu", response_model=MenuItem, status_code=201)
async def create_menu_item(
    fields: MenuItemFields = Depends(valid_menu_item),
    store: MenuStore = Depends(get_menu_store),
) -> MenuItem:
    item = store.create(fields)
    logger.info("menu_item.created", item_id=item.id)
    return item


@router.put("/menu/{item_id}", response_model=MenuItem)
async def update_menu_item(
    validated: tuple[int, MenuItemFields] = Depends(valid_menu_update),
    store: MenuStore = Depends(get_menu_store),
) -> MenuItem:
    item_id, fields = validated
    item = store.update(item_id, fields)
    if item is None:
        raise _not_found(item_id)
    logger.info("menu_item.updated", item_id=item_id)
    return item


@router.delete("/menu/{item_id}", response_model=DeletedResponse)
async def delete_menu_item(
    menu_item_id: int = Depends(valid_item_id),
    store: MenuStore = Depends(get_menu_store),
) -> DeletedResponse:
    item = store.delete(menu_item_id)
    if item is None:
        raise _not_found(menu_item_id)
    logger.info("menu_item.deleted", item_id=menu_item_id)
    return DeletedResponse(deleted=item)

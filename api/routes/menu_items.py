"""Menu item CRUD routes"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db
from api.responses import error_responses
from domain.schemas import (
    MenuItemWrite,
    MenuItemResponse,
    MenuItemListResponse,
    MenuItemDeleteResponse,
)
from services import MenuItemService

router = APIRouter(prefix="/menu-items", tags=["Menu Items"])
logger = logging.getLogger("menuapi.api.menu_items")

# The body is read as raw JSON and validated by services.validation;
# MenuItemWrite only documents its shape.
_BODY_SCHEMA = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": MenuItemWrite.model_json_schema()}},
    }
}


@router.get(
    "", response_model=MenuItemListResponse, responses=error_responses(500)
)
def list_menu_items(db: Session = Depends(get_db)):
    """Return all menu items, newest first."""
    items = MenuItemService.list_items(db)
    return {"success": True, "data": items, "count": len(items)}


@router.post(
    "",
    response_model=MenuItemResponse,
    status_code=status.HTTP_201_CREATED,
    responses=error_responses(400, 409, 500),
    openapi_extra=_BODY_SCHEMA,
)
def create_menu_item(payload: Any = Body(None), db: Session = Depends(get_db)):
    """Create a menu item from ``{"name": "..."}``."""
    return MenuItemService.create_item(db, payload)


@router.get(
    "/{item_id}",
    response_model=MenuItemResponse,
    responses=error_responses(400, 404, 500),
)
def get_menu_item(item_id: str, db: Session = Depends(get_db)):
    """Get one menu item by id."""
    return MenuItemService.get_item(db, item_id)


@router.put(
    "/{item_id}",
    response_model=MenuItemResponse,
    responses=error_responses(400, 404, 409, 500),
    openapi_extra=_BODY_SCHEMA,
)
def update_menu_item(
    item_id: str, payload: Any = Body(None), db: Session = Depends(get_db)
):
    """Replace the name of a menu item."""
    return MenuItemService.update_item(db, item_id, payload)


@router.delete(
    "/{item_id}",
    response_model=MenuItemDeleteResponse,
    responses=error_responses(400, 404, 500),
)
def delete_menu_item(item_id: str, db: Session = Depends(get_db)):
    """Delete a menu item and return the removed record."""
    item = MenuItemService.delete_item(db, item_id)
    return {
        "success": True,
        "message": "Menu item deleted successfully",
        "data": item,
    }

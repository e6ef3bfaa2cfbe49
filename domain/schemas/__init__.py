"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.menu_item_schemas import (
    MenuItemWrite,
    MenuItemResponse,
    MenuItemListResponse,
    MenuItemDeleteResponse,
    Pagination,
    SearchResponse,
    ErrorResponse,
)

__all__ = [
    "MenuItemWrite",
    "MenuItemResponse",
    "MenuItemListResponse",
    "MenuItemDeleteResponse",
    "Pagination",
    "SearchResponse",
    "ErrorResponse",
]

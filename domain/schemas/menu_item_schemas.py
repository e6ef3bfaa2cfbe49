from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Any
from datetime import datetime


class MenuItemWrite(BaseModel):
    """Documented request body for create and update.

    Routes read the raw JSON object and run it through ``services.validation``
    so that every rule violation yields the same 400 envelope.
    """

    name: str = Field(
        ..., min_length=2, max_length=100, description="Menu item name", examples=["Pizza"]
    )


class MenuItemResponse(BaseModel):
    """Schema for a single menu item"""

    id: int
    name: str
    created_at: datetime = Field(..., serialization_alias="createdAt")

    model_config = ConfigDict(from_attributes=True)


class MenuItemListResponse(BaseModel):
    """All menu items, newest first"""

    success: bool = True
    data: List[MenuItemResponse]
    count: int


class MenuItemDeleteResponse(BaseModel):
    """Deletion confirmation with the removed record"""

    success: bool = True
    message: str
    data: MenuItemResponse


class Pagination(BaseModel):
    """Pagination block of a search response"""

    total: int = Field(..., description="Number of items matching the query")
    count: int = Field(..., description="Number of items in this page")
    limit: int
    offset: int
    has_more: bool = Field(..., serialization_alias="hasMore")


class SearchResponse(BaseModel):
    """Case-insensitive name search results"""

    query: str
    results: List[MenuItemResponse]
    count: int
    pagination: Pagination


class ErrorResponse(BaseModel):
    """Error envelope shared by every failing endpoint"""

    success: bool = False
    error: str = Field(..., description="Human-readable error message")
    type: str = Field(..., description="Machine-readable error code")
    details: Optional[Any] = None

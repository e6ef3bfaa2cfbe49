"""Menu item search route"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from api.dependencies import get_db
from api.responses import error_responses
from domain.schemas import SearchResponse
from services import MenuItemService

router = APIRouter(tags=["Search"])


@router.get(
    "/search", response_model=SearchResponse, responses=error_responses(400, 500)
)
def search_menu_items(
    q: Optional[str] = Query(
        default=None, description="Text to look for in item names (min 2 characters)"
    ),
    limit: Optional[str] = Query(
        default=None, description="Maximum results (1-100, default 20)"
    ),
    offset: Optional[str] = Query(default=None, description="Pagination offset"),
    db: Session = Depends(get_db),
):
    """
    Case-insensitive substring search on menu item names.

    - **q**: Search text
    - **limit**: Max results (1-100), anything above 100 is rejected
    - **offset**: For pagination
    """
    params, results, total = MenuItemService.search_items(db, q, limit, offset)
    return {
        "query": params.query,
        "results": results,
        "count": len(results),
        "pagination": {
            "total": total,
            "count": len(results),
            "limit": params.limit,
            "offset": params.offset,
            "has_more": params.offset + params.limit < total,
        },
    }

"""API index route"""

from fastapi import APIRouter

from app.config import settings

router = APIRouter(tags=["Index"])


@router.get("/")
def index():
    """Describe the API and list its endpoints."""
    prefix = settings.api_prefix
    return {
        "message": f"Welcome to the {settings.api_title}",
        "version": settings.app_version,
        "endpoints": {
            f"GET {prefix}/menu-items": "List all menu items",
            f"POST {prefix}/menu-items": "Create a new menu item",
            f"GET {prefix}/menu-items/{{id}}": "Get a menu item by ID",
            f"PUT {prefix}/menu-items/{{id}}": "Update a menu item",
            f"DELETE {prefix}/menu-items/{{id}}": "Delete a menu item",
            f"GET {prefix}/search": "Search menu items by name",
        },
    }

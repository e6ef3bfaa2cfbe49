"""Services package - Business logic layer"""

from services.menu_item_service import MenuItemService

# Note: validation contains pure helper functions, not a class

__all__ = [
    "MenuItemService",
]

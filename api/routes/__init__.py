"""API routes package"""

from . import root, health, menu_items, search

__all__ = ["root", "health", "menu_items", "search"]

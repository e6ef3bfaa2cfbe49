"""
Menu item repository - the only path from services to the menu_items table.
"""

from typing import List, Optional, Tuple
from sqlalchemy import func
from sqlalchemy.orm import Session

from domain.models.menu_item import MAX_ITEM_ID, MenuItem
from repositories.base import BaseRepository


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class MenuItemRepository(BaseRepository[MenuItem]):
    """Repository for menu items"""

    def __init__(self, db: Session):
        super().__init__(db, MenuItem)

    def _ordered(self, query):
        return query.order_by(MenuItem.created_at.desc(), MenuItem.id.desc())

    def get_by_id(self, item_id: int) -> Optional[MenuItem]:
        """Get menu item by id; ids outside the column range cannot exist"""
        if item_id < 1 or item_id > MAX_ITEM_ID:
            return None
        return super().get_by_id(item_id)

    def list_all(self) -> List[MenuItem]:
        """All menu items, newest first"""
        return self._ordered(self.db.query(MenuItem)).all()

    def get_by_name(self, name: str, exclude_id: Optional[int] = None) -> Optional[MenuItem]:
        """Get menu item by name (case-insensitive), optionally ignoring one id"""
        query = self.db.query(MenuItem).filter(
            func.lower(MenuItem.name) == func.lower(name.strip())
        )
        if exclude_id is not None:
            query = query.filter(MenuItem.id != exclude_id)
        return query.first()

    def create(self, name: str) -> MenuItem:
        """Insert a new menu item; id and created_at are generated by the store"""
        return self.save(MenuItem(name=name))

    def update(self, item_id: int, name: str) -> Optional[MenuItem]:
        """Replace the name of an item, or return None if it does not exist"""
        item = self.get_by_id(item_id)
        if item is None:
            return None
        item.name = name
        return self.save(item)

    def delete(self, item_id: int) -> Optional[MenuItem]:
        """Delete an item and return its last state, or None if it does not exist"""
        item = self.get_by_id(item_id)
        if item is None:
            return None
        return self.remove(item)

    def search(self, query: str, limit: int = 20, offset: int = 0) -> Tuple[List[MenuItem], int]:
        """
        Case-insensitive substring search on name.

        An offset at or past the number of matches yields an empty page
        without running the page query.

        Returns:
            (page of matching items, total number of matches)
        """
        pattern = f"%{_escape_like(query.lower())}%"
        matching = self.db.query(MenuItem).filter(
            func.lower(MenuItem.name).like(pattern, escape="\\")
        )
        total = matching.count()
        if offset >= total:
            return [], total
        items = self._ordered(matching).offset(offset).limit(limit).all()
        return items, total

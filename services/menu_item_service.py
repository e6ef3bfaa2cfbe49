"""Menu item service - business rules on top of the repository."""

from typing import Any, List, Optional, Tuple
from sqlalchemy.orm import Session
import logging

from app.config import settings
from app.exceptions import NotFoundError, ConflictError
from domain.models.menu_item import MenuItem
from repositories.menu_item_repository import MenuItemRepository
from services.validation import (
    SearchParams,
    parse_item_id,
    validate_menu_item_payload,
    validate_search_params,
)

logger = logging.getLogger("menuapi.menu_items")


class MenuItemService:
    """Business logic for menu item management."""

    @staticmethod
    def _ensure_unique(repo: MenuItemRepository, name: str, exclude_id: Optional[int] = None) -> None:
        if not settings.enforce_unique_names:
            return
        existing = repo.get_by_name(name, exclude_id=exclude_id)
        if existing is not None:
            logger.warning(f"Duplicate menu item name '{name}' (existing id={existing.id})")
            raise ConflictError(
                f"A menu item named '{existing.name}' already exists",
                details={"id": existing.id},
            )

    @staticmethod
    def list_items(db: Session) -> List[MenuItem]:
        """Return every menu item, newest first."""
        return MenuItemRepository(db).list_all()

    @staticmethod
    def get_item(db: Session, raw_id: Any) -> MenuItem:
        """Get one item by its path id."""
        item_id = parse_item_id(raw_id)
        item = MenuItemRepository(db).get_by_id(item_id)
        if item is None:
            raise NotFoundError("Menu item not found", details={"id": item_id})
        return item

    @staticmethod
    def create_item(db: Session, payload: Any) -> MenuItem:
        """
        Create a menu item from a decoded JSON body.

        Raises:
            ServiceValidationError: missing or invalid name
            ConflictError: name already used (when uniqueness is enforced)
        """
        name = validate_menu_item_payload(payload)
        repo = MenuItemRepository(db)
        MenuItemService._ensure_unique(repo, name)

        item = repo.create(name)
        logger.info(f"Created menu item {item.id} '{item.name}'")
        return item

    @staticmethod
    def update_item(db: Session, raw_id: Any, payload: Any) -> MenuItem:
        """
        Replace the name of an existing menu item.

        The id is checked first, then the body, then existence and duplicates.
        """
        item_id = parse_item_id(raw_id)
        name = validate_menu_item_payload(payload)
        repo = MenuItemRepository(db)

        if not repo.exists(item_id):
            raise NotFoundError("Menu item not found", details={"id": item_id})
        MenuItemService._ensure_unique(repo, name, exclude_id=item_id)

        item = repo.update(item_id, name)
        if item is None:
            raise NotFoundError("Menu item not found", details={"id": item_id})
        logger.info(f"Updated menu item {item.id} -> '{item.name}'")
        return item

    @staticmethod
    def delete_item(db: Session, raw_id: Any) -> MenuItem:
        """Delete a menu item and return the removed record."""
        item_id = parse_item_id(raw_id)
        item = MenuItemRepository(db).delete(item_id)
        if item is None:
            raise NotFoundError("Menu item not found", details={"id": item_id})
        logger.info(f"Deleted menu item {item_id}")
        return item

    @staticmethod
    def search_items(
        db: Session, query: Optional[str], limit: Any = None, offset: Any = None
    ) -> Tuple[SearchParams, List[MenuItem], int]:
        """
        Validate search parameters and run the search.

        Returns:
            (normalized parameters, page of results, total number of matches)
        """
        params = validate_search_params(query, limit, offset)
        results, total = MenuItemRepository(db).search(
            params.query, limit=params.limit, offset=params.offset
        )
        logger.debug(
            f"Search '{params.query}' limit={params.limit} offset={params.offset}: "
            f"{len(results)}/{total}"
        )
        return params, results, total

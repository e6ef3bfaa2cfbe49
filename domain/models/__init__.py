"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    Database,
    initialize,
    get_database,
    shutdown,
)
from domain.models.menu_item import MenuItem

__all__ = [
    # Database
    "Base",
    "Database",
    "initialize",
    "get_database",
    "shutdown",
    # Menu models
    "MenuItem",
]

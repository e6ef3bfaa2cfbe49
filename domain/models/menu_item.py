"""
MenuItem model - the single record managed by the API.
"""

from sqlalchemy import Column, Integer, String, TIMESTAMP, CheckConstraint
from sqlalchemy.sql import func

from domain.models.database import Base

# Largest value the Integer primary key column can hold
MAX_ITEM_ID = 2**31 - 1


class MenuItem(Base):
    """
    A menu entry.

    ``id`` comes from an autoincrement sequence so identifiers of deleted
    rows are never handed out again. ``created_at`` is set once at insert time.
    """

    __tablename__ = "menu_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, index=True)
    created_at = Column(
        TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    )

    __table_args__ = (
        CheckConstraint("length(name) >= 2", name="ck_menu_items_name_length"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self):
        return f"<MenuItem(id={self.id}, name='{self.name}')>"

#!/usr/bin/env python3
"""
Standalone database initialization script
Creates the menu_items table on DATABASE_URL and optionally seeds sample items
"""

import argparse
import logging
import os
import sys

# Ensure we're using the right Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from sqlalchemy.exc import SQLAlchemyError

from app.config import settings
from domain.models import database as db
from repositories import MenuItemRepository

logger = logging.getLogger("menuapi.scripts.init_db")

SAMPLE_ITEMS = ["Pizza Margherita", "Lasagne", "Salade César", "Tiramisu", "Espresso"]


def seed(database: db.Database) -> int:
    """Insert the sample items that are not present yet; return how many were added"""
    created = 0
    for session in database.session():
        repo = MenuItemRepository(session)
        for name in SAMPLE_ITEMS:
            if repo.get_by_name(name) is None:
                repo.create(name)
                created += 1
    return created


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Create the menu items schema")
    parser.add_argument("--seed", action="store_true", help="Insert sample menu items")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()), format=settings.log_format
    )

    database = db.initialize()
    try:
        database.create_all()
        if args.seed:
            logger.info("Seeded %d menu items", seed(database))
    except SQLAlchemyError as e:
        logger.error(f"Database initialization failed: {e}")
        return 1
    finally:
        db.shutdown()
    return 0


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("Menu Items API Database Initialization")
    print("=" * 60 + "\n")

    exit_code = main()

    print("\n" + "=" * 60)
    print("SUCCESS! Your database is ready to use." if exit_code == 0 else "FAILED! Check the errors above.")
    print("=" * 60 + "\n")

    sys.exit(exit_code)

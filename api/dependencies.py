"""
API dependencies for dependency injection
"""

from typing import Generator
from fastapi import Request
from sqlalchemy.orm import Session

from domain.models import get_database


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Sessions come from the Database attached to the application at startup,
    falling back to the process-wide instance.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    database = getattr(request.app.state, "database", None) or get_database()
    yield from database.session()

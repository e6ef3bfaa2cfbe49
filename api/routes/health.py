"""Health check routes"""

from fastapi import APIRouter, Request
import logging

from app.config import settings
from domain.models import get_database

router = APIRouter(tags=["Health"])
logger = logging.getLogger("menuapi.api.health")


@router.get("/health-check")
def health_check(request: Request):
    """Basic health check endpoint, including a database probe"""
    database = getattr(request.app.state, "database", None)
    try:
        database = database or get_database()
        db_status = "ok" if database.health_check() else "unavailable"
    except RuntimeError:
        logger.warning("Health check called before database initialization")
        db_status = "not initialized"
    return {
        "status": "ok",
        "service": settings.app_name,
        "version": settings.app_version,
        "database": db_status,
    }

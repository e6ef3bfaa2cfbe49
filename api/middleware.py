"""
Consolidated middleware for the Menu Items API
"""

import time
import logging
from uuid import uuid4

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from api.responses import error_response
from app.exceptions import ServiceValidationError

logger = logging.getLogger("menuapi.middleware")


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all HTTP requests and responses"""

    async def dispatch(self, request: Request, call_next):
        # Generate unique request ID
        request_id = str(uuid4())
        request.state.request_id = request_id

        logger.info(
            f"Request started",
            extra={
                "request_id": request_id,
                "method": request.method,
                "url": str(request.url),
                "client": request.client.host if request.client else None,
            },
        )

        start_time = time.time()

        try:
            response: Response = await call_next(request)
            process_time = time.time() - start_time

            logger.info(
                f"Request completed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "url": str(request.url),
                    "status_code": response.status_code,
                    "process_time": f"{process_time:.4f}s",
                },
            )

            response.headers["X-Request-ID"] = request_id
            response.headers["X-Process-Time"] = f"{process_time:.4f}"

            return response

        except Exception as exc:
            process_time = time.time() - start_time
            logger.error(
                f"Request failed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "url": str(request.url),
                    "error": str(exc),
                    "process_time": f"{process_time:.4f}s",
                },
                exc_info=True,
            )
            raise


# ============================================================================
# Error Handlers
# ============================================================================


def _is_json_decode_error(exc: RequestValidationError) -> bool:
    return any(err.get("type") == "json_invalid" for err in exc.errors())


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle request parsing errors (malformed JSON, bad query/path types)"""
    if _is_json_decode_error(exc):
        logger.warning(f"Malformed JSON body on {request.url}")
        return error_response(
            status.HTTP_400_BAD_REQUEST, "Invalid JSON in request body", "INVALID_JSON"
        )

    logger.warning(f"Validation error on {request.url}: {exc.errors()}")
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "Request validation failed",
        "VALIDATION_ERROR",
        details=exc.errors(),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions"""
    logger.warning(f"HTTP {exc.status_code} on {request.url}: {exc.detail}")

    return error_response(
        exc.status_code,
        str(exc.detail),
        f"HTTP_{exc.status_code}",
        headers=getattr(exc, "headers", None),
    )


async def service_exception_handler(request: Request, exc: ServiceValidationError):
    """Handle validation, not-found and conflict errors raised by services"""
    logger.warning(f"{exc.code} on {request.url}: {exc.message}")

    return error_response(exc.http_status, exc.message, exc.code, details=exc.details)


async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    """Handle store failures; the driver message stays in the server log"""
    logger.exception(f"Database error on {request.url}: {exc}")

    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred",
        "INTERNAL_SERVER_ERROR",
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception(f"Unexpected error on {request.url}: {str(exc)}")

    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred",
        "INTERNAL_SERVER_ERROR",
    )

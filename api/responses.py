"""
Standardized API response helpers.
Every error leaves the API as ``{"success": false, "error": <message>, "type": <code>}``.
"""

from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from domain.schemas import ErrorResponse


ERROR_DESCRIPTIONS = {
    400: "Invalid input",
    404: "Menu item not found",
    409: "Duplicate menu item name",
    500: "Unexpected server or database error",
}


def error_payload(message: str, error_type: str, details: Any = None) -> dict:
    """Create a standardized error body"""
    payload = {"success": False, "error": message, "type": error_type}
    if details:
        payload["details"] = jsonable_encoder(details)
    return payload


def error_response(
    status_code: int,
    message: str,
    error_type: str,
    details: Any = None,
    headers: Optional[dict] = None,
) -> JSONResponse:
    """Create a standardized error response"""
    return JSONResponse(
        status_code=status_code,
        content=error_payload(message, error_type, details),
        headers=headers,
    )


def error_responses(*codes: int) -> dict:
    """OpenAPI ``responses=`` entries for the given status codes"""
    return {
        code: {"description": ERROR_DESCRIPTIONS[code], "model": ErrorResponse}
        for code in codes
    }

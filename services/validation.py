"""
Input validation for menu item requests.

Pure functions: they take raw request values, return normalized values, and
raise ServiceValidationError naming the violated rule. Nothing here touches
the database.
"""

import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from app.exceptions import ServiceValidationError

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
SEARCH_MIN_LENGTH = 2
SEARCH_MAX_LIMIT = 100
SEARCH_DEFAULT_LIMIT = 20

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class SearchParams:
    query: str
    limit: int
    offset: int


def validate_name(value: Any) -> str:
    """Return the trimmed name or raise if it is missing, not text, or out of bounds."""
    if value is None:
        raise ServiceValidationError("Name is required", details={"field": "name"})
    if not isinstance(value, str):
        raise ServiceValidationError("Name must be a string", details={"field": "name"})

    name = value.strip()
    if not name:
        raise ServiceValidationError("Name is required", details={"field": "name"})
    if len(name) < NAME_MIN_LENGTH:
        raise ServiceValidationError(
            f"Name must be at least {NAME_MIN_LENGTH} characters long",
            details={"field": "name"},
        )
    if len(name) > NAME_MAX_LENGTH:
        raise ServiceValidationError(
            f"Name must be at most {NAME_MAX_LENGTH} characters long",
            details={"field": "name"},
        )
    return name


def validate_menu_item_payload(payload: Any) -> str:
    """Check a decoded JSON body for create/update and return the trimmed name."""
    if not isinstance(payload, Mapping):
        raise ServiceValidationError("Request body must be a JSON object")
    return validate_name(payload.get("name"))


def _parse_int(raw: Any) -> Optional[int]:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        text = raw.strip()
        if _INTEGER.fullmatch(text):
            return int(text)
    return None


def parse_item_id(raw: Any) -> int:
    """Parse a path id; only positive integers are accepted."""
    item_id = _parse_int(raw)
    if item_id is None or item_id <= 0:
        raise ServiceValidationError("Invalid ID", details={"field": "id", "value": str(raw)})
    return item_id


def validate_search_params(
    query: Optional[str],
    limit: Optional[Any] = None,
    offset: Optional[Any] = None,
) -> SearchParams:
    """
    Validate search query parameters.

    Args:
        query: search text, at least SEARCH_MIN_LENGTH characters once trimmed
        limit: page size, 1..SEARCH_MAX_LIMIT, SEARCH_DEFAULT_LIMIT when omitted
        offset: number of matches to skip, >= 0, 0 when omitted
    """
    if query is None or not query.strip():
        raise ServiceValidationError("Search query is required", details={"field": "q"})
    text = query.strip()
    if len(text) < SEARCH_MIN_LENGTH:
        raise ServiceValidationError(
            f"Search query must be at least {SEARCH_MIN_LENGTH} characters long",
            details={"field": "q"},
        )

    if limit is None or limit == "":
        page_size = SEARCH_DEFAULT_LIMIT
    else:
        page_size = _parse_int(limit)
        if page_size is None or page_size < 1:
            raise ServiceValidationError(
                "Limit must be a positive integer", details={"field": "limit"}
            )
        if page_size > SEARCH_MAX_LIMIT:
            raise ServiceValidationError(
                f"Limit cannot exceed {SEARCH_MAX_LIMIT}", details={"field": "limit"}
            )

    if offset is None or offset == "":
        skip = 0
    else:
        skip = _parse_int(offset)
        if skip is None or skip < 0:
            raise ServiceValidationError(
                "Offset must be a non-negative integer", details={"field": "offset"}
            )

    return SearchParams(query=text, limit=page_size, offset=skip)

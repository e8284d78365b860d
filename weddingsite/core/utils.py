"""
Utility functions for the application.
"""
from typing import Any, Dict
from datetime import datetime, timezone


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, matching what the database stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def page_offset(page: int, page_size: int) -> int:
    """Offset of a 1-based page."""
    return (page - 1) * page_size


def has_more_pages(total: int, page: int, page_size: int) -> bool:
    """Whether items exist past the given page."""
    return total > page_offset(page, page_size) + page_size


def format_error(message: str, details: Any = None) -> Dict[str, Any]:
    """Format error response."""
    response = {"error": message}
    if details:
        response["details"] = details
    return response

"""Mapper functions to convert API payloads into domain entities.

This layer isolates the JSON shape of the remote API, making it easy to
change when the server's response format changes.
"""

import math
from datetime import datetime
from typing import Any, Optional

from dateutil import parser as date_parser

from librarydash.domain import entities as domain
from librarydash.domain.errors import MalformedResponseError


def _count(data: dict, key: str) -> int:
    value = data.get(key, 0)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise MalformedResponseError(f"Field '{key}' is not a number: {value!r}")
    if isinstance(value, float) and not math.isfinite(value):
        raise MalformedResponseError(f"Field '{key}' is not a finite number: {value!r}")
    try:
        return int(value)
    except (ValueError, OverflowError) as e:
        raise MalformedResponseError(f"Field '{key}' is not a number: {value!r}") from e


def _timestamp(value: Any) -> Optional[datetime]:
    if not value:
        return None
    try:
        return date_parser.isoparse(str(value))
    except ValueError as e:
        raise MalformedResponseError(f"Invalid timestamp: {value!r}") from e


def _require_mapping(data: Any, what: str) -> dict:
    if not isinstance(data, dict):
        raise MalformedResponseError(f"Expected {what} object, got {type(data).__name__}")
    return data


def stats_from_payload(data: Any) -> domain.DashboardStats:
    """Convert a dashboard summary payload to a DashboardStats entity."""
    data = _require_mapping(data, "dashboard summary")
    return domain.DashboardStats(
        total_books=_count(data, "total_books"),
        available_books=_count(data, "available_books"),
        active_borrowers=_count(data, "active_borrowers"),
        total_transactions=_count(data, "total_transactions"),
    )


def quick_stats_from_payload(data: Any) -> domain.QuickStats:
    """Convert a today's-activity payload to a QuickStats entity."""
    data = _require_mapping(data, "quick stats")
    return domain.QuickStats(
        books_added_today=_count(data, "books_added_today"),
        books_borrowed_today=_count(data, "books_borrowed_today"),
        books_returned_today=_count(data, "books_returned_today"),
    )


def category_from_payload(data: Any) -> domain.Category:
    """Convert a category payload to a Category entity."""
    data = _require_mapping(data, "category")
    try:
        category_id = int(data["category_id"])
    except (KeyError, TypeError, ValueError) as e:
        raise MalformedResponseError(f"Invalid category payload: {data!r}") from e

    name = data.get("category_name")
    if not isinstance(name, str) or not name.strip():
        raise MalformedResponseError(f"Category {category_id} has no name: {name!r}")

    return domain.Category(
        category_id=category_id,
        category_name=name,
        category_description=data.get("category_description") or "",
        who_edited=data.get("who_edited") or None,
        created_at=_timestamp(data.get("created_at")),
        updated_at=_timestamp(data.get("updated_at")),
    )


def categories_from_payload(data: Any) -> list[domain.Category]:
    """Convert a category list payload, preserving server order.

    Raises:
        MalformedResponseError: If the payload is not a list or repeats an ID
    """
    if not isinstance(data, list):
        raise MalformedResponseError(f"Expected category list, got {type(data).__name__}")

    categories = [category_from_payload(item) for item in data]
    seen: set[int] = set()
    for category in categories:
        if category.category_id in seen:
            raise MalformedResponseError(f"Duplicate category_id {category.category_id}")
        seen.add(category.category_id)
    return categories


def response_from_body(body: Any, status_code: Optional[int] = None) -> domain.ApiResponse:
    """Convert a decoded JSON body to an ApiResponse envelope.

    Bodies without a ``success`` key are judged by the HTTP status code.
    """
    if not isinstance(body, dict):
        return domain.ApiResponse(
            success=False,
            message=None,
            status_code=status_code,
        )

    if "success" in body:
        success = body["success"] is True
    else:
        success = status_code is not None and 200 <= status_code < 300

    errors: dict[str, list[str]] = {}
    raw_errors = body.get("errors")
    if isinstance(raw_errors, dict):
        for field_name, messages in raw_errors.items():
            if isinstance(messages, str):
                errors[str(field_name)] = [messages]
            elif isinstance(messages, list):
                errors[str(field_name)] = [str(m) for m in messages]

    message = body.get("message")
    return domain.ApiResponse(
        success=success,
        data=body.get("data"),
        message=str(message) if message else None,
        errors=errors,
        status_code=status_code,
    )

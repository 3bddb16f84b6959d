"""Domain model entities for librarydash.

These are pure data classes representing the dashboard's business concepts,
independent of the wire format of the remote API. The mappers in
``librarydash.api.mappers`` are the only place that knows the JSON shape.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Optional


class Resource(str, Enum):
    """Independently fetched dashboard resources."""

    STATS = "stats"
    CATEGORIES = "categories"
    QUICK_STATS = "quick_stats"


class FormMode(str, Enum):
    """Edit-mode states of the category form."""

    IDLE = "idle"
    CREATING = "creating"
    EDITING = "editing"


@dataclass(frozen=True)
class Category:
    """Category domain entity."""

    category_id: int
    category_name: str
    category_description: str = ""
    who_edited: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class DashboardStats:
    """Aggregate library summary."""

    total_books: int = 0
    available_books: int = 0
    active_borrowers: int = 0
    total_transactions: int = 0


@dataclass(frozen=True)
class QuickStats:
    """Same-day activity counters."""

    books_added_today: int = 0
    books_borrowed_today: int = 0
    books_returned_today: int = 0


FORM_FIELDS = ("category_name", "category_description", "who_edited")


@dataclass(frozen=True)
class FormState:
    """Transient state of the category create/edit form.

    ``editing`` references the category being edited, or None when the form
    is used to create a new category.
    """

    category_name: str = ""
    category_description: str = ""
    who_edited: str = ""
    editing: Optional[Category] = None

    @classmethod
    def from_category(cls, category: Category) -> "FormState":
        """Build a form pre-filled from an existing category."""
        return cls(
            category_name=category.category_name,
            category_description=category.category_description or "",
            who_edited=category.who_edited or "",
            editing=category,
        )

    def with_field(self, name: str, value: str) -> "FormState":
        """Return a copy of the form with one field changed.

        Raises:
            ValueError: If name is not a form field
        """
        if name not in FORM_FIELDS:
            raise ValueError(f"Unknown form field '{name}'")
        return replace(self, **{name: value})

    def payload(self, editor_label: str) -> dict[str, str]:
        """Return the request body, substituting editor_label for a blank editor."""
        return {
            "category_name": self.category_name,
            "category_description": self.category_description,
            "who_edited": self.who_edited or editor_label,
        }


@dataclass(frozen=True)
class DerivedMetrics:
    """Metrics derived from DashboardStats for display."""

    availability_percentage: int
    usage_rate: int
    borrowed_books: int
    availability_label: str
    stock_label: str


@dataclass(frozen=True)
class ApiResponse:
    """Parsed response envelope returned by the remote API."""

    success: bool
    data: Any = None
    message: Optional[str] = None
    errors: dict[str, list[str]] = field(default_factory=dict)
    status_code: Optional[int] = None

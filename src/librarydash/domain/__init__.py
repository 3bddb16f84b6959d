"""Domain layer for librarydash application.

Services are imported from their modules directly (e.g.
``librarydash.domain.category``) so that the API layer can import the
entities without a circular import through this package.
"""

from librarydash.domain.entities import (
    Category,
    DashboardStats,
    DerivedMetrics,
    FormMode,
    FormState,
    QuickStats,
    Resource,
)

__all__ = [
    "Category",
    "DashboardStats",
    "DerivedMetrics",
    "FormMode",
    "FormState",
    "QuickStats",
    "Resource",
]

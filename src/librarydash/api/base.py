"""Abstract remote API interface."""

from abc import ABC, abstractmethod
from typing import Any

from librarydash.domain.entities import ApiResponse
from librarydash.domain.errors import ApplicationError, ValidationError

SUMMARY_PATH = "/dashboard/summary"
CATEGORIES_PATH = "/categories"
CREATE_CATEGORY_PATH = "/create/categories"
UPDATE_CATEGORY_PATH = "/update/categories/{category_id}"
ARCHIVE_CATEGORY_PATH = "/archive/categories/{category_id}"
TODAY_STATS_PATH = "/dashboard/today"


class ApiClient(ABC):
    """Abstract networking collaborator for the library dashboard API.

    Every method returns the parsed response envelope, including
    ``success: false`` answers. Only failures that produce no envelope at
    all (network errors, timeouts, non-JSON bodies) raise TransportError.
    """

    @abstractmethod
    def get_dashboard_summary(self) -> ApiResponse:
        """Fetch the aggregate library summary."""
        pass

    @abstractmethod
    def list_categories(self) -> ApiResponse:
        """Fetch all active categories."""
        pass

    @abstractmethod
    def create_category(self, payload: dict[str, str]) -> ApiResponse:
        """Create a category from form fields."""
        pass

    @abstractmethod
    def update_category(self, category_id: int, payload: dict[str, str]) -> ApiResponse:
        """Update an existing category."""
        pass

    @abstractmethod
    def archive_category(self, category_id: int) -> ApiResponse:
        """Soft-delete a category."""
        pass

    @abstractmethod
    def get_today_stats(self, path: str = TODAY_STATS_PATH) -> ApiResponse:
        """Fetch same-day activity counters."""
        pass

    def close(self) -> None:
        """Release any held connections."""
        pass


def ensure_success(response: ApiResponse) -> Any:
    """Return the response data, raising if the API reported a failure.

    Raises:
        ValidationError: If the response carries field-level errors
        ApplicationError: For any other ``success: false`` response
    """
    if response.success:
        return response.data
    if response.errors:
        raise ValidationError(
            response.errors, message=response.message, status_code=response.status_code
        )
    raise ApplicationError(response.message, status_code=response.status_code)

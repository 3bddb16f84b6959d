"""Shared domain error messages and error types."""

from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class RemoteError(DomainError):
    """A call to the remote API did not succeed."""


class TransportError(RemoteError):
    """Network failure, timeout, or an unreadable response body."""


class ApplicationError(RemoteError):
    """The API answered with ``success: false``."""

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message or "Request failed")
        self.message = message
        self.status_code = status_code


class ValidationError(ApplicationError):
    """The API rejected one or more fields."""

    def __init__(
        self,
        field_errors: dict[str, list[str]],
        message: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message, status_code)
        self.field_errors = field_errors

    def first_message(self) -> str:
        """Return the first message of the first invalid field."""
        for messages in self.field_errors.values():
            return (messages[0] if messages else "") or VALIDATION_FAILED
        return self.message or VALIDATION_FAILED


class MalformedResponseError(RemoteError):
    """A response payload could not be mapped to domain entities."""


class InvalidStateError(DomainError):
    """Form operation is not valid in the current edit mode."""


FETCH_STATS_FAILED = "Failed to fetch dashboard data"
FETCH_CATEGORIES_FAILED = "Failed to fetch categories"
CREATE_CATEGORY_FAILED = "Failed to create category"
UPDATE_CATEGORY_FAILED = "Failed to update category"
DELETE_CATEGORY_FAILED = "Failed to delete category"
VALIDATION_FAILED = "Validation failed"
CATEGORY_NAME_REQUIRED = "Category name is required"
CONFIRM_ARCHIVE = "Are you sure you want to delete this category?"


def describe_failure(error: Exception, default: str) -> str:
    """Collapse any remote failure to a single human-readable message.

    Field-level validation messages win over the response message, which
    wins over the operation's default message.
    """
    if isinstance(error, ValidationError):
        return error.first_message()
    if isinstance(error, ApplicationError) and error.message:
        return error.message
    return default


def category_not_found(category_id: int) -> str:
    """Return message for a category missing from the loaded list."""
    return f"Category {category_id} not found"


def submit_without_form() -> str:
    """Return message for submitting while the form is hidden."""
    return "No category form is open"

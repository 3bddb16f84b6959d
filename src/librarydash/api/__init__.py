"""Remote API layer for librarydash."""

from librarydash.api.base import ApiClient, ensure_success
from librarydash.api.factories import create_http_client

__all__ = ["ApiClient", "ensure_success", "create_http_client"]

"""API client factory functions."""

from typing import Optional

from librarydash.api.http_client import RequestsApiClient
from librarydash.config import DashboardConfig


def create_http_client(config: Optional[DashboardConfig] = None) -> RequestsApiClient:
    """Create an HTTP API client.

    Args:
        config: Configuration to use. If None, reads LIBRARYDASH_* environment
            variables.

    Returns:
        RequestsApiClient pointed at the configured API URL
    """
    if config is None:
        config = DashboardConfig.from_env()

    return RequestsApiClient(config.api_url, timeout=config.timeout)

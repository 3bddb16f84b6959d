"""HTTP implementation of the dashboard API client."""

from typing import Any, Optional

import requests

from librarydash.api.base import (
    ApiClient,
    ARCHIVE_CATEGORY_PATH,
    CATEGORIES_PATH,
    CREATE_CATEGORY_PATH,
    SUMMARY_PATH,
    TODAY_STATS_PATH,
    UPDATE_CATEGORY_PATH,
)
from librarydash.api.mappers import response_from_body
from librarydash.domain.entities import ApiResponse
from librarydash.domain.errors import TransportError
from librarydash.logger import get_logger

logger = get_logger()

DEFAULT_TIMEOUT = 10.0


class RequestsApiClient(ApiClient):
    """API client backed by a ``requests.Session``."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the client.

        Args:
            base_url: API root, e.g. "http://localhost:8000/api"
            timeout: Per-request timeout in seconds
            session: Optional session to reuse (a new one is created if None)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Accept": "application/json",
                "Content-Type": "application/json",
            }
        )

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _request(self, method: str, path: str, body: Optional[dict[str, Any]] = None) -> ApiResponse:
        url = self._url(path)
        logger.debug(f"{method} {url}")
        try:
            resp = self.session.request(method, url, json=body, timeout=self.timeout)
        except requests.Timeout as e:
            raise TransportError(f"{method} {path} timed out after {self.timeout}s") from e
        except requests.RequestException as e:
            raise TransportError(f"{method} {path} failed: {e}") from e

        try:
            payload = resp.json()
        except ValueError as e:
            raise TransportError(
                f"{method} {path} returned a non-JSON body (HTTP {resp.status_code})"
            ) from e

        response = response_from_body(payload, status_code=resp.status_code)
        if not response.success:
            logger.debug(
                f"{method} {path} unsuccessful (HTTP {resp.status_code}): "
                f"{response.message or response.errors}"
            )
        return response

    def get_dashboard_summary(self) -> ApiResponse:
        return self._request("GET", SUMMARY_PATH)

    def list_categories(self) -> ApiResponse:
        return self._request("GET", CATEGORIES_PATH)

    def create_category(self, payload: dict[str, str]) -> ApiResponse:
        return self._request("POST", CREATE_CATEGORY_PATH, payload)

    def update_category(self, category_id: int, payload: dict[str, str]) -> ApiResponse:
        return self._request(
            "POST", UPDATE_CATEGORY_PATH.format(category_id=category_id), payload
        )

    def archive_category(self, category_id: int) -> ApiResponse:
        return self._request("POST", ARCHIVE_CATEGORY_PATH.format(category_id=category_id))

    def get_today_stats(self, path: str = TODAY_STATS_PATH) -> ApiResponse:
        return self._request("GET", path)

    def close(self) -> None:
        self.session.close()

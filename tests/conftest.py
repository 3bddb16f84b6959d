"""Shared pytest fixtures for librarydash tests."""

import threading
from typing import Any, Callable

import pytest

from librarydash.api.base import ApiClient, TODAY_STATS_PATH
from librarydash.config import DashboardConfig
from librarydash.domain.category import CategoryStore
from librarydash.domain.dashboard import Dashboard
from librarydash.domain.entities import ApiResponse
from librarydash.domain.error_board import ErrorBoard
from librarydash.domain.stats import StatsFetcher


class FakeApiClient(ApiClient):
    """In-memory stand-in for the dashboard API.

    Behaves like a small server by default. ``script(endpoint, *items)``
    queues responses (ApiResponse objects or exceptions to raise) that are
    served before falling back to the default behavior.
    """

    def __init__(self):
        self.calls: list[tuple[str, Any]] = []
        self.summary = {
            "total_books": 100,
            "available_books": 45,
            "active_borrowers": 12,
            "total_transactions": 230,
        }
        self.today = {
            "books_added_today": 7,
            "books_borrowed_today": 4,
            "books_returned_today": 1,
        }
        self.category_rows: list[dict] = [
            {
                "category_id": 1,
                "category_name": "Fiction",
                "category_description": "Novels and short stories",
                "who_edited": "Admin",
                "created_at": "2024-01-15T10:00:00Z",
                "updated_at": "2024-01-15T10:00:00Z",
            },
            {
                "category_id": 2,
                "category_name": "History",
                "category_description": "",
                "who_edited": None,
                "created_at": "2024-02-01T09:30:00Z",
                "updated_at": "2024-03-05T16:45:00Z",
            },
        ]
        self.next_id = 3
        self.closed = False
        self._scripted: dict[str, list[Any]] = {}
        self._lock = threading.Lock()

    def script(self, endpoint: str, *items: Any) -> None:
        self._scripted.setdefault(endpoint, []).extend(items)

    def count(self, endpoint: str) -> int:
        return sum(1 for name, _ in self.calls if name == endpoint)

    def _serve(self, endpoint: str, args: Any, default: Callable[[], ApiResponse]) -> ApiResponse:
        with self._lock:
            self.calls.append((endpoint, args))
            queue = self._scripted.get(endpoint)
            item = queue.pop(0) if queue else None
        if isinstance(item, Exception):
            raise item
        if item is not None:
            return item
        return default()

    def get_dashboard_summary(self) -> ApiResponse:
        return self._serve(
            "get_dashboard_summary", None, lambda: ApiResponse(True, dict(self.summary))
        )

    def list_categories(self) -> ApiResponse:
        return self._serve(
            "list_categories",
            None,
            lambda: ApiResponse(True, [dict(row) for row in self.category_rows]),
        )

    def create_category(self, payload: dict[str, str]) -> ApiResponse:
        def create():
            row = dict(payload, category_id=self.next_id, created_at="2024-04-01T12:00:00Z")
            row["updated_at"] = row["created_at"]
            self.next_id += 1
            self.category_rows.append(row)
            return ApiResponse(True, dict(row), message="Category created")

        return self._serve("create_category", dict(payload), create)

    def update_category(self, category_id: int, payload: dict[str, str]) -> ApiResponse:
        def update():
            for row in self.category_rows:
                if row["category_id"] == category_id:
                    row.update(payload)
                    return ApiResponse(True, dict(row))
            return ApiResponse(False, message="Category not found", status_code=404)

        return self._serve("update_category", (category_id, dict(payload)), update)

    def archive_category(self, category_id: int) -> ApiResponse:
        def archive():
            self.category_rows = [
                row for row in self.category_rows if row["category_id"] != category_id
            ]
            return ApiResponse(True)

        return self._serve("archive_category", category_id, archive)

    def get_today_stats(self, path: str = TODAY_STATS_PATH) -> ApiResponse:
        return self._serve("get_today_stats", path, lambda: ApiResponse(True, dict(self.today)))

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_api():
    """Create a fake API client with two categories."""
    return FakeApiClient()


@pytest.fixture
def error_board():
    """Create an empty error board."""
    return ErrorBoard()


@pytest.fixture
def stats_fetcher(fake_api, error_board):
    """Create a StatsFetcher against the fake API."""
    return StatsFetcher(fake_api, errors=error_board)


@pytest.fixture
def category_store(fake_api, stats_fetcher, error_board):
    """Create a CategoryStore that runs refreshes inline."""
    return CategoryStore(fake_api, stats_fetcher, errors=error_board)


@pytest.fixture
def dashboard(fake_api):
    """Create a Dashboard against the fake API."""
    with Dashboard(fake_api) as dash:
        yield dash


@pytest.fixture
def test_config():
    """Create a configuration that does not depend on the environment."""
    return DashboardConfig(api_url="http://library.test/api", timeout=2.0)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()

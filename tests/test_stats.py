"""Tests for the dashboard summary and today's activity fetchers."""

import threading

from librarydash.domain.entities import ApiResponse, DashboardStats, QuickStats, Resource
from librarydash.domain.errors import TransportError
from librarydash.domain.quick_stats import (
    ApiQuickStatsSource,
    DEFAULT_PLACEHOLDER,
    PlaceholderQuickStatsSource,
    QuickStatsFetcher,
    QuickStatsSource,
)
from librarydash.domain.stats import StatsFetcher


class TestStatsFetcher:
    """Tests for StatsFetcher."""

    def test_fetch_replaces_stats(self, stats_fetcher):
        stats = stats_fetcher.fetch()

        assert stats == DashboardStats(100, 45, 12, 230)
        assert stats_fetcher.stats == stats
        assert stats_fetcher.error is None

    def test_transport_failure_keeps_previous_stats(self, stats_fetcher, fake_api):
        stats_fetcher.fetch()
        fake_api.script("get_dashboard_summary", TransportError("connection refused"))

        assert stats_fetcher.fetch() is None
        assert stats_fetcher.stats == DashboardStats(100, 45, 12, 230)
        assert stats_fetcher.error == "Failed to fetch dashboard data"

    def test_unsuccessful_response_is_a_failure(self, stats_fetcher, fake_api):
        fake_api.script("get_dashboard_summary", ApiResponse(False, message="Nope"))

        assert stats_fetcher.fetch() is None
        assert stats_fetcher.stats == DashboardStats()
        assert stats_fetcher.error == "Failed to fetch dashboard data"

    def test_malformed_payload_is_a_failure(self, stats_fetcher, fake_api):
        fake_api.script("get_dashboard_summary", ApiResponse(True, "not an object"))

        assert stats_fetcher.fetch() is None
        assert stats_fetcher.error == "Failed to fetch dashboard data"

    def test_success_does_not_clear_error(self, stats_fetcher, fake_api):
        fake_api.script("get_dashboard_summary", TransportError("down"))
        stats_fetcher.fetch()

        stats_fetcher.fetch()

        assert stats_fetcher.stats.total_books == 100
        assert stats_fetcher.error == "Failed to fetch dashboard data"

    def test_no_retry(self, stats_fetcher, fake_api):
        fake_api.script("get_dashboard_summary", TransportError("down"))
        stats_fetcher.fetch()

        assert fake_api.count("get_dashboard_summary") == 1

    def test_non_finite_count_keeps_previous_stats(self, stats_fetcher, fake_api):
        stats_fetcher.fetch()
        fake_api.script(
            "get_dashboard_summary", ApiResponse(True, {"total_books": float("inf")})
        )

        assert stats_fetcher.fetch() is None
        assert stats_fetcher.stats.total_books == 100
        assert stats_fetcher.error == "Failed to fetch dashboard data"

    def test_stale_response_does_not_overwrite_newer(self, fake_api):
        """A slow first request finishing last must not win."""
        release_first = threading.Event()
        first_started = threading.Event()
        responses = [
            {"total_books": 1, "available_books": 1},
            {"total_books": 2, "available_books": 2},
        ]

        class SlowFirstApi(type(fake_api)):
            def get_dashboard_summary(self):
                body = responses.pop(0)
                if body["total_books"] == 1:
                    first_started.set()
                    release_first.wait(timeout=5)
                return ApiResponse(True, body)

        fetcher = StatsFetcher(SlowFirstApi())
        slow = threading.Thread(target=fetcher.fetch)
        slow.start()
        assert first_started.wait(timeout=5)

        assert fetcher.fetch().total_books == 2
        release_first.set()
        slow.join(timeout=5)

        assert fetcher.stats.total_books == 2

    def test_stale_failure_is_ignored(self, fake_api):
        release_first = threading.Event()
        first_started = threading.Event()
        attempts = []

        class SlowFailingApi(type(fake_api)):
            def get_dashboard_summary(self):
                attempts.append(1)
                if len(attempts) == 1:
                    first_started.set()
                    release_first.wait(timeout=5)
                    raise TransportError("timed out")
                return ApiResponse(True, {"total_books": 3})

        fetcher = StatsFetcher(SlowFailingApi())
        slow = threading.Thread(target=fetcher.fetch)
        slow.start()
        assert first_started.wait(timeout=5)

        fetcher.fetch()
        release_first.set()
        slow.join(timeout=5)

        assert fetcher.stats.total_books == 3
        assert fetcher.error is None


class TestQuickStats:
    """Tests for QuickStatsFetcher and its sources."""

    def test_placeholder_source_makes_no_call(self, fake_api):
        fetcher = QuickStatsFetcher(PlaceholderQuickStatsSource())

        assert fetcher.fetch() == DEFAULT_PLACEHOLDER
        assert fetcher.quick_stats == QuickStats(2, 5, 3)
        assert fake_api.calls == []

    def test_placeholder_counters_are_swappable(self):
        fetcher = QuickStatsFetcher(PlaceholderQuickStatsSource(QuickStats(9, 8, 7)))

        assert fetcher.fetch() == QuickStats(9, 8, 7)

    def test_api_source(self, fake_api):
        fetcher = QuickStatsFetcher(ApiQuickStatsSource(fake_api, path="/stats/today"))

        assert fetcher.fetch() == QuickStats(7, 4, 1)
        assert fake_api.calls == [("get_today_stats", "/stats/today")]

    def test_failure_keeps_counters_without_dashboard_error(self, fake_api, error_board):
        fetcher = QuickStatsFetcher(ApiQuickStatsSource(fake_api))
        fetcher.fetch()
        fake_api.script("get_today_stats", TransportError("down"))

        assert fetcher.fetch() is None
        assert fetcher.quick_stats == QuickStats(7, 4, 1)
        assert error_board.current is None

    def test_custom_source(self):
        class CountingSource(QuickStatsSource):
            def __init__(self):
                self.calls = 0

            def fetch(self):
                self.calls += 1
                return QuickStats(books_added_today=self.calls)

        fetcher = QuickStatsFetcher(CountingSource())
        fetcher.fetch()

        assert fetcher.fetch().books_added_today == 2


class TestErrorBoard:
    """Tests for the per-resource error slots."""

    def test_current_is_latest_report(self, error_board):
        error_board.report(Resource.STATS, "Failed to fetch dashboard data")
        error_board.report(Resource.CATEGORIES, "Failed to fetch categories")

        assert error_board.current == "Failed to fetch categories"
        assert error_board.get(Resource.STATS) == "Failed to fetch dashboard data"

    def test_clearing_one_slot_reveals_older_error(self, error_board):
        error_board.report(Resource.STATS, "Failed to fetch dashboard data")
        error_board.report(Resource.CATEGORIES, "Failed to fetch categories")

        error_board.clear(Resource.CATEGORIES)

        assert error_board.current == "Failed to fetch dashboard data"

    def test_clear_all(self, error_board):
        error_board.report(Resource.STATS, "a")
        error_board.report(Resource.CATEGORIES, "b")

        error_board.clear()

        assert error_board.current is None

    def test_report_replaces_slot(self, error_board):
        error_board.report(Resource.CATEGORIES, "first")
        error_board.report(Resource.CATEGORIES, "second")

        assert error_board.get(Resource.CATEGORIES) == "second"

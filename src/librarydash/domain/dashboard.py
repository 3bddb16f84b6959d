"""Dashboard composition: wires the fetchers together and mounts them."""

from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import wait as wait_for_futures
from typing import Callable, Optional

from librarydash.api.base import ApiClient
from librarydash.api.factories import create_http_client
from librarydash.config import DashboardConfig
from librarydash.domain.category import CategoryStore, DEFAULT_EDITOR_LABEL
from librarydash.domain.entities import DerivedMetrics
from librarydash.domain.error_board import ErrorBoard
from librarydash.domain.metrics import compute_metrics
from librarydash.domain.quick_stats import (
    ApiQuickStatsSource,
    PlaceholderQuickStatsSource,
    QuickStatsFetcher,
    QuickStatsSource,
)
from librarydash.domain.stats import StatsFetcher
from librarydash.logger import get_logger

logger = get_logger()


class Dashboard:
    """Admin dashboard state.

    Holds the three independently fetched resources and reduces their
    per-resource errors to the single visible ``error``. Use as a context
    manager, or call ``close()`` when done, to shut down the worker pool.
    """

    def __init__(
        self,
        api: ApiClient,
        quick_stats_source: Optional[QuickStatsSource] = None,
        confirm: Optional[Callable[[str], bool]] = None,
        editor_label: str = DEFAULT_EDITOR_LABEL,
        max_workers: int = 3,
    ):
        """Initialize dashboard.

        Args:
            api: API client instance
            quick_stats_source: Source of today's counters (placeholder if None)
            confirm: Confirmation prompt used before archiving a category
            editor_label: Editor name sent when the form's editor is blank
            max_workers: Size of the worker pool used for fetches
        """
        self.api = api
        self.errors = ErrorBoard()
        self.executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="librarydash"
        )

        self.stats = StatsFetcher(api, errors=self.errors)
        store_options = {"confirm": confirm} if confirm is not None else {}
        self.categories = CategoryStore(
            api,
            self.stats,
            errors=self.errors,
            editor_label=editor_label,
            executor=self.executor,
            **store_options,
        )
        self.quick_stats = QuickStatsFetcher(
            quick_stats_source or PlaceholderQuickStatsSource()
        )

    @classmethod
    def from_config(
        cls,
        config: DashboardConfig,
        api: Optional[ApiClient] = None,
        confirm: Optional[Callable[[str], bool]] = None,
    ) -> "Dashboard":
        """Build a dashboard from configuration.

        Args:
            config: Application configuration
            api: API client to use (an HTTP client for config.api_url if None)
            confirm: Confirmation prompt used before archiving a category
        """
        if api is None:
            api = create_http_client(config)

        source: QuickStatsSource
        if config.quick_stats_source == "api":
            source = ApiQuickStatsSource(api, path=config.quick_stats_path)
        else:
            source = PlaceholderQuickStatsSource()

        return cls(
            api,
            quick_stats_source=source,
            confirm=confirm,
            editor_label=config.editor_label,
        )

    def __enter__(self) -> "Dashboard":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def error(self) -> Optional[str]:
        """The single visible error message, if any."""
        return self.errors.current

    @property
    def is_loading(self) -> bool:
        """True while a category create/update is in flight."""
        return self.categories.is_submitting

    @property
    def metrics(self) -> DerivedMetrics:
        """Derived metrics for the current summary."""
        return compute_metrics(self.stats.stats)

    def mount(self) -> list[Future]:
        """Start the initial fetches concurrently.

        The three fetches have no ordering between them and each updates
        only its own resource when it completes.

        Returns:
            Futures for the summary, category and quick-stats fetches
        """
        logger.debug("Mounting dashboard")
        return [
            self.executor.submit(self.stats.fetch),
            self.executor.submit(self.categories.list),
            self.executor.submit(self.quick_stats.fetch),
        ]

    def wait(self, futures: list[Future], timeout: Optional[float] = None) -> bool:
        """Block until futures complete.

        Returns:
            True if every future finished within timeout
        """
        done, not_done = wait_for_futures(futures, timeout=timeout)
        for future in done:
            # Fetchers record remote failures themselves; re-raise anything else.
            future.result()
        return not not_done

    def wait_for_refreshes(self, timeout: Optional[float] = None) -> bool:
        """Block until the refreshes triggered by the last category write finish."""
        return self.wait(self.categories.pending_refreshes, timeout=timeout)

    def close(self) -> None:
        """Shut down the worker pool and the API client."""
        self.executor.shutdown(wait=True)
        self.api.close()

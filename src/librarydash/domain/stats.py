"""Dashboard summary domain service."""

from typing import Optional

from librarydash.api.base import ApiClient, ensure_success
from librarydash.api.mappers import stats_from_payload
from librarydash.domain.entities import DashboardStats, Resource
from librarydash.domain.error_board import ErrorBoard
from librarydash.domain.errors import FETCH_STATS_FAILED, RemoteError
from librarydash.domain.resource import ResourceSlot
from librarydash.logger import get_logger

logger = get_logger()


class StatsFetcher:
    """Fetches and holds the aggregate library summary."""

    def __init__(self, api: ApiClient, errors: Optional[ErrorBoard] = None):
        """Initialize stats fetcher.

        Args:
            api: API client instance
            errors: Shared error board (a private one is created if None)
        """
        self.api = api
        self.errors = errors or ErrorBoard()
        self._slot: ResourceSlot[DashboardStats] = ResourceSlot(DashboardStats())

    @property
    def stats(self) -> DashboardStats:
        """The last successfully fetched summary."""
        return self._slot.value

    @property
    def error(self) -> Optional[str]:
        return self.errors.get(Resource.STATS)

    def fetch(self) -> Optional[DashboardStats]:
        """Fetch the dashboard summary and replace the current value.

        Returns:
            The new summary, or None if the fetch failed or was superseded
            by a newer request. On failure the previous summary is kept.
        """
        ticket = self._slot.begin()
        try:
            stats = stats_from_payload(ensure_success(self.api.get_dashboard_summary()))
        except RemoteError as e:
            if self._slot.settle(ticket):
                logger.warning(f"Error fetching dashboard summary: {e}")
                self.errors.report(Resource.STATS, FETCH_STATS_FAILED)
            return None

        if not self._slot.accept(ticket, stats):
            logger.debug(f"Discarded stale dashboard summary (request {ticket})")
            return None
        return stats

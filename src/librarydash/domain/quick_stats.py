"""Today's activity counters."""

from abc import ABC, abstractmethod
from typing import Optional

from librarydash.api.base import ApiClient, TODAY_STATS_PATH, ensure_success
from librarydash.api.mappers import quick_stats_from_payload
from librarydash.domain.entities import QuickStats
from librarydash.domain.errors import RemoteError
from librarydash.domain.resource import ResourceSlot
from librarydash.logger import get_logger

logger = get_logger()

# Stand-in counters until the server exposes real same-day activity.
DEFAULT_PLACEHOLDER = QuickStats(
    books_added_today=2,
    books_borrowed_today=5,
    books_returned_today=3,
)


class QuickStatsSource(ABC):
    """Supplies same-day activity counters."""

    @abstractmethod
    def fetch(self) -> QuickStats:
        """Return today's counters.

        Raises:
            RemoteError: If the counters could not be obtained
        """
        pass


class PlaceholderQuickStatsSource(QuickStatsSource):
    """Returns a fixed set of counters without any remote call."""

    def __init__(self, counters: QuickStats = DEFAULT_PLACEHOLDER):
        self.counters = counters

    def fetch(self) -> QuickStats:
        return self.counters


class ApiQuickStatsSource(QuickStatsSource):
    """Reads today's counters from the API."""

    def __init__(self, api: ApiClient, path: str = TODAY_STATS_PATH):
        self.api = api
        self.path = path

    def fetch(self) -> QuickStats:
        return quick_stats_from_payload(ensure_success(self.api.get_today_stats(self.path)))


class QuickStatsFetcher:
    """Fetches and holds today's activity counters."""

    def __init__(self, source: QuickStatsSource):
        self.source = source
        self._slot: ResourceSlot[QuickStats] = ResourceSlot(QuickStats())

    @property
    def quick_stats(self) -> QuickStats:
        return self._slot.value

    def fetch(self) -> Optional[QuickStats]:
        """Fetch counters from the source.

        A failure is logged and keeps the previous counters; it is not shown
        as a dashboard error.
        """
        ticket = self._slot.begin()
        try:
            counters = self.source.fetch()
        except RemoteError as e:
            if self._slot.settle(ticket):
                logger.warning(f"Error fetching quick stats: {e}")
            return None

        if not self._slot.accept(ticket, counters):
            return None
        return counters

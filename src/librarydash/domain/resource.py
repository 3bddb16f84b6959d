"""Versioned holder for a remotely fetched value."""

import threading
from typing import Generic, TypeVar

T = TypeVar("T")


class ResourceSlot(Generic[T]):
    """Current value of one resource plus a request-id guard.

    Every fetch takes a ticket from ``begin()`` before issuing its request.
    ``accept()`` only applies results whose ticket is newer than the last
    applied one, so a slow response can never overwrite a newer result.
    """

    def __init__(self, initial: T):
        self._lock = threading.Lock()
        self._value = initial
        self._issued = 0
        self._applied = 0

    @property
    def value(self) -> T:
        with self._lock:
            return self._value

    def begin(self) -> int:
        """Reserve the next request id."""
        with self._lock:
            self._issued += 1
            return self._issued

    def accept(self, ticket: int, value: T) -> bool:
        """Apply value for ticket unless it is stale.

        Returns:
            True if the value was applied
        """
        with self._lock:
            if ticket <= self._applied:
                return False
            self._applied = ticket
            self._value = value
            return True

    def settle(self, ticket: int) -> bool:
        """Mark a failed request as the latest outcome without changing the value.

        Returns:
            False if the failure is stale and should be ignored
        """
        with self._lock:
            if ticket <= self._applied:
                return False
            self._applied = ticket
            return True

"""Per-resource error slots reduced to a single visible error."""

import itertools
import threading
from typing import Optional

from librarydash.domain.entities import Resource


class ErrorBoard:
    """Holds one error message per resource.

    Each resource records failures in its own slot. The presentation layer
    shows only ``current``: the most recently recorded message that has not
    been cleared.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._counter = itertools.count(1)
        self._slots: dict[Resource, tuple[int, str]] = {}

    def report(self, resource: Resource, message: str) -> None:
        """Record an error message for a resource."""
        with self._lock:
            self._slots[resource] = (next(self._counter), message)

    def clear(self, resource: Optional[Resource] = None) -> None:
        """Clear one resource's slot, or every slot when resource is None."""
        with self._lock:
            if resource is None:
                self._slots.clear()
            else:
                self._slots.pop(resource, None)

    def get(self, resource: Resource) -> Optional[str]:
        """Return the error recorded for a resource, if any."""
        with self._lock:
            entry = self._slots.get(resource)
        return entry[1] if entry else None

    @property
    def current(self) -> Optional[str]:
        """The single visible error: the latest message still recorded."""
        with self._lock:
            if not self._slots:
                return None
            _, message = max(self._slots.values())
        return message

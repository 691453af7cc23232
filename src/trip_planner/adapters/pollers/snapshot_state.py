"""Snapshot state for one refreshed view."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Generic, TypeVar

from trip_planner.domain.models.error_details import ErrorDetails

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class SnapshotState(Generic[T]):
    """Latest snapshot of a view plus the outcome of its last refresh.

    Once closed, late results are dropped so a dismissed view stays dismissed.
    """

    name: str
    snapshot: T | None = None
    last_update: datetime | None = None
    last_error: ErrorDetails | None = None
    api_status: str = "unknown"
    on_replace: Callable[[T], None] | None = field(default=None, repr=False)
    _closed: bool = field(default=False, repr=False)

    @property
    def closed(self) -> bool:
        return self._closed

    def replace(self, snapshot: T, updated_at: datetime) -> bool:
        """Replace the snapshot wholesale. Returns False once closed."""
        if self._closed:
            logger.debug(f"Discarding late snapshot for closed view {self.name}")
            return False
        self.snapshot = snapshot
        self.last_update = updated_at
        self.last_error = None
        self.api_status = "success"
        if self.on_replace is not None:
            self.on_replace(snapshot)
        return True

    def record_error(self, error: ErrorDetails) -> bool:
        """Keep the previous snapshot and remember why the refresh failed."""
        if self._closed:
            return False
        self.last_error = error
        self.api_status = "error"
        return True

    def close(self) -> None:
        self._closed = True

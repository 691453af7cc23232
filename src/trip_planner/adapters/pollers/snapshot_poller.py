"""Periodic poller that refreshes one view's snapshot."""

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime
from typing import Generic, TypeVar

from trip_planner.domain.contracts.poller import PollerProtocol
from trip_planner.domain.contracts.snapshot_state import (
    SnapshotStateProtocol,  # noqa: TC001 - Runtime dependency: used in __init__ signature
)
from trip_planner.domain.models.error_details import ErrorDetails

logger = logging.getLogger(__name__)

T = TypeVar("T")


def extract_error_details(error: Exception) -> ErrorDetails:
    """Extract HTTP status code and error reason from exception."""
    error_str = str(error)
    # ApiError renders as "<message> (<status>)"
    status_match = re.search(r"\((\d+)\)", error_str)
    status_code = int(status_match.group(1)) if status_match else None

    if status_code == 401:
        reason = "Unauthorized (check API key)"
    elif status_code == 429:
        reason = "Rate limit exceeded"
    elif status_code == 502:
        reason = "Bad gateway (server error)"
    elif status_code == 503:
        reason = "Service unavailable"
    elif status_code == 504:
        reason = "Gateway timeout"
    elif status_code is not None:
        reason = f"HTTP {status_code}"
    else:
        reason = "Unknown error"

    return ErrorDetails(status_code=status_code, reason=reason, message=error_str or None)


class SnapshotPoller(PollerProtocol, Generic[T]):
    """Runs ``fetch`` on a fixed timer and replaces the state with each result.

    Ticks are independent: a slow tick may still be running when the next
    one starts, and whichever settles last wins. Stopping cancels the timer
    only; ticks already in flight finish, and the state drops their results
    once it has been closed.
    """

    def __init__(
        self,
        name: str,
        fetch: Callable[[], Awaitable[T]],
        state: SnapshotStateProtocol[T],
        interval_seconds: float,
    ) -> None:
        """Initialize the poller.

        Args:
            name: View name used in log messages.
            fetch: Coroutine factory producing a complete snapshot.
            state: State receiving snapshots and errors.
            interval_seconds: Delay between ticks.
        """
        self.name = name
        self.fetch = fetch
        self.state = state
        self.interval_seconds = interval_seconds
        self._task: asyncio.Task | None = None
        self._in_flight: set[asyncio.Task] = set()

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        """Start the timer; the first tick fires immediately."""
        if self.running:
            logger.warning(f"{self.name} poller already running")
            return
        self._task = asyncio.create_task(self._timer_loop())
        logger.info(f"Started {self.name} poller ({self.interval_seconds}s interval)")

    async def stop(self) -> None:
        """Cancel the timer. In-flight ticks are left to settle."""
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                logger.debug(f"{self.name} poller timer cancelled")
            logger.info(f"Stopped {self.name} poller")
        self._task = None

    async def wait_in_flight(self) -> None:
        """Wait for ticks that were already running when the timer stopped."""
        if self._in_flight:
            await asyncio.gather(*self._in_flight, return_exceptions=True)

    async def _timer_loop(self) -> None:
        while True:
            task = asyncio.create_task(self.tick())
            self._in_flight.add(task)
            task.add_done_callback(self._in_flight.discard)
            await asyncio.sleep(self.interval_seconds)

    async def tick(self) -> None:
        """Fetch one complete snapshot and hand it to the state."""
        try:
            snapshot = await self.fetch()
        except Exception as e:
            error_details = extract_error_details(e)
            logger.error(
                f"{self.name} refresh failed: {error_details.reason} "
                f"(status: {error_details.status_code}, error: {e})"
            )
            self.state.record_error(error_details)
            return

        if self.state.replace(snapshot, datetime.now(UTC)):
            logger.debug(f"{self.name} snapshot refreshed")

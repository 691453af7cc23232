"""Multi-window trip search against the upstream journey planner."""

import asyncio
import logging
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from trip_planner.application.services.journey_deduplicator import deduplicate_journeys
from trip_planner.application.services.journey_extractors import departure_time
from trip_planner.domain.errors import NoTripsFoundError
from trip_planner.domain.models.fetch_settings import FetchSettings
from trip_planner.domain.models.journey import Journey

if TYPE_CHECKING:
    from trip_planner.domain.ports import TripRepository

logger = logging.getLogger(__name__)


def build_time_windows(now: datetime) -> list[datetime]:
    """Query time-points around ``now``.

    Every 2 hours over the trailing 6 hours up to and including now, every
    30 minutes over the next 2 hours, then every 2 hours from 3 hours ahead.
    """
    windows = [now - timedelta(hours=hours) for hours in (6, 4, 2)]
    windows.append(now)
    windows.extend(now + timedelta(minutes=minutes) for minutes in range(30, 121, 30))
    windows.extend(now + timedelta(hours=hours) for hours in range(3, 7, 2))
    return windows


class TripFetchOrchestrator:
    """Fans a trip search out over many time windows and merges the results."""

    def __init__(
        self,
        trip_repository: "TripRepository",
        settings: FetchSettings | None = None,
    ) -> None:
        """Initialize with the journey planner port and fetch settings."""
        self._trip_repository = trip_repository
        self._settings = settings or FetchSettings()

    async def fetch_trips(
        self,
        origin_id: str,
        destination_id: str,
        now: datetime | None = None,
    ) -> list[Journey]:
        """Fetch, merge and deduplicate journeys between two stops.

        A failing window counts as an empty one. If every window is empty a
        single larger query at ``now`` is tried before giving up.

        Raises:
            NoTripsFoundError: No window and no fallback query returned a journey.
        """
        now = now or datetime.now(UTC)
        windows = build_time_windows(now)
        journeys: list[Journey] = []
        failed_windows = 0

        batch_size = max(1, self._settings.batch_size)
        for start in range(0, len(windows), batch_size):
            batch = windows[start : start + batch_size]
            results = await asyncio.gather(
                *(self._query_window(origin_id, destination_id, at_time) for at_time in batch)
            )
            for result in results:
                if result is None:
                    failed_windows += 1
                else:
                    journeys.extend(result)

            if start + batch_size < len(windows):
                await asyncio.sleep(self._settings.batch_pause_seconds)

        if failed_windows:
            logger.warning(
                f"{failed_windows} of {len(windows)} time windows failed for "
                f"{origin_id} -> {destination_id}"
            )

        if not journeys:
            journeys = await self._fallback_query(origin_id, destination_id, now)

        if not journeys:
            raise NoTripsFoundError(
                "No trips found. Please check your origin and destination stations."
            )

        unique = deduplicate_journeys(journeys)
        result = [journey for journey in unique if departure_time(journey) is not None]
        logger.info(
            f"Found {len(result)} unique journeys ({len(journeys)} raw) for "
            f"{origin_id} -> {destination_id}"
        )
        return result

    async def _query_window(
        self, origin_id: str, destination_id: str, at_time: datetime
    ) -> list[Journey] | None:
        """Query one window. Returns None if the query failed."""
        try:
            return await self._trip_repository.plan_trips(
                origin_id,
                destination_id,
                at_time,
                result_count=self._settings.result_count,
            )
        except Exception as e:
            logger.warning(f"Trip query for window {at_time.isoformat()} failed: {e}")
            return None

    async def _fallback_query(
        self, origin_id: str, destination_id: str, now: datetime
    ) -> list[Journey]:
        logger.info(f"No journeys in any window, retrying {origin_id} -> {destination_id} at now")
        try:
            return await self._trip_repository.plan_trips(
                origin_id,
                destination_id,
                now,
                result_count=self._settings.fallback_result_count,
            )
        except Exception as e:
            logger.error(f"Fallback trip query failed: {e}")
            return []

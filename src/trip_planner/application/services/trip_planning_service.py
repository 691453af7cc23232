"""Trip planning use case: fetch once, re-rank on every preference change."""

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from trip_planner.application.services.best_candidate_selector import (
    select_best_journey_per_vehicle,
)
from trip_planner.application.services.trip_fetch_orchestrator import TripFetchOrchestrator
from trip_planner.application.services.trip_preference_sorter import TripPreferenceSorter
from trip_planner.domain.models.fetch_settings import FetchSettings
from trip_planner.domain.models.journey import Journey
from trip_planner.domain.models.preferences import PlannerPolicy, TripPreference

if TYPE_CHECKING:
    from trip_planner.domain.ports import StopRepository, TripRepository
    from trip_planner.domain.models.stop import Stop

logger = logging.getLogger(__name__)


class TripPlanningService:
    """Searches stops, plans journeys and ranks them by preference."""

    def __init__(
        self,
        trip_repository: "TripRepository",
        stop_repository: "StopRepository",
        fetch_settings: FetchSettings | None = None,
        policy: PlannerPolicy | None = None,
    ) -> None:
        """Initialize with the journey planner and stop finder ports."""
        self._stop_repository = stop_repository
        self._orchestrator = TripFetchOrchestrator(trip_repository, fetch_settings)
        self._sorter = TripPreferenceSorter(policy)

    async def search_stops(self, query: str) -> list["Stop"]:
        """Stops matching a query, empty for a blank query."""
        if not query.strip():
            return []
        return await self._stop_repository.search_stops(query)

    async def plan(
        self,
        origin_id: str,
        destination_id: str,
        now: datetime | None = None,
        one_per_vehicle: bool = False,
    ) -> list[Journey]:
        """Fetch the deduplicated journey set between two stops.

        With ``one_per_vehicle`` journeys on the same service run are
        collapsed to the best candidate.
        """
        journeys = await self._orchestrator.fetch_trips(origin_id, destination_id, now)
        if one_per_vehicle:
            journeys = select_best_journey_per_vehicle(journeys)
        return journeys

    def rank(
        self,
        journeys: list[Journey],
        preference: TripPreference,
        now: datetime | None = None,
    ) -> list[Journey]:
        """Apply a preference to an already fetched journey set."""
        return self._sorter.sort(journeys, preference, now)

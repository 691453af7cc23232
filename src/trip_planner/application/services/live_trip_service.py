"""Live position and trip update lookup for a single journey."""

import asyncio
import logging
from typing import TYPE_CHECKING

from trip_planner.application.services.journey_extractors import correlation_id
from trip_planner.application.services.realtime_correlator import find_trip_update, find_vehicle
from trip_planner.domain.models.journey import Journey
from trip_planner.domain.models.realtime import (
    LiveTripStatus,
    TransportMode,
    TripUpdateEntity,
    VehicleEntity,
)

if TYPE_CHECKING:
    from trip_planner.domain.ports import RealtimeFeedRepository

logger = logging.getLogger(__name__)


class LiveTripService:
    """Correlates a journey with the vehicle position and trip update feeds."""

    def __init__(
        self,
        feed_repository: "RealtimeFeedRepository",
        primary_mode: TransportMode = TransportMode.TRAIN,
        fallback_mode: TransportMode | None = TransportMode.METRO,
    ) -> None:
        """Initialize with the realtime feed port and the modes to try in order.

        Trains and metro share one identifier namespace upstream, so a miss
        under the primary mode is retried once under the fallback mode.
        """
        self._feed_repository = feed_repository
        self._primary_mode = primary_mode
        self._fallback_mode = fallback_mode

    async def find_vehicle(self, trip_id: str | None, mode: TransportMode) -> VehicleEntity | None:
        """Vehicle position for a trip identifier under one mode's feed."""
        if not trip_id:
            return None
        vehicles = await self._feed_repository.get_vehicle_positions(mode)
        return find_vehicle(trip_id, vehicles)

    async def find_trip_update(
        self, trip_id: str | None, mode: TransportMode
    ) -> TripUpdateEntity | None:
        """Trip update for a trip identifier under one mode's feed."""
        if not trip_id:
            return None
        updates = await self._feed_repository.get_trip_updates(mode)
        return find_trip_update(trip_id, updates)

    async def get_live_status(self, journey: Journey) -> LiveTripStatus:
        """Look up live data for a journey's first primary leg."""
        trip_id = correlation_id(journey)
        if not trip_id:
            return LiveTripStatus(trip_id=None, reason="no realtime trip id")

        modes = [self._primary_mode]
        if self._fallback_mode is not None and self._fallback_mode != self._primary_mode:
            modes.append(self._fallback_mode)

        for mode in modes:
            vehicle, trip_update = await asyncio.gather(
                self.find_vehicle(trip_id, mode),
                self.find_trip_update(trip_id, mode),
            )
            if vehicle is not None or trip_update is not None:
                return LiveTripStatus(
                    trip_id=trip_id, vehicle=vehicle, trip_update=trip_update, mode=mode
                )
            logger.debug(f"No live data for {trip_id} in {mode.value} feeds")

        return LiveTripStatus(trip_id=trip_id, reason="not available in real-time feeds")

"""Live vehicle positions for the map."""

import asyncio
import logging
from typing import TYPE_CHECKING

from trip_planner.domain.models.preferences import TransportFilters
from trip_planner.domain.models.realtime import VehicleEntity

if TYPE_CHECKING:
    from trip_planner.domain.ports import RealtimeFeedRepository

logger = logging.getLogger(__name__)


class LiveVehicleService:
    """Fetches vehicle positions for every enabled transport mode."""

    def __init__(self, feed_repository: "RealtimeFeedRepository") -> None:
        """Initialize with the realtime feed port."""
        self._feed_repository = feed_repository

    async def get_vehicles(self, filters: TransportFilters) -> list[VehicleEntity]:
        """All vehicles of the enabled modes, fetched concurrently."""
        modes = filters.enabled_modes()
        if not modes:
            return []

        results = await asyncio.gather(
            *(self._feed_repository.get_vehicle_positions(mode) for mode in modes)
        )
        vehicles = [vehicle for mode_vehicles in results for vehicle in mode_vehicles]
        logger.debug(f"Fetched {len(vehicles)} vehicles for {len(modes)} modes")
        return vehicles

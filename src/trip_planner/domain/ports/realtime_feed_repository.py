"""Realtime feed repository port."""

from typing import Protocol

from trip_planner.domain.models.realtime import TransportMode, TripUpdateEntity, VehicleEntity


class RealtimeFeedRepository(Protocol):
    """Port for decoded GTFS-realtime feeds.

    Implementations swallow fetch and decode failures and return an empty
    list, so callers never see an exception for a missing feed.
    """

    async def get_vehicle_positions(self, mode: TransportMode) -> list[VehicleEntity]:
        """Get live vehicle positions for a transport mode."""
        ...

    async def get_trip_updates(self, mode: TransportMode) -> list[TripUpdateEntity]:
        """Get live trip updates for a transport mode."""
        ...

"""Departure repository port."""

from typing import Protocol

from trip_planner.domain.models.departure_event import DepartureEvent


class DepartureRepository(Protocol):
    """Port for retrieving departures at a stop."""

    async def get_stop_departures(self, stop_id: str) -> list[DepartureEvent]:
        """Get upcoming departures for a stop."""
        ...

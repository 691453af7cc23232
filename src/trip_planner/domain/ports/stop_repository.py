"""Stop repository port."""

from typing import Protocol

from trip_planner.domain.models.stop import Stop


class StopRepository(Protocol):
    """Port for searching stops and stations."""

    async def search_stops(self, query: str) -> list[Stop]:
        """Search stops by name. Raises ApiError if the API is unreachable or the key is missing."""
        ...

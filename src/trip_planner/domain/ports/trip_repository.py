"""Trip repository port."""

from datetime import datetime
from typing import Protocol

from trip_planner.domain.models.journey import Journey


class TripRepository(Protocol):
    """Port for the upstream journey planner."""

    async def plan_trips(
        self,
        origin_id: str,
        destination_id: str,
        at_time: datetime,
        result_count: int = 100,
    ) -> list[Journey]:
        """Plan journeys departing from ``at_time``.

        An empty list is a legitimate answer. Raises ApiError on transport
        or authentication failures.
        """
        ...

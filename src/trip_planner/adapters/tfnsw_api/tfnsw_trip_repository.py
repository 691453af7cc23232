"""Trip repository adapter for the TfNSW trip planner ``/trip`` endpoint."""

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any
from zoneinfo import ZoneInfo

from trip_planner.adapters.tfnsw_api.constants import TRIP_PATH
from trip_planner.adapters.tfnsw_api.journey_parser import JourneyParser
from trip_planner.domain.models.journey import Journey

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from trip_planner.adapters.tfnsw_api.http_client import TfnswHttpClient


class TfnswTripRepository:
    """Plans journeys between two stops departing at a given time."""

    def __init__(
        self,
        http_client: "TfnswHttpClient",
        api_key: str | None,
        timezone: str = "Australia/Sydney",
    ) -> None:
        """Initialize the repository.

        Args:
            http_client: Client used for authenticated requests.
            api_key: Trip planner API key.
            timezone: Zone the planner interprets ``itdDate``/``itdTime`` in.
        """
        self._http_client = http_client
        self._api_key = api_key
        self._zone = ZoneInfo(timezone)

    def build_params(
        self, origin_id: str, destination_id: str, at_time: datetime, result_count: int
    ) -> dict[str, str | int]:
        """Query parameters for a departure-anchored trip request."""
        local_time = at_time.astimezone(self._zone) if at_time.tzinfo else at_time
        return {
            "depArrMacro": "dep",
            "itdDate": local_time.strftime("%Y%m%d"),
            "itdTime": local_time.strftime("%H%M"),
            "type_origin": "any",
            "name_origin": origin_id,
            "type_destination": "any",
            "name_destination": destination_id,
            "calcNumberOfTrips": result_count,
        }

    @staticmethod
    def _warn_system_errors(data: dict[str, Any]) -> None:
        messages = data.get("systemMessages") or []
        errors = [m for m in messages if isinstance(m, dict) and m.get("type") == "error"]
        if errors:
            logger.warning(f"Trip planner system messages: {errors}")

    async def plan_trips(
        self,
        origin_id: str,
        destination_id: str,
        at_time: datetime,
        result_count: int = 100,
    ) -> list[Journey]:
        """Plan journeys departing from ``at_time``.

        Raises:
            ApiError: If the key is missing or the planner answers with an error status.
        """
        params = self.build_params(origin_id, destination_id, at_time, result_count)
        data = await self._http_client.get_json(TRIP_PATH, params, self._api_key)
        if not isinstance(data, dict):
            logger.warning(f"Unexpected trip response type: {type(data).__name__}")
            return []

        self._warn_system_errors(data)
        journeys = JourneyParser.parse_journeys(data)
        logger.debug(
            f"Trip planner returned {len(journeys)} journeys for {origin_id} -> {destination_id} "
            f"at {params['itdDate']} {params['itdTime']}"
        )
        return journeys

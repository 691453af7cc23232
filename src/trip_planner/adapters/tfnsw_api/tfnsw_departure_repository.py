"""Departure repository adapter for the TfNSW ``/departure_mon`` endpoint."""

import logging
from typing import TYPE_CHECKING

from trip_planner.adapters.tfnsw_api.constants import DEPARTURE_MONITOR_PATH
from trip_planner.adapters.tfnsw_api.stop_event_parser import StopEventParser
from trip_planner.domain.models.departure_event import DepartureEvent

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from trip_planner.adapters.tfnsw_api.http_client import TfnswHttpClient


class TfnswDepartureRepository:
    """Adapter for live departures at a stop."""

    def __init__(self, http_client: "TfnswHttpClient", api_key: str | None) -> None:
        """Initialize with the HTTP client and trip planner API key."""
        self._http_client = http_client
        self._api_key = api_key

    async def get_stop_departures(self, stop_id: str) -> list[DepartureEvent]:
        """Get upcoming departures for a stop.

        Raises:
            ApiError: If the key is missing or the request fails.
        """
        params = {
            "mode": "direct",
            "type_dm": "stop",
            "name_dm": stop_id,
            "departureMonitorMacro": "true",
            "itdDateTimeDepArr": "dep",
        }
        data = await self._http_client.get_json(DEPARTURE_MONITOR_PATH, params, self._api_key)
        if not isinstance(data, dict):
            return []

        departures = StopEventParser.parse_stop_events(data)
        if not departures:
            logger.debug(f"No departures returned for stop {stop_id}")
        return departures

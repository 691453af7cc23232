"""Stop repository adapter for the TfNSW ``/stop_finder`` endpoint."""

import logging
from typing import TYPE_CHECKING

from trip_planner.adapters.tfnsw_api.constants import STOP_FINDER_PATH
from trip_planner.adapters.tfnsw_api.location_parser import LocationParser
from trip_planner.domain.models.stop import Stop

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from trip_planner.adapters.tfnsw_api.http_client import TfnswHttpClient


class TfnswStopRepository:
    """Searches stops, stations, wharves and platforms by name."""

    def __init__(self, http_client: "TfnswHttpClient", api_key: str | None) -> None:
        self._http_client = http_client
        self._api_key = api_key

    async def search_stops(self, query: str) -> list[Stop]:
        """Search stops matching ``query``; non-transport locations are dropped."""
        if not query.strip():
            return []

        params = {"type_sf": "any", "name_sf": query, "TfNSWSF": "true"}
        data = await self._http_client.get_json(STOP_FINDER_PATH, params, self._api_key)
        if not isinstance(data, dict):
            return []

        stops = LocationParser.parse_locations(data)
        logger.debug(f"Stop search '{query}' matched {len(stops)} stops")
        return stops

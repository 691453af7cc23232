"""Realtime feed repository over the TfNSW GTFS-realtime endpoints."""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

from trip_planner.adapters.gtfs_realtime.feed_decoder import (
    DecodeError,
    decode_trip_updates,
    decode_vehicle_positions,
)
from trip_planner.adapters.tfnsw_api.constants import TRIP_UPDATES_PATH, VEHICLE_POSITIONS_PATH
from trip_planner.domain.errors import ApiError
from trip_planner.domain.models.realtime import TransportMode, TripUpdateEntity, VehicleEntity

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from trip_planner.adapters.tfnsw_api.http_client import TfnswHttpClient

T = TypeVar("T")

# Trains and metro share one feed; buses are the fallback feed
MODE_FEED_PATHS: dict[TransportMode, str] = {
    TransportMode.TRAIN: "nswtrains",
    TransportMode.METRO: "nswtrains",
    TransportMode.FERRY: "ferries/sydneyferries",
    TransportMode.LIGHTRAIL: "lightrail/cbdandsoutheast",
    TransportMode.BUS: "buses",
}
DEFAULT_FEED_PATH = "buses"


def feed_path_for(mode: TransportMode) -> str:
    """Feed path suffix for a transport mode."""
    return MODE_FEED_PATHS.get(mode, DEFAULT_FEED_PATH)


class GtfsRealtimeFeedRepository:
    """Fetches and decodes vehicle position and trip update feeds.

    Every failure degrades to an empty list: a missing key, a non-200 status,
    a connection error or an undecodable payload.
    """

    def __init__(
        self,
        http_client: "TfnswHttpClient",
        vehicle_positions_api_key: str | None,
        trip_updates_api_key: str | None,
    ) -> None:
        self._http_client = http_client
        self._vehicle_positions_api_key = vehicle_positions_api_key
        self._trip_updates_api_key = trip_updates_api_key

    async def _fetch(
        self,
        base_path: str,
        api_key: str | None,
        mode: TransportMode,
        decode: Callable[[bytes, TransportMode], list[T]],
        feed_name: str,
    ) -> list[T]:
        if not api_key:
            logger.warning(f"{feed_name} API key missing; skipping {mode.value} feed")
            return []

        path = f"{base_path}/{feed_path_for(mode)}"
        try:
            status, payload = await self._http_client.get_bytes(path, api_key)
        except ApiError as e:
            logger.warning(f"Failed to fetch {feed_name} for {mode.value}: {e}")
            return []

        if status != 200:
            logger.error(f"Status {status} for {feed_name} feed {path}")
            return []

        try:
            entities = decode(payload, mode)
        except DecodeError as e:
            logger.warning(f"Failed to decode {feed_name} feed for {mode.value}: {e}")
            return []

        logger.debug(f"Decoded {len(entities)} {feed_name} entities for {mode.value}")
        return entities

    async def get_vehicle_positions(self, mode: TransportMode) -> list[VehicleEntity]:
        """Live vehicle positions for a transport mode."""
        return await self._fetch(
            VEHICLE_POSITIONS_PATH,
            self._vehicle_positions_api_key,
            mode,
            decode_vehicle_positions,
            "vehicle positions",
        )

    async def get_trip_updates(self, mode: TransportMode) -> list[TripUpdateEntity]:
        """Live trip updates for a transport mode."""
        return await self._fetch(
            TRIP_UPDATES_PATH,
            self._trip_updates_api_key,
            mode,
            decode_trip_updates,
            "trip updates",
        )

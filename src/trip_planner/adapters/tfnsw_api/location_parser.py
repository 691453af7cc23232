"""Parser for stop finder responses."""

import logging
import re
from typing import Any

from trip_planner.adapters.tfnsw_api.constants import STOP_NAME_PATTERN, STOP_TYPES
from trip_planner.domain.models.stop import Stop

logger = logging.getLogger(__name__)

_STOP_NAME_RE = re.compile(STOP_NAME_PATTERN, re.IGNORECASE)


class LocationParser:
    """Turns stop finder ``locations`` into Stop objects, keeping transport nodes only."""

    @staticmethod
    def is_transport_location(location: dict[str, Any]) -> bool:
        """Stops and platforms, global-id nodes, or anything named like a station."""
        if location.get("type") in STOP_TYPES:
            return True
        if location.get("isGlobalId"):
            return True
        return bool(_STOP_NAME_RE.search(location.get("name") or ""))

    @staticmethod
    def parse_locations(data: dict[str, Any]) -> list[Stop]:
        """Parse and filter the locations of a stop finder response."""
        stops = []
        for location in data.get("locations") or []:
            if not isinstance(location, dict) or not location.get("id"):
                continue
            if not LocationParser.is_transport_location(location):
                continue
            stops.append(LocationParser._parse_location(location))
        return stops

    @staticmethod
    def _parse_location(location: dict[str, Any]) -> Stop:
        coord = location.get("coord")
        latitude = longitude = None
        if isinstance(coord, list) and len(coord) >= 2:
            latitude, longitude = float(coord[0]), float(coord[1])
        return Stop(
            id=str(location["id"]),
            name=location.get("name") or str(location["id"]),
            type=location.get("type") or "unknown",
            disassembled_name=location.get("disassembledName"),
            latitude=latitude,
            longitude=longitude,
            is_global_id=bool(location.get("isGlobalId")),
        )

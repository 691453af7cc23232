"""Parser for trip planner (rapidJSON) journey responses."""

import logging
from typing import Any

from trip_planner.domain.models.journey import Journey, Leg, StopPoint, Transportation

logger = logging.getLogger(__name__)


def _optional_str(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _optional_int(value: Any) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _parse_coord(coord: Any) -> tuple[float | None, float | None]:
    """EPSG:4326 coordinates arrive as [latitude, longitude]."""
    if isinstance(coord, list) and len(coord) >= 2:
        try:
            return float(coord[0]), float(coord[1])
        except (TypeError, ValueError):
            logger.debug(f"Ignoring malformed coordinate: {coord}")
    return None, None


class JourneyParser:
    """Turns the ``journeys`` array of a trip response into Journey objects."""

    @staticmethod
    def parse_journeys(data: dict[str, Any]) -> list[Journey]:
        """Parse all journeys of a trip response; a missing list yields none."""
        raw_journeys = data.get("journeys") or []
        journeys = []
        for raw in raw_journeys:
            if not isinstance(raw, dict):
                continue
            journeys.append(JourneyParser.parse_journey(raw))
        return journeys

    @staticmethod
    def parse_journey(raw: dict[str, Any]) -> Journey:
        legs = tuple(
            JourneyParser.parse_leg(leg) for leg in raw.get("legs") or [] if isinstance(leg, dict)
        )
        return Journey(legs=legs)

    @staticmethod
    def parse_leg(raw: dict[str, Any]) -> Leg:
        stop_sequence = tuple(
            JourneyParser.parse_stop_point(stop)
            for stop in raw.get("stopSequence") or []
            if isinstance(stop, dict)
        )
        return Leg(
            origin=JourneyParser.parse_stop_point(raw.get("origin") or {}),
            destination=JourneyParser.parse_stop_point(raw.get("destination") or {}),
            transportation=JourneyParser.parse_transportation(raw.get("transportation") or {}),
            stop_sequence=stop_sequence,
        )

    @staticmethod
    def parse_stop_point(raw: dict[str, Any]) -> StopPoint:
        latitude, longitude = _parse_coord(raw.get("coord"))
        properties = raw.get("properties") or {}
        platform = (
            raw.get("platform")
            or raw.get("platformName")
            or raw.get("platformLongName")
            or properties.get("platform")
        )
        return StopPoint(
            id=_optional_str(raw.get("id")),
            name=_optional_str(raw.get("name")),
            disassembled_name=_optional_str(raw.get("disassembledName")),
            latitude=latitude,
            longitude=longitude,
            departure_time_planned=_optional_str(raw.get("departureTimePlanned")),
            departure_time_estimated=_optional_str(raw.get("departureTimeEstimated")),
            arrival_time_planned=_optional_str(raw.get("arrivalTimePlanned")),
            arrival_time_estimated=_optional_str(raw.get("arrivalTimeEstimated")),
            platform=_optional_str(platform),
        )

    @staticmethod
    def parse_transportation(raw: dict[str, Any]) -> Transportation:
        product = raw.get("product") or {}
        properties = raw.get("properties") or {}
        return Transportation(
            product_class=_optional_int(product.get("class")),
            name=_optional_str(raw.get("name")),
            disassembled_name=_optional_str(raw.get("disassembledName")),
            realtime_trip_id=_optional_str(properties.get("RealtimeTripId")),
            trip_code=_optional_str(raw.get("tripCode") or properties.get("tripCode")),
            id=_optional_str(raw.get("id")),
        )

"""Parser for departure monitor ``stopEvents``."""

import logging
from datetime import UTC, datetime
from typing import Any

from trip_planner.domain.models.departure_event import DepartureEvent

logger = logging.getLogger(__name__)

UNKNOWN_DESTINATION = "Unknown Destination"


class StopEventParser:
    """Parses departure monitor responses into DepartureEvent objects."""

    @staticmethod
    def parse_stop_events(data: dict[str, Any]) -> list[DepartureEvent]:
        """Parse every stop event; events without any time are skipped."""
        results = []
        for event in data.get("stopEvents") or []:
            if not isinstance(event, dict):
                continue
            departure = StopEventParser._parse_stop_event(event)
            if departure:
                results.append(departure)
        return results

    @staticmethod
    def _parse_time(time_str: str | None) -> datetime | None:
        """Parse ISO format time string."""
        if not time_str:
            return None
        try:
            parsed = datetime.fromisoformat(time_str.replace("Z", "+00:00"))
        except ValueError:
            logger.debug(f"Failed to parse time: {time_str}")
            return None
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)

    @staticmethod
    def _collect_properties(event: dict[str, Any]) -> dict[str, str]:
        """Platform-bearing properties from the event and its location."""
        location_properties = (event.get("location") or {}).get("properties") or {}
        properties = {**location_properties, **(event.get("properties") or {})}
        if event.get("plannedPlatform"):
            properties["plannedPlatform"] = event["plannedPlatform"]
        return {str(k): str(v) for k, v in properties.items() if isinstance(v, str | int)}

    @staticmethod
    def _parse_stop_event(event: dict[str, Any]) -> DepartureEvent | None:
        planned = StopEventParser._parse_time(event.get("departureTimePlanned"))
        estimated = StopEventParser._parse_time(event.get("departureTimeEstimated"))
        if planned is None and estimated is None:
            return None

        location = event.get("location") or {}
        transportation = event.get("transportation") or {}
        product_class = (transportation.get("product") or {}).get("class")
        transport_properties = transportation.get("properties") or {}

        return DepartureEvent(
            location_id=location.get("id"),
            location_name=location.get("name"),
            planned_time=planned,
            estimated_time=estimated,
            line=(
                transportation.get("disassembledName")
                or transportation.get("number")
                or transportation.get("name")
                or ""
            ),
            destination=(transportation.get("destination") or {}).get("name")
            or UNKNOWN_DESTINATION,
            product_class=product_class if isinstance(product_class, int) else None,
            platform=event.get("platform") or None,
            realtime_trip_id=transport_properties.get("RealtimeTripId"),
            properties=StopEventParser._collect_properties(event),
        )

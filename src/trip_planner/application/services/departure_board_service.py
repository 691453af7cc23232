"""Departure board for a single stop."""

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from trip_planner.domain.models.departure_event import DepartureEvent
from trip_planner.domain.models.preferences import TransportFilters

if TYPE_CHECKING:
    from trip_planner.domain.ports import DepartureRepository

logger = logging.getLogger(__name__)

PLATFORM_PATTERN = re.compile(r"Platform\s+([0-9A-Za-z]+)", re.IGNORECASE)

# Product classes used by the departure monitor
PRODUCT_CLASS_TRAIN = 1
PRODUCT_CLASS_LIGHTRAIL = 4
PRODUCT_CLASS_BUS = 5
PRODUCT_CLASS_FERRY = 9


@dataclass(frozen=True)
class DepartureBoard:
    """Departures at one stop after applying the user's transport filters."""

    stop_id: str
    stop_name: str
    departures: list[DepartureEvent]


def departure_platform(departure: DepartureEvent) -> str | None:
    """Platform from explicit fields first, then from the location name."""
    if departure.platform:
        return departure.platform
    for key in ("plannedPlatform", "platform", "Platform"):
        value = departure.properties.get(key)
        if value:
            return value
    match = PLATFORM_PATTERN.search(departure.location_name or "")
    return match.group(1) if match else None


def is_departure_shown(departure: DepartureEvent, filters: TransportFilters) -> bool:
    """Whether the departure's mode is enabled. Unknown classes count as trains."""
    product_class = departure.product_class or PRODUCT_CLASS_TRAIN
    if product_class == PRODUCT_CLASS_TRAIN:
        return filters.train or filters.metro
    if product_class == PRODUCT_CLASS_BUS:
        return filters.bus
    if product_class == PRODUCT_CLASS_LIGHTRAIL:
        return filters.lightrail
    if product_class == PRODUCT_CLASS_FERRY:
        return filters.ferry
    return True


class DepartureBoardService:
    """Builds filtered departure boards from the departure monitor."""

    def __init__(self, departure_repository: "DepartureRepository") -> None:
        """Initialize with a departure repository."""
        self._departure_repository = departure_repository

    async def get_board(self, stop_id: str, filters: TransportFilters) -> DepartureBoard:
        """Fetch departures for a stop and keep the enabled modes."""
        departures = await self._departure_repository.get_stop_departures(stop_id)
        stop_name = "Stop"
        if departures and departures[0].location_name:
            stop_name = departures[0].location_name

        shown = [departure for departure in departures if is_departure_shown(departure, filters)]
        if len(shown) != len(departures):
            logger.debug(f"Filtered {len(departures) - len(shown)} departures at {stop_id}")
        return DepartureBoard(stop_id=stop_id, stop_name=stop_name, departures=shown)

"""Domain models for the trip planner."""

from trip_planner.domain.models.departure_event import DepartureEvent
from trip_planner.domain.models.error_details import ErrorDetails
from trip_planner.domain.models.favorite_route import FavoriteRoute
from trip_planner.domain.models.fetch_settings import FetchSettings
from trip_planner.domain.models.journey import (
    NON_SUBSTANTIVE_PRODUCT_CLASSES,
    Journey,
    Leg,
    StopPoint,
    Transportation,
)
from trip_planner.domain.models.preferences import (
    DisplayPreferences,
    PlannerPolicy,
    TransportFilters,
    TripPreference,
)
from trip_planner.domain.models.realtime import (
    LiveTripStatus,
    StopTimeUpdate,
    TransportMode,
    TripDescriptor,
    TripUpdateEntity,
    VehicleEntity,
)
from trip_planner.domain.models.stop import Stop

__all__ = [
    "NON_SUBSTANTIVE_PRODUCT_CLASSES",
    "DepartureEvent",
    "DisplayPreferences",
    "ErrorDetails",
    "FavoriteRoute",
    "FetchSettings",
    "Journey",
    "Leg",
    "LiveTripStatus",
    "PlannerPolicy",
    "Stop",
    "StopPoint",
    "StopTimeUpdate",
    "TransportFilters",
    "TransportMode",
    "Transportation",
    "TripDescriptor",
    "TripPreference",
    "TripUpdateEntity",
    "VehicleEntity",
]

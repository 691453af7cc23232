"""Domain layer - core models, errors and ports."""

from trip_planner.domain.errors import ApiError, NoTripsFoundError
from trip_planner.domain.models import Journey, Leg, Stop, TripPreference
from trip_planner.domain.ports import (
    DepartureRepository,
    PreferenceStore,
    RealtimeFeedRepository,
    StopRepository,
    TripRepository,
)

__all__ = [
    "ApiError",
    "DepartureRepository",
    "Journey",
    "Leg",
    "NoTripsFoundError",
    "PreferenceStore",
    "RealtimeFeedRepository",
    "Stop",
    "StopRepository",
    "TripPreference",
    "TripRepository",
]

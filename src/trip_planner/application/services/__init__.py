"""Application services (use cases) for trip planning and live data."""

from trip_planner.application.services.best_candidate_selector import (
    select_best_journey_per_vehicle,
)
from trip_planner.application.services.departure_board_service import (
    DepartureBoard,
    DepartureBoardService,
)
from trip_planner.application.services.favorites_service import FavoritesService
from trip_planner.application.services.journey_deduplicator import deduplicate_journeys
from trip_planner.application.services.journey_summary import JourneySummary, summarize_journey
from trip_planner.application.services.live_trip_service import LiveTripService
from trip_planner.application.services.live_vehicle_service import LiveVehicleService
from trip_planner.application.services.preferences_service import PreferencesService, format_time
from trip_planner.application.services.trip_fetch_orchestrator import (
    TripFetchOrchestrator,
    build_time_windows,
)
from trip_planner.application.services.trip_planning_service import TripPlanningService
from trip_planner.application.services.trip_preference_sorter import TripPreferenceSorter

__all__ = [
    "DepartureBoard",
    "DepartureBoardService",
    "FavoritesService",
    "JourneySummary",
    "LiveTripService",
    "LiveVehicleService",
    "PreferencesService",
    "TripFetchOrchestrator",
    "TripPlanningService",
    "TripPreferenceSorter",
    "build_time_windows",
    "deduplicate_journeys",
    "format_time",
    "select_best_journey_per_vehicle",
    "summarize_journey",
]

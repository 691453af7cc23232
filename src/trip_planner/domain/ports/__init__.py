"""Ports (interfaces) for the ports-and-adapters architecture."""

from trip_planner.domain.ports.departure_repository import DepartureRepository
from trip_planner.domain.ports.preference_store import PreferenceStore
from trip_planner.domain.ports.realtime_feed_repository import RealtimeFeedRepository
from trip_planner.domain.ports.stop_repository import StopRepository
from trip_planner.domain.ports.trip_repository import TripRepository

__all__ = [
    "DepartureRepository",
    "PreferenceStore",
    "RealtimeFeedRepository",
    "StopRepository",
    "TripRepository",
]

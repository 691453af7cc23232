"""Adapters layer - external system integrations."""

from trip_planner.adapters.config import AppConfig
from trip_planner.adapters.gtfs_realtime import GtfsRealtimeFeedRepository
from trip_planner.adapters.storage import JsonPreferenceStore
from trip_planner.adapters.tfnsw_api import (
    TfnswDepartureRepository,
    TfnswHttpClient,
    TfnswStopRepository,
    TfnswTripRepository,
)

__all__ = [
    "AppConfig",
    "GtfsRealtimeFeedRepository",
    "JsonPreferenceStore",
    "TfnswDepartureRepository",
    "TfnswHttpClient",
    "TfnswStopRepository",
    "TfnswTripRepository",
]

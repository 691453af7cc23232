"""Transport for NSW trip planner API adapters."""

from trip_planner.adapters.tfnsw_api.http_client import TfnswHttpClient
from trip_planner.adapters.tfnsw_api.tfnsw_departure_repository import TfnswDepartureRepository
from trip_planner.adapters.tfnsw_api.tfnsw_stop_repository import TfnswStopRepository
from trip_planner.adapters.tfnsw_api.tfnsw_trip_repository import TfnswTripRepository

__all__ = [
    "TfnswDepartureRepository",
    "TfnswHttpClient",
    "TfnswStopRepository",
    "TfnswTripRepository",
]

"""Realtime feed domain models (decoded GTFS-realtime entities)."""

from dataclasses import dataclass, field
from enum import Enum


class TransportMode(str, Enum):
    """Transport modes with their own realtime feeds."""

    TRAIN = "train"
    METRO = "metro"
    BUS = "bus"
    LIGHTRAIL = "lightrail"
    FERRY = "ferry"


@dataclass(frozen=True)
class TripDescriptor:
    """Trip reference carried by a realtime entity."""

    trip_id: str = ""
    route_id: str = ""
    start_time: str | None = None
    start_date: str | None = None


@dataclass(frozen=True)
class VehicleEntity:
    """A live vehicle position."""

    id: str
    mode: TransportMode
    trip: TripDescriptor | None
    label: str = ""
    latitude: float | None = None
    longitude: float | None = None
    bearing: float | None = None
    timestamp: int | None = None


@dataclass(frozen=True)
class StopTimeUpdate:
    """Predicted arrival/departure at one stop of a trip update."""

    stop_id: str
    stop_sequence: int | None = None
    arrival_delay: int | None = None
    departure_delay: int | None = None


@dataclass(frozen=True)
class TripUpdateEntity:
    """A live trip update."""

    id: str
    mode: TransportMode
    trip: TripDescriptor | None
    stop_time_updates: tuple[StopTimeUpdate, ...] = field(default_factory=tuple)
    timestamp: int | None = None


@dataclass(frozen=True)
class LiveTripStatus:
    """Outcome of correlating a journey with the realtime feeds."""

    trip_id: str | None
    vehicle: VehicleEntity | None = None
    trip_update: TripUpdateEntity | None = None
    mode: TransportMode | None = None
    reason: str | None = None

    @property
    def found(self) -> bool:
        """Whether any live data matched."""
        return self.vehicle is not None or self.trip_update is not None

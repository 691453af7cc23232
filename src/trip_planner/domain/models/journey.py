"""Journey domain models."""

from dataclasses import dataclass, field

# Product classes of walking/footpath pseudo-legs
NON_SUBSTANTIVE_PRODUCT_CLASSES = frozenset({99, 100})


@dataclass(frozen=True)
class StopPoint:
    """A stop reference at either end of a leg, with its raw timestamps."""

    id: str | None = None
    name: str | None = None
    disassembled_name: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    departure_time_planned: str | None = None
    departure_time_estimated: str | None = None
    arrival_time_planned: str | None = None
    arrival_time_estimated: str | None = None
    platform: str | None = None


@dataclass(frozen=True)
class Transportation:
    """The service a leg is travelled on."""

    product_class: int | None = None
    name: str | None = None
    disassembled_name: str | None = None
    realtime_trip_id: str | None = None  # properties.RealtimeTripId
    trip_code: str | None = None
    id: str | None = None

    @property
    def line_name(self) -> str:
        """Short line name if present, else the long one."""
        return self.disassembled_name or self.name or ""


@dataclass(frozen=True)
class Leg:
    """One segment of a journey."""

    origin: StopPoint
    destination: StopPoint
    transportation: Transportation
    stop_sequence: tuple[StopPoint, ...] = field(default_factory=tuple)

    @property
    def is_substantive(self) -> bool:
        """Whether this leg is actual transport (not walking or a footpath transfer)."""
        product_class = self.transportation.product_class
        if product_class is None:
            return False
        return product_class not in NON_SUBSTANTIVE_PRODUCT_CLASSES


@dataclass(frozen=True)
class Journey:
    """A single trip candidate as returned by the trip planner."""

    legs: tuple[Leg, ...]

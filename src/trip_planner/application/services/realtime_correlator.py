"""Match a scheduled trip identifier against live GTFS-realtime entities.

Identifiers from the journey planner (e.g. ``96-N.1260.166.36.A.8.88166633``)
rarely equal the feed's trip ids, so matching goes through an ordered list
of increasingly loose predicates. Each predicate is tried against every
entity before the next one is considered, so a stricter match always wins
over a looser one elsewhere in the feed.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TypeVar

from trip_planner.domain.models.realtime import TripUpdateEntity, VehicleEntity

logger = logging.getLogger(__name__)

Entity = TypeVar("Entity", VehicleEntity, TripUpdateEntity)


@dataclass(frozen=True)
class CorrelationKey:
    """A schedule-side identifier split into its dot-separated parts."""

    trip_id: str
    prefix: str | None
    suffix: str | None

    @classmethod
    def parse(cls, trip_id: str) -> "CorrelationKey":
        """Split an identifier. A single-part identifier has no prefix."""
        parts = trip_id.split(".")
        return cls(
            trip_id=trip_id,
            prefix=parts[0] if len(parts) > 1 else None,
            suffix=parts[-1] or None,
        )


MatchPredicate = Callable[[CorrelationKey, VehicleEntity | TripUpdateEntity], bool]


def _trip_id(entity: VehicleEntity | TripUpdateEntity) -> str:
    return entity.trip.trip_id if entity.trip else ""


def matches_exact_trip_id(key: CorrelationKey, entity: VehicleEntity | TripUpdateEntity) -> bool:
    """The entity's trip id is the identifier itself."""
    return _trip_id(entity) == key.trip_id


def matches_suffix(key: CorrelationKey, entity: VehicleEntity | TripUpdateEntity) -> bool:
    """The identifier's last segment appears in the entity's trip id or entity id."""
    if not key.suffix:
        return False
    return key.suffix in _trip_id(entity) or key.suffix in entity.id


def matches_prefix(key: CorrelationKey, entity: VehicleEntity | TripUpdateEntity) -> bool:
    """The identifier's first segment appears in the entity's trip id or entity id."""
    if not key.prefix:
        return False
    return key.prefix in _trip_id(entity) or key.prefix in entity.id


def matches_route_id(key: CorrelationKey, entity: VehicleEntity | TripUpdateEntity) -> bool:
    """The entity's route id appears in the identifier."""
    route_id = entity.trip.route_id if entity.trip else ""
    return bool(route_id) and route_id in key.trip_id


def matches_vehicle_label(key: CorrelationKey, entity: VehicleEntity | TripUpdateEntity) -> bool:
    """The vehicle's label mentions the identifier or its last segment."""
    label = getattr(entity, "label", "")
    if not label:
        return False
    return key.trip_id in label or bool(key.suffix and key.suffix in label)


TRIP_UPDATE_MATCHERS: tuple[MatchPredicate, ...] = (
    matches_exact_trip_id,
    matches_suffix,
    matches_prefix,
    matches_route_id,
)
VEHICLE_MATCHERS: tuple[MatchPredicate, ...] = (*TRIP_UPDATE_MATCHERS, matches_vehicle_label)


def find_match(
    trip_id: str | None,
    entities: Sequence[Entity],
    matchers: Sequence[MatchPredicate],
) -> Entity | None:
    """First entity matched by the first predicate that matches anything.

    Entities without a trip descriptor are never matched. A miss is a
    normal outcome and returns None.
    """
    if not trip_id:
        return None

    key = CorrelationKey.parse(trip_id)
    candidates = [entity for entity in entities if entity.trip is not None]
    for matcher in matchers:
        for entity in candidates:
            if matcher(key, entity):
                logger.debug(f"Matched {trip_id} to entity {entity.id} via {matcher.__name__}")
                return entity
    return None


def find_vehicle(trip_id: str | None, vehicles: Sequence[VehicleEntity]) -> VehicleEntity | None:
    """Correlate an identifier with a vehicle position."""
    return find_match(trip_id, vehicles, VEHICLE_MATCHERS)


def find_trip_update(
    trip_id: str | None, updates: Sequence[TripUpdateEntity]
) -> TripUpdateEntity | None:
    """Correlate an identifier with a trip update."""
    return find_match(trip_id, updates, TRIP_UPDATE_MATCHERS)

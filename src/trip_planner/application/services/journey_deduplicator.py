"""Collapse identical journeys returned by overlapping time-window queries."""

import logging
from datetime import datetime

from trip_planner.application.services.journey_extractors import (
    arrival_time,
    departure_time,
    primary_legs,
    route_signature,
)
from trip_planner.domain.models.journey import Journey

logger = logging.getLogger(__name__)

DedupKey = tuple[datetime, datetime | None, str, int]


def dedup_key(journey: Journey) -> DedupKey | None:
    """Identity of a journey's content, or None when its departure is unknown."""
    departure = departure_time(journey)
    if departure is None:
        return None
    return (
        departure,
        arrival_time(journey),
        route_signature(journey),
        len(primary_legs(journey)),
    )


def deduplicate_journeys(journeys: list[Journey]) -> list[Journey]:
    """Keep the first journey for every distinct key, preserving order.

    Journeys with an unknown departure are dropped. Timestamps must match
    to the exact instant; near-identical journeys are not merged.
    """
    seen: set[DedupKey] = set()
    result: list[Journey] = []
    dropped_unknown = 0

    for journey in journeys:
        key = dedup_key(journey)
        if key is None:
            dropped_unknown += 1
            continue
        if key in seen:
            continue
        seen.add(key)
        result.append(journey)

    logger.debug(
        f"Deduplicated {len(journeys)} journeys to {len(result)} "
        f"({dropped_unknown} without departure time dropped)"
    )
    return result

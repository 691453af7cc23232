"""Pick one representative journey per physical service run."""

import logging
from datetime import datetime

from trip_planner.application.services.journey_extractors import (
    arrival_time,
    correlation_id,
    departure_time,
    is_direct,
    transfer_count,
)
from trip_planner.domain.models.journey import Journey

logger = logging.getLogger(__name__)


def _arrival_sort_key(journey: Journey) -> tuple[bool, datetime | None]:
    arrival = arrival_time(journey)
    return (arrival is None, arrival)


def group_key(journey: Journey, position: int) -> str:
    """Trip group of a journey.

    Falls back to the departure timestamp, and to a key unique to the
    journey's position when even that is unknown, so unidentifiable
    journeys never share a group.
    """
    trip_id = correlation_id(journey)
    if trip_id:
        return f"trip:{trip_id}"
    departure = departure_time(journey)
    if departure is not None:
        return f"departure:{departure.isoformat()}"
    return f"unidentified:{position}"


def pick_best_candidate(group: list[Journey]) -> Journey:
    """Best journey of one trip group.

    Direct journeys win over any journey with changes; among directs the
    earliest arrival wins. Otherwise fewest changes, then earliest arrival.
    Ties keep input order.
    """
    if len(group) == 1:
        return group[0]

    direct_options = [journey for journey in group if is_direct(journey)]
    if direct_options:
        return min(direct_options, key=_arrival_sort_key)

    return min(group, key=lambda journey: (transfer_count(journey), *_arrival_sort_key(journey)))


def select_best_journey_per_vehicle(journeys: list[Journey]) -> list[Journey]:
    """Collapse journeys on the same vehicle run to a single representative.

    Groups are emitted in order of their first journey.
    """
    groups: dict[str, list[Journey]] = {}
    for position, journey in enumerate(journeys):
        groups.setdefault(group_key(journey, position), []).append(journey)

    result = [pick_best_candidate(group) for group in groups.values()]
    logger.debug(f"Selected {len(result)} journeys from {len(journeys)} across trip groups")
    return result

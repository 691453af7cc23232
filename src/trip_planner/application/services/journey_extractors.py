"""Pure functions deriving times, counts and identifiers from a journey.

None of these raise for missing or malformed upstream data: an unknown
timestamp is reported as ``None`` and an unknown duration as
``UNKNOWN_DURATION``, which compares greater than any real duration.
"""

import logging
from datetime import UTC, datetime, timedelta

from trip_planner.domain.models.journey import Journey, Leg

logger = logging.getLogger(__name__)

UNKNOWN_DURATION = timedelta.max


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO 8601 timestamp, returning None if absent or malformed."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        logger.debug(f"Ignoring unparseable timestamp {value!r}")
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed


def _first_parseable(*values: str | None) -> datetime | None:
    for value in values:
        parsed = parse_timestamp(value)
        if parsed is not None:
            return parsed
    return None


def departure_time(journey: Journey) -> datetime | None:
    """Estimated departure of the first leg, else planned, else None."""
    if not journey.legs:
        return None
    origin = journey.legs[0].origin
    return _first_parseable(origin.departure_time_estimated, origin.departure_time_planned)


def arrival_time(journey: Journey) -> datetime | None:
    """Estimated arrival of the last leg, else planned, else None."""
    if not journey.legs:
        return None
    destination = journey.legs[-1].destination
    return _first_parseable(destination.arrival_time_estimated, destination.arrival_time_planned)


def duration(journey: Journey) -> timedelta:
    """Door-to-door duration, or UNKNOWN_DURATION if either end is unknown."""
    departure = departure_time(journey)
    arrival = arrival_time(journey)
    if departure is None or arrival is None:
        return UNKNOWN_DURATION
    return arrival - departure


def primary_legs(journey: Journey) -> list[Leg]:
    """Legs that are actual transport, in travel order."""
    return [leg for leg in journey.legs if leg.is_substantive]


def transfer_count(journey: Journey) -> int:
    """Number of changes between primary legs."""
    return max(0, len(primary_legs(journey)) - 1)


def is_direct(journey: Journey) -> bool:
    """Whether the journey needs no change."""
    return len(primary_legs(journey)) <= 1


def stop_count(journey: Journey) -> int:
    """Intermediate stops on the first primary leg (origin and destination excluded)."""
    legs = primary_legs(journey)
    if not legs:
        return 0
    return max(0, len(legs[0].stop_sequence) - 2)


def correlation_id(journey: Journey) -> str | None:
    """Realtime trip identifier of the first primary leg, if the planner gave one."""
    legs = primary_legs(journey)
    if not legs:
        return None
    transportation = legs[0].transportation
    return transportation.realtime_trip_id or transportation.trip_code or transportation.id or None


def route_signature(journey: Journey) -> str:
    """Line and leg destination of every primary leg, e.g. ``T1-Central|M1-Chatswood``."""
    return "|".join(
        f"{leg.transportation.line_name}-{leg.destination.name or ''}"
        for leg in primary_legs(journey)
    )

"""Rank and filter journeys according to the user's trip preference."""

import logging
from datetime import UTC, datetime, timedelta

from trip_planner.application.services.journey_extractors import (
    UNKNOWN_DURATION,
    arrival_time,
    departure_time,
    duration,
    stop_count,
)
from trip_planner.domain.models.journey import Journey
from trip_planner.domain.models.preferences import PlannerPolicy, TripPreference

logger = logging.getLogger(__name__)


def _departure_sort_key(journey: Journey) -> tuple[bool, datetime | None]:
    departure = departure_time(journey)
    return (departure is None, departure)


def _arrival_sort_key(journey: Journey) -> tuple[bool, datetime | None]:
    arrival = arrival_time(journey)
    return (arrival is None, arrival)


class TripPreferenceSorter:
    """Applies one of the three ranking policies to a deduplicated journey list.

    Sorting never re-fetches: the same input can be re-ranked whenever the
    preference changes.
    """

    def __init__(self, policy: PlannerPolicy | None = None) -> None:
        """Initialize with the heuristic thresholds to apply."""
        self._policy = policy or PlannerPolicy()

    @property
    def policy(self) -> PlannerPolicy:
        """Thresholds in use."""
        return self._policy

    def sort(
        self,
        journeys: list[Journey],
        preference: TripPreference = TripPreference.ALL_STOPS,
        now: datetime | None = None,
    ) -> list[Journey]:
        """Return a new, filtered and ordered list for the given preference."""
        if not journeys:
            return []

        if preference == TripPreference.FASTEST:
            return self._fastest(journeys, now or datetime.now(UTC))
        if preference == TripPreference.LIMITED_STOPS:
            return self._limited_stops(journeys)
        return sorted(journeys, key=_departure_sort_key)

    def is_limited_stops(self, journey: Journey) -> bool:
        """Whether the first primary leg skips enough stops to count as limited stops."""
        return stop_count(journey) <= self._policy.limited_stops_max_stops

    def _fastest(self, journeys: list[Journey], now: datetime) -> list[Journey]:
        upcoming = []
        for journey in journeys:
            departure = departure_time(journey)
            if departure is not None and departure >= now:
                upcoming.append(journey)
        if not upcoming:
            return []

        arrivals = [arrival for arrival in map(arrival_time, upcoming) if arrival is not None]
        if not arrivals:
            return []

        threshold = min(arrivals) + timedelta(minutes=self._policy.fastest_window_minutes)
        kept = []
        for journey in upcoming:
            arrival = arrival_time(journey)
            if arrival is not None and arrival <= threshold:
                kept.append(journey)

        logger.debug(f"Fastest: kept {len(kept)} of {len(journeys)} journeys")
        return sorted(kept, key=_arrival_sort_key)

    def _limited_stops(self, journeys: list[Journey]) -> list[Journey]:
        kept = [journey for journey in journeys if self.is_limited_stops(journey)]

        if not kept:
            # Nothing qualifies by stop count, keep the quickest services instead
            min_duration = min(duration(journey) for journey in journeys)
            if min_duration == UNKNOWN_DURATION:
                kept = list(journeys)
            else:
                threshold = min_duration * self._policy.limited_stops_duration_tolerance
                kept = [journey for journey in journeys if duration(journey) <= threshold]
            logger.debug(f"Limited stops: duration fallback kept {len(kept)} journeys")

        return sorted(kept, key=_departure_sort_key)

"""Tests for preference-based journey ranking."""

from datetime import timedelta

import pytest

from tests.builders import BASE_TIME, direct_journey
from trip_planner.application.services.trip_preference_sorter import TripPreferenceSorter
from trip_planner.domain.models import PlannerPolicy, TripPreference


@pytest.fixture
def sorter() -> TripPreferenceSorter:
    return TripPreferenceSorter()


def test_all_stops_orders_by_departure(sorter: TripPreferenceSorter) -> None:
    """Given unordered journeys, when ranking for all stops, then they are ordered by departure."""
    late = direct_journey(30, 60)
    early = direct_journey(0, 40)
    middle = direct_journey(15, 45)

    assert sorter.sort([late, early, middle], TripPreference.ALL_STOPS) == [early, middle, late]


def test_sort_returns_new_list(sorter: TripPreferenceSorter) -> None:
    """Given a journey list, when ranking, then the input list is not modified."""
    journeys = [direct_journey(30, 60), direct_journey(0, 40)]
    original = list(journeys)

    sorter.sort(journeys, TripPreference.ALL_STOPS)

    assert journeys == original


def test_empty_input_gives_empty_output_for_every_preference(sorter: TripPreferenceSorter) -> None:
    """Given no journeys, when ranking with any preference, then the result is empty."""
    for preference in TripPreference:
        assert sorter.sort([], preference, now=BASE_TIME) == []


def test_fastest_keeps_arrivals_within_window(sorter: TripPreferenceSorter) -> None:
    """Given arrivals at T, T+3 and T+6 minutes, when ranking fastest, then only T and T+3 remain."""
    at_t6 = direct_journey(0, 36)
    at_t = direct_journey(5, 30)
    at_t3 = direct_journey(2, 33)

    result = sorter.sort([at_t6, at_t, at_t3], TripPreference.FASTEST, now=BASE_TIME)

    assert result == [at_t, at_t3]


def test_fastest_drops_past_departures(sorter: TripPreferenceSorter) -> None:
    """Given a journey that already left, when ranking fastest, then it is excluded even if it arrives first."""
    departed = direct_journey(-10, 20)
    upcoming = direct_journey(5, 35)

    result = sorter.sort([departed, upcoming], TripPreference.FASTEST, now=BASE_TIME)

    assert result == [upcoming]


def test_fastest_without_upcoming_journeys_is_empty(sorter: TripPreferenceSorter) -> None:
    """Given only past journeys, when ranking fastest, then the result is empty."""
    later = BASE_TIME + timedelta(hours=2)

    assert sorter.sort([direct_journey(0, 30)], TripPreference.FASTEST, now=later) == []


def test_fastest_without_known_arrivals_is_empty(sorter: TripPreferenceSorter) -> None:
    """Given upcoming journeys without arrival times, when ranking fastest, then the result is empty."""
    result = sorter.sort([direct_journey(5, None)], TripPreference.FASTEST, now=BASE_TIME)

    assert result == []


def test_fastest_window_comes_from_policy() -> None:
    """Given a 10 minute window, when ranking fastest, then arrivals within 10 minutes remain."""
    sorter = TripPreferenceSorter(PlannerPolicy(fastest_window_minutes=10))
    journeys = [direct_journey(0, 30), direct_journey(0, 36), direct_journey(0, 41)]

    result = sorter.sort(journeys, TripPreference.FASTEST, now=BASE_TIME)

    assert result == journeys[:2]


def test_limited_stops_keeps_journeys_with_few_stops(sorter: TripPreferenceSorter) -> None:
    """Given express and all-stops services, when ranking limited stops, then only express remain by departure."""
    all_stops = direct_journey(0, 50, stops=14)
    express_late = direct_journey(20, 45, stops=5)
    express_early = direct_journey(5, 30, stops=7)

    result = sorter.sort([all_stops, express_late, express_early], TripPreference.LIMITED_STOPS)

    assert result == [express_early, express_late]


def test_limited_stops_falls_back_to_duration(sorter: TripPreferenceSorter) -> None:
    """Given no limited-stops service, when ranking, then journeys within 1.2x the shortest duration remain."""
    ten = direct_journey(0, 10, stops=20)
    eleven = direct_journey(5, 16, stops=20)
    fifteen = direct_journey(2, 17, stops=20)

    result = sorter.sort([fifteen, eleven, ten], TripPreference.LIMITED_STOPS)

    assert result == [ten, eleven]


def test_limited_stops_fallback_keeps_all_when_durations_unknown(
    sorter: TripPreferenceSorter,
) -> None:
    """Given no duration is known, when the duration fallback runs, then every journey is kept."""
    first = direct_journey(10, None, stops=20)
    second = direct_journey(0, None, stops=20)

    assert sorter.sort([first, second], TripPreference.LIMITED_STOPS) == [second, first]


def test_is_limited_stops_uses_policy_threshold() -> None:
    """Given a stricter stop limit, when classifying, then the threshold is respected."""
    sorter = TripPreferenceSorter(PlannerPolicy(limited_stops_max_stops=2))

    assert sorter.is_limited_stops(direct_journey(stops=4))
    assert not sorter.is_limited_stops(direct_journey(stops=5))

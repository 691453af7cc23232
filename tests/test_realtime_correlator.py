"""Tests for correlating planner trip ids with realtime entities."""

from tests.builders import make_trip_update, make_vehicle
from trip_planner.application.services.realtime_correlator import (
    CorrelationKey,
    find_trip_update,
    find_vehicle,
)

TRIP_ID = "96-N.1260.166.36.A.8.88166633"


def test_correlation_key_splits_prefix_and_suffix() -> None:
    """Given a dotted identifier, when parsing, then prefix and suffix are its first and last parts."""
    key = CorrelationKey.parse(TRIP_ID)

    assert key.prefix == "96-N"
    assert key.suffix == "88166633"


def test_single_part_identifier_has_no_prefix() -> None:
    """Given an identifier without dots, when parsing, then only a suffix is set."""
    key = CorrelationKey.parse("1260")

    assert key.prefix is None
    assert key.suffix == "1260"


def test_exact_match_wins_over_earlier_suffix_match() -> None:
    """Given a suffix match listed before an exact match, when correlating, then the exact match wins."""
    suffix_match = make_vehicle("v1", trip_id="other.88166633")
    exact = make_vehicle("v2", trip_id=TRIP_ID)

    assert find_vehicle(TRIP_ID, [suffix_match, exact]) is exact


def test_suffix_matches_entity_id() -> None:
    """Given the suffix only in the entity id, when correlating, then that entity matches."""
    vehicle = make_vehicle("88166633_veh", trip_id="unrelated")

    assert find_vehicle(TRIP_ID, [vehicle]) is vehicle


def test_prefix_match_is_tried_after_suffix() -> None:
    """Given a prefix-only and a suffix-only candidate, when correlating, then the suffix one wins."""
    prefix_only = make_trip_update("tu1", trip_id="96-N.999")
    suffix_only = make_trip_update("tu2", trip_id="x.88166633")

    assert find_trip_update(TRIP_ID, [prefix_only, suffix_only]) is suffix_only
    assert find_trip_update(TRIP_ID, [prefix_only]) is prefix_only


def test_route_id_contained_in_identifier_matches() -> None:
    """Given only a route id inside the identifier, when correlating, then it matches as a last resort."""
    update = make_trip_update("tu1", trip_id="zzz", route_id="1260.166")

    assert find_trip_update(TRIP_ID, [update]) is update


def test_empty_route_id_never_matches() -> None:
    """Given an entity with an empty route id, when correlating, then it is not matched by route."""
    update = make_trip_update("tu1", trip_id="zzz", route_id="")

    assert find_trip_update(TRIP_ID, [update]) is None


def test_vehicle_label_is_last_resort_for_vehicles_only() -> None:
    """Given a vehicle label mentioning the suffix, when correlating, then the vehicle matches."""
    vehicle = make_vehicle("v1", trip_id="zzz", label="Run 1260 to Central")

    assert find_vehicle("1260", [vehicle]) is vehicle


def test_entities_without_trip_are_skipped() -> None:
    """Given an entity without trip descriptor, when correlating, then it is never matched."""
    vehicle = make_vehicle("88166633", with_trip=False)

    assert find_vehicle(TRIP_ID, [vehicle]) is None


def test_missing_identifier_or_no_candidates_return_none() -> None:
    """Given no identifier or no entities, when correlating, then None is returned."""
    assert find_vehicle(None, [make_vehicle("v1", trip_id=TRIP_ID)]) is None
    assert find_vehicle("", [make_vehicle("v1", trip_id=TRIP_ID)]) is None
    assert find_trip_update(TRIP_ID, []) is None

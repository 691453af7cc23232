"""Tests for TfNSW rapidJSON response parsers."""

from datetime import UTC, datetime

from trip_planner.adapters.tfnsw_api.journey_parser import JourneyParser
from trip_planner.adapters.tfnsw_api.location_parser import LocationParser
from trip_planner.adapters.tfnsw_api.stop_event_parser import StopEventParser

TRIP_RESPONSE = {
    "journeys": [
        {
            "legs": [
                {
                    "origin": {
                        "id": "2150111",
                        "name": "Parramatta Station, Platform 1, Parramatta",
                        "coord": [-33.817, 151.004],
                        "departureTimePlanned": "2025-03-03T08:00:00Z",
                        "departureTimeEstimated": "2025-03-03T08:02:00Z",
                    },
                    "destination": {
                        "id": "200060",
                        "name": "Central Station, Platform 16, Sydney",
                        "arrivalTimePlanned": "2025-03-03T08:30:00Z",
                    },
                    "transportation": {
                        "id": "nsw:020T1: :H:sj2",
                        "name": "Sydney Trains Network T1 North Shore & Western Line",
                        "disassembledName": "T1",
                        "product": {"class": 1, "name": "Sydney Trains Network"},
                        "properties": {"RealtimeTripId": "96-N.1260.166", "tripCode": 1260},
                    },
                    "stopSequence": [{"id": "a"}, {"id": "b"}, {"id": "c"}],
                },
                {
                    "origin": {"name": "Central Station"},
                    "destination": {"name": "Central Station"},
                    "transportation": {"product": {"class": 100, "name": "footpath"}},
                },
            ]
        },
        "not a journey",
    ],
    "systemMessages": [],
}


def test_parse_journeys_maps_legs_and_times() -> None:
    """Given a trip response, when parsing, then legs, times and identifiers are mapped."""
    journeys = JourneyParser.parse_journeys(TRIP_RESPONSE)

    assert len(journeys) == 1
    first, walk = journeys[0].legs
    assert first.origin.latitude == -33.817
    assert first.origin.longitude == 151.004
    assert first.origin.departure_time_estimated == "2025-03-03T08:02:00Z"
    assert first.destination.arrival_time_planned == "2025-03-03T08:30:00Z"
    assert first.transportation.product_class == 1
    assert first.transportation.line_name == "T1"
    assert first.transportation.realtime_trip_id == "96-N.1260.166"
    assert first.transportation.trip_code == "1260"
    assert len(first.stop_sequence) == 3
    assert walk.transportation.product_class == 100
    assert not walk.is_substantive


def test_parse_journeys_without_journeys_key() -> None:
    """Given a response without journeys, when parsing, then an empty list is returned."""
    assert JourneyParser.parse_journeys({"systemMessages": [{"type": "error"}]}) == []


def test_missing_product_class_is_none() -> None:
    """Given a transportation without product, when parsing, then product class is None."""
    transportation = JourneyParser.parse_transportation({"name": "Walk"})

    assert transportation.product_class is None


def test_locations_keep_transport_nodes_only() -> None:
    """Given mixed stop finder results, when parsing, then streets and POIs without stop names are dropped."""
    data = {
        "locations": [
            {
                "id": "10101100",
                "name": "Central Station, Sydney",
                "type": "stop",
                "coord": [-33.88, 151.2],
            },
            {"id": "202210", "name": "Platform 2", "type": "platform"},
            {"id": "g1", "name": "Somewhere", "type": "poi", "isGlobalId": True},
            {"id": "w1", "name": "Circular Quay Wharf 5", "type": "poi"},
            {"id": "s1", "name": "George Street", "type": "street"},
            {"name": "No id Station", "type": "stop"},
        ]
    }

    stops = LocationParser.parse_locations(data)

    assert [stop.id for stop in stops] == ["10101100", "202210", "g1", "w1"]
    assert stops[0].latitude == -33.88
    assert stops[2].is_global_id


def test_stop_events_map_to_departures() -> None:
    """Given departure monitor events, when parsing, then times, line, destination and platform data are mapped."""
    data = {
        "stopEvents": [
            {
                "location": {
                    "id": "2000336",
                    "name": "Central Station, Platform 16",
                    "properties": {"platform": "CE16"},
                },
                "departureTimePlanned": "2025-03-03T08:00:00Z",
                "departureTimeEstimated": "2025-03-03T08:04:00Z",
                "transportation": {
                    "disassembledName": "T1",
                    "number": "T1 North Shore & Western Line",
                    "destination": {"name": "Emu Plains"},
                    "product": {"class": 1},
                    "properties": {"RealtimeTripId": "96-N.1260"},
                },
            },
            {"location": {"id": "x"}, "transportation": {}},
            {
                "departureTimePlanned": "2025-03-03T08:10:00",
                "plannedPlatform": "2",
                "transportation": {"number": "333"},
            },
        ]
    }

    departures = StopEventParser.parse_stop_events(data)

    assert len(departures) == 2
    first, second = departures
    assert first.planned_time == datetime(2025, 3, 3, 8, 0, tzinfo=UTC)
    assert first.delay_minutes == 4
    assert first.line == "T1"
    assert first.destination == "Emu Plains"
    assert first.product_class == 1
    assert first.realtime_trip_id == "96-N.1260"
    assert first.properties["platform"] == "CE16"
    assert second.line == "333"
    assert second.destination == "Unknown Destination"
    assert second.properties["plannedPlatform"] == "2"
    assert second.planned_time is not None and second.planned_time.tzinfo is not None

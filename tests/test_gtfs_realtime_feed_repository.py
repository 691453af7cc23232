"""Tests for the GTFS-realtime feed repository."""

from unittest.mock import AsyncMock

import pytest
from google.transit import gtfs_realtime_pb2

from trip_planner.adapters.gtfs_realtime import GtfsRealtimeFeedRepository, feed_path_for
from trip_planner.domain.errors import ApiError
from trip_planner.domain.models import TransportMode


def _vehicle_feed() -> bytes:
    feed = gtfs_realtime_pb2.FeedMessage()
    feed.header.gtfs_realtime_version = "2.0"
    entity = feed.entity.add()
    entity.id = "veh-1"
    entity.vehicle.trip.trip_id = "96-N.1260.166"
    entity.vehicle.trip.route_id = "T1"
    entity.vehicle.vehicle.label = "Central to Emu Plains"
    entity.vehicle.position.latitude = -33.88
    entity.vehicle.position.longitude = 151.2
    entity.vehicle.position.bearing = 90.0
    entity.vehicle.timestamp = 1740988800
    no_trip = feed.entity.add()
    no_trip.id = "veh-2"
    no_trip.vehicle.position.latitude = -33.8
    no_trip.vehicle.position.longitude = 151.1
    update_only = feed.entity.add()
    update_only.id = "tu-in-vehicle-feed"
    update_only.trip_update.trip.trip_id = "x"
    return feed.SerializeToString()


def _trip_update_feed() -> bytes:
    feed = gtfs_realtime_pb2.FeedMessage()
    feed.header.gtfs_realtime_version = "2.0"
    entity = feed.entity.add()
    entity.id = "tu-1"
    entity.trip_update.trip.trip_id = "96-N.1260.166"
    stop_time = entity.trip_update.stop_time_update.add()
    stop_time.stop_id = "2000336"
    stop_time.stop_sequence = 4
    stop_time.departure.delay = 120
    return feed.SerializeToString()


@pytest.fixture
def http_client() -> AsyncMock:
    return AsyncMock()


def test_feed_paths_per_mode() -> None:
    """Given each mode, when resolving feed paths, then trains and metro share nswtrains."""
    assert feed_path_for(TransportMode.TRAIN) == "nswtrains"
    assert feed_path_for(TransportMode.METRO) == "nswtrains"
    assert feed_path_for(TransportMode.FERRY) == "ferries/sydneyferries"
    assert feed_path_for(TransportMode.LIGHTRAIL) == "lightrail/cbdandsoutheast"
    assert feed_path_for(TransportMode.BUS) == "buses"


@pytest.mark.asyncio
async def test_vehicle_positions_are_decoded(http_client: AsyncMock) -> None:
    """Given a vehicle positions feed, when fetching, then vehicle entities are decoded."""
    http_client.get_bytes.return_value = (200, _vehicle_feed())
    repository = GtfsRealtimeFeedRepository(http_client, "veh-key", "tu-key")

    vehicles = await repository.get_vehicle_positions(TransportMode.TRAIN)

    assert [v.id for v in vehicles] == ["veh-1", "veh-2"]
    first, second = vehicles
    assert first.trip is not None
    assert first.trip.trip_id == "96-N.1260.166"
    assert first.trip.route_id == "T1"
    assert first.label == "Central to Emu Plains"
    assert first.latitude == pytest.approx(-33.88)
    assert first.bearing == pytest.approx(90.0)
    assert first.mode == TransportMode.TRAIN
    assert second.trip is None
    http_client.get_bytes.assert_awaited_once_with("/v1/gtfs/vehiclepos/nswtrains", "veh-key")


@pytest.mark.asyncio
async def test_trip_updates_are_decoded(http_client: AsyncMock) -> None:
    """Given a trip updates feed, when fetching, then stop time delays are decoded."""
    http_client.get_bytes.return_value = (200, _trip_update_feed())
    repository = GtfsRealtimeFeedRepository(http_client, "veh-key", "tu-key")

    updates = await repository.get_trip_updates(TransportMode.METRO)

    assert len(updates) == 1
    assert updates[0].trip is not None and updates[0].trip.trip_id == "96-N.1260.166"
    assert updates[0].stop_time_updates[0].departure_delay == 120
    assert updates[0].stop_time_updates[0].arrival_delay is None
    http_client.get_bytes.assert_awaited_once_with("/v1/gtfs/realtime/nswtrains", "tu-key")


@pytest.mark.asyncio
async def test_missing_key_returns_empty_without_request(http_client: AsyncMock) -> None:
    """Given no realtime key, when fetching, then an empty list is returned and nothing requested."""
    repository = GtfsRealtimeFeedRepository(http_client, None, None)

    assert await repository.get_vehicle_positions(TransportMode.BUS) == []
    assert await repository.get_trip_updates(TransportMode.BUS) == []
    http_client.get_bytes.assert_not_awaited()


@pytest.mark.asyncio
async def test_non_200_returns_empty(http_client: AsyncMock) -> None:
    """Given a 403 feed response, when fetching, then an empty list is returned."""
    http_client.get_bytes.return_value = (403, b"")
    repository = GtfsRealtimeFeedRepository(http_client, "key", "key")

    assert await repository.get_vehicle_positions(TransportMode.FERRY) == []


@pytest.mark.asyncio
async def test_connection_failure_returns_empty(http_client: AsyncMock) -> None:
    """Given a connection failure, when fetching, then an empty list is returned."""
    http_client.get_bytes.side_effect = ApiError("Request failed: timeout")
    repository = GtfsRealtimeFeedRepository(http_client, "key", "key")

    assert await repository.get_trip_updates(TransportMode.TRAIN) == []


@pytest.mark.asyncio
async def test_undecodable_payload_returns_empty(http_client: AsyncMock) -> None:
    """Given a truncated protobuf payload, when fetching, then an empty list is returned."""
    http_client.get_bytes.return_value = (200, b"\x0a\x05abc")
    repository = GtfsRealtimeFeedRepository(http_client, "key", "key")

    assert await repository.get_vehicle_positions(TransportMode.LIGHTRAIL) == []

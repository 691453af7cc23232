"""Decodes GTFS-realtime protobuf feeds into domain entities."""

import logging
from typing import Any

from google.protobuf.message import DecodeError
from google.transit import gtfs_realtime_pb2

from trip_planner.domain.models.realtime import (
    StopTimeUpdate,
    TransportMode,
    TripDescriptor,
    TripUpdateEntity,
    VehicleEntity,
)

logger = logging.getLogger(__name__)

__all__ = ["DecodeError", "decode_feed", "decode_trip_updates", "decode_vehicle_positions"]


def decode_feed(payload: bytes) -> gtfs_realtime_pb2.FeedMessage:
    """Parse a FeedMessage. Raises DecodeError on malformed input."""
    feed = gtfs_realtime_pb2.FeedMessage()
    feed.ParseFromString(payload)
    return feed


def _trip_descriptor(message: Any, has_trip: bool) -> TripDescriptor | None:
    if not has_trip:
        return None
    trip = message.trip
    return TripDescriptor(
        trip_id=trip.trip_id if trip.HasField("trip_id") else "",
        route_id=trip.route_id if trip.HasField("route_id") else "",
        start_time=trip.start_time if trip.HasField("start_time") else None,
        start_date=trip.start_date if trip.HasField("start_date") else None,
    )


def decode_vehicle_positions(payload: bytes, mode: TransportMode) -> list[VehicleEntity]:
    """Vehicle entities of a vehicle positions feed; other entity kinds are skipped."""
    vehicles = []
    for entity in decode_feed(payload).entity:
        if not entity.HasField("vehicle"):
            continue
        vehicle = entity.vehicle
        position = vehicle.position if vehicle.HasField("position") else None
        vehicles.append(
            VehicleEntity(
                id=entity.id,
                mode=mode,
                trip=_trip_descriptor(vehicle, vehicle.HasField("trip")),
                label=vehicle.vehicle.label if vehicle.vehicle.HasField("label") else "",
                latitude=position.latitude if position is not None else None,
                longitude=position.longitude if position is not None else None,
                bearing=position.bearing
                if position is not None and position.HasField("bearing")
                else None,
                timestamp=vehicle.timestamp if vehicle.HasField("timestamp") else None,
            )
        )
    return vehicles


def _stop_time_update(update: Any) -> StopTimeUpdate:
    return StopTimeUpdate(
        stop_id=update.stop_id if update.HasField("stop_id") else "",
        stop_sequence=update.stop_sequence if update.HasField("stop_sequence") else None,
        arrival_delay=update.arrival.delay
        if update.HasField("arrival") and update.arrival.HasField("delay")
        else None,
        departure_delay=update.departure.delay
        if update.HasField("departure") and update.departure.HasField("delay")
        else None,
    )


def decode_trip_updates(payload: bytes, mode: TransportMode) -> list[TripUpdateEntity]:
    """Trip update entities of a realtime feed."""
    updates = []
    for entity in decode_feed(payload).entity:
        if not entity.HasField("trip_update"):
            continue
        trip_update = entity.trip_update
        updates.append(
            TripUpdateEntity(
                id=entity.id,
                mode=mode,
                trip=_trip_descriptor(trip_update, trip_update.HasField("trip")),
                stop_time_updates=tuple(
                    _stop_time_update(u) for u in trip_update.stop_time_update
                ),
                timestamp=trip_update.timestamp if trip_update.HasField("timestamp") else None,
            )
        )
    return updates

"""GTFS-realtime feed adapters."""

from trip_planner.adapters.gtfs_realtime.gtfs_realtime_feed_repository import (
    GtfsRealtimeFeedRepository,
    feed_path_for,
)

__all__ = ["GtfsRealtimeFeedRepository", "feed_path_for"]

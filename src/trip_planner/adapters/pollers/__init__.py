"""Periodic refresh pollers."""

from trip_planner.adapters.pollers.snapshot_poller import SnapshotPoller, extract_error_details
from trip_planner.adapters.pollers.snapshot_state import SnapshotState

__all__ = ["SnapshotPoller", "SnapshotState", "extract_error_details"]

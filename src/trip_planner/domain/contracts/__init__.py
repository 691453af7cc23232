"""Domain contracts (protocols for infrastructure collaborators)."""

from trip_planner.domain.contracts.poller import PollerProtocol
from trip_planner.domain.contracts.snapshot_state import SnapshotStateProtocol

__all__ = ["PollerProtocol", "SnapshotStateProtocol"]

"""Protocol for per-view snapshot state."""

from datetime import datetime
from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from trip_planner.domain.models.error_details import ErrorDetails

T = TypeVar("T")


class SnapshotStateProtocol(Protocol[T]):
    """Holds the latest complete snapshot of a view."""

    @property
    def closed(self) -> bool:
        """Whether the owning view has been torn down."""
        ...

    def replace(self, snapshot: T, updated_at: datetime) -> bool:
        """Replace the snapshot. Returns False and does nothing once closed."""
        ...

    def record_error(self, error: "ErrorDetails") -> bool:
        """Record a failed refresh. Returns False and does nothing once closed."""
        ...

    def close(self) -> None:
        """Mark the owning view as torn down."""
        ...

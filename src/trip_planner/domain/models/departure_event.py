"""Departure event domain model."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class DepartureEvent:
    """A single departure from a stop (departure monitor stop event)."""

    location_id: str | None
    location_name: str | None
    planned_time: datetime | None
    estimated_time: datetime | None
    line: str
    destination: str
    product_class: int | None
    platform: str | None = None
    realtime_trip_id: str | None = None
    properties: dict[str, str] = field(default_factory=dict)

    @property
    def time(self) -> datetime | None:
        """Estimated time if known, else planned."""
        return self.estimated_time or self.planned_time

    @property
    def delay_minutes(self) -> int:
        """Minutes behind schedule, 0 when on time or unknown."""
        if self.estimated_time is None or self.planned_time is None:
            return 0
        return round((self.estimated_time - self.planned_time).total_seconds() / 60)

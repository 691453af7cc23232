"""Favorite route domain model."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FavoriteRoute:
    """A saved origin/destination pair."""

    origin_id: str
    origin_name: str
    destination_id: str
    destination_name: str

    @property
    def id(self) -> str:
        """Composite identifier ``originId-destinationId``."""
        return f"{self.origin_id}-{self.destination_id}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the stored JSON shape."""
        return {
            "id": self.id,
            "from": {"id": self.origin_id, "name": self.origin_name},
            "to": {"id": self.destination_id, "name": self.destination_name},
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FavoriteRoute":
        """Deserialize from the stored JSON shape."""
        origin = data.get("from") or {}
        destination = data.get("to") or {}
        return cls(
            origin_id=str(origin.get("id", "")),
            origin_name=str(origin.get("name", "")),
            destination_id=str(destination.get("id", "")),
            destination_name=str(destination.get("name", "")),
        )

"""Stop domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Stop:
    """A searchable public transport location."""

    id: str
    name: str
    type: str
    disassembled_name: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    is_global_id: bool = False

    @property
    def display_name(self) -> str:
        """Short name if the API gave one."""
        return self.disassembled_name or self.name

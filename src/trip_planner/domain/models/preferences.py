"""User preference domain models."""

from dataclasses import dataclass
from enum import Enum

from trip_planner.domain.models.realtime import TransportMode


class TripPreference(str, Enum):
    """Ranking policy for the journey list."""

    ALL_STOPS = "all_stops"
    LIMITED_STOPS = "limited_stops"
    FASTEST = "fastest"


@dataclass(frozen=True)
class PlannerPolicy:
    """Heuristic thresholds used when ranking journeys."""

    fastest_window_minutes: float = 5
    limited_stops_max_stops: int = 5
    limited_stops_duration_tolerance: float = 1.20


@dataclass(frozen=True)
class DisplayPreferences:
    """How times are rendered."""

    use_24_hour: bool = False
    show_date: bool = True


@dataclass(frozen=True)
class TransportFilters:
    """Which transport modes are shown on boards and maps."""

    train: bool = True
    metro: bool = True
    bus: bool = True
    lightrail: bool = True
    ferry: bool = True

    def enabled_modes(self) -> list[TransportMode]:
        """Enabled modes in a fixed order."""
        return [mode for mode in TransportMode if getattr(self, mode.value)]

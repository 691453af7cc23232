"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from trip_planner.domain.models.fetch_settings import FetchSettings
from trip_planner.domain.models.preferences import PlannerPolicy, TripPreference

# TOML table -> settings fields it may override
_TOML_SECTIONS: dict[str, tuple[str, ...]] = {
    "planner": (
        "fetch_batch_size",
        "fetch_batch_pause_ms",
        "trip_result_count",
        "fallback_trip_result_count",
        "fastest_window_minutes",
        "limited_stops_max_stops",
        "limited_stops_duration_tolerance",
        "default_preference",
    ),
    "refresh": (
        "trip_refresh_seconds",
        "departure_refresh_seconds",
        "vehicle_refresh_seconds",
        "live_trip_refresh_seconds",
    ),
    "api": ("timezone", "tfnsw_base_url", "tfnsw_api_timeout", "min_delay_seconds_between_calls"),
    "storage": ("preferences_file",),
}


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Credentials
    tfnsw_api_key: str | None = Field(default=None, description="Trip planner API key")
    tfnsw_gtfs_api_key: str | None = Field(
        default=None, description="GTFS-realtime API key (falls back to the trip planner key)"
    )
    tfnsw_vehicle_pos_api_key: str | None = Field(
        default=None, description="Vehicle positions feed key (falls back to the GTFS key)"
    )
    tfnsw_trip_updates_api_key: str | None = Field(
        default=None, description="Trip updates feed key (falls back to the GTFS key)"
    )

    # Transport
    timezone: str = Field(
        default="Australia/Sydney",
        description="IANA timezone the journey planner interprets query dates and times in",
    )
    tfnsw_base_url: str = Field(
        default="https://api.transport.nsw.gov.au", description="Open data API base URL"
    )
    tfnsw_api_timeout: int = Field(default=15, description="Timeout for API requests in seconds")
    min_delay_seconds_between_calls: float = Field(
        default=0.0,
        description="Minimum delay between trip planner requests to avoid rate limiting",
    )

    # Multi-window trip search
    fetch_batch_size: int = Field(default=3, description="Time windows queried concurrently")
    fetch_batch_pause_ms: int = Field(default=100, description="Pause between window batches")
    trip_result_count: int = Field(default=150, description="Journeys requested per window")
    fallback_trip_result_count: int = Field(
        default=300, description="Journeys requested by the fallback query"
    )

    # Ranking policy
    fastest_window_minutes: float = Field(
        default=5, description="Fastest: keep journeys arriving within this of the earliest"
    )
    limited_stops_max_stops: int = Field(
        default=5, description="Limited stops: maximum intermediate stops"
    )
    limited_stops_duration_tolerance: float = Field(
        default=1.20, description="Limited stops fallback: allowed multiple of the minimum duration"
    )
    default_preference: str = Field(default="all_stops", description="Initial trip preference")

    # Refresh intervals
    trip_refresh_seconds: int = Field(default=30, description="Journey list refresh interval")
    departure_refresh_seconds: int = Field(default=30, description="Departure board refresh")
    vehicle_refresh_seconds: int = Field(default=15, description="Live map refresh interval")
    live_trip_refresh_seconds: int = Field(default=10, description="Single trip live refresh")

    # Persistence
    preferences_file: str = Field(
        default="~/.config/trip-planner/preferences.json",
        description="JSON file holding favorites and display preferences",
    )

    config_file: str | None = Field(
        default=None, description="Optional TOML file overriding the settings above"
    )

    @field_validator("fetch_batch_size", "trip_result_count", "fallback_trip_result_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate counts are positive."""
        if v < 1:
            raise ValueError("batch size and result counts must be at least 1")
        return v

    @field_validator("limited_stops_duration_tolerance")
    @classmethod
    def validate_tolerance(cls, v: float) -> float:
        """Validate the duration tolerance never shrinks the minimum."""
        if v < 1.0:
            raise ValueError("limited_stops_duration_tolerance must be at least 1.0")
        return v

    @field_validator("default_preference")
    @classmethod
    def validate_default_preference(cls, v: str) -> str:
        """Validate the default preference is a known ranking policy."""
        values = {preference.value for preference in TripPreference}
        if v.lower() not in values:
            raise ValueError(f"default_preference must be one of {sorted(values)}")
        return v.lower()

    def load_toml(self) -> dict[str, Any]:
        """Apply overrides from the TOML config file, if one is configured."""
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        for section, names in _TOML_SECTIONS.items():
            table = toml_data.get(section, {})
            if not isinstance(table, dict):
                raise ValueError(f"TOML config '{section}' must be a table")
            for name in names:
                if name in table:
                    setattr(self, name, table[name])

        return toml_data

    def trip_planner_api_key(self) -> str | None:
        """Key for the trip planner endpoints."""
        return self.tfnsw_api_key

    def vehicle_positions_api_key(self) -> str | None:
        """Key for the vehicle positions feed."""
        return self.tfnsw_vehicle_pos_api_key or self.tfnsw_gtfs_api_key or self.tfnsw_api_key

    def trip_updates_api_key(self) -> str | None:
        """Key for the trip updates feed."""
        return self.tfnsw_trip_updates_api_key or self.tfnsw_gtfs_api_key or self.tfnsw_api_key

    def planner_policy(self) -> PlannerPolicy:
        """Ranking thresholds."""
        return PlannerPolicy(
            fastest_window_minutes=self.fastest_window_minutes,
            limited_stops_max_stops=self.limited_stops_max_stops,
            limited_stops_duration_tolerance=self.limited_stops_duration_tolerance,
        )

    def fetch_settings(self) -> FetchSettings:
        """Multi-window search settings."""
        return FetchSettings(
            batch_size=self.fetch_batch_size,
            batch_pause_seconds=self.fetch_batch_pause_ms / 1000,
            result_count=self.trip_result_count,
            fallback_result_count=self.fallback_trip_result_count,
        )

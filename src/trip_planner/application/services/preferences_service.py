"""Display preferences and transport filters, plus time formatting."""

import logging
from dataclasses import asdict, fields, replace
from datetime import datetime
from typing import TYPE_CHECKING, Any

from trip_planner.domain.models.preferences import DisplayPreferences, TransportFilters

if TYPE_CHECKING:
    from trip_planner.domain.ports import PreferenceStore

logger = logging.getLogger(__name__)

PREFERENCES_KEY = "app_preferences"
FILTERS_KEY = "transport_filters"

# Stored keys use the camelCase names the web front end wrote
_PREFERENCE_KEYS = {"use_24_hour": "use24Hour", "show_date": "showDate"}


def format_time(value: datetime | None, preferences: DisplayPreferences) -> str:
    """Render a time as ``14:05`` or ``2:05 PM``, optionally prefixed by the date."""
    if value is None:
        return "--:--"

    if preferences.use_24_hour:
        time_string = value.strftime("%H:%M")
    else:
        hour = value.hour % 12 or 12
        time_string = f"{hour}:{value.minute:02d} {'AM' if value.hour < 12 else 'PM'}"

    if preferences.show_date:
        return f"{value.strftime('%a')} {value.day} {value.strftime('%b')}, {time_string}"
    return time_string


def _bool_fields(data: Any, names: dict[str, str]) -> dict[str, bool]:
    if not isinstance(data, dict):
        return {}
    return {field: bool(data[key]) for field, key in names.items() if key in data}


class PreferencesService:
    """Loads preferences once and writes them back on every change."""

    def __init__(self, store: "PreferenceStore") -> None:
        """Initialize and load the stored preferences."""
        self._store = store
        self._preferences = DisplayPreferences(
            **_bool_fields(store.get(PREFERENCES_KEY), _PREFERENCE_KEYS)
        )
        filter_names = {field.name: field.name for field in fields(TransportFilters)}
        self._filters = TransportFilters(**_bool_fields(store.get(FILTERS_KEY), filter_names))

    @property
    def preferences(self) -> DisplayPreferences:
        """Current display preferences."""
        return self._preferences

    @property
    def filters(self) -> TransportFilters:
        """Current transport filters."""
        return self._filters

    def update_preference(self, name: str, value: bool) -> DisplayPreferences:
        """Change one display preference and persist."""
        if name not in _PREFERENCE_KEYS:
            raise ValueError(f"Unknown preference: {name}")
        self._preferences = replace(self._preferences, **{name: value})
        self._store.set(
            PREFERENCES_KEY,
            {key: getattr(self._preferences, field) for field, key in _PREFERENCE_KEYS.items()},
        )
        return self._preferences

    def toggle_filter(self, mode: str) -> TransportFilters:
        """Flip one transport mode filter and persist."""
        current = asdict(self._filters)
        if mode not in current:
            raise ValueError(f"Unknown transport mode: {mode}")
        self._filters = replace(self._filters, **{mode: not current[mode]})
        self._store.set(FILTERS_KEY, asdict(self._filters))
        logger.debug(f"Transport filter {mode} is now {not current[mode]}")
        return self._filters

    def format_time(self, value: datetime | None) -> str:
        """Format a time with the current preferences."""
        return format_time(value, self._preferences)

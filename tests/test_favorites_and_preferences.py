"""Tests for favorites, display preferences and time formatting."""

from datetime import datetime
from typing import Any

import pytest

from trip_planner.application.services import FavoritesService, PreferencesService, format_time
from trip_planner.application.services.favorites_service import FAVORITES_KEY
from trip_planner.application.services.preferences_service import FILTERS_KEY, PREFERENCES_KEY
from trip_planner.domain.models import DisplayPreferences, FavoriteRoute


class InMemoryStore:
    """Preference store keeping values in a dict."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self.data = data or {}
        self.writes = 0

    def get(self, key: str) -> Any | None:
        return self.data.get(key)

    def set(self, key: str, value: Any) -> None:
        self.writes += 1
        self.data[key] = value


CENTRAL_TO_PARRAMATTA = FavoriteRoute("10101100", "Central", "10101229", "Parramatta")


def test_add_favorite_persists_in_stored_shape() -> None:
    """Given an empty store, when adding a favorite, then it is stored with id, from and to."""
    store = InMemoryStore()
    service = FavoritesService(store)

    assert service.add_favorite(CENTRAL_TO_PARRAMATTA)

    assert store.data[FAVORITES_KEY] == [
        {
            "id": "10101100-10101229",
            "from": {"id": "10101100", "name": "Central"},
            "to": {"id": "10101229", "name": "Parramatta"},
        }
    ]


def test_adding_duplicate_favorite_is_noop() -> None:
    """Given a saved favorite, when adding it again, then nothing changes."""
    store = InMemoryStore()
    service = FavoritesService(store)
    service.add_favorite(CENTRAL_TO_PARRAMATTA)

    assert not service.add_favorite(CENTRAL_TO_PARRAMATTA)
    assert service.list_favorites() == [CENTRAL_TO_PARRAMATTA]
    assert store.writes == 1


def test_remove_favorite() -> None:
    """Given a saved favorite, when removing it by id, then the list is empty."""
    service = FavoritesService(InMemoryStore())
    service.add_favorite(CENTRAL_TO_PARRAMATTA)

    assert service.remove_favorite("10101100-10101229")
    assert service.list_favorites() == []
    assert not service.remove_favorite("10101100-10101229")


def test_preferences_default_when_store_empty() -> None:
    """Given nothing stored, when loading preferences, then 12-hour with date and all modes are used."""
    service = PreferencesService(InMemoryStore())

    assert service.preferences == DisplayPreferences(use_24_hour=False, show_date=True)
    assert len(service.filters.enabled_modes()) == 5


def test_preferences_load_stored_camel_case_keys() -> None:
    """Given stored camelCase preferences, when loading, then they are applied."""
    store = InMemoryStore(
        {PREFERENCES_KEY: {"use24Hour": True, "showDate": False}, FILTERS_KEY: {"bus": False}}
    )
    service = PreferencesService(store)

    assert service.preferences.use_24_hour
    assert not service.preferences.show_date
    assert not service.filters.bus
    assert service.filters.train


def test_update_preference_writes_back() -> None:
    """Given a preference change, when updating, then the store receives the new value."""
    store = InMemoryStore()
    service = PreferencesService(store)

    service.update_preference("use_24_hour", True)

    assert store.data[PREFERENCES_KEY] == {"use24Hour": True, "showDate": True}


def test_update_unknown_preference_raises() -> None:
    """Given an unknown preference name, when updating, then ValueError is raised."""
    with pytest.raises(ValueError, match="Unknown preference"):
        PreferencesService(InMemoryStore()).update_preference("theme", True)


def test_toggle_filter_flips_and_persists() -> None:
    """Given ferry enabled, when toggling it, then it is disabled and stored."""
    store = InMemoryStore()
    service = PreferencesService(store)

    filters = service.toggle_filter("ferry")

    assert not filters.ferry
    assert store.data[FILTERS_KEY]["ferry"] is False
    with pytest.raises(ValueError, match="Unknown transport mode"):
        service.toggle_filter("monorail")


@pytest.mark.parametrize(
    ("value", "preferences", "expected"),
    [
        (datetime(2025, 10, 19, 14, 5), DisplayPreferences(True, False), "14:05"),
        (datetime(2025, 10, 19, 14, 5), DisplayPreferences(False, False), "2:05 PM"),
        (datetime(2025, 10, 19, 0, 7), DisplayPreferences(False, False), "12:07 AM"),
        (datetime(2025, 10, 19, 9, 30), DisplayPreferences(True, True), "Sun 19 Oct, 09:30"),
        (None, DisplayPreferences(), "--:--"),
    ],
)
def test_format_time(value: datetime | None, preferences: DisplayPreferences, expected: str) -> None:
    """Given a time and display preferences, when formatting, then the expected text is produced."""
    assert format_time(value, preferences) == expected

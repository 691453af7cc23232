"""Saved origin/destination pairs."""

import logging
from typing import TYPE_CHECKING

from trip_planner.domain.models.favorite_route import FavoriteRoute

if TYPE_CHECKING:
    from trip_planner.domain.ports import PreferenceStore

logger = logging.getLogger(__name__)

FAVORITES_KEY = "favorite_trips"


class FavoritesService:
    """Adds, lists and removes favorite routes in the preference store."""

    def __init__(self, store: "PreferenceStore") -> None:
        """Initialize with the preference store."""
        self._store = store

    def list_favorites(self) -> list[FavoriteRoute]:
        """Favorites in the order they were saved."""
        stored = self._store.get(FAVORITES_KEY) or []
        return [FavoriteRoute.from_dict(item) for item in stored if isinstance(item, dict)]

    def add_favorite(self, favorite: FavoriteRoute) -> bool:
        """Save a favorite. Returns False if one with the same id already exists."""
        favorites = self.list_favorites()
        if any(existing.id == favorite.id for existing in favorites):
            return False
        favorites.append(favorite)
        self._save(favorites)
        logger.info(f"Saved favorite {favorite.id}")
        return True

    def remove_favorite(self, favorite_id: str) -> bool:
        """Remove a favorite by id. Returns False if it was not saved."""
        favorites = self.list_favorites()
        remaining = [favorite for favorite in favorites if favorite.id != favorite_id]
        if len(remaining) == len(favorites):
            return False
        self._save(remaining)
        logger.info(f"Removed favorite {favorite_id}")
        return True

    def _save(self, favorites: list[FavoriteRoute]) -> None:
        self._store.set(FAVORITES_KEY, [favorite.to_dict() for favorite in favorites])

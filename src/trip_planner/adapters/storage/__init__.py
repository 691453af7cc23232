"""Local persistence adapters."""

from trip_planner.adapters.storage.json_preference_store import JsonPreferenceStore

__all__ = ["JsonPreferenceStore"]

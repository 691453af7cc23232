"""Preference store port."""

from typing import Any, Protocol


class PreferenceStore(Protocol):
    """Port for a persisted key-value store holding JSON-like values."""

    def get(self, key: str) -> Any | None:
        """Return the stored value, or None if the key was never written."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Store a value, replacing any previous one."""
        ...

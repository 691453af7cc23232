"""JSON file backed preference store."""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class JsonPreferenceStore:
    """Key-value store persisted as one JSON object on disk.

    The file is read lazily and rewritten on every ``set``. A missing or
    corrupt file starts the store empty.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).expanduser()
        self._data: dict[str, Any] | None = None

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, Any]:
        if self._data is not None:
            return self._data

        self._data = {}
        if not self._path.exists():
            return self._data
        try:
            with self._path.open(encoding="utf-8") as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read preferences from {self._path}: {e}")
            return self._data

        if isinstance(loaded, dict):
            self._data = loaded
        else:
            logger.warning(f"Ignoring preferences file {self._path}: expected a JSON object")
        return self._data

    def get(self, key: str) -> Any | None:
        """Return the stored value, or None if the key was never written."""
        return self._load().get(key)

    def set(self, key: str, value: Any) -> None:
        """Store a value and write the file."""
        data = self._load()
        data[key] = value
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        with tmp_path.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        tmp_path.replace(self._path)
        logger.debug(f"Saved preference '{key}' to {self._path}")

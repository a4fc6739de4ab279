"""
User favorites: display names bound to catalog zone ids.

The whole ordered list is stored as one JSON document under a single
settings key and rewritten on every add/remove.
"""
from __future__ import annotations

import json
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from PySide6.QtCore import QObject, Signal

from core.logging.logger import get_logger, is_verbose_logging
from core.settings.settings_manager import SettingsManager

logger = get_logger(__name__)

FAVORITES_KEY = "favorites"


@dataclass(frozen=True)
class FavoriteCity:
    """A user-named city pinned to a catalog zone."""

    id: str
    name: str
    time_zone_id: str

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "name": self.name, "timeZoneId": self.time_zone_id}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FavoriteCity":
        """
        Build a favorite from its stored mapping.

        Raises:
            ValueError: If a field is missing or not a string
        """
        try:
            values = (data["id"], data["name"], data["timeZoneId"])
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed favorite record: {data!r}") from e
        if not all(isinstance(value, str) for value in values):
            raise ValueError(f"Malformed favorite record: {data!r}")
        return cls(*values)


class FavoritesStore(QObject):
    """
    Ordered, persisted list of favorite cities.

    Insertion order is display order. Storage and memory are kept in step:
    each successful mutation rewrites the full list and syncs before
    returning.
    """

    favorites_changed = Signal(list)  # list[FavoriteCity]

    def __init__(self, settings: SettingsManager, key: str = FAVORITES_KEY,
                 parent: Optional[QObject] = None):
        super().__init__(parent)
        self._settings = settings
        self._key = key
        self._favorites: List[FavoriteCity] = []
        self._last_id = 0

    @property
    def favorites(self) -> List[FavoriteCity]:
        return list(self._favorites)

    def get(self, favorite_id: str) -> Optional[FavoriteCity]:
        for favorite in self._favorites:
            if favorite.id == favorite_id:
                return favorite
        return None

    def load(self) -> List[FavoriteCity]:
        """
        Read the persisted favorites.

        A missing key yields an empty list. Corrupt data is logged and also
        treated as an empty list; the stored value is left untouched until
        the next mutation overwrites it.
        """
        raw = self._settings.get(self._key)
        if raw is None or raw == "":
            self._favorites = []
            logger.debug("[FAVORITES] No stored favorites")
            return self.favorites

        try:
            records = json.loads(raw)
            if not isinstance(records, list):
                raise ValueError(f"expected a list, got {type(records).__name__}")
            loaded = [FavoriteCity.from_dict(record) for record in records]
        except (TypeError, ValueError) as e:
            # json.JSONDecodeError is a ValueError subclass
            logger.warning("[FALLBACK] [FAVORITES] Stored favorites unreadable, starting empty: %s", e)
            self._favorites = []
            return self.favorites

        self._favorites = loaded
        for favorite in loaded:
            if favorite.id.isdigit():
                self._last_id = max(self._last_id, int(favorite.id))
        logger.info("[FAVORITES] Loaded %d favorites", len(loaded))
        return self.favorites

    def add(self, name: str, time_zone_id: str) -> Optional[FavoriteCity]:
        """
        Append a favorite.

        Returns:
            The new favorite, or None when the name is blank or no zone was
            selected (nothing is stored in that case)
        """
        display_name = (name or "").strip()
        if not display_name or not time_zone_id:
            logger.debug("[FAVORITES] Rejected add (name=%r, zone=%r)", name, time_zone_id)
            return None

        favorite = FavoriteCity(self._next_id(), display_name, time_zone_id)
        self._favorites.append(favorite)
        self._persist()
        logger.info("[FAVORITES] Added %s -> %s (id=%s)", display_name, time_zone_id, favorite.id)
        return favorite

    def remove(self, favorite_id: str) -> bool:
        """Remove a favorite by id. Unknown ids are ignored."""
        remaining = [f for f in self._favorites if f.id != favorite_id]
        if len(remaining) == len(self._favorites):
            logger.debug("[FAVORITES] Remove ignored, no favorite with id=%s", favorite_id)
            return False

        self._favorites = remaining
        self._persist()
        logger.info("[FAVORITES] Removed id=%s", favorite_id)
        return True

    def _next_id(self) -> str:
        # Creation time in ms, bumped past the last id so same-ms adds stay unique.
        candidate = max(int(time.time() * 1000), self._last_id + 1)
        self._last_id = candidate
        return str(candidate)

    def _persist(self) -> None:
        payload = json.dumps([favorite.to_dict() for favorite in self._favorites])
        self._settings.set(self._key, payload)
        self._settings.sync()
        if is_verbose_logging():
            logger.debug("[FAVORITES] Persisted %s", payload)
        self.favorites_changed.emit(self.favorites)

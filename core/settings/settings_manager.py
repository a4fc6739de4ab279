"""
Settings manager implementation for the world clock.

Uses QSettings for persistent storage. Favorites and clock preferences both
live here so a single durable store backs the whole application.
"""
from typing import Any, Callable, Dict, List, Optional
import os
import threading
from PySide6.QtCore import QSettings, QObject, Signal
from core.logging.logger import get_logger, is_verbose_logging

logger = get_logger(__name__)

DEFAULT_ORGANIZATION = "WorldClock"
DEFAULT_APPLICATION = "WorldClock"
SETTINGS_PATH_ENV = "WORLDCLOCK_SETTINGS_PATH"


class SettingsManager(QObject):
    """
    Centralized settings management for the world clock.

    Uses QSettings for persistent storage with organization/application name,
    or an INI file when ``path`` is given. Change notifications are delivered
    through the ``settings_changed`` signal and per-key handlers.
    """

    # Signal emitted when settings change
    settings_changed = Signal(str, object)  # key, new_value

    def __init__(self, organization: str = DEFAULT_ORGANIZATION,
                 application: str = DEFAULT_APPLICATION,
                 path: Optional[str] = None):
        """
        Initialize the settings manager.

        Args:
            organization: Organization name for QSettings
            application: Application name for QSettings
            path: Optional INI file path; overrides the native store
        """
        super().__init__()

        if path is None:
            path = os.getenv(SETTINGS_PATH_ENV) or None

        if path:
            self._settings = QSettings(str(path), QSettings.Format.IniFormat)
        else:
            self._settings = QSettings(organization, application)
        self._lock = threading.RLock()
        self._change_handlers: Dict[str, List[Callable]] = {}

        self._set_defaults()

        logger.info("SettingsManager initialized (%s)", self._settings.fileName())

    def _set_defaults(self) -> None:
        """Set default values if not already present."""
        defaults = {
            # Reference instant refresh cadence
            'clock.refresh_interval_ms': 60000,
            # Formatting strategy
            'clock.locale': 'en_US',
            'clock.time_format': '12h',  # '12h' | '24h' | 'locale'
        }

        with self._lock:
            for key, value in defaults.items():
                if not self._settings.contains(key):
                    self._settings.setValue(key, value)
                    logger.debug("Default applied: %s=%r", key, value)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a setting value.

        Args:
            key: Setting key in dot notation (e.g., 'clock.locale')
            default: Default value if key not found

        Returns:
            Setting value or default
        """
        with self._lock:
            return self._settings.value(key, default)

    def get_int(self, key: str, default: int = 0) -> int:
        """Convenience wrapper around get() that normalizes to int."""
        raw = self.get(key, default)
        try:
            return int(raw)
        except (TypeError, ValueError):
            logger.warning("[FALLBACK] Setting %s=%r is not an int, using %d", key, raw, default)
            return default

    def set(self, key: str, value: Any) -> None:
        """
        Set a setting value.

        Args:
            key: Setting key in dot notation
            value: Value to set
        """
        with self._lock:
            old_value = self._settings.value(key)
            self._settings.setValue(key, value)

            self.settings_changed.emit(key, value)

            for handler in self._change_handlers.get(key, []):
                try:
                    handler(value, old_value)
                except Exception as e:
                    logger.error("Error in change handler for %s: %s", key, e)

        # Stored payloads (the favorites JSON in particular) can be long, so
        # values are only dumped in verbose mode.
        if is_verbose_logging():
            logger.debug("Setting changed: %s: %r -> %r", key, old_value, value)
        else:
            logger.debug("Setting changed: %s", key)

    def sync(self) -> None:
        """Force pending writes out to persistent storage."""
        with self._lock:
            self._settings.sync()
            status = self._settings.status()
        if status != QSettings.Status.NoError:
            logger.error("Settings sync failed: %s", status)

    def on_changed(self, key: str, handler: Callable[[Any, Any], None]) -> None:
        """
        Register a handler for setting changes.

        Args:
            key: Setting key to watch
            handler: Called as handler(new_value, old_value)
        """
        with self._lock:
            self._change_handlers.setdefault(key, []).append(handler)
        logger.debug("Registered change handler for %s", key)

    def contains(self, key: str) -> bool:
        """Check if a setting key exists."""
        with self._lock:
            return self._settings.contains(key)

    def remove(self, key: str) -> None:
        """Remove a setting key."""
        with self._lock:
            self._settings.remove(key)
        logger.debug("Removed setting: %s", key)

    def clear(self) -> None:
        """Clear all settings (use with caution)."""
        with self._lock:
            self._settings.clear()
        logger.warning("All settings cleared")

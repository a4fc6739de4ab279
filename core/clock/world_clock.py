"""
World clock controller.

Glues the catalog, engine, favorites store and refresh scheduler together and
exposes ready-to-render readings. All readings produced between two ticks are
computed from the same reference instant.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from PySide6.QtCore import QObject, Signal

from core.clock.catalog import TimeZoneEntry, find_zone, format_offset, get_catalog
from core.clock.engine import local_time_for
from core.clock.favorites import FavoriteCity, FavoritesStore
from core.clock.formatting import ClockFormatter
from core.clock.scheduler import DEFAULT_REFRESH_INTERVAL_MS, RefreshScheduler, utc_now
from core.logging.logger import get_logger
from core.settings.settings_manager import SettingsManager

logger = get_logger(__name__)


@dataclass(frozen=True)
class ClockReading:
    """Everything a card needs to show one zone."""
    zone: TimeZoneEntry
    wall_clock: datetime
    is_dst_active: bool
    time_text: str
    date_text: str

    @property
    def offset_label(self) -> str:
        """Offset actually applied, e.g. 'UTC-4' for New York during DST."""
        hours = self.wall_clock.utcoffset().total_seconds() / 3600
        return f"UTC{format_offset(hours)}"


class WorldClock(QObject):
    """
    Owns the reference instant and everything derived from it.

    ``activate()`` loads favorites and starts the refresh timer;
    ``deactivate()`` must be called on teardown to cancel it.
    """

    refreshed = Signal(object)  # datetime

    def __init__(self, settings: SettingsManager,
                 formatter: Optional[ClockFormatter] = None,
                 clock: Optional[Callable[[], datetime]] = None,
                 parent: Optional[QObject] = None):
        super().__init__(parent)
        if formatter is None:
            formatter = ClockFormatter.from_settings(settings)
            # Follow preference changes made while the clock is running
            for key in ('clock.locale', 'clock.time_format'):
                settings.on_changed(key, lambda _new, _old: self._reload_formatter(settings))
        self._formatter = formatter
        self._clock = clock or utc_now
        self._reference_instant = self._clock()

        interval_ms = settings.get_int('clock.refresh_interval_ms', DEFAULT_REFRESH_INTERVAL_MS)
        self._scheduler = RefreshScheduler(interval_ms, clock=self._clock, parent=self)
        self._scheduler.ticked.connect(self.set_reference_instant)

        self._favorites = FavoritesStore(settings, parent=self)

    @property
    def favorites(self) -> FavoritesStore:
        return self._favorites

    @property
    def scheduler(self) -> RefreshScheduler:
        return self._scheduler

    @property
    def formatter(self) -> ClockFormatter:
        return self._formatter

    @property
    def reference_instant(self) -> datetime:
        return self._reference_instant

    def _reload_formatter(self, settings: SettingsManager) -> None:
        self._formatter = ClockFormatter.from_settings(settings)
        logger.info(
            "[CLOCK] Formatter now %s / %s",
            self._formatter.locale_name,
            self._formatter.time_format.value,
        )

    def activate(self) -> None:
        self._favorites.load()
        self._scheduler.start()
        logger.info("[CLOCK] Activated with %d favorites", len(self._favorites.favorites))

    def deactivate(self) -> None:
        self._scheduler.stop()
        logger.info("[CLOCK] Deactivated")

    def is_active(self) -> bool:
        return self._scheduler.is_running()

    def set_reference_instant(self, instant: datetime) -> None:
        self._reference_instant = instant
        self.refreshed.emit(instant)

    def reading_for(self, zone: TimeZoneEntry) -> ClockReading:
        wall_clock, dst_active = local_time_for(zone, self._reference_instant)
        return ClockReading(
            zone=zone,
            wall_clock=wall_clock,
            is_dst_active=dst_active,
            time_text=self._formatter.format_time(wall_clock),
            date_text=self._formatter.format_date(wall_clock),
        )

    def zone_readings(self) -> List[ClockReading]:
        return [self.reading_for(zone) for zone in get_catalog()]

    def favorite_readings(self) -> List[Tuple[FavoriteCity, ClockReading]]:
        """Readings for each favorite; favorites with unknown zones are skipped."""
        readings = []
        for favorite in self._favorites.favorites:
            zone = find_zone(favorite.time_zone_id)
            if zone is None:
                logger.debug(
                    "[CLOCK] Skipping favorite %s: unknown zone %r",
                    favorite.name,
                    favorite.time_zone_id,
                )
                continue
            readings.append((favorite, self.reading_for(zone)))
        return readings

    def add_favorite(self, name: str, zone_id: str) -> Optional[FavoriteCity]:
        return self._favorites.add(name, zone_id)

    def remove_favorite(self, favorite_id: str) -> bool:
        return self._favorites.remove(favorite_id)

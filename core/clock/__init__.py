"""Time zone catalog, clock computation and favorites."""

from .catalog import TimeZoneEntry, find_zone, format_offset, get_catalog, get_zone_choices
from .engine import ZoneTime, is_dst_active, local_time_for
from .favorites import FavoriteCity, FavoritesStore
from .formatting import ClockFormatter, TimeFormat
from .scheduler import RefreshScheduler
from .world_clock import ClockReading, WorldClock

__all__ = [
    'TimeZoneEntry',
    'find_zone',
    'format_offset',
    'get_catalog',
    'get_zone_choices',
    'ZoneTime',
    'is_dst_active',
    'local_time_for',
    'FavoriteCity',
    'FavoritesStore',
    'ClockFormatter',
    'TimeFormat',
    'RefreshScheduler',
    'ClockReading',
    'WorldClock',
]

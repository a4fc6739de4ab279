"""
Locale-aware formatting for zone wall-clock times.

The locale is explicit configuration rather than whatever the host happens
to use, so output is reproducible.
"""
from datetime import datetime
from enum import Enum

from PySide6.QtCore import QDate, QLocale, QTime

from core.logging.logger import get_logger

logger = get_logger(__name__)


class TimeFormat(Enum):
    """Time format options."""
    TWELVE_HOUR = "12h"
    TWENTY_FOUR_HOUR = "24h"
    LOCALE = "locale"


_TIME_PATTERNS = {
    TimeFormat.TWELVE_HOUR: "h:mm AP",
    TimeFormat.TWENTY_FOUR_HOUR: "HH:mm",
}


class ClockFormatter:
    """
    Formats wall-clock datetimes for display.

    Times use a short hour:minute form, dates use the locale's long format
    (weekday, month, day and year).
    """

    def __init__(self, locale_name: str = "en_US",
                 time_format: TimeFormat = TimeFormat.TWELVE_HOUR):
        self._locale_name = locale_name
        self._locale = QLocale(locale_name)
        self._time_format = time_format

    @classmethod
    def from_settings(cls, settings) -> "ClockFormatter":
        """Build a formatter from the persisted clock.* preferences."""
        locale_name = str(settings.get('clock.locale', 'en_US') or 'en_US')
        raw_format = str(settings.get('clock.time_format', '12h'))
        try:
            time_format = TimeFormat(raw_format)
        except ValueError:
            logger.warning("[FALLBACK] Unknown time format %r, using 12h", raw_format)
            time_format = TimeFormat.TWELVE_HOUR
        return cls(locale_name, time_format)

    @property
    def locale_name(self) -> str:
        return self._locale_name

    @property
    def time_format(self) -> TimeFormat:
        return self._time_format

    def format_time(self, wall_clock: datetime) -> str:
        """Format the hour and minute of ``wall_clock``."""
        qtime = QTime(wall_clock.hour, wall_clock.minute, wall_clock.second)
        if self._time_format == TimeFormat.LOCALE:
            return self._locale.toString(qtime, QLocale.FormatType.ShortFormat)
        return self._locale.toString(qtime, _TIME_PATTERNS[self._time_format])

    def format_date(self, wall_clock: datetime) -> str:
        """Format the calendar date of ``wall_clock`` in long form."""
        qdate = QDate(wall_clock.year, wall_clock.month, wall_clock.day)
        return self._locale.toString(qdate, QLocale.FormatType.LongFormat)

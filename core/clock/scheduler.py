"""Refresh timer that drives the world clock's reference instant.

One owned QTimer with a fixed period. The owner starts it when the clock
becomes active and stops it on teardown; there is no global instance.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer, Signal

from core.logging.logger import get_logger, is_verbose_logging

logger = get_logger(__name__)

DEFAULT_REFRESH_INTERVAL_MS = 60_000


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RefreshScheduler(QObject):
    """Periodic sampler of the host wall clock.

    Emits ``ticked`` with a freshly sampled instant once on ``start()`` and
    then every ``interval_ms``. Ticks the event loop misses (e.g. while the
    process is suspended) are dropped, not replayed.
    """

    ticked = Signal(object)  # datetime

    def __init__(
        self,
        interval_ms: int = DEFAULT_REFRESH_INTERVAL_MS,
        clock: Optional[Callable[[], datetime]] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._interval_ms = max(1, int(interval_ms))
        self._clock = clock or utc_now
        self._timer = QTimer(self)
        self._timer.setInterval(self._interval_ms)
        self._timer.timeout.connect(self._on_tick)

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    def is_running(self) -> bool:
        return self._timer.isActive()

    def start(self) -> None:
        """Start ticking. Samples the clock immediately."""
        if self._timer.isActive():
            logger.debug("[SCHEDULER] Already running")
            return

        self._timer.start()
        logger.info("[SCHEDULER] Started (interval=%dms)", self._interval_ms)
        self._on_tick()

    def stop(self) -> None:
        """Cancel the recurring timer."""
        if not self._timer.isActive():
            return
        self._timer.stop()
        logger.info("[SCHEDULER] Stopped")

    def _on_tick(self) -> None:
        try:
            instant = self._clock()
            if is_verbose_logging():
                logger.debug("[SCHEDULER] Tick at %s", instant.isoformat())
            self.ticked.emit(instant)
        except Exception as e:
            logger.exception("[SCHEDULER] Tick handler raised: %s", e)

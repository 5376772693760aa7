# studycheck/clock.py

import logging
from datetime import datetime
from typing import Callable

logger = logging.getLogger(__name__)

CLOCK_FORMAT = "%H:%M:%S"


def format_clock(moment: datetime) -> str:
    return moment.strftime(CLOCK_FORMAT)


class DigitalClock:
    """Schiebt jede Sekunde die aktuelle Uhrzeit (HH:MM:SS) an on_update."""

    def __init__(self, root, on_update: Callable[[str], None],
                 now: Callable[[], datetime] = datetime.now,
                 interval_ms: int = 1000):
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        self.root = root
        self.on_update = on_update
        self.now = now
        self.interval_ms = interval_ms
        self._running = False
        self._job = None

    @property
    def running(self) -> bool:
        return self._running

    def start(self):
        if self._running:
            return
        self._running = True
        logger.debug("Uhr gestartet.")
        self._refresh()

    def _refresh(self):
        # Der Job ist gefeuert; on_update darf stop() aufrufen
        self._job = None
        self.on_update(format_clock(self.now()))
        if self._running:
            self._job = self.root.after(self.interval_ms, self._refresh)

    def stop(self):
        if not self._running:
            return
        self._running = False
        if self._job is not None:
            self.root.after_cancel(self._job)
            self._job = None
        logger.debug("Uhr gestoppt.")

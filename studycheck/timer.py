# studycheck/timer.py

import logging
from dataclasses import dataclass
from typing import Callable, Optional

logger = logging.getLogger(__name__)

MAX_HOUR = 23
MAX_MINUTE = 59


class TimerRunningError(RuntimeError):
    """Dauer darf nur im Leerlauf geändert werden."""


def format_remaining(seconds: int) -> str:
    """Restzeit als MM:SS (Minuten werden nicht bei 59 gekappt)."""
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


@dataclass
class CountdownState:
    remaining_seconds: int = 0
    is_running: bool = False
    selected_hour: int = 0
    selected_minute: int = 0


class CountdownTimer:
    """
    Countdown mit Stunden/Minuten-Auswahl.

    Im Leerlauf sind die Auswahlfelder maßgeblich, während des Laufs die
    Restzeit in Sekunden; die Felder werden dann nach jedem Tick neu
    abgeleitet. Der Tick läuft über root.after(), die Job-ID ist der
    einzige Handle und wird bei stop()/reset() sofort storniert.
    """

    def __init__(self, root, on_tick: Optional[Callable[[CountdownState], None]] = None,
                 on_finish: Optional[Callable[[], None]] = None,
                 interval_ms: int = 1000):
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        self.root = root
        self.on_tick = on_tick
        self.on_finish = on_finish
        self.interval_ms = interval_ms
        self.state = CountdownState()
        self._job = None

    @property
    def remaining_seconds(self) -> int:
        return self.state.remaining_seconds

    @property
    def is_running(self) -> bool:
        return self.state.is_running

    @property
    def selected_hour(self) -> int:
        return self.state.selected_hour

    @property
    def selected_minute(self) -> int:
        return self.state.selected_minute

    @property
    def display(self) -> str:
        return format_remaining(self.state.remaining_seconds)

    def set_duration(self, hour: int, minute: int):
        if self.state.is_running:
            raise TimerRunningError("cannot change duration while running")
        if not 0 <= hour <= MAX_HOUR:
            raise ValueError(f"hour must be in [0, {MAX_HOUR}], got {hour}")
        if not 0 <= minute <= MAX_MINUTE:
            raise ValueError(f"minute must be in [0, {MAX_MINUTE}], got {minute}")
        self.state.selected_hour = hour
        self.state.selected_minute = minute
        self.state.remaining_seconds = hour * 3600 + minute * 60
        logger.info("Dauer gesetzt: %02d:%02d (%d s)", hour, minute,
                    self.state.remaining_seconds)

    def start(self):
        if self.state.is_running:
            return
        self.state.is_running = True
        self._job = self.root.after(self.interval_ms, self._on_timer)
        logger.info("Timer gestartet bei %s", self.display)

    def _on_timer(self):
        # Der Job ist gefeuert, der Handle damit verbraucht
        self._job = None
        if not self.state.is_running:
            return
        self.tick()
        if self.state.is_running:
            self._job = self.root.after(self.interval_ms, self._on_timer)

    def tick(self):
        if self.state.remaining_seconds == 0:
            self.stop()
            logger.info("Timer abgelaufen.")
            if self.on_finish is not None:
                self.on_finish()
            return
        self.state.remaining_seconds -= 1
        self._derive_selection()
        logger.debug("Tick: %s", self.display)
        if self.on_tick is not None:
            self.on_tick(self.state)

    def _derive_selection(self):
        rem = self.state.remaining_seconds
        self.state.selected_hour = rem // 3600
        self.state.selected_minute = (rem % 3600) // 60

    def stop(self):
        was_running = self.state.is_running
        self.state.is_running = False
        self._cancel_job()
        if was_running:
            logger.info("Timer gestoppt bei %s", self.display)

    def reset(self):
        self._cancel_job()
        # Felder am bestehenden Objekt nullen; on_tick-Empfänger halten es
        self.state.remaining_seconds = 0
        self.state.is_running = False
        self.state.selected_hour = 0
        self.state.selected_minute = 0
        logger.info("Timer zurückgesetzt.")

    def _cancel_job(self):
        if self._job is not None:
            self.root.after_cancel(self._job)
            self._job = None

# studycheck/config.py

from dataclasses import dataclass

DEFAULT_TITLE = "StudyCheck"
DEFAULT_GEOMETRY = "420x640"
DEFAULT_THEME = "darkly"
DEFAULT_TICK_MS = 1000
DEFAULT_LOG_LEVEL = "INFO"


@dataclass
class AppConfig:
    """Fensterparameter, Theme und Tick-Intervall (wird nicht gespeichert)."""

    title: str = DEFAULT_TITLE
    geometry: str = DEFAULT_GEOMETRY
    theme: str = DEFAULT_THEME
    tick_ms: int = DEFAULT_TICK_MS
    log_level: str = DEFAULT_LOG_LEVEL

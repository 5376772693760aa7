import argparse
import logging

from studycheck.config import (
    AppConfig, DEFAULT_GEOMETRY, DEFAULT_LOG_LEVEL, DEFAULT_THEME, DEFAULT_TICK_MS,
)


def parse_args(argv=None) -> AppConfig:
    parser = argparse.ArgumentParser(prog="studycheck",
                                     description="Uhr, To-do-Liste und Countdown in einem Fenster.")
    parser.add_argument("--theme", default=DEFAULT_THEME, help="ttkbootstrap-Theme")
    parser.add_argument("--geometry", default=DEFAULT_GEOMETRY, help="Fenstergröße, z.B. 420x640")
    parser.add_argument("--tick-ms", type=int, default=DEFAULT_TICK_MS,
                        help="Tick-Intervall in Millisekunden")
    parser.add_argument("--log-level", default=DEFAULT_LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)
    if args.tick_ms <= 0:
        parser.error("--tick-ms must be positive")
    return AppConfig(geometry=args.geometry, theme=args.theme,
                     tick_ms=args.tick_ms, log_level=args.log_level)


def setup_logging(level: str):
    logger = logging.getLogger("studycheck")
    logger.setLevel(level)
    # Nur einen Konsolen-Handler anhängen, auch bei wiederholtem Aufruf
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s — %(message)s"))
        logger.addHandler(handler)
    return logger


def main(argv=None):
    config = parse_args(argv)
    setup_logging(config.log_level)
    # GUI erst hier laden, damit --help ohne Display funktioniert
    from studycheck.gui import StudyCheckApp
    StudyCheckApp(config).run()


if __name__ == "__main__":
    main()

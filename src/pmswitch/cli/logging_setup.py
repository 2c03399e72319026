"""Logging configuration applied once at the CLI boundary."""

import logging
from dataclasses import dataclass

DEBUG_FORMAT = "%(name)s - %(levelname)s - %(message)s"
DEFAULT_FORMAT = "%(levelname)s: %(message)s"


@dataclass(frozen=True)
class LoggingSettings:
    """Root logger level and format for one CLI invocation."""

    level: int
    format: str

    @staticmethod
    def from_flags(*, debug: bool) -> "LoggingSettings":
        if debug:
            return LoggingSettings(level=logging.DEBUG, format=DEBUG_FORMAT)
        return LoggingSettings(level=logging.WARNING, format=DEFAULT_FORMAT)


def configure_logging(settings: LoggingSettings) -> None:
    """Configure the root logger.

    Does nothing if the root logger already has handlers (for example when
    running under a test harness that installs its own).
    """
    logging.basicConfig(level=settings.level, format=settings.format)

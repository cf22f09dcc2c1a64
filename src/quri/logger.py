"""Logging helpers for the QURI builder.

Creating a logger is free of side effects. The root logger is configured from
``settings.LOG_LEVEL`` only when a record is first emitted, and only if the
host application has not configured logging itself.
"""

import logging
from typing import Optional

from quri.settings import settings as quri_settings

_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}

_configured = False


def resolve_level(level: Optional[str]) -> int:
    """Map a level name to its numeric value, falling back to INFO."""
    return _LEVELS.get((level or "").upper(), logging.INFO)


def setup_global_logging(level: str = "INFO") -> None:
    """Configure the root logger once in a standardized format.

    Args:
        level: Log level name (e.g., "DEBUG", "INFO")
    """
    global _configured
    if _configured:
        return
    logging.basicConfig(
        level=resolve_level(level),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    _configured = True


def get_logger(name: Optional[str] = None) -> "Logger":
    """Return a named logger wrapper without configuring anything.

    Args:
        name: Logger name, usually __name__
    """
    return Logger(name or "quri")


class Logger:
    """Lazily configured wrapper over a standard library logger.

    - Global logging is set up on the first emitted record, never on import.
    - `message(text)` logs at the level named by `settings.LOG_LEVEL`.
    """

    def __init__(self, name: Optional[str] = None) -> None:
        self._logger = logging.getLogger(name or "quri")

    @property
    def name(self) -> str:
        return self._logger.name

    def _emit(self, level: int, msg: str, *args, **kwargs) -> None:
        if not _configured:
            setup_global_logging(quri_settings.LOG_LEVEL)
        self._logger.log(level, msg, *args, **kwargs)

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._emit(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._emit(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._emit(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self._emit(logging.ERROR, msg, *args, **kwargs)

    def critical(self, msg: str, *args, **kwargs) -> None:
        self._emit(logging.CRITICAL, msg, *args, **kwargs)

    def message(self, msg: str, *args, **kwargs) -> None:
        # Unset LOG_LEVEL counts as INFO
        self._emit(resolve_level(quri_settings.LOG_LEVEL), msg, *args, **kwargs)

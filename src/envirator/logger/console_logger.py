"""
Console logger.

Writes each message verbatim to a stream (default: stderr), one per line.
This is the default logger for Envirator so report messages appear exactly
as formatted.
"""

import sys
from typing import Any, Optional, TextIO

from .interface import Logger

_LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40, "CRITICAL": 50}


class ConsoleLogger(Logger):
    """Plain console logger.

    Messages below ``min_level`` are dropped. Extra keyword arguments are
    appended as ``key=value`` pairs.

    Example:
        logger = ConsoleLogger()
        logger.warning("[ENV WARN]: Missing environment variable 'PORT'")
    """

    def __init__(self, output: Optional[TextIO] = None, min_level: str = "WARNING"):
        """Initialize the console logger.

        Args:
            output: Output stream (default: stderr at the time of each write)
            min_level: Lowest level written (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        """
        self._output = output
        self._min_level = _LEVELS.get(min_level.upper(), _LEVELS["WARNING"])

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        if _LEVELS[level] < self._min_level:
            return

        if kwargs:
            extra = " ".join(f"{k}={v}" for k, v in kwargs.items())
            message = f"{message} ({extra})"

        print(message, file=self._output or sys.stderr, flush=True)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log("CRITICAL", message, **kwargs)

"""
Logger interface for envirator.

Abstract base class describing the logging contract used by envirator.
Only ``warning`` and ``error`` are required of loggers passed in by callers;
any object providing those two methods (``logging.Logger`` included) is
accepted wherever a logger is expected.
"""

from abc import ABC, abstractmethod
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class EnvLogger(Protocol):
    """Minimal duck-typed logger accepted by Envirator."""

    def warning(self, message: str) -> Any: ...

    def error(self, message: str) -> Any: ...


class Logger(ABC):
    """Abstract base class for envirator loggers.

    Example:
        class MyLogger(Logger):
            def warning(self, message: str, **kwargs: Any) -> None:
                print(f"WARN: {message}")
            # ... implement other methods
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message.

        Args:
            message: The message to log
            **kwargs: Additional key-value pairs to include in the log
        """

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        """Log a critical message."""


class WarnLoggerAdapter:
    """Presents a logger that has ``warn`` but no ``warning`` as an EnvLogger."""

    def __init__(self, logger: Any) -> None:
        self.logger = logger

    def warning(self, message: str) -> Any:
        return self.logger.warn(message)

    def error(self, message: str) -> Any:
        return self.logger.error(message)

    def __getattr__(self, name: str) -> Any:
        return getattr(self.logger, name)

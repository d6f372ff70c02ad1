"""
Envirator logger module.

Envirator reports missing variables and load failures through a logger.
By default that is a ``ConsoleLogger`` writing the message text verbatim to
stderr; applications can pass any object with ``warning`` and ``error``
methods, or build a ``StructuredLogger`` here.

Usage:
    from envirator.logger import get_logger

    logger = get_logger("envirator")
    env = Envirator(logger=logger)

Environment Variables:
    {PREFIX}_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    {PREFIX}_LOG_FILE: Optional file path for log output
    {PREFIX}_LOG_JSON: Set to "true" for JSON output format

    Where {PREFIX} is derived from the logger name (e.g., MY_APP for "my-app")
"""

import logging
import os
from typing import Mapping, Optional

from .console_logger import ConsoleLogger
from .interface import EnvLogger, Logger, WarnLoggerAdapter
from .structured_logger import JsonFormatter, StructuredLogger, TextFormatter


def _get_env_prefix(name: str) -> str:
    """Convert a logger name to an environment variable prefix.

    Examples:
        "envirator" -> "ENVIRATOR"
        "my-app" -> "MY_APP"
    """
    return name.upper().replace("-", "_").replace(".", "_")


def create_logger(
    name: str = "envirator",
    level: Optional[int] = None,
    log_file: Optional[str] = None,
    json_format: Optional[bool] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Logger:
    """Create a StructuredLogger, filling unset parameters from the environment.

    Args:
        name: Logger name
        level: Logging level (defaults to {PREFIX}_LOG_LEVEL or INFO)
        log_file: Optional file path (defaults to {PREFIX}_LOG_FILE)
        json_format: JSON output (defaults to {PREFIX}_LOG_JSON == "true")
        environ: Variables to read instead of ``os.environ``

    Returns:
        A configured Logger instance
    """
    env = os.environ if environ is None else environ
    env_prefix = _get_env_prefix(name)

    if level is None:
        level_str = env.get(f"{env_prefix}_LOG_LEVEL", "INFO").upper()
        level = getattr(logging, level_str, logging.INFO)

    if log_file is None:
        log_file = env.get(f"{env_prefix}_LOG_FILE")

    if json_format is None:
        json_format = env.get(f"{env_prefix}_LOG_JSON", "false").lower() == "true"

    return StructuredLogger(
        name=name,
        level=level,
        log_file=log_file,
        json_format=json_format,
    )


def get_logger(name: str = "envirator") -> Logger:
    """Get a logger configured from environment variables."""
    return create_logger(name=name)


__all__ = [
    # Interfaces
    "EnvLogger",
    "Logger",
    "WarnLoggerAdapter",
    # Implementations
    "ConsoleLogger",
    "StructuredLogger",
    # Formatters
    "JsonFormatter",
    "TextFormatter",
    # Factory functions
    "create_logger",
    "get_logger",
]

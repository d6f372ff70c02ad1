"""Exceptions for envirator.

Usage:
    from envirator.exceptions import (
        EnviratorError,
        ConfigurationError,
        LoadError,
        TerminationError,
    )
"""

from envirator.exceptions.base import (
    ConfigurationError,
    EnviratorError,
    LoadError,
    TerminationError,
)

__all__ = [
    "EnviratorError",
    "ConfigurationError",
    "LoadError",
    "TerminationError",
]

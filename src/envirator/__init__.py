"""Envirator - environment-aware configuration variables.

This package provides:
- env: The Envirator facade (provide, provide_many, load, environment checks)
- environments: Role -> label registry for development/production/staging/test
- store: Injectable variable stores (process environment, in-memory)
- loader: .env file loading via python-dotenv
- logger: Console and structured loggers
- exceptions: Structured exception classes
- testing: Recording logger/terminator and pytest fixtures
"""

__version__ = "1.0.0"

from envirator.enums import DEFAULT_NODE_ENV, Environment, Level

from envirator.env import Env, Envirator, create_env

from envirator.environments import EnvironmentRegistry

from envirator.options import EnvOptions

from envirator.store import (
    MemoryVariableStore,
    ProcessEnvStore,
    VariableStore,
)

from envirator.terminator import ProcessTerminator, Terminator

from envirator.loader import DotenvLoader, EnvFileLoader, LoadResult

from envirator.keys import camelcase

from envirator.suppression import SuppressFlag, SuppressIn, SuppressWhen

from envirator.logger import (
    ConsoleLogger,
    EnvLogger,
    Logger,
    StructuredLogger,
    create_logger,
    get_logger,
)

from envirator.exceptions import (
    ConfigurationError,
    EnviratorError,
    LoadError,
    TerminationError,
)

__all__ = [
    "__version__",
    # Facade
    "Envirator",
    "Env",
    "create_env",
    "EnvOptions",
    # Environments
    "Environment",
    "EnvironmentRegistry",
    "Level",
    "DEFAULT_NODE_ENV",
    # Stores
    "VariableStore",
    "ProcessEnvStore",
    "MemoryVariableStore",
    # Termination
    "Terminator",
    "ProcessTerminator",
    # Loading
    "EnvFileLoader",
    "DotenvLoader",
    "LoadResult",
    # Keys and suppression
    "camelcase",
    "SuppressFlag",
    "SuppressIn",
    "SuppressWhen",
    # Logger
    "EnvLogger",
    "Logger",
    "ConsoleLogger",
    "StructuredLogger",
    "create_logger",
    "get_logger",
    # Exceptions
    "EnviratorError",
    "ConfigurationError",
    "LoadError",
    "TerminationError",
]

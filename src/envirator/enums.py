"""Constants shared across envirator modules."""

from enum import Enum

DEFAULT_NODE_ENV = "NODE_ENV"
EXIT_FAILURE = 1


class Environment(str, Enum):
    """Built-in environment roles and their default labels."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    STAGING = "staging"
    TEST = "test"

    def __str__(self) -> str:
        return self.value


class Level(str, Enum):
    """Level tags used in report messages."""

    ERROR = "ERROR"
    WARN = "WARN"

    def __str__(self) -> str:
        return self.value

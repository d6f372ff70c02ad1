"""Test doubles for code that uses envirator.

Fatal reports normally end the process. Inject one of these terminators to
observe them instead:

    from envirator import Envirator, MemoryVariableStore
    from envirator.testing import RecordingLogger, RecordingTerminator

    logger = RecordingLogger()
    terminator = RecordingTerminator()
    env = Envirator(store=MemoryVariableStore(), logger=logger, terminator=terminator)

    env.provide("MISSING")
    assert terminator.codes == [1]
    assert logger.errors == ["[ENV ERROR]: Missing environment variable 'MISSING'"]

pytest users can load the fixtures with:

    pytest_plugins = ["envirator.testing.pytest_fixtures"]
"""

from dataclasses import dataclass, field
from typing import Any, List, NoReturn, Tuple

from envirator.exceptions import TerminationError
from envirator.logger import Logger

__all__ = [
    "RecordingLogger",
    "RecordingTerminator",
    "RaisingTerminator",
]


@dataclass
class RecordingLogger(Logger):
    """Logger that keeps every message in memory."""

    records: List[Tuple[str, str]] = field(default_factory=list)

    def _messages(self, level: str) -> List[str]:
        return [message for lvl, message in self.records if lvl == level]

    @property
    def warnings(self) -> List[str]:
        return self._messages("WARNING")

    @property
    def errors(self) -> List[str]:
        return self._messages("ERROR")

    def clear(self) -> None:
        self.records.clear()

    def debug(self, message: str, **kwargs: Any) -> None:
        self.records.append(("DEBUG", message))

    def info(self, message: str, **kwargs: Any) -> None:
        self.records.append(("INFO", message))

    def warning(self, message: str, **kwargs: Any) -> None:
        self.records.append(("WARNING", message))

    def error(self, message: str, **kwargs: Any) -> None:
        self.records.append(("ERROR", message))

    def critical(self, message: str, **kwargs: Any) -> None:
        self.records.append(("CRITICAL", message))


@dataclass
class RecordingTerminator:
    """Records exit codes and returns, so the caller carries on."""

    codes: List[int] = field(default_factory=list)

    @property
    def called(self) -> bool:
        return bool(self.codes)

    def terminate(self, code: int) -> NoReturn:  # type: ignore[misc]
        self.codes.append(code)


class RaisingTerminator:
    """Raises TerminationError so the fatal path really diverges."""

    def terminate(self, code: int) -> NoReturn:
        raise TerminationError(code)

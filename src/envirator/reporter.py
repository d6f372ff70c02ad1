"""Missing-variable reporting.

Decides, for a value that may be absent, whether to stay silent, log a
warning, or log an error and terminate the process.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Collection, Optional

from .enums import EXIT_FAILURE, Level
from .logger import EnvLogger
from .suppression import Suppression, merge_suppression
from .terminator import Terminator

if TYPE_CHECKING:
    from .env import Envirator


def missing_message(key: str, level: Level) -> str:
    return f"[ENV {level}]: Missing environment variable '{key}'"


def load_failure_message(path: str, error: Any) -> str:
    return f"[ENV {Level.ERROR}] failed to load '{path}': {error}"


class PresenceReporter:
    """Reports absent values according to the warn-only and suppression policy.

    A missing value is fatal unless ``warn_only`` is set, and it stays fatal
    in any environment listed in ``do_not_warn_in`` even when ``warn_only``
    is set. Fatal reports log at error level and call the terminator.
    """

    def __init__(self, terminator: Terminator, do_not_warn_in: Collection[str]) -> None:
        self._terminator = terminator
        self._do_not_warn_in = frozenset(do_not_warn_in)

    def should_exit(self, warn_only: bool, current_label: Optional[str]) -> bool:
        return not warn_only or current_label in self._do_not_warn_in

    def fail(self, message: str, logger: EnvLogger) -> None:
        """Log ``message`` at error level and terminate with exit code 1.

        Only returns when the terminator does (test doubles).
        """
        logger.error(message)
        self._terminator.terminate(EXIT_FAILURE)

    def report(
        self,
        key: str,
        value: Any,
        *,
        env: "Envirator",
        current_label: Optional[str],
        warn_only: bool,
        logger: EnvLogger,
        suppression: Optional[Suppression],
        instance_suppression: Suppression,
    ) -> None:
        """Report ``value`` for ``key`` if it is absent."""
        if value is not None:
            return

        if self.should_exit(warn_only, current_label):
            self.fail(missing_message(key, Level.ERROR), logger)
            return

        suppressed = merge_suppression(suppression, instance_suppression)
        if not suppressed(key, env, current_label):
            logger.warning(missing_message(key, Level.WARN))

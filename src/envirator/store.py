"""Variable stores.

Envirator reads and writes variables through a ``VariableStore`` rather than
touching ``os.environ`` directly, so tests and embedders can supply an
isolated store.

Stores are not synchronised. A resolution reads, decides and may write back
without any atomicity guarantee; callers must not mutate the same store
from another thread while a resolution is in flight.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Mapping, MutableMapping, Optional, Protocol, runtime_checkable


def stringify(value: Any) -> str:
    """Render a value the way it is stored in the environment.

    Booleans are written in lower case so ``"true"``/``"false"`` round-trip
    through shells and dotenv files.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@runtime_checkable
class VariableStore(Protocol):
    """Protocol for string-keyed variable stores."""

    def get(self, key: str) -> Optional[str]:
        """Return the value for ``key`` or None if unset."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` (stringified) under ``key``."""
        ...

    def entries(self) -> Dict[str, str]:
        """Return a snapshot of all variables."""
        ...


class ProcessEnvStore:
    """Store bound to the process environment (``os.environ``)."""

    def __init__(self, environ: Optional[MutableMapping[str, str]] = None) -> None:
        self._environ = environ

    @property
    def environ(self) -> MutableMapping[str, str]:
        # Looked up on each access so monkeypatched os.environ is honoured
        return os.environ if self._environ is None else self._environ

    def get(self, key: str) -> Optional[str]:
        return self.environ.get(key)

    def set(self, key: str, value: Any) -> None:
        self.environ[key] = stringify(value)

    def entries(self) -> Dict[str, str]:
        return dict(self.environ)


class MemoryVariableStore:
    """In-memory variable store.

    Example:
        store = MemoryVariableStore({"PORT": "8080"})
        store.set("DEBUG", True)
        store.get("DEBUG")  # "true"
    """

    def __init__(self, initial: Optional[Mapping[str, Any]] = None) -> None:
        self._store: Dict[str, str] = {}
        for key, value in (initial or {}).items():
            self.set(key, value)

    def get(self, key: str) -> Optional[str]:
        return self._store.get(key)

    def set(self, key: str, value: Any) -> None:
        self._store[key] = stringify(value)

    def entries(self) -> Dict[str, str]:
        return self._store.copy()

    def clear(self) -> None:
        self._store.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __len__(self) -> int:
        return len(self._store)

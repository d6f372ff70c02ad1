"""Env file loading with python-dotenv.

Reads ``KEY=value`` pairs from an env file into a variable store. Values
already present in the store are kept unless ``override`` is set, so the
process environment takes precedence over the file by default.

A file that cannot be opened or decoded is reported in the returned
``LoadResult`` rather than raised; the caller decides whether that is fatal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Protocol, Union, runtime_checkable

from dotenv import dotenv_values

from .exceptions import LoadError
from .store import VariableStore


@dataclass
class LoadResult:
    """Outcome of loading one env file.

    Attributes:
        path: File that was read
        values: Variables parsed from the file (whether or not they were applied)
        error: The failure, if the file could not be read
    """

    path: str
    values: Dict[str, str] = field(default_factory=dict)
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> "LoadResult":
        """Raise ``LoadError`` if loading failed, else return self."""
        if self.error is not None:
            raise LoadError(self.path, self.error)
        return self


@runtime_checkable
class EnvFileLoader(Protocol):
    """Loads an env file into a store."""

    def load(
        self,
        path: Union[str, Path],
        store: VariableStore,
        *,
        override: bool = False,
        encoding: str = "utf-8",
    ) -> LoadResult: ...


class DotenvLoader:
    """Env file loader backed by ``dotenv_values``.

    Example:
        result = DotenvLoader().load(".env.production", ProcessEnvStore())
        if not result.ok:
            print(result.error)
    """

    def __init__(self, interpolate: bool = True) -> None:
        self.interpolate = interpolate

    def load(
        self,
        path: Union[str, Path],
        store: VariableStore,
        *,
        override: bool = False,
        encoding: str = "utf-8",
    ) -> LoadResult:
        result = LoadResult(path=str(path))

        try:
            with Path(path).open(encoding=encoding) as fh:
                file_values = dotenv_values(stream=fh, interpolate=self.interpolate)
        except (OSError, UnicodeDecodeError) as e:
            result.error = e
            return result

        result.values = {k: v for k, v in file_values.items() if v is not None}

        for key, value in result.values.items():
            if override or store.get(key) is None:
                store.set(key, value)

        return result

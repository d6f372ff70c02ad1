"""Warning suppression directives.

A missing variable that is not fatal produces a warning unless suppressed.
Suppression is given as a boolean, a list of environment labels, or a
predicate ``(key, env) -> bool`` (or ``(key) -> bool``); both the instance and the individual call
may supply one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, FrozenSet, Iterable, Optional, Union

from .callables import call_flexible
from .environments import normalize_label
from .exceptions import ConfigurationError

if TYPE_CHECKING:
    from .env import Envirator

SuppressPredicate = Callable[..., Any]
SuppressionInput = Union[bool, Iterable[str], SuppressPredicate, "Suppression"]


class Suppression:
    """Base class for suppression directives."""

    def suppresses(self, key: str, env: "Envirator", current_label: Optional[str]) -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class SuppressFlag(Suppression):
    enabled: bool = False

    def suppresses(self, key: str, env: "Envirator", current_label: Optional[str]) -> bool:
        return self.enabled


@dataclass(frozen=True)
class SuppressIn(Suppression):
    """Suppress while the current environment label is listed."""

    labels: FrozenSet[str] = frozenset()

    @classmethod
    def of(cls, labels: Iterable[str]) -> "SuppressIn":
        return cls(frozenset(normalize_label(label) for label in labels))

    def suppresses(self, key: str, env: "Envirator", current_label: Optional[str]) -> bool:
        return current_label in self.labels


@dataclass(frozen=True)
class SuppressWhen(Suppression):
    """Suppress when the predicate, called with ``(key, env)`` or ``(key)``, is truthy."""

    predicate: SuppressPredicate

    def suppresses(self, key: str, env: "Envirator", current_label: Optional[str]) -> bool:
        return bool(call_flexible(self.predicate, key, env))


def as_suppression(value: SuppressionInput) -> Suppression:
    """Convert a raw ``suppress_warnings`` option into a directive."""
    if isinstance(value, Suppression):
        return value
    if isinstance(value, bool):
        return SuppressFlag(value)
    if callable(value):
        return SuppressWhen(value)
    if isinstance(value, (str, bytes)):
        raise ConfigurationError(
            "suppress_warnings must be a bool, a list of environments or a callable",
            details={"value": value},
        )
    try:
        return SuppressIn.of(value)
    except TypeError as e:
        raise ConfigurationError(
            "suppress_warnings must be a bool, a list of environments or a callable",
            details={"value": repr(value)},
        ) from e


def merge_suppression(call: Optional[Suppression], instance: Suppression) -> Callable[..., bool]:
    """Combine call-level and instance-level suppression.

    The call-level directive replaces the instance one when both are of the
    same kind; otherwise a warning is suppressed if either directive says so.
    Returns a function of ``(key, env, current_label)``.
    """
    if call is None or type(call) is type(instance):
        chosen = instance if call is None else call
        return chosen.suppresses

    def either(key: str, env: "Envirator", current_label: Optional[str]) -> bool:
        return call.suppresses(key, env, current_label) or instance.suppresses(
            key, env, current_label
        )

    return either

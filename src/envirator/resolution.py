"""Value resolution and environment overrides.

Given a key and its call options, computes the value ``provide`` returns:
the stored value or an environment-specific default, then, after the
caller's mutators have run, possibly the default again if an override
predicate rejects the mutated value.

Defaults never apply in production unless production defaults are allowed;
that applies both to the initial substitution and to overrides.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Sequence, Union

from .callables import call_flexible
from .environments import EnvironmentRegistry

Mutator = Callable[[Any], Any]
MutatorInput = Union[Mutator, Sequence[Mutator]]
OverridePredicate = Callable[..., Any]
OverrideInput = Union[OverridePredicate, Sequence[OverridePredicate]]


def as_list(value: Any) -> list:
    """Wrap a single callable in a list; None becomes an empty list."""
    if value is None:
        return []
    if callable(value):
        return [value]
    return list(value)


@dataclass(frozen=True)
class ResolutionContext:
    """Everything needed to resolve one key, captured per ``provide`` call."""

    key: str
    raw_value: Optional[str]
    current_label: Optional[str]
    is_production: bool
    default_value: Any = None
    defaults_for: Mapping[str, Any] = field(default_factory=dict)
    production_defaults: bool = False
    allow_empty_string: bool = True

    @property
    def defaults_allowed(self) -> bool:
        return self.production_defaults or not self.is_production


class ResolutionPolicy:
    """Computes resolved values for a registry of environments."""

    def __init__(self, environments: EnvironmentRegistry) -> None:
        self._environments = environments

    def environment_default(self, ctx: ResolutionContext) -> Any:
        """Default for the current environment, else the flat default.

        ``defaults_for`` is keyed by label; a role name is also accepted when
        the current label belongs to a renamed role.
        """
        defaults_for = ctx.defaults_for or {}
        label = ctx.current_label

        value = defaults_for.get(label) if label is not None else None
        if value is None:
            role = self._environments.classify(label)
            if role is not None and role != label:
                value = defaults_for.get(role)

        return ctx.default_value if value is None else value

    @staticmethod
    def present_value(ctx: ResolutionContext) -> Optional[str]:
        """Raw value, with blank strings treated as absent when not allowed."""
        value = ctx.raw_value
        if value is not None and not ctx.allow_empty_string and not value.strip():
            return None
        return value

    def environment_value(self, ctx: ResolutionContext) -> Any:
        value = self.present_value(ctx)

        if value is not None or not ctx.defaults_allowed:
            return value
        return self.environment_default(ctx)

    @staticmethod
    def apply_mutators(value: Any, mutators: Optional[MutatorInput]) -> Any:
        for mutate in as_list(mutators):
            value = mutate(value)
        return value

    def environment_override(
        self, value: Any, ctx: ResolutionContext, env_override: Optional[OverrideInput]
    ) -> Any:
        """Replace ``value`` with the environment default when a predicate fires.

        Predicates take ``(value)`` or ``(value, default)``.
        """
        use_default = self.environment_default(ctx)
        should_override = any(
            call_flexible(predicate, value, use_default) for predicate in as_list(env_override)
        )

        if should_override and ctx.defaults_allowed and use_default is not None:
            return use_default
        return value

    @staticmethod
    def config_file_path(label: str, path: Optional[str] = None) -> str:
        """Env file for an environment: ``.env.<label>``, or ``.env`` with no label."""
        if path is not None:
            return path
        return f".env.{label}" if label else ".env"

"""Instance-level options.

``EnvOptions`` gathers everything an ``Envirator`` is constructed with,
applies defaults, builds the environment registry, and folds deprecated
option names onto their current equivalents once, so the rest of the code
only ever sees the current names.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional

from .enums import DEFAULT_NODE_ENV
from .environments import EnvironmentRegistry, normalize_label
from .exceptions import ConfigurationError
from .logger import ConsoleLogger, EnvLogger, WarnLoggerAdapter
from .suppression import Suppression, SuppressionInput, as_suppression

_DEPRECATED = {
    "envs": "environments",
    "key_to_js_prop": "camelcase",
}


def check_logger(logger: Any) -> EnvLogger:
    """Accept a logger with warning() and error(), adapting one that has warn()."""
    if callable(getattr(logger, "error", None)):
        if callable(getattr(logger, "warning", None)):
            return logger
        if callable(getattr(logger, "warn", None)):
            return WarnLoggerAdapter(logger)
    raise ConfigurationError(
        "logger must provide warning() (or warn()) and error() methods",
        details={"logger": type(logger).__name__},
    )


def _warn_deprecated(name: str) -> None:
    warnings.warn(
        f"'{name}' is deprecated, use '{_DEPRECATED[name]}'",
        DeprecationWarning,
        stacklevel=4,
    )


@dataclass(frozen=True)
class EnvOptions:
    """Resolved instance options.

    Attributes:
        node_env: Name of the selector variable holding the current environment
        no_default_env: Treat an unset selector variable as a missing variable
        environments: Role -> label registry
        default_env: Label used when the selector variable is unset
        do_not_warn_in: Labels in which a missing variable is always fatal
        camelcase: Convert keys to camelCase in ``provide_many``
        logger: Destination for warnings and errors
        warn_only: Warn instead of terminating for missing variables
        production_defaults: Allow defaults to apply in production
        allow_empty_string: Treat an empty/blank value as present
        suppress_warnings: Instance-level warning suppression
        set_env: Write resolved values back into the store
    """

    node_env: str
    no_default_env: bool
    environments: EnvironmentRegistry
    default_env: str
    do_not_warn_in: List[str]
    camelcase: bool
    logger: EnvLogger
    warn_only: bool
    production_defaults: bool
    allow_empty_string: bool
    suppress_warnings: Suppression
    set_env: bool

    @classmethod
    def build(
        cls,
        *,
        node_env: str = DEFAULT_NODE_ENV,
        no_default_env: bool = False,
        environments: Optional[Mapping[str, str]] = None,
        default_env: Optional[str] = None,
        do_not_warn_in: Optional[Iterable[str]] = None,
        camelcase: Optional[bool] = None,
        logger: Optional[EnvLogger] = None,
        warn_only: bool = False,
        production_defaults: bool = False,
        allow_empty_string: bool = True,
        suppress_warnings: SuppressionInput = False,
        set_env: bool = False,
        envs: Optional[Mapping[str, str]] = None,
        key_to_js_prop: Optional[bool] = None,
    ) -> "EnvOptions":
        """Build options from constructor keywords.

        ``envs`` and ``key_to_js_prop`` are accepted for backward
        compatibility; ``environments`` and ``camelcase`` take precedence.

        Raises:
            ConfigurationError: If an option has an unusable value
        """
        if envs is not None:
            _warn_deprecated("envs")
        if key_to_js_prop is not None:
            _warn_deprecated("key_to_js_prop")

        if not isinstance(node_env, str) or not node_env:
            raise ConfigurationError("node_env must be a non-empty string", details={"node_env": node_env})

        registry = EnvironmentRegistry(envs, environments)

        if camelcase is None:
            camelcase = bool(key_to_js_prop) if key_to_js_prop is not None else False

        if do_not_warn_in is None:
            not_warned = [registry.production]
        elif isinstance(do_not_warn_in, str):
            raise ConfigurationError(
                "do_not_warn_in must be a list of environments",
                details={"do_not_warn_in": do_not_warn_in},
            )
        else:
            not_warned = [normalize_label(label) for label in do_not_warn_in]

        return cls(
            node_env=node_env,
            no_default_env=no_default_env,
            environments=registry,
            default_env=registry.default_label(no_default_env, default_env),
            do_not_warn_in=not_warned,
            camelcase=camelcase,
            logger=check_logger(logger if logger is not None else ConsoleLogger()),
            warn_only=warn_only,
            production_defaults=production_defaults,
            allow_empty_string=allow_empty_string,
            suppress_warnings=as_suppression(suppress_warnings),
            set_env=set_env,
        )

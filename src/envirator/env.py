"""Envirator: environment-aware access to configuration variables.

Example:
    from envirator import Envirator

    env = Envirator(warn_only=True)
    env.load()  # .env.<current environment>

    port = env.provide("PORT", default_value=8080, mutators=int)
    settings = env.provide_many(
        [
            {"key": "DATABASE_URL", "key_to": "db"},
            {"key": "WORKERS", "default_value": "4", "mutators": int},
            "SECRET_KEY",
        ]
    )

A missing variable terminates the process (exit code 1) unless ``warn_only``
is set, and even then it terminates in any environment listed in
``do_not_warn_in`` (production by default).
"""

from __future__ import annotations

import warnings
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Union, overload

from .environments import EnvironmentRegistry
from .keys import KeyToInput, project_key
from .loader import DotenvLoader, EnvFileLoader, LoadResult
from .logger import EnvLogger
from .options import EnvOptions, check_logger
from .reporter import PresenceReporter, load_failure_message
from .resolution import MutatorInput, OverrideInput, ResolutionContext, ResolutionPolicy
from .store import ProcessEnvStore, VariableStore
from .suppression import SuppressionInput, as_suppression
from .terminator import ProcessTerminator, Terminator

KeySpec = Union[str, Mapping[str, Any]]
ShapeFn = Callable[[Dict[str, Any]], Any]

# Keys of a provide_many entry that shape the destination key rather than the value
_KEY_OPTIONS = ("key", "key_to", "camelcase", "key_to_js_prop")


def _fallback(value: Any, default: Any) -> Any:
    return default if value is None else value


class Envirator:
    """Resolve environment variables with defaults, overrides and reporting.

    Args:
        store: Variable store (default: the process environment)
        terminator: Ends the process on fatal reports (default: ``os._exit``)
        loader: Env file loader (default: python-dotenv)
        **options: Instance options, see ``EnvOptions.build``
    """

    def __init__(
        self,
        *,
        store: Optional[VariableStore] = None,
        terminator: Optional[Terminator] = None,
        loader: Optional[EnvFileLoader] = None,
        **options: Any,
    ) -> None:
        self._options = EnvOptions.build(**options)
        self._store: VariableStore = store if store is not None else ProcessEnvStore()
        self._loader: EnvFileLoader = loader if loader is not None else DotenvLoader()
        self._reporter = PresenceReporter(
            terminator if terminator is not None else ProcessTerminator(),
            self._options.do_not_warn_in,
        )
        self._policy = ResolutionPolicy(self._options.environments)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(node_env={self._options.node_env!r}, "
            f"environments={dict(self._options.environments)!r})"
        )

    @property
    def options(self) -> EnvOptions:
        return self._options

    @property
    def environments(self) -> EnvironmentRegistry:
        return self._options.environments

    @property
    def store(self) -> VariableStore:
        return self._store

    def load(
        self,
        path: Optional[Union[str, Path]] = None,
        *,
        node_env: Optional[str] = None,
        logger: Optional[EnvLogger] = None,
        override: bool = False,
        encoding: str = "utf-8",
    ) -> LoadResult:
        """Load an env file into the store.

        Without ``path`` the file is ``.env.<environment>``, where the
        environment is read from the selector variable (``node_env``, by
        default the instance's) or falls back to the default environment.

        A file that cannot be read is logged at error level and terminates
        the process.
        """
        selector = node_env or self._options.node_env
        logger = self._options.logger if logger is None else check_logger(logger)

        label = (self._store.get(selector) or self._options.default_env).lower().strip()
        use_path = self._policy.config_file_path(label, None if path is None else str(path))

        result = self._loader.load(use_path, self._store, override=override, encoding=encoding)
        if result.error is not None:
            self._reporter.fail(load_failure_message(use_path, result.error), logger)
        elif hasattr(logger, "debug"):
            logger.debug(f"loaded {len(result.values)} variables from '{use_path}'")

        return result

    def provide(
        self,
        key: str,
        *,
        default_value: Any = None,
        defaults_for: Optional[Mapping[str, Any]] = None,
        mutators: Optional[MutatorInput] = None,
        env_override: Optional[OverrideInput] = None,
        logger: Optional[EnvLogger] = None,
        warn_only: Optional[bool] = None,
        production_defaults: Optional[bool] = None,
        allow_empty_string: Optional[bool] = None,
        suppress_warnings: Optional[SuppressionInput] = None,
        set_env: Optional[bool] = None,
    ) -> Any:
        """Retrieve an environment variable.

        Args:
            key: Variable name
            default_value: Used when the variable is absent
            defaults_for: Defaults per environment, taking precedence over ``default_value``
            mutators: Function or list of functions applied to the value in order
            env_override: Predicates ``(value, default)``; if any is truthy the
                mutated value is replaced by the default
            logger: Logger for this call
            warn_only: Warn instead of terminating when the value is missing
            production_defaults: Allow defaults to apply in production
            allow_empty_string: Treat a blank value as present
            suppress_warnings: Call-level warning suppression
            set_env: Write the resolved value back into the store

        Returns:
            The resolved value, or None if absent and not fatal
        """
        opts = self._options
        current = self.current_env

        ctx = ResolutionContext(
            key=key,
            raw_value=self._store.get(key),
            current_label=current,
            is_production=current == opts.environments.production,
            default_value=default_value,
            defaults_for=defaults_for or {},
            production_defaults=_fallback(production_defaults, opts.production_defaults),
            allow_empty_string=_fallback(allow_empty_string, opts.allow_empty_string),
        )

        value = self._policy.environment_value(ctx)

        self._reporter.report(
            key,
            value,
            env=self,
            current_label=current,
            warn_only=_fallback(warn_only, opts.warn_only),
            logger=opts.logger if logger is None else check_logger(logger),
            suppression=None if suppress_warnings is None else as_suppression(suppress_warnings),
            instance_suppression=opts.suppress_warnings,
        )

        value = self._policy.apply_mutators(value, mutators)
        value = self._policy.environment_override(value, ctx, env_override)

        if _fallback(set_env, opts.set_env) and value is not None:
            self._store.set(key, value)

        return value

    def provide_many(self, envars: Iterable[KeySpec], shape: Optional[ShapeFn] = None) -> Any:
        """Provide many environment variables at once.

        Each entry is a key, or a mapping with ``key`` plus ``key_to``
        (string, function or list of functions naming the result key),
        ``camelcase``, and any ``provide`` option.

        Args:
            envars: Keys or key mappings
            shape: Applied to the accumulated dict before returning

        Returns:
            ``shape(result)``, by default the dict itself
        """
        result: Dict[str, Any] = {}

        for envar in envars:
            if isinstance(envar, str):
                key, spec = envar, {}
            else:
                spec = dict(envar)
                key = spec["key"]

            use_camelcase = spec.get("camelcase")
            if "key_to_js_prop" in spec:
                warnings.warn(
                    "'key_to_js_prop' is deprecated, use 'camelcase'",
                    DeprecationWarning,
                    stacklevel=2,
                )
                if use_camelcase is None:
                    use_camelcase = spec["key_to_js_prop"]
            if use_camelcase is None:
                use_camelcase = self._options.camelcase

            key_to: Optional[KeyToInput] = spec.get("key_to")
            provide_opts = {k: v for k, v in spec.items() if k not in _KEY_OPTIONS}

            result[project_key(key, key_to, use_camelcase)] = self.provide(key, **provide_opts)

        return result if shape is None else shape(result)

    @overload
    def set_env(self, key: str, value: Any) -> None: ...

    @overload
    def set_env(self, key: Mapping[str, Any]) -> None: ...

    def set_env(self, key: Union[str, Mapping[str, Any]], value: Any = None) -> None:
        """Set one variable, or every variable in a mapping, as strings."""
        variables = {key: value} if isinstance(key, str) else key

        for name, val in variables.items():
            self._store.set(name, val)

    @property
    def current_env(self) -> Optional[str]:
        """The current environment label.

        Read from the selector variable and normalised. When it is unset the
        default environment is used, unless ``no_default_env`` is set, in
        which case the selector variable is reported as missing (fatal).
        """
        opts = self._options
        env = self._store.get(opts.node_env)

        if opts.no_default_env and (env is None or not env.strip()):
            self._reporter.report(
                opts.node_env,
                None,
                env=self,
                current_label=None,
                warn_only=False,
                logger=opts.logger,
                suppression=None,
                instance_suppression=opts.suppress_warnings,
            )
            return None

        return (env or opts.default_env).lower().strip()

    @current_env.setter
    def current_env(self, env: str) -> None:
        self.set_env(self._options.node_env, env)

    def is_environment(self, role: str) -> bool:
        """True if the current environment is the label registered for ``role``."""
        label = self.environments.label_for(role)
        return label is not None and self.current_env == label

    @property
    def is_production(self) -> bool:
        return self.is_environment("production")

    @property
    def is_development(self) -> bool:
        return self.is_environment("development")

    @property
    def is_staging(self) -> bool:
        return self.is_environment("staging")

    @property
    def is_test(self) -> bool:
        return self.is_environment("test")


Env = Envirator


def create_env(**options: Any) -> Envirator:
    """Create an Envirator; accepts the same keywords as the constructor."""
    return Envirator(**options)

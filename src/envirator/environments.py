"""Environment registry.

Maps environment roles (development, production, staging, test and any
custom role) to the label that identifies them at runtime, i.e. the value
of the selector variable such as ``NODE_ENV``.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional

from .enums import Environment
from .exceptions import ConfigurationError

BUILT_IN_ENVIRONMENTS: Mapping[str, str] = MappingProxyType(
    {env.name.lower(): env.value for env in Environment}
)


def normalize_label(label: str) -> str:
    """Lower-case and trim an environment label."""
    return label.lower().strip()


class EnvironmentRegistry(Mapping[str, str]):
    """Immutable role -> label mapping.

    Built from the built-in roles with each override mapping applied in
    order, later mappings winning. Labels need not be unique across roles.

    Example:
        registry = EnvironmentRegistry({"production": "Prod", "qa": "QA"})
        registry["production"]  # "prod"
        registry.classify("qa")  # "qa"
    """

    def __init__(self, *overrides: Optional[Mapping[str, str]]) -> None:
        labels: Dict[str, str] = dict(BUILT_IN_ENVIRONMENTS)

        for mapping in overrides:
            for role, label in (mapping or {}).items():
                if not isinstance(label, str):
                    raise ConfigurationError(
                        f"environment label for '{role}' must be a string",
                        details={"role": str(role), "label": repr(label)},
                    )
                labels[str(role)] = label

        self._labels: Mapping[str, str] = MappingProxyType(
            {role: normalize_label(label) for role, label in labels.items()}
        )

    def __getitem__(self, role: str) -> str:
        return self._labels[role]

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)

    def __len__(self) -> int:
        return len(self._labels)

    def __repr__(self) -> str:
        return f"EnvironmentRegistry({dict(self._labels)!r})"

    @property
    def development(self) -> str:
        return self._labels["development"]

    @property
    def production(self) -> str:
        return self._labels["production"]

    @property
    def staging(self) -> str:
        return self._labels["staging"]

    @property
    def test(self) -> str:
        return self._labels["test"]

    @property
    def roles(self) -> List[str]:
        return list(self._labels)

    def label_for(self, role: str) -> Optional[str]:
        """Return the label for ``role``, or None for an unknown role."""
        return self._labels.get(role)

    def classify(self, label: Optional[str]) -> Optional[str]:
        """Return the first role whose label equals ``label``."""
        if label is None:
            return None

        wanted = normalize_label(label)
        for role, role_label in self._labels.items():
            if role_label == wanted:
                return role
        return None

    def default_label(self, no_default_env: bool = False, default_env: Optional[str] = None) -> str:
        """Label used when the selector variable is unset.

        Empty in no-default mode. Otherwise the label of ``default_env`` when
        it names a known role, else the development label.
        """
        if no_default_env:
            return ""

        if default_env is not None:
            label = self._labels.get(default_env)
            if label is not None:
                return label.strip()

        return self.development

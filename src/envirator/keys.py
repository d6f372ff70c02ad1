"""Destination keys for ``provide_many``."""

import re
from typing import Callable, List, Optional, Sequence, Union

KeyTo = Callable[[str], str]
KeyToInput = Union[str, KeyTo, Sequence[KeyTo]]

_SEPARATORS = re.compile(r"[-_]+")


def camelcase(key: str) -> str:
    """Convert an environment variable name into a camelCase property name.

    Examples:
        "DATABASE_URL" -> "databaseUrl"
        "api-key" -> "apiKey"
        "PORT" -> "port"
    """
    parts = [part for part in _SEPARATORS.split(key.strip()) if part]
    if not parts:
        return ""

    first, rest = parts[0], parts[1:]
    return first.lower() + "".join(part[:1].upper() + part[1:].lower() for part in rest)


def _key_chain(key_to: Optional[KeyToInput]) -> List[KeyTo]:
    if key_to is None:
        return []
    if callable(key_to):
        return [key_to]
    return list(key_to)


def project_key(key: str, key_to: Optional[KeyToInput] = None, use_camelcase: bool = False) -> str:
    """Compute the destination key for ``key``.

    A string ``key_to`` is used as-is. Functions are applied in order to the
    key, after the camelCase conversion when ``use_camelcase`` is set.
    """
    if isinstance(key_to, str):
        return key_to

    chain = _key_chain(key_to)
    if use_camelcase:
        chain.insert(0, camelcase)

    for mutate in chain:
        key = mutate(key)
    return key

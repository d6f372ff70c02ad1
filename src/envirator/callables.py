"""Calling user predicates with as many arguments as they accept."""

import inspect
from typing import Any, Callable, Tuple


def accepted_args(func: Callable[..., Any], args: Tuple[Any, ...]) -> Tuple[Any, ...]:
    """Longest prefix of ``args`` that ``func`` can be called with.

    ``math.isnan`` or ``lambda v: v > 100`` receive only the value, while a
    two-argument predicate also receives the default. Callables without an
    inspectable signature get every argument.
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return args

    for count in range(len(args), -1, -1):
        try:
            signature.bind(*args[:count])
        except TypeError:
            continue
        return args[:count]
    return args


def call_flexible(func: Callable[..., Any], *args: Any) -> Any:
    return func(*accepted_args(func, args))

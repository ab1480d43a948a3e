from functools import wraps
from typing import Callable

_unset = object()


def run_once(func: Callable) -> Callable:
    """
    Decorator that restricts ``func`` to a single execution. Every later call returns the first result, whatever
    arguments it is given. Used for process-wide lookups such as the hierarchical config and the chart registry.

    :param func: The decorated function
    """
    cache = {"result": _unset}

    @wraps(func)
    def wrapper(*args, **kwargs):
        if cache["result"] is _unset:
            cache["result"] = func(*args, **kwargs)

        return cache["result"]

    return wrapper

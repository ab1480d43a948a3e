from dataclasses import fields, is_dataclass
from typing import Any

from .external_key import external_key


def _map_dict(val: dict) -> dict:
    return {k: _map(v) for k, v in val.items()}


def _map_dataclass(val: Any) -> dict:
    # unset fields are not part of the payload
    return {external_key(f): _map(getattr(val, f.name)) for f in fields(val) if getattr(val, f.name) is not None}


def _map(val: Any) -> Any:
    if isinstance(val, list):
        return [_map(v) for v in val]
    elif isinstance(val, dict):
        return _map_dict(val)
    elif isinstance(val, type):
        raise TypeError(f"Unexpected value '{val}' of type '{type(val)}'")
    elif is_dataclass(val):
        return _map_dataclass(val)
    else:
        return val


def values_from_args(args: object) -> dict:
    """Generate a weakly typed values map from a strongly typed args object

    Recursively converts dataclasses to dict, naming each property after the field's external key.

    Raises an exception for any value that cannot be represented in a values map.

    :param args: A chart args object and a dataclass instance
    :return: The values map for the args
    """
    if isinstance(args, type) or not is_dataclass(args):
        raise TypeError(f"Unexpected args '{args}' of type '{type(args)}'")

    return _map_dataclass(args)

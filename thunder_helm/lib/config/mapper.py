from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any, Mapping, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from dacite import from_dict, Config, UnexpectedDataError
from pulumi import log

from thunder_helm.lib.utils import external_key

ArgsType = TypeVar("ArgsType")


def _translate_value(value: Any, tp: Any) -> Any:
    origin = get_origin(tp)

    if isinstance(tp, type) and is_dataclass(tp):
        return _translate(value, tp) if isinstance(value, Mapping) else value
    elif origin is Union:
        options = [arg for arg in get_args(tp) if arg is not type(None)]
        if len(options) == 1:
            return _translate_value(value, options[0])
        for arg in options:
            if isinstance(arg, type) and is_dataclass(arg) and isinstance(value, Mapping):
                return _translate(value, arg)
        return value
    elif origin is list and isinstance(value, list):
        (item_type,) = get_args(tp) or (Any,)
        return [_translate_value(v, item_type) for v in value]
    elif origin is dict and isinstance(value, Mapping):
        _, value_type = get_args(tp) or (Any, Any)
        return {k: _translate_value(v, value_type) for k, v in value.items()}
    else:
        return value


def _translate(data: Mapping[str, Any], data_class: type) -> dict:
    """Rename the external keys of ``data`` to the field names of ``data_class``, recursing into nested dataclasses

    Keys that match no field are kept so that dacite can reject them. A field name is not a key of its own: it is
    rejected here, since dacite would take it for the field.
    """
    hints = get_type_hints(data_class)
    names = {external_key(f): f.name for f in fields(data_class)}

    aliases = {key for key in data if key not in names and key in names.values()}
    if aliases:
        raise UnexpectedDataError(keys=aliases)

    return {
        names.get(key, key): _translate_value(value, hints[names[key]]) if key in names else value
        for key, value in data.items()
    }


def decode_inputs(inputs: Mapping[str, Any], args_cls: Type[ArgsType]) -> ArgsType:
    """Decode an input bag into an args dataclass

    Uses `dacite <https://github.com/konradhalas/dacite>`_ to map dict to dataclass. Keys of the input bag are the
    external keys of the fields (see ``thunder_helm.lib.utils.keyed``).

    :param inputs: The input bag handed over by the engine
    :param args_cls: The dataclass for the chart args
    :return: The input bag expressed in the chart's args dataclass
    """
    args = from_dict(
        data_class=args_cls,
        data=_translate(inputs, args_cls),
        config=Config(
            cast=[Enum],
            strict=True,
        ),
    )

    log.debug(f"args for `{args_cls.__name__}` are {args}")

    return args

from dataclasses import Field, field
from typing import Any

from .camel_from_snake import camel_from_snake

KEY_METADATA = "pulumi"


def keyed(key: str, **kwargs) -> Any:
    """Declare a dataclass field whose external key is not the lower camel case of its name

    Example::

        disable_crd_hooks: Optional[bool] = keyed("disableCRDHooks", default=None)

    :param key: The external property name
    :param kwargs: Forwarded to ``dataclasses.field``
    :return: A dataclass field
    """
    return field(metadata={KEY_METADATA: key}, **kwargs)


def external_key(f: Field) -> str:
    """Return the external property name of a dataclass field

    :param f: A dataclass field
    :return: The declared key, else the field name in lower camel case
    """
    return f.metadata.get(KEY_METADATA) or camel_from_snake(f.name)

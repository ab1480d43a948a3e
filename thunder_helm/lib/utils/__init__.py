from .camel_from_snake import camel_from_snake
from .external_key import external_key, keyed, KEY_METADATA
from .kebab_from_snake import kebab_from_snake
from .run_once import run_once
from .values_from_args import values_from_args

from .core import get_repo_override, get_helm_config
from .mapper import decode_inputs
from .thunder_env import get_thunder_env, HierarchicalConfig, ThunderConfigException

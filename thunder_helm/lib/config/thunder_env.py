import logging
import sys
from collections import UserDict
from pathlib import Path
from typing import Optional

import hiyapyco

from thunder_helm.lib.utils import run_once

logger = logging.getLogger(__name__)


class ThunderConfigException(Exception):
    def __init__(self, key):
        super().__init__(f"Missing required configuration variable '{key}'")


class HierarchicalConfig(UserDict):
    """
    HierarchicalConfig is a UserDict that automatically loads configuration from a tiered set of config files.

    This class will look for `Thunder.common.yaml` next to the entrypoint of the process (for the provider that is
    the plugin binary shim, for tests it can be any path), and will walk the filesystem upwards a configurable number
    of times to find other `Thunder.common.yaml` files.

    The discovered files will be merged using a YAML object merger (HiYaPyCo) that supports Jinja2 syntax. Files
    closer to the entrypoint win.

    Example usage:
        from thunder_helm.lib.config import get_thunder_env

        get_thunder_env().get("helm", {})
        get_thunder_env().require("myotherconfig")

    """

    def __init__(self, limit=5, filename="Thunder.common.yaml", entrypoint: Optional[Path] = None):
        """
        Create a HierarchicalConfig UserDict

        :param limit: Max parent directories to walk
        :param filename: Filename to find and merge
        :param entrypoint: Path to start from, defaults to the `__main__` module
        """
        super().__init__()
        self.filename = filename
        configs = list(reversed(self._discover_configs(limit, entrypoint or self._get_entrypoint())))
        logger.debug("Found configs in %s", configs)

        if configs:
            # expose the data from the loader as our UserDict backing store
            self.data = hiyapyco.load([str(path) for path in configs], method=hiyapyco.METHOD_MERGE) or {}

    def require(self, key: str) -> any:
        """
        Require a key from the configuration and return it. If not found, throw a `ThunderConfigException`

        :param key: Key string to require from the configuration
        :return: Object
        """
        if v := self.get(key):
            return v
        else:
            raise ThunderConfigException(key)

    @staticmethod
    def _get_entrypoint() -> Path:
        main_module = sys.modules["__main__"]
        if not hasattr(main_module, "__file__"):
            logger.debug("No __file__ for __main__, starting from the working directory")
            return Path.cwd() / "__main__"

        return Path(main_module.__file__).absolute()

    def _discover_configs(self, limit: int, entrypoint: Path) -> list[Path]:
        """
        Walk upwards from the entrypoint and collect the config files found on the way

        :param limit: Max parent directories to walk
        :param entrypoint: File the walk starts from
        :return: Config paths, closest first
        """
        config_paths = []
        logger.debug("Entrypoint: %s", entrypoint)

        for path in list(entrypoint.parents)[:limit]:
            logger.debug("Looking in [%s] for [%s]", path, self.filename)
            maybe_config = path / self.filename
            if maybe_config.exists():
                logger.debug("Detected config [%s]", maybe_config)
                config_paths.append(maybe_config)

            # stop at the project root; a config may live there, but not higher.
            if (path / ".git").is_dir():
                logger.debug("Found project root, breaking")
                break

        return config_paths


@run_once
def get_thunder_env() -> HierarchicalConfig:
    """Load the hierarchical config on first use and hand out the same object afterwards"""
    return HierarchicalConfig()

from typing import Optional

from pulumi import log

from .thunder_env import get_thunder_env

HELM_CONFIG_KEY = "helm"
"""Top level key in `Thunder.common.yaml` holding the settings of this provider."""


def get_helm_config() -> dict:
    """
    Returns the `helm` section of the hierarchical config, or an empty dict

    Example Thunder.common.yaml:
        helm:
          repo_overrides:
            sealed-secrets: https://charts.mirror.internal/bitnami-labs

    :return: dict
    """
    return get_thunder_env().get(HELM_CONFIG_KEY) or {}


def get_repo_override(chart_name: str) -> Optional[str]:
    """
    Retrieve the repository mirror configured for a chart, if any

    :param chart_name: Default chart name of a chart variant
    :return: Repository URL or None
    """
    overrides = get_helm_config().get("repo_overrides") or {}
    repo = overrides.get(chart_name)

    if repo:
        log.debug(f"using repo override `{repo}` for chart `{chart_name}`")

    return repo

from typing import Optional

from pulumi import Inputs, ResourceOptions, log, provider

from thunder_helm import __version__
from thunder_helm.chart_manager import get_chart_manager
from thunder_helm.lib.helm import construct


class ThunderHelmProvider(provider.Provider):
    """
    Component provider serving the strongly typed Helm charts found under ``thunder_helm.charts``
    """

    def __init__(self):
        super().__init__(__version__)

    def construct(
        self,
        name: str,
        resource_type: str,
        inputs: Inputs,
        options: Optional[ResourceOptions] = None,
    ) -> provider.ConstructResult:
        log.debug(f"construct `{resource_type}` named `{name}`")

        chart = get_chart_manager().get_chart(resource_type)

        return construct(chart.chart_cls, chart.args_cls, resource_type, name, inputs, options)

from pulumi import log

from thunder_helm.lib.utils import run_once
from .discover_charts import discover_charts
from .registered_chart import RegisteredChart


class _ChartManager:
    """Stores and hands out the charts served by the provider."""

    def __init__(self):
        """Initialize the chart manager

        The ``charts`` instance attribute would look like::

            {
                "thunder-helm:index:SealedSecrets": RegisteredChart(name='sealed-secrets', ...),
                "thunder-helm:index:KubeletRubberStamp": RegisteredChart(name='kubelet-rubber-stamp', ...),
            }
        """
        self.charts = discover_charts()

        log.debug(f"discovered charts `{list(self.charts)}`")

    def get_chart(self, type_token: str) -> RegisteredChart:
        """Returns the chart registered for a type token

        :param type_token: Type token of a construct request
        :return: A RegisteredChart
        """
        try:
            return self.charts[type_token]
        except KeyError:
            raise ModuleNotFoundError(f"unknown resource type {type_token}")

    def get_all_charts(self) -> list[RegisteredChart]:
        """Helper function used to return the known charts, ordered by name

        :return: The full collection of charts
        """
        return sorted(self.charts.values(), key=lambda chart: chart.name)


@run_once
def get_chart_manager() -> _ChartManager:
    return _ChartManager()

from os import walk
from pathlib import Path
from typing import Optional

from pulumi import log

from thunder_helm.lib.utils import kebab_from_snake
from .registered_chart import RegisteredChart, load_chart

_charts_package = "thunder_helm.charts"


def _get_dirs(path: Path) -> list[str]:
    """Get all directories in ``path`` that don't start with underscore

    :param path: Path to start from
    :return: List of directories in ``path``
    """
    _, dirs, _ = next(walk(path))
    return sorted(d for d in dirs if not d.startswith("_"))


def discover_charts(
    charts_path: Optional[Path] = None, charts_package: str = _charts_package
) -> dict[str, RegisteredChart]:
    """Find all charts

    Assumes that the path to a chart is ``thunder_helm/charts/{chart}``, a package exporting one ``Chart`` subclass
    and one ``ChartArgs`` subclass.

    Example::

        # thunder_helm
        # └── charts
        #     ├── sealed_secrets
        #     └── kubernetes_dashboard

        {
            "thunder-helm:index:SealedSecrets": RegisteredChart(name='sealed-secrets', ...),
            "thunder-helm:index:KubernetesDashboard": RegisteredChart(name='kubernetes-dashboard', ...),
        }

    :param charts_path: Directory holding the chart packages
    :param charts_package: Python package matching ``charts_path``
    :return: A mapping of type tokens to charts
    """
    if charts_path is None:
        charts_path = Path(__file__).absolute().parent.parent / "charts"

    log.debug(f"looking for charts in `{charts_path}`")

    charts = {}
    for package in _get_dirs(charts_path):
        chart = load_chart(kebab_from_snake(package), f"{charts_package}.{package}")

        if chart.type_token in charts:
            raise ValueError(
                f"type `{chart.type_token}` is declared by both `{charts[chart.type_token].name}` and `{chart.name}`"
            )

        charts[chart.type_token] = chart

    return charts

from dataclasses import dataclass
from importlib import import_module
from types import ModuleType
from typing import Type

from pulumi import log

from thunder_helm.lib.helm import Chart, ChartArgs


@dataclass
class RegisteredChart:
    """
    A chart variant served by the provider: the component class and the dataclass its inputs decode into.
    """

    name: str
    """Name of the chart package, in kebab case"""

    chart_cls: Type[Chart]
    """Component class"""

    args_cls: Type[ChartArgs]
    """Args dataclass"""

    @property
    def type_token(self) -> str:
        return self.chart_cls.get_type()


def _find_subclass(package: ModuleType, base: type) -> type:
    for key, value in vars(package).items():
        if not key.startswith("_"):
            if isinstance(value, type) and issubclass(value, base) and value is not base:
                log.debug(f"found {base.__name__} class `{value.__name__}`")

                return value

    raise ModuleNotFoundError(f"no subclass of `{base.__name__}` found in `{package.__name__}`")


def load_chart(name: str, package_name: str) -> RegisteredChart:
    """Import a chart package and pick its chart and args classes

    :param name: Name of the chart, in kebab case
    :param package_name: Absolute name of the python package holding the chart
    :return: A RegisteredChart
    """
    log.debug(f"importing chart `{name}` from `{package_name}`")

    package = import_module(package_name)

    return RegisteredChart(
        name=name,
        chart_cls=_find_subclass(package, Chart),
        args_cls=_find_subclass(package, ChartArgs),
    )

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from pulumi import ComponentResource, Output, ResourceOptions

from .release import ReleaseType, FIELD_HELM_OPTIONS_INPUT
from thunder_helm.lib.utils import keyed


@dataclass
class ChartArgs:
    """
    Base of the strongly typed args of a chart. Subclasses add one field per chart value; the external key of each
    field (lower camel case unless declared with ``keyed``) is the key used in the chart's values.
    """

    helm_options: Optional[ReleaseType] = keyed(FIELD_HELM_OPTIONS_INPUT, default=None)
    """Options of the Helm Release backing the chart."""


class Chart(ComponentResource, ABC):
    """
    A strongly typed Helm Chart component. It takes part in the Pulumi resource lifecycle by virtue of being a
    ``ComponentResource``, and declares the defaults its Helm Release is built from.

    The type token and the defaults are class level so a construct request can be checked before anything is
    registered.
    """

    status: Optional[Output[dict]] = None

    def __init__(self, name: str, opts: Optional[ResourceOptions] = None):
        super().__init__(self.get_type(), name, None, opts)

    @classmethod
    @abstractmethod
    def get_type(cls) -> str:
        """Fully qualified Pulumi type token of this resource"""

    @classmethod
    @abstractmethod
    def default_chart_name(cls) -> str:
        """Default name of the chart"""

    @classmethod
    @abstractmethod
    def default_repo_url(cls) -> str:
        """Default Helm repo URL of the chart"""

    def set_outputs(self, status: Output[dict]) -> None:
        """Keep the status of the Helm Release child resource once it has been created and registered

        :param status: The Release status output
        """
        self.status = status

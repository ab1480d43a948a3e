from dataclasses import dataclass
from typing import Any, Optional

from thunder_helm.lib.helm import ChartArgs
from thunder_helm.lib.utils import keyed


@dataclass
class SealedSecretsImage:
    registry: Optional[str] = None
    """Sealed Secrets image registry"""

    repository: Optional[str] = None
    """Sealed Secrets image repository"""

    tag: Optional[str] = None
    """Sealed Secrets image tag (immutable tags are recommended)"""


@dataclass
class SealedSecretsArgs(ChartArgs):
    fullname_override: Optional[str] = keyed("fullnameOverride", default=None)
    """String to fully override the sealed-secrets fullname. Clients default to `sealed-secrets-controller`."""

    command_args: Optional[list[str]] = None
    """Additional command arguments for the controller, i.e. `["--update-status"]`."""

    key_renew_period: Optional[str] = keyed("keyrenewperiod", default=None)
    """Period after which a new sealing key is generated, i.e. `720h`. `0` disables renewal."""

    image: Optional[SealedSecretsImage] = None
    """Controller image"""

    tolerations: Optional[list[dict[str, Any]]] = None
    """Tolerations for the controller pod"""

    node_selector: Optional[dict[str, str]] = None
    """Node labels for the controller pod assignment"""

    resources: Optional[dict[str, Any]] = None
    """Resource requests and limits of the controller container"""

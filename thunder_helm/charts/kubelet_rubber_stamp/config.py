from dataclasses import dataclass
from typing import Any, Optional

from thunder_helm.lib.helm import ChartArgs


@dataclass
class KubeletRubberStampArgs(ChartArgs):
    tolerations: Optional[list[dict[str, Any]]] = None
    node_selector: Optional[dict[str, str]] = None

from dataclasses import dataclass
from typing import Any, Optional

from thunder_helm.lib.helm import ChartArgs


@dataclass
class MetricsScraper:
    enabled: Optional[bool] = None
    """Deploy the dashboard metrics scraper next to the dashboard"""


@dataclass
class KubernetesDashboardArgs(ChartArgs):
    replica_count: Optional[int] = None
    """Number of replicas"""

    extra_args: Optional[list[str]] = None
    """Additional container arguments, i.e. `["--enable-skip-login"]`"""

    protocol_http: Optional[bool] = None
    """Serve application over HTTP without TLS"""

    metrics_scraper: Optional[MetricsScraper] = None

    tolerations: Optional[list[dict[str, Any]]] = None
    """Tolerations for the dashboard pods. Use `[{"operator": "Exists", "effect": "NoSchedule"}]` to allow running
    on control planes."""

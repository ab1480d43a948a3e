from .config import KubernetesDashboardArgs, MetricsScraper
from .kubernetes_dashboard import KubernetesDashboard

from .chart_manager import get_chart_manager
from .discover_charts import discover_charts
from .registered_chart import RegisteredChart, load_chart

"""Chart and table presentation of a selected district."""

from .chart import ChartHandle, ChartRenderer, MatplotlibChart, MatplotlibChartRenderer
from .presenter import Presenter
from .table import RichTableRenderer, TableRenderer, build_rate_table

__all__ = [
    "ChartHandle",
    "ChartRenderer",
    "MatplotlibChart",
    "MatplotlibChartRenderer",
    "Presenter",
    "RichTableRenderer",
    "TableRenderer",
    "build_rate_table",
]

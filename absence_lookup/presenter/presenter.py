"""Rendering hand-off for a selected district.

The presenter owns the only live chart handle of a session. Every call to
``show`` disposes the previous chart before asking the chart renderer for a
new one, then fills the table renderer with the present values, newest first.
"""

from __future__ import annotations

import logging

from absence_lookup.pipeline.lookup.projection import (
    TableRow,
    YearSeries,
    table_rows,
)

from .chart import ChartHandle, ChartRenderer
from .table import TableRenderer

logger = logging.getLogger(__name__)


class Presenter:
    r"""Replace-and-dispose rendering of one district at a time.

    Parameters
    ----------
    chart_renderer : ChartRenderer
        Builds a chart from ``(labels, values, title)``.
    table_renderer : TableRenderer
        Displays ``(label, formatted value)`` rows.

    Examples
    --------
    >>> from absence_lookup.presenter import MatplotlibChartRenderer, RichTableRenderer
    >>> presenter = Presenter(MatplotlibChartRenderer(), RichTableRenderer())
    """

    def __init__(
        self, chart_renderer: ChartRenderer, table_renderer: TableRenderer
    ) -> None:
        self.chart_renderer = chart_renderer
        self.table_renderer = table_renderer
        self._chart: ChartHandle | None = None

    @property
    def chart(self) -> ChartHandle | None:
        return self._chart

    def show(self, name: str, series: YearSeries) -> ChartHandle:
        """Render ``series`` for district ``name``, replacing any previous chart."""
        self.close()
        self._chart = self.chart_renderer.render(series.labels, series.values, name)
        rows: list[TableRow] = table_rows(series)
        self.table_renderer.render(name, rows)
        if not rows:
            logger.info("No rate values available for %s", name)
        return self._chart

    def close(self) -> None:
        """Dispose the current chart, if any."""
        if self._chart is not None:
            self._chart.dispose()
            self._chart = None

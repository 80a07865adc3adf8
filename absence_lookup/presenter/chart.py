"""Line chart rendering backed by matplotlib.

Each call to ``MatplotlibChartRenderer.render`` builds a fresh ``Figure``
for one district. Absent values are plotted as ``NaN`` so the line shows a
gap rather than dropping to zero. The renderer keeps track of the charts it
has produced that are not yet disposed; the presenter relies on this to keep
exactly one chart alive per session.
"""

from __future__ import annotations

import io
import logging
import math
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from matplotlib.figure import Figure

from absence_lookup.config import (
    CHART_DPI,
    CHART_FIGSIZE,
    CHART_FILL_ALPHA,
    CHART_GRID_COLOR,
    CHART_LINE_COLOR,
    CHART_SERIES_LABEL,
    CHART_Y_AXIS_TITLE,
)

logger = logging.getLogger(__name__)


class ChartHandle(Protocol):
    """A rendered chart that must be disposed before it is replaced."""

    @property
    def disposed(self) -> bool: ...

    def dispose(self) -> None: ...

    def save(self, path: Path) -> Path: ...

    def to_png_bytes(self) -> bytes: ...


class ChartRenderer(Protocol):
    def render(
        self, labels: Sequence[str], values: Sequence[float | None], title: str
    ) -> ChartHandle: ...


class MatplotlibChart:
    r"""A single rendered chart wrapping a matplotlib ``Figure``.

    Parameters
    ----------
    figure : Figure
        The figure holding the plot.
    title : str
        The chart title (district name).
    owner : MatplotlibChartRenderer | None
        Renderer to notify on disposal.
    """

    def __init__(
        self,
        figure: Figure,
        title: str,
        owner: MatplotlibChartRenderer | None = None,
    ) -> None:
        self.figure: Figure | None = figure
        self.title = title
        self._owner = owner

    @property
    def disposed(self) -> bool:
        return self.figure is None

    def _require_figure(self) -> Figure:
        if self.figure is None:
            raise RuntimeError(f"Chart for {self.title!r} has been disposed")
        return self.figure

    def save(self, path: Path) -> Path:
        """Write the chart as a PNG file, creating parent directories."""
        figure = self._require_figure()
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        figure.savefig(path, dpi=CHART_DPI, bbox_inches="tight")
        logger.info("Chart for %s written to %s", self.title, path)
        return path

    def to_png_bytes(self) -> bytes:
        figure = self._require_figure()
        buffer = io.BytesIO()
        figure.savefig(buffer, format="png", dpi=CHART_DPI, bbox_inches="tight")
        return buffer.getvalue()

    def dispose(self) -> None:
        """Release the figure. Safe to call more than once."""
        if self.figure is None:
            return
        self.figure.clear()
        self.figure = None
        if self._owner is not None:
            self._owner._forget(self)


class MatplotlibChartRenderer:
    """Build line charts of yearly rates as matplotlib figures."""

    def __init__(self) -> None:
        self._live: list[MatplotlibChart] = []

    @property
    def live_charts(self) -> list[MatplotlibChart]:
        return list(self._live)

    def _forget(self, chart: MatplotlibChart) -> None:
        if chart in self._live:
            self._live.remove(chart)

    def render(
        self, labels: Sequence[str], values: Sequence[float | None], title: str
    ) -> MatplotlibChart:
        r"""Render a line chart over ``labels``/``values``.

        Parameters
        ----------
        labels : Sequence[str]
            X-axis labels, oldest first.
        values : Sequence[float | None]
            Rates aligned with ``labels``; ``None`` leaves a gap.
        title : str
            Chart title, usually the district name.

        Returns
        -------
        MatplotlibChart
            Handle owning the new figure.
        """
        if len(labels) != len(values):
            raise ValueError("labels and values must have the same length")
        x = list(range(len(labels)))
        y = [math.nan if v is None else float(v) for v in values]

        figure = Figure(figsize=CHART_FIGSIZE, layout="tight")
        ax = figure.add_subplot(1, 1, 1)
        ax.plot(
            x,
            y,
            color=CHART_LINE_COLOR,
            linewidth=3,
            marker="o",
            markersize=7,
            markerfacecolor="#ffffff",
            markeredgecolor=CHART_LINE_COLOR,
            markeredgewidth=2,
            label=CHART_SERIES_LABEL,
        )
        ax.fill_between(x, y, color=CHART_LINE_COLOR, alpha=CHART_FILL_ALPHA)
        for xi, value in zip(x, values):
            if value is not None:
                ax.annotate(
                    f"{value}%",
                    (xi, value),
                    textcoords="offset points",
                    xytext=(0, 8),
                    ha="center",
                    fontsize=8,
                )
        ax.set_xticks(x)
        ax.set_xticklabels(labels)
        ax.set_ylim(bottom=0)
        ax.set_ylabel(CHART_Y_AXIS_TITLE)
        ax.set_title(title)
        ax.grid(axis="y", color=CHART_GRID_COLOR)
        ax.grid(axis="x", visible=False)
        ax.legend(loc="upper center")

        chart = MatplotlibChart(figure, title, owner=self)
        self._live.append(chart)
        logger.debug("Rendered chart for %s (%d live)", title, len(self._live))
        return chart

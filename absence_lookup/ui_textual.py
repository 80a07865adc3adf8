"""Textual app for interactive district lookup.

Mirrors the lookup page layout: header, search box with a results list, an
inline status line, and a results panel (district name, chart, rate table)
that appears after the first selection. All state lives in
``LookupController``; this module only forwards UI events to it and renders
from its state.

Docstrings use NumPy style and English.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import ClassVar

from textual import events
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.widgets import DataTable, Footer, Input, OptionList, Static

from absence_lookup.config import NO_MATCHES_TEXT, SEARCH_HINT_TEXT
from absence_lookup.controller import LookupController
from absence_lookup.pipeline.district_data import DistrictRecord
from absence_lookup.pipeline.lookup import SearchStatus, TableRow
from absence_lookup.pipeline.report import report_filename
from absence_lookup.presenter import MatplotlibChartRenderer, Presenter
from absence_lookup.settings import LookupSettings

logger = logging.getLogger(__name__)


class DataTableRenderer:
    """Table renderer that fills a Textual ``DataTable``."""

    def __init__(self) -> None:
        self.table: DataTable | None = None
        self.rows: list[TableRow] = []

    def render(self, title: str, rows: Sequence[TableRow]) -> None:
        self.rows = list(rows)
        if self.table is None:
            return
        self.table.clear()
        for row in self.rows:
            self.table.add_row(row.label, row.value)


def chart_path_for(output_dir: Path, district_name: str) -> Path:
    """Return where the TUI saves the chart image of a district."""
    return output_dir / "charts" / report_filename(district_name).replace(".html", ".png")


class DistrictLookupApp(App):
    r"""Textual application for searching districts and viewing their rates.

    Parameters
    ----------
    controller : LookupController
        Session state and event handlers.
    output_dir : Path
        Where chart images are written on selection.

    Examples
    --------
    >>> app = DistrictLookupApp(controller, Path("output"))
    >>> app.run()
    """

    TITLE = "District Chronic Absenteeism Lookup"

    BINDINGS: ClassVar[list[tuple[str, str, str]]] = [
        ("escape", "hide_results", "Hide results"),
        ("q", "quit", "Quit"),
    ]

    CSS: ClassVar[str] = """
    #root { height: 100%; }
    #header { background: $accent; color: black; padding: 1 2; }
    #search-container { height: auto; border: round $accent; }
    #results { max-height: 12; }
    #status { padding: 0 1; color: $text-muted; }
    #status.error { color: red; }
    #result-section { border: round $accent; height: 1fr; }
    #district-name { text-style: bold; padding: 0 1; }
    #chart-info { padding: 0 1; }
    .hidden { display: none; }
    """

    def __init__(self, controller: LookupController, output_dir: Path) -> None:
        super().__init__()
        self.controller = controller
        self.output_dir = Path(output_dir)
        self._shown: tuple[DistrictRecord, ...] = ()

    @property
    def table_renderer(self) -> DataTableRenderer | None:
        renderer = self.controller.presenter.table_renderer
        return renderer if isinstance(renderer, DataTableRenderer) else None

    def compose(self) -> ComposeResult:
        """Compose the search area, status line and results panel."""
        header = Static(self.TITLE, id="header")
        search = Vertical(
            Input(placeholder="Search for a district...", id="search"),
            OptionList(id="results", classes="hidden"),
            id="search-container",
        )
        status = Static("", id="status")
        results = Vertical(
            Static("", id="district-name"),
            Static("", id="chart-info"),
            DataTable(id="rates"),
            id="result-section",
            classes="hidden",
        )
        yield Vertical(header, search, status, results, Footer(), id="root")

    def on_mount(self) -> None:
        """Attach the rate table and start loading the dataset."""
        table = self.query_one("#rates", DataTable)
        table.add_columns("Year", "Rate")
        if self.table_renderer is not None:
            self.table_renderer.table = table
        self.query_one("#search", Input).focus()
        self.controller.begin_load()
        self._render_status()
        self.run_worker(self._load(), exclusive=True)

    async def _load(self) -> None:
        await self.controller.on_ready()
        self._render_status()

    def _render_status(self) -> None:
        status = self.query_one("#status", Static)
        status.update(self.controller.status)
        status.set_class(self.controller.status_is_error, "error")

    def _render_results(self) -> None:
        results = self.query_one("#results", OptionList)
        results.clear_options()
        outcome = self.controller.outcome
        self._shown = outcome.matches
        if outcome.status is SearchStatus.MATCHES:
            results.add_options(outcome.names)
        elif outcome.status is SearchStatus.NO_MATCHES:
            results.add_option(NO_MATCHES_TEXT)
            results.disable_option_at_index(0)
        results.set_class(not self.controller.results_visible, "hidden")

    def on_input_changed(self, event: Input.Changed) -> None:
        """Search as the user types."""
        self.controller.on_input(event.value)
        self._render_results()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Select the first result on Enter."""
        if self.controller.results_visible and self._shown:
            self._select(self._shown[0])
        elif len(event.value.strip()) < 2:
            self.notify(SEARCH_HINT_TEXT)

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        index = event.option_index
        if 0 <= index < len(self._shown):
            self._select(self._shown[index])

    def on_click(self, event: events.Click) -> None:
        """Hide results when clicking outside the search area."""
        widget = getattr(event, "widget", None)
        container = self.query_one("#search-container")
        if widget is None or container not in widget.ancestors_with_self:
            self.action_hide_results()

    def action_hide_results(self) -> None:
        self.controller.on_outside_click()
        self._render_results()

    def _select(self, record: DistrictRecord) -> None:
        self.controller.on_result_click(record)
        self.query_one("#result-section").remove_class("hidden")
        self.query_one("#district-name", Static).update(record.clean_name)
        chart_info = self.query_one("#chart-info", Static)
        handle = self.controller.presenter.chart
        if handle is not None:
            target = chart_path_for(self.output_dir, record.clean_name)
            try:
                path = handle.save(target)
            except OSError as exc:
                logger.error("Could not save chart to %s: %s", target, exc)
                chart_info.update(f"Could not save chart to {target}")
                self.notify("Could not save chart", severity="error")
            else:
                chart_info.update(f"Chart saved to {path}")
        search = self.query_one("#search", Input)
        search.value = ""
        self._render_results()

    def on_unmount(self) -> None:
        self.controller.close()


def build_app(settings: LookupSettings) -> DistrictLookupApp:
    """Wire a controller with matplotlib charts and a ``DataTable`` renderer."""
    presenter = Presenter(MatplotlibChartRenderer(), DataTableRenderer())
    controller = LookupController(
        settings.csv_source, presenter, timeout=settings.fetch_timeout
    )
    return DistrictLookupApp(controller, settings.output_dir)


def run_app(settings: LookupSettings) -> None:
    build_app(settings).run()

"""Session controller for the district lookup.

``LookupController`` owns all mutable session state (the loaded dataset, the
load status, the current query and search outcome, the selected district)
and exposes one handler per UI event. Surfaces such as the CLI and the
Textual app call these handlers and render from the controller's state; they
hold no state of their own.

State machine
-------------
``NoSelection -> Selected(record)`` on a result click. There is no transition
back to ``NoSelection``.
"""

from __future__ import annotations

import logging
from pathlib import Path

import aiohttp

from absence_lookup.config import DEFAULT_FETCH_TIMEOUT, STATUS_LOADING
from absence_lookup.exceptions import AppError

from .pipeline.district_data import DistrictRecord, LoadResult, load_districts
from .pipeline.lookup import (
    SearchOutcome,
    SearchStatus,
    YearSeries,
    project_district,
    search_districts,
)
from .presenter import Presenter

logger = logging.getLogger(__name__)


class LookupController:
    r"""Explicit session state plus UI event handlers.

    Parameters
    ----------
    source : str | Path
        Local path or URL of the district CSV.
    presenter : Presenter
        Rendering hand-off for selections.
    session : aiohttp.ClientSession | None, optional
        Session for remote sources.
    timeout : float, optional
        Fetch timeout in seconds.

    Attributes
    ----------
    records : tuple[DistrictRecord, ...]
        The dataset; empty until a load succeeds.
    status : str
        Inline status text; empty when there is nothing to report.
    error : AppError | None
        The terminal error of the last load attempt.
    query : str
        Current content of the search box.
    outcome : SearchOutcome
        Result of the last search.
    results_visible : bool
        Whether the results list is shown.
    selected : DistrictRecord | None
        The selected district, ``None`` before the first selection.
    series : YearSeries | None
        Projection of ``selected``.
    """

    def __init__(
        self,
        source: str | Path,
        presenter: Presenter,
        *,
        session: aiohttp.ClientSession | None = None,
        timeout: float = DEFAULT_FETCH_TIMEOUT,
    ) -> None:
        self.source = source
        self.presenter = presenter
        self._session = session
        self._timeout = timeout
        self.records: tuple[DistrictRecord, ...] = ()
        self.status: str = ""
        self.error: AppError | None = None
        self.loaded: bool = False
        self.query: str = ""
        self.outcome: SearchOutcome = SearchOutcome(SearchStatus.NOT_SHOWN)
        self.results_visible: bool = False
        self.selected: DistrictRecord | None = None
        self.series: YearSeries | None = None

    @property
    def has_selection(self) -> bool:
        return self.selected is not None

    @property
    def status_is_error(self) -> bool:
        return self.error is not None

    def begin_load(self) -> None:
        """Enter the loading state before the fetch starts."""
        self.status = STATUS_LOADING
        self.error = None

    async def on_ready(self) -> LoadResult:
        """Load the dataset and update the status text."""
        self.begin_load()
        result = await load_districts(self.source, self._session, timeout=self._timeout)
        self.apply_load_result(result)
        return result

    def apply_load_result(self, result: LoadResult) -> None:
        self.records = result.records
        self.error = result.error
        self.status = result.status_message
        self.loaded = result.ok

    def on_input(self, text: str) -> SearchOutcome:
        """Run a search for the new search-box content."""
        self.query = text
        self.outcome = search_districts(self.records, text)
        self.results_visible = self.outcome.visible
        if self.outcome.visible and not self.records:
            logger.warning("Search attempted but data is empty")
        return self.outcome

    def on_result_click(self, record: DistrictRecord) -> YearSeries:
        """Select ``record``, present it and reset the search box."""
        self.selected = record
        self.series = project_district(record)
        self.presenter.show(record.clean_name, self.series)
        self.results_visible = False
        self.query = ""
        self.outcome = SearchOutcome(SearchStatus.NOT_SHOWN)
        logger.info("Selected district %s", record.clean_name)
        return self.series

    def on_outside_click(self) -> None:
        self.results_visible = False

    def close(self) -> None:
        """Release the live chart."""
        self.presenter.close()

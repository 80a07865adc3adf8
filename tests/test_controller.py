"""Tests for the session controller and its event handlers."""

from pathlib import Path

import pytest

from absence_lookup.config import STATUS_EMPTY_ERROR, STATUS_LOADING
from absence_lookup.controller import LookupController
from absence_lookup.pipeline.lookup import SearchStatus
from absence_lookup.presenter import MatplotlibChartRenderer, Presenter


@pytest.fixture
def make_controller(table_renderer):
    def _make(source):
        renderer = MatplotlibChartRenderer()
        controller = LookupController(source, Presenter(renderer, table_renderer))
        return controller, renderer

    return _make


def test_search_before_load_returns_no_matches(make_controller, sample_csv):
    controller, _ = make_controller(sample_csv)
    assert controller.on_input("aspen").status is SearchStatus.NO_MATCHES
    assert controller.on_input("a").status is SearchStatus.NOT_SHOWN
    assert not controller.results_visible


@pytest.mark.asyncio
async def test_on_ready_loads_and_clears_status(make_controller, sample_csv):
    controller, _ = make_controller(sample_csv)
    result = await controller.on_ready()
    assert result.ok
    assert controller.status == ""
    assert controller.loaded
    assert len(controller.records) == 4


@pytest.mark.asyncio
async def test_on_ready_shows_loading_until_resolved(make_controller, sample_csv, monkeypatch):
    controller, _ = make_controller(sample_csv)
    seen = []

    async def fake_load(source, session=None, *, timeout):
        seen.append(controller.status)
        from absence_lookup.pipeline.district_data import LoadResult

        return LoadResult.loaded(())

    monkeypatch.setattr("absence_lookup.controller.load_districts", fake_load)
    await controller.on_ready()
    assert seen == [STATUS_LOADING]


@pytest.mark.asyncio
async def test_failed_load_sets_error_status_and_search_is_inert(make_controller, tmp_path: Path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    controller, _ = make_controller(path)
    await controller.on_ready()
    assert controller.status == STATUS_EMPTY_ERROR
    assert controller.status_is_error
    assert controller.records == ()
    assert controller.on_input("anything").status is SearchStatus.NO_MATCHES


@pytest.mark.asyncio
async def test_selection_flow(make_controller, sample_csv, table_renderer):
    controller, renderer = make_controller(sample_csv)
    await controller.on_ready()
    outcome = controller.on_input("ce")
    assert controller.results_visible
    assert not controller.has_selection

    series = controller.on_result_click(outcome.matches[0])
    assert controller.selected is outcome.matches[0]
    assert series.values[0] == 8.9
    assert controller.query == ""
    assert not controller.results_visible
    assert table_renderer.calls[-1][0] == "Cedar Falls Union"

    second = controller.on_input("aspen").matches[0]
    controller.on_result_click(second)
    assert controller.selected is second
    assert len(renderer.live_charts) == 1
    controller.close()
    assert renderer.live_charts == []


@pytest.mark.asyncio
async def test_outside_click_hides_results(make_controller, sample_csv):
    controller, _ = make_controller(sample_csv)
    await controller.on_ready()
    controller.on_input("birch")
    assert controller.results_visible
    controller.on_outside_click()
    assert not controller.results_visible
    assert controller.outcome.status is SearchStatus.MATCHES


def test_begin_load_sets_loading_status(make_controller, sample_csv):
    controller, _ = make_controller(sample_csv)
    controller.begin_load()
    assert controller.status == STATUS_LOADING
    assert not controller.status_is_error

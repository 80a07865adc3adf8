"""Tests for the matplotlib chart renderer and the presenter hand-off."""

import math
from pathlib import Path

import pytest

from absence_lookup.config import CHART_SERIES_LABEL
from absence_lookup.pipeline.lookup import project_district
from absence_lookup.presenter import (
    MatplotlibChartRenderer,
    Presenter,
    RichTableRenderer,
    build_rate_table,
)
from absence_lookup.pipeline.district_data import DistrictRecord


def test_chart_plots_absent_values_as_gaps(reference_record):
    renderer = MatplotlibChartRenderer()
    series = project_district(reference_record)
    chart = renderer.render(series.labels, series.values, "Aspen Ridge Unified")
    chart.to_png_bytes()
    ax = chart.figure.axes[0]
    line = ax.get_lines()[0]
    ydata = list(line.get_ydata())
    assert ydata[0] == 10.5
    assert math.isnan(ydata[1]) and math.isnan(ydata[2]) and math.isnan(ydata[4])
    assert ydata[5] == 9.0
    assert line.get_label() == CHART_SERIES_LABEL
    assert [t.get_text() for t in ax.get_xticklabels()] == series.labels
    assert ax.get_ylim()[0] == 0
    assert ax.get_title() == "Aspen Ridge Unified"
    chart.dispose()


def test_chart_with_no_values_still_renders():
    renderer = MatplotlibChartRenderer()
    record = DistrictRecord.from_row({"clean_name": "Empty"})
    series = project_district(record)
    chart = renderer.render(series.labels, series.values, "Empty")
    assert not chart.disposed
    chart.dispose()
    assert chart.disposed


def test_render_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        MatplotlibChartRenderer().render(["a", "b"], [1.0], "x")


def test_dispose_is_idempotent_and_blocks_save(tmp_path: Path):
    renderer = MatplotlibChartRenderer()
    chart = renderer.render(["a"], [1.0], "x")
    chart.dispose()
    chart.dispose()
    assert renderer.live_charts == []
    with pytest.raises(RuntimeError):
        chart.save(tmp_path / "x.png")


def test_save_writes_png(tmp_path: Path):
    chart = MatplotlibChartRenderer().render(["a", "b"], [1.0, None], "x")
    out = chart.save(tmp_path / "nested" / "x.png")
    assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
    chart.dispose()


def test_reselecting_leaves_exactly_one_live_chart(reference_record, table_renderer):
    renderer = MatplotlibChartRenderer()
    presenter = Presenter(renderer, table_renderer)
    first = presenter.show("Aspen Ridge Unified", project_district(reference_record))
    other = DistrictRecord.from_row({"clean_name": "Other", "20192020": "3.5"})
    second = presenter.show("Other", project_district(other))
    assert first.disposed
    assert not second.disposed
    assert renderer.live_charts == [second]
    assert presenter.chart is second
    presenter.close()
    assert renderer.live_charts == []
    assert presenter.chart is None


def test_presenter_fills_table_with_present_values(reference_record, table_renderer):
    presenter = Presenter(MatplotlibChartRenderer(), table_renderer)
    presenter.show("Aspen Ridge Unified", project_district(reference_record))
    title, rows = table_renderer.calls[-1]
    assert title == "Aspen Ridge Unified"
    assert [r.value for r in rows] == ["9.0%", "8.25%", "10.5%"]
    presenter.close()


def test_rich_table_renderer_prints_rows(reference_record):
    from rich.console import Console

    console = Console(record=True, width=80)
    presenter = Presenter(MatplotlibChartRenderer(), RichTableRenderer(console))
    presenter.show("Aspen Ridge Unified", project_district(reference_record))
    text = console.export_text()
    assert "2024-2025" in text and "9.0%" in text
    assert "2020-2021" not in text
    presenter.close()


def test_build_rate_table_has_year_and_rate_columns():
    table = build_rate_table("x", [])
    assert [c.header for c in table.columns] == ["Year", "Rate"]
    assert table.row_count == 0

"""Export a standalone HTML report for one district.

Headless runner that projects a district, renders its chart through the
presenter, and writes the report page using the project template.

Usage Examples
--------------
::

    from pathlib import Path
    from absence_lookup.pipeline.report.runner import export_district_report
    export_district_report(record, Path("output/aspen-ridge-unified.html"))

"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from absence_lookup.config import REPORT_TEMPLATE_PATH
from absence_lookup.pipeline.district_data.records import DistrictRecord
from absence_lookup.pipeline.lookup.projection import TableRow, project_district
from absence_lookup.presenter import MatplotlibChartRenderer, Presenter

from .renderer import generate_report_html, write_html_output

logger = logging.getLogger(__name__)


class _CollectingTableRenderer:
    def __init__(self) -> None:
        self.rows: list[TableRow] = []

    def render(self, title: str, rows) -> None:
        self.rows = list(rows)


def report_filename(district_name: str) -> str:
    """Return a filesystem-safe ``.html`` name for a district.

    Examples
    --------
    >>> report_filename("Aspen Ridge Unified")
    'aspen-ridge-unified.html'
    """
    slug = re.sub(r"[^a-z0-9]+", "-", district_name.lower()).strip("-")
    return f"{slug or 'district'}.html"


def export_district_report(
    record: DistrictRecord,
    output_file: Path,
    template_path: Path | None = None,
) -> bool:
    r"""Render and write the HTML report for ``record``.

    Parameters
    ----------
    record : DistrictRecord
        The selected district.
    output_file : Path
        Destination of the report.
    template_path : Path | None, optional
        Report template; defaults to ``REPORT_TEMPLATE_PATH``.

    Returns
    -------
    bool
        ``True`` if the report was written; ``False`` if an error occurred
        (errors are logged).
    """
    template_path = Path(template_path) if template_path is not None else REPORT_TEMPLATE_PATH
    table = _CollectingTableRenderer()
    presenter = Presenter(MatplotlibChartRenderer(), table)
    try:
        chart = presenter.show(record.clean_name, project_district(record))
        png = chart.to_png_bytes()
        html = generate_report_html(record.clean_name, table.rows, png, template_path)
    except OSError:
        logger.exception("Failed to render report for %s", record.clean_name)
        return False
    finally:
        presenter.close()
    if not write_html_output(html, Path(output_file)):
        return False
    logger.info("Report for %s written to %s", record.clean_name, output_file)
    return True


__all__ = ["export_district_report", "report_filename"]

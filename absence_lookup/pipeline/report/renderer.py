"""HTML rendering utilities for single-district reports.

This module turns a projected district (its chart image and table rows) into
a standalone HTML page by injecting values into the report template. It is
the lowest layer of the export path and has no knowledge of loading or
searching.

Example
-------
>>> from absence_lookup.pipeline.report import renderer
>>> rows_html = renderer.render_table_rows([])
>>> "No data" in rows_html
True
"""

from __future__ import annotations

import base64
import html
import logging
import re
from collections.abc import Sequence
from pathlib import Path

from absence_lookup.config import CHART_SERIES_LABEL
from absence_lookup.pipeline.lookup.projection import TableRow

logger = logging.getLogger(__name__)

NO_VALUES_ROW_HTML: str = '<tr><td colspan="2">No data available</td></tr>'

_PLACEHOLDER_RE = re.compile(r"\{(district_name|chart_img|table_rows)\}")


def render_table_rows(rows: Sequence[TableRow]) -> str:
    r"""Render table rows as ``<tr>`` elements in the given order.

    Parameters
    ----------
    rows : Sequence[TableRow]
        Present rates, newest first.

    Returns
    -------
    str
        Concatenated, escaped HTML rows; a single placeholder row if empty.
    """
    if not rows:
        return NO_VALUES_ROW_HTML
    return "".join(
        f"<tr><td>{html.escape(row.label)}</td><td>{html.escape(row.value)}</td></tr>"
        for row in rows
    )


def render_chart_img(png_bytes: bytes | None, alt: str) -> str:
    """Return an ``<img>`` tag embedding ``png_bytes`` as a data URI."""
    if not png_bytes:
        return ""
    encoded = base64.b64encode(png_bytes).decode("ascii")
    return (
        f'<img src="data:image/png;base64,{encoded}" '
        f'alt="{html.escape(alt, quote=True)}">'
    )


def generate_report_html(
    district_name: str,
    rows: Sequence[TableRow],
    chart_png: bytes | None,
    template_path: Path,
) -> str:
    r"""Render the full report by filling the template placeholders.

    Parameters
    ----------
    district_name : str
        Display name of the district.
    rows : Sequence[TableRow]
        Table rows, newest first.
    chart_png : bytes | None
        PNG image of the chart, or ``None`` to omit it.
    template_path : Path
        Template containing ``{district_name}``, ``{chart_img}`` and
        ``{table_rows}`` placeholders.

    Returns
    -------
    str
        Rendered HTML.

    Raises
    ------
    OSError
        If the template file cannot be read.
    """
    with template_path.open("r", encoding="utf-8") as fh:
        tpl = fh.read()
    alt = f"{CHART_SERIES_LABEL}: {district_name}"
    values = {
        "district_name": html.escape(district_name),
        "chart_img": render_chart_img(chart_png, alt),
        "table_rows": render_table_rows(rows),
    }
    return _PLACEHOLDER_RE.sub(lambda m: values[m.group(1)], tpl)


def write_html_output(html_content: str, output_file: Path) -> bool:
    """Write the rendered HTML to disk, creating parent directories.

    Returns ``True`` on success; failures are logged and return ``False``.
    """
    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(html_content, encoding="utf-8")
    except OSError:
        logger.exception("Failed to write HTML output to %s", output_file)
        return False
    return True

"""Single-district HTML report export.

Exposes the template renderer and the headless export runner.
"""

from .renderer import (
    generate_report_html,
    render_chart_img,
    render_table_rows,
    write_html_output,
)
from .runner import export_district_report, report_filename

__all__ = [
    "export_district_report",
    "generate_report_html",
    "render_chart_img",
    "render_table_rows",
    "report_filename",
    "write_html_output",
]

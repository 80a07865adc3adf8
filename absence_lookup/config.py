"""Global configuration constants for the project.

Defines paths, year buckets, display texts and logging defaults used across
the loader, lookup and presentation layers.
"""

from __future__ import annotations

from pathlib import Path

# Project directories
PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
PACKAGE_DIR: Path = PROJECT_ROOT / "absence_lookup"
LOG_DIR: Path = PROJECT_ROOT / "logs"

# Data source defaults
DEFAULT_CSV_SOURCE: str = str(PROJECT_ROOT / "data" / "district_data.csv")
DEFAULT_FETCH_TIMEOUT: float = 30.0
NAME_COLUMN: str = "clean_name"
BYTE_ORDER_MARK: str = "\ufeff"
MISSING_VALUE_TOKEN: str = "NA"

# Year buckets, oldest first
YEAR_CODES: tuple[str, ...] = (
    "20192020",
    "20202021",
    "20212022",
    "20222023",
    "20232024",
    "20242025",
)
YEAR_LABELS: tuple[str, ...] = (
    "2019-2020",
    "2020-2021",
    "2021-2022",
    "2022-2023",
    "2023-2024",
    "2024-2025",
)

# Search
MIN_QUERY_LENGTH: int = 2
NO_MATCHES_TEXT: str = "No matching districts found"
SEARCH_HINT_TEXT: str = "Type at least 2 characters to search"

# Status messages
STATUS_LOADING: str = "Loading data..."
STATUS_FETCH_ERROR: str = "Error loading data file. Please check connection."
STATUS_SCHEMA_ERROR: str = "Error: Data format incorrect (missing clean_name column)."
STATUS_EMPTY_ERROR: str = "Error: No data found in CSV file."

# Chart styling
CHART_SERIES_LABEL: str = "Chronic Absenteeism Rate (%)"
CHART_Y_AXIS_TITLE: str = "Percent (%)"
CHART_LINE_COLOR: str = "#2563eb"
CHART_FILL_ALPHA: float = 0.1
CHART_GRID_COLOR: str = "#e2e8f0"
CHART_FIGSIZE: tuple[float, float] = (10.0, 5.0)
CHART_DPI: int = 150

# Report export
REPORT_TEMPLATE_PATH: Path = PROJECT_ROOT / "templates" / "district_report.html"
DEFAULT_OUTPUT_DIR: Path = PROJECT_ROOT / "output"

# Environment overrides
ENV_CSV_SOURCE: str = "ABSENCE_CSV_SOURCE"
ENV_OUTPUT_DIR: str = "ABSENCE_OUTPUT_DIR"
ENV_FETCH_TIMEOUT: str = "ABSENCE_FETCH_TIMEOUT"

# Logging
LOG_FILENAME_LOOKUP: str = "absence_lookup.log"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

"""Search and projection over loaded district records."""

from .projection import (
    TableRow,
    YearPoint,
    YearSeries,
    format_rate,
    parse_rate,
    project_district,
    table_rows,
)
from .search import (
    SearchOutcome,
    SearchStatus,
    find_district,
    normalize_query,
    search_districts,
)

__all__ = [
    "SearchOutcome",
    "SearchStatus",
    "TableRow",
    "YearPoint",
    "YearSeries",
    "find_district",
    "format_rate",
    "normalize_query",
    "parse_rate",
    "project_district",
    "search_districts",
    "table_rows",
]

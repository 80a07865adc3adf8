"""District data loading package.

Exposes the fetch, parse and load entrypoints for the district CSV along with
the immutable ``DistrictRecord`` type. All concrete logic lives in the
``fetcher``, ``loader`` and ``records`` submodules.
"""

from .fetcher import fetch_csv_text, is_remote_source
from .loader import (
    LoadResult,
    load_districts,
    normalize_name_header,
    parse_district_csv,
    status_message_for,
)
from .records import DistrictRecord

__all__ = [
    "DistrictRecord",
    "LoadResult",
    "fetch_csv_text",
    "is_remote_source",
    "load_districts",
    "normalize_name_header",
    "parse_district_csv",
    "status_message_for",
]

"""Case-insensitive district name search.

Search is a pure linear scan over the loaded records: the same query and the
same data always yield the same matches, in original data order. Queries
shorter than ``MIN_QUERY_LENGTH`` (after trimming) do not search at all; that
"not shown" outcome is kept distinct from "no matches".
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass

from absence_lookup.config import MIN_QUERY_LENGTH, NO_MATCHES_TEXT

from ..district_data.records import DistrictRecord


class SearchStatus(enum.Enum):
    NOT_SHOWN = "not_shown"
    MATCHES = "matches"
    NO_MATCHES = "no_matches"


@dataclass(frozen=True)
class SearchOutcome:
    r"""Result of one search.

    Attributes
    ----------
    status : SearchStatus
        Whether results are hidden, present, or empty.
    query : str
        The normalized (trimmed, lower-cased) query.
    matches : tuple[DistrictRecord, ...]
        Matching records in original order; empty unless ``MATCHES``.
    """

    status: SearchStatus
    query: str = ""
    matches: tuple[DistrictRecord, ...] = ()

    @property
    def visible(self) -> bool:
        """Return True if the results list should be shown."""
        return self.status is not SearchStatus.NOT_SHOWN

    @property
    def names(self) -> list[str]:
        return [record.clean_name for record in self.matches]

    @property
    def display_text(self) -> str:
        """Return the placeholder text for an empty result list, if any."""
        if self.status is SearchStatus.NO_MATCHES:
            return NO_MATCHES_TEXT
        return ""


def normalize_query(query: str | None) -> str:
    """Trim and lower-case a raw query string."""
    return (query or "").strip().lower()


def search_districts(
    records: Sequence[DistrictRecord], query: str | None
) -> SearchOutcome:
    r"""Return the records whose name contains ``query``, ignoring case.

    Parameters
    ----------
    records : Sequence[DistrictRecord]
        The full dataset; may be empty while loading or after a failed load.
    query : str | None
        Raw user input.

    Returns
    -------
    SearchOutcome
        ``NOT_SHOWN`` for queries shorter than the minimum length,
        otherwise ``MATCHES`` or ``NO_MATCHES``.

    Examples
    --------
    >>> from absence_lookup.pipeline.district_data import DistrictRecord
    >>> data = [DistrictRecord.from_row({"clean_name": "Aspen County"})]
    >>> search_districts(data, "a").status
    <SearchStatus.NOT_SHOWN: 'not_shown'>
    >>> search_districts(data, " ASPEN ").names
    ['Aspen County']
    """
    needle = normalize_query(query)
    if len(needle) < MIN_QUERY_LENGTH:
        return SearchOutcome(SearchStatus.NOT_SHOWN, needle)
    matches = tuple(
        record
        for record in records
        if record.clean_name and needle in record.clean_name.lower()
    )
    if not matches:
        return SearchOutcome(SearchStatus.NO_MATCHES, needle)
    return SearchOutcome(SearchStatus.MATCHES, needle, matches)


def find_district(
    records: Sequence[DistrictRecord], name: str
) -> DistrictRecord | None:
    """Return the first record whose name equals ``name`` ignoring case."""
    wanted = normalize_query(name)
    for record in records:
        if record.clean_name.lower() == wanted:
            return record
    return None

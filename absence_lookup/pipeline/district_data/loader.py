"""loader.py: Parse and validate the district CSV into immutable records.

This module is the data-oriented half of the load stage. It turns raw CSV
text into an ordered tuple of ``DistrictRecord`` objects, normalizing the
district name header (which may carry a byte-order mark or stray whitespace)
to ``clean_name``, and reports every failure as a ``LoadResult`` rather than
an exception so the caller can surface a status message.

Design Principles
-----------------
- Parsing is delegated to pandas; every column is read as ``str`` and the
  literal ``"NA"`` token is preserved rather than turned into ``NaN``.
- Record order is the file order. Nothing is sorted or deduplicated.
- Rows with a blank district name are dropped and counted in the log.

Usage
-----
>>> import asyncio
>>> from absence_lookup.pipeline.district_data.loader import load_districts
>>> result = asyncio.run(load_districts("data/district_data.csv"))
>>> result.ok
True
"""

from __future__ import annotations

import io
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import aiohttp
import pandas as pd

from absence_lookup.config import (
    BYTE_ORDER_MARK,
    DEFAULT_FETCH_TIMEOUT,
    NAME_COLUMN,
    STATUS_EMPTY_ERROR,
    STATUS_FETCH_ERROR,
    STATUS_SCHEMA_ERROR,
)
from absence_lookup.exceptions import (
    AppError,
    DataFetchError,
    EmptyDatasetError,
    SchemaMismatchError,
)

from .fetcher import fetch_csv_text
from .records import DistrictRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadResult:
    r"""Outcome of one load attempt.

    Attributes
    ----------
    records : tuple[DistrictRecord, ...]
        Loaded records in file order; empty on failure.
    error : AppError | None
        The terminal error of the attempt, if any.
    """

    records: tuple[DistrictRecord, ...] = ()
    error: AppError | None = None

    @classmethod
    def loaded(cls, records: Sequence[DistrictRecord]) -> LoadResult:
        return cls(records=tuple(records))

    @classmethod
    def failed(cls, error: AppError) -> LoadResult:
        return cls(records=(), error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def status_message(self) -> str:
        """Return the user-facing status text; empty when the load succeeded."""
        return status_message_for(self.error)


def status_message_for(error: AppError | None) -> str:
    """Map a load error to the inline status text shown to the user."""
    if error is None:
        return ""
    if isinstance(error, SchemaMismatchError):
        return STATUS_SCHEMA_ERROR
    if isinstance(error, EmptyDatasetError):
        return STATUS_EMPTY_ERROR
    return STATUS_FETCH_ERROR


def normalize_header(header: str) -> str:
    """Strip surrounding whitespace and a leading byte-order mark from a header."""
    return str(header).strip().lstrip(BYTE_ORDER_MARK).strip()


def normalize_name_header(columns: Sequence[str]) -> list[str]:
    r"""Return ``columns`` with the district name header renamed to ``clean_name``.

    Parameters
    ----------
    columns : Sequence[str]
        Header names as parsed from the file.

    Returns
    -------
    list[str]
        The same headers, with the first one that normalizes to
        ``clean_name`` replaced by exactly ``clean_name``.

    Raises
    ------
    SchemaMismatchError
        If no header normalizes to ``clean_name``.

    Examples
    --------
    >>> normalize_name_header(["\ufeffclean_name ", "20192020"])
    ['clean_name', '20192020']
    """
    headers = [str(c) for c in columns]
    for index, header in enumerate(headers):
        if normalize_header(header) == NAME_COLUMN:
            headers[index] = NAME_COLUMN
            return headers
    raise SchemaMismatchError(
        f"Could not find '{NAME_COLUMN}' column",
        context={"headers": headers},
    )


def parse_district_csv(text: str) -> tuple[DistrictRecord, ...]:
    r"""Parse CSV text into district records.

    Parameters
    ----------
    text : str
        Raw CSV text; the first row is the header.

    Returns
    -------
    tuple[DistrictRecord, ...]
        Records in file order, each with a non-empty ``clean_name``.

    Raises
    ------
    EmptyDatasetError
        If the payload is empty, cannot be parsed, has no data rows, or has
        no row with a district name.
    SchemaMismatchError
        If the name column cannot be located among the headers.
    """
    if not text or not text.strip(BYTE_ORDER_MARK + " \t\r\n"):
        raise EmptyDatasetError("CSV payload is empty")
    try:
        dataframe = pd.read_csv(
            io.StringIO(text),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            index_col=False,
        )
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as exc:
        raise EmptyDatasetError(
            "CSV payload could not be parsed", context={"reason": str(exc)}
        ) from exc
    if dataframe.empty:
        raise EmptyDatasetError(
            "CSV contains no data rows",
            context={"headers": [str(c) for c in dataframe.columns]},
        )
    dataframe.columns = normalize_name_header(list(dataframe.columns))
    dataframe = dataframe.fillna("")

    records: list[DistrictRecord] = []
    skipped = 0
    for row in dataframe.to_dict(orient="records"):
        record = DistrictRecord.from_row(row)
        if not record.clean_name:
            skipped += 1
            continue
        records.append(record)
    if skipped:
        logger.warning("Skipped %d row(s) without a district name", skipped)
    if not records:
        raise EmptyDatasetError(
            "CSV contains no named districts", context={"skipped_rows": skipped}
        )
    return tuple(records)


async def load_districts(
    source: str | Path,
    session: aiohttp.ClientSession | None = None,
    *,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
) -> LoadResult:
    r"""Fetch and parse the district dataset, never raising.

    Parameters
    ----------
    source : str | Path
        Local path or ``http(s)://`` URL of the CSV.
    session : aiohttp.ClientSession | None, optional
        Session for remote sources; see ``fetch_csv_text``.
    timeout : float, optional
        Total timeout in seconds for a remote download.

    Returns
    -------
    LoadResult
        Loaded records, or an empty result carrying the terminal error.

    Notes
    -----
    No retry is attempted; every error is terminal for this load attempt.
    """
    try:
        text = await fetch_csv_text(source, session, timeout=timeout)
        records = parse_district_csv(text)
    except (DataFetchError, EmptyDatasetError, SchemaMismatchError) as exc:
        logger.error("Failed to load district data from %s: %s", source, exc)
        logger.debug("Load error details: %s", exc.to_dict())
        return LoadResult.failed(exc)
    logger.info("Loaded %d district record(s) from %s", len(records), source)
    return LoadResult.loaded(records)

"""Asynchronous retrieval of the district CSV resource.

The fetcher is the only suspension point of the application: it reads the
CSV from a local path or downloads it over HTTP(S) with ``aiohttp``. It does
not parse anything and never retries; any failure is raised as
``DataFetchError`` for the loader to translate into a status message.

Examples
--------
>>> import asyncio
>>> from absence_lookup.pipeline.district_data.fetcher import fetch_csv_text
>>> # text = asyncio.run(fetch_csv_text("data/district_data.csv"))
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import aiohttp

from absence_lookup.config import DEFAULT_FETCH_TIMEOUT
from absence_lookup.exceptions import DataFetchError

logger = logging.getLogger(__name__)


def is_remote_source(source: str) -> bool:
    """Return True if ``source`` is an ``http://`` or ``https://`` URL."""
    return str(source).lower().startswith(("http://", "https://"))


async def _read_local(path: Path) -> str:
    try:
        # utf-8 (not utf-8-sig) so a BOM survives into the header row
        return await asyncio.to_thread(path.read_text, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DataFetchError(
            f"Could not read CSV file: {path}",
            context={"source": str(path), "reason": str(exc)},
        ) from exc


async def _download(
    session: aiohttp.ClientSession, url: str, timeout: float
) -> str:
    try:
        async with session.get(
            url, timeout=aiohttp.ClientTimeout(total=timeout)
        ) as response:
            status = response.status
            text = await response.text()
    except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
        raise DataFetchError(
            f"Could not download CSV: {url}",
            context={"source": url, "reason": str(exc) or type(exc).__name__},
        ) from exc
    if status != 200:
        raise DataFetchError(
            f"Unexpected HTTP status {status} for {url}",
            context={"source": url, "status": status},
        )
    return text


async def fetch_csv_text(
    source: str | Path,
    session: aiohttp.ClientSession | None = None,
    *,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
) -> str:
    r"""Fetch the raw CSV text for ``source``.

    Parameters
    ----------
    source : str | Path
        Local file path or ``http(s)://`` URL.
    session : aiohttp.ClientSession | None, optional
        Session used for remote sources. Used and not closed by this
        function. When ``None`` a short-lived session is created.
    timeout : float, optional
        Total timeout in seconds for a remote download.

    Returns
    -------
    str
        The CSV text, with any byte-order mark left in place.

    Raises
    ------
    DataFetchError
        If the file cannot be read, the request fails, times out or returns
        a non-200 status.
    """
    source_str = str(source)
    if not is_remote_source(source_str):
        logger.debug("Reading district CSV from %s", source_str)
        return await _read_local(Path(source_str))
    logger.debug("Downloading district CSV from %s", source_str)
    if session is not None:
        return await _download(session, source_str, timeout)
    async with aiohttp.ClientSession() as owned_session:
        return await _download(owned_session, source_str, timeout)

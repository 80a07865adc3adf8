"""Tests for local and HTTP CSV fetching with fake aiohttp sessions."""

import asyncio
from pathlib import Path

import aiohttp
import pytest

from absence_lookup.exceptions import DataFetchError
from absence_lookup.pipeline.district_data import fetcher


class FakeResponse:
    def __init__(self, status: int, text: str):
        self.status = status
        self._text = text

    async def text(self):
        return self._text

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    def __init__(self, response=None, error=None):
        self._response = response
        self._error = error
        self.urls = []

    def get(self, url, *args, **kwargs):
        self.urls.append(url)
        if self._error is not None:
            raise self._error
        return self._response


def test_is_remote_source():
    assert fetcher.is_remote_source("https://example.invalid/data.csv")
    assert fetcher.is_remote_source("HTTP://example.invalid/data.csv")
    assert not fetcher.is_remote_source("data/district_data.csv")


@pytest.mark.asyncio
async def test_fetch_local_file_keeps_bom(tmp_path: Path):
    path = tmp_path / "d.csv"
    path.write_text("\ufeffclean_name\nAspen\n", encoding="utf-8")
    text = await fetcher.fetch_csv_text(path)
    assert text.startswith("\ufeffclean_name")


@pytest.mark.asyncio
async def test_fetch_missing_local_file_raises(tmp_path: Path):
    with pytest.raises(DataFetchError) as info:
        await fetcher.fetch_csv_text(tmp_path / "nope.csv")
    assert info.value.context["source"].endswith("nope.csv")


@pytest.mark.asyncio
async def test_fetch_remote_success():
    session = FakeSession(FakeResponse(200, "clean_name\nAspen\n"))
    text = await fetcher.fetch_csv_text("https://example.invalid/d.csv", session)
    assert text == "clean_name\nAspen\n"
    assert session.urls == ["https://example.invalid/d.csv"]


@pytest.mark.asyncio
async def test_fetch_remote_http_error_status():
    session = FakeSession(FakeResponse(404, "not found"))
    with pytest.raises(DataFetchError) as info:
        await fetcher.fetch_csv_text("https://example.invalid/d.csv", session)
    assert info.value.context["status"] == 404


@pytest.mark.asyncio
async def test_fetch_remote_client_error():
    session = FakeSession(error=aiohttp.ClientConnectionError("refused"))
    with pytest.raises(DataFetchError):
        await fetcher.fetch_csv_text("https://example.invalid/d.csv", session)


@pytest.mark.asyncio
async def test_fetch_remote_timeout():
    session = FakeSession(error=asyncio.TimeoutError())
    with pytest.raises(DataFetchError) as info:
        await fetcher.fetch_csv_text("https://example.invalid/d.csv", session)
    assert info.value.context["reason"] == "TimeoutError"

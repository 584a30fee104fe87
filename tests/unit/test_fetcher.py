"""Unit tests for the page fetcher."""

import logging

import aiohttp
import pytest
from aioresponses import aioresponses
from bs4 import BeautifulSoup

from ratebeer.config import ScraperSettings
from ratebeer.exceptions import NotFoundError
from ratebeer.scrapers.fetcher import PageFetcher

BEER_URL = "https://www.ratebeer.com/beer/a/1411/"


class TestPageFetcher:
    """Test the PageFetcher class."""

    @pytest.fixture
    def settings(self) -> ScraperSettings:
        return ScraperSettings()

    def test_absolute_url(self, settings: ScraperSettings) -> None:
        fetcher = PageFetcher(None, ScraperSettings(base_url="https://mirror.example.com/"))  # type: ignore[arg-type]

        assert fetcher.absolute_url("/beer/a/1/") == "https://mirror.example.com/beer/a/1/"

    @pytest.mark.asyncio
    async def test_fetch_success(self, settings: ScraperSettings) -> None:
        """Test successful page fetching."""
        with aioresponses() as m:
            m.get(
                BEER_URL,
                status=200,
                body="<html><body><h1>Tennents Lager</h1></body></html>",
                content_type="text/html",
            )

            async with aiohttp.ClientSession() as session:
                soup = await PageFetcher(session, settings).fetch("/beer/a/1411/")

                assert isinstance(soup, BeautifulSoup)
                assert soup.find("h1").text == "Tennents Lager"

    @pytest.mark.asyncio
    async def test_post_success(self, settings: ScraperSettings) -> None:
        """Test form submission."""
        with aioresponses() as m:
            m.post(
                "https://www.ratebeer.com/findbeer.asp",
                status=200,
                body="<html><body><h2>beers</h2></body></html>",
                content_type="text/html",
            )

            async with aiohttp.ClientSession() as session:
                soup = await PageFetcher(session, settings).post(
                    "/findbeer.asp", {"BeerName": "Tennents"}
                )

                assert soup.find("h2").text == "beers"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status, message",
        [
            (404, "Page not found \\(404\\)"),
            (403, "Access forbidden \\(403\\)"),
            (500, "Server error \\(500\\)"),
            (502, "HTTP 502"),
        ],
    )
    async def test_fetch_http_errors(
        self, settings: ScraperSettings, status: int, message: str
    ) -> None:
        """Test that HTTP failures raise NotFoundError."""
        with aioresponses() as m:
            m.get(BEER_URL, status=status)

            async with aiohttp.ClientSession() as session:
                with pytest.raises(NotFoundError, match=message):
                    await PageFetcher(session, settings).fetch("/beer/a/1411/")

    @pytest.mark.asyncio
    async def test_fetch_empty_response(self, settings: ScraperSettings) -> None:
        """Test handling of empty responses."""
        with aioresponses() as m:
            m.get(BEER_URL, status=200, body="")

            async with aiohttp.ClientSession() as session:
                with pytest.raises(NotFoundError, match="Empty response"):
                    await PageFetcher(session, settings).fetch("/beer/a/1411/")

    @pytest.mark.asyncio
    async def test_fetch_network_error(self, settings: ScraperSettings) -> None:
        """Test handling of network errors."""
        with aioresponses() as m:
            m.get(BEER_URL, exception=aiohttp.ClientError("Network error"))

            async with aiohttp.ClientSession() as session:
                with pytest.raises(NotFoundError, match="Network error fetching"):
                    await PageFetcher(session, settings).fetch("/beer/a/1411/")

    @pytest.mark.asyncio
    async def test_post_network_error(self, settings: ScraperSettings) -> None:
        with aioresponses() as m:
            m.post(
                "https://www.ratebeer.com/findbeer.asp",
                exception=aiohttp.ClientError("Network error"),
            )

            async with aiohttp.ClientSession() as session:
                with pytest.raises(NotFoundError, match="Network error posting"):
                    await PageFetcher(session, settings).post(
                        "/findbeer.asp", {"BeerName": "Tennents"}
                    )

    @pytest.mark.asyncio
    async def test_non_html_response_warns(
        self, settings: ScraperSettings, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that a response without HTML markup is logged but returned."""
        with aioresponses() as m:
            m.get(BEER_URL, status=200, body="plain text")

            async with aiohttp.ClientSession() as session:
                with caplog.at_level(logging.WARNING):
                    soup = await PageFetcher(session, settings).fetch("/beer/a/1411/")

        assert soup.get_text() == "plain text"
        assert "doesn't appear to be HTML" in caplog.text

"""Shared fixtures: a PageFetcher serving canned pages instead of the network."""

from typing import Callable, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from bs4 import BeautifulSoup

from ratebeer.config import ScraperSettings
from ratebeer.exceptions import NotFoundError
from ratebeer.scrapers.fetcher import PageFetcher

FetcherFactory = Callable[..., PageFetcher]


@pytest.fixture
def settings() -> ScraperSettings:
    return ScraperSettings(base_url="https://www.ratebeer.com")


@pytest.fixture
def make_fetcher(settings: ScraperSettings) -> FetcherFactory:
    """
    Build a fetcher whose GETs are served from ``pages`` (path -> HTML) and
    whose search POSTs are served from ``searches`` (query -> HTML).

    Unknown paths raise NotFoundError, as a 404 would. Every requested path is
    recorded in ``fetcher.requested``.
    """

    def factory(
        pages: Dict[str, str], searches: Optional[Dict[str, str]] = None
    ) -> PageFetcher:
        fetcher = PageFetcher(MagicMock(), settings)
        requested: List[str] = []
        searches = searches or {}

        async def fetch(path: str) -> BeautifulSoup:
            requested.append(path)
            if path not in pages:
                raise NotFoundError(f"Page not found (404): {path}")
            return BeautifulSoup(pages[path], settings.html_parser)

        async def post(path: str, form: Dict[str, str]) -> BeautifulSoup:
            query = form["BeerName"]
            requested.append(f"{path}?BeerName={query}")
            return BeautifulSoup(searches.get(query, "<html></html>"), settings.html_parser)

        fetcher.fetch = AsyncMock(side_effect=fetch)  # type: ignore[method-assign]
        fetcher.post = AsyncMock(side_effect=post)  # type: ignore[method-assign]
        fetcher.requested = requested  # type: ignore[attr-defined]
        return fetcher

    return factory

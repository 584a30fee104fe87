import logging
from typing import Mapping, Optional
from urllib.parse import urljoin

import aiohttp
from bs4 import BeautifulSoup

from ..config.settings import ScraperSettings
from ..exceptions import NotFoundError


class PageFetcher:
    """Fetches RateBeer pages over a shared aiohttp session and parses them."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        settings: Optional[ScraperSettings] = None,
    ) -> None:
        self.session = session
        self.settings = settings or ScraperSettings()
        self.base_url = self.settings.base_url + "/"
        self.html_parser = self.settings.html_parser
        self.logger = logging.getLogger(self.__class__.__name__)

    def absolute_url(self, path: str) -> str:
        return urljoin(self.base_url, path)

    async def fetch(self, path: str) -> BeautifulSoup:
        """
        Fetch and parse a page, raising NotFoundError on any HTTP failure.
        """
        url = self.absolute_url(path)
        self.logger.debug(f"Fetching page: {url}")
        try:
            async with self.session.get(url) as response:
                return await self._read(response, url)
        except aiohttp.ClientError as e:
            raise NotFoundError(f"Network error fetching {url}: {str(e)}") from e

    async def post(self, path: str, form: Mapping[str, str]) -> BeautifulSoup:
        """
        Submit a form and parse the resulting page.
        """
        url = self.absolute_url(path)
        self.logger.debug(f"Posting form to {url}: {dict(form)}")
        try:
            async with self.session.post(url, data=dict(form)) as response:
                return await self._read(response, url)
        except aiohttp.ClientError as e:
            raise NotFoundError(f"Network error posting to {url}: {str(e)}") from e

    async def _read(
        self, response: aiohttp.ClientResponse, url: str
    ) -> BeautifulSoup:
        if response.status == 404:
            raise NotFoundError(f"Page not found (404): {url}")
        elif response.status == 403:
            raise NotFoundError(f"Access forbidden (403): {url}")
        elif response.status == 500:
            raise NotFoundError(f"Server error (500): {url}")
        elif response.status != 200:
            raise NotFoundError(f"HTTP {response.status}: {url}")

        content = await response.text()

        if not content or len(content.strip()) == 0:
            raise NotFoundError(f"Empty response from: {url}")

        soup = BeautifulSoup(content, self.html_parser)

        # Basic validation that we got HTML
        if not soup.find("html") and not soup.find("body"):
            self.logger.warning(f"Response doesn't appear to be HTML: {url}")

        return soup

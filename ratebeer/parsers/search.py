"""Free-text search of beers and breweries."""

from typing import List, Tuple

from bs4 import BeautifulSoup, Tag

from .. import urls
from ..models import Beer, Brewery, SearchResult
from ..scrapers.fetcher import PageFetcher
from .base import fix_characters, id_from_link
from .query import ipa_variant, normalize_query


class SearchParser:
    """
    Runs a search and reads the result tables.

    The results page holds a series of tables, each preceded by an ``h2``
    heading; only the "brewers" and "beers" tables are read.
    """

    def __init__(self, fetcher: PageFetcher) -> None:
        self.fetcher = fetcher

    async def search(self, query: str) -> SearchResult:
        normalized = normalize_query(query)
        beers, breweries = await self._run(normalized)
        result = SearchResult(query=normalized, beers=beers, breweries=breweries)

        if " ipa" in normalized.lower():
            extra_beers, _ = await self._run(normalize_query(ipa_variant(normalized)))
            result.merge_beers(extra_beers)
        return result

    async def _run(self, query: str) -> Tuple[List[Beer], List[Brewery]]:
        soup = await self.fetcher.post(urls.SEARCH_URL, {"BeerName": query})
        return self.extract(soup)

    def extract(self, soup: BeautifulSoup) -> Tuple[List[Beer], List[Brewery]]:
        beers: List[Beer] = []
        breweries: List[Brewery] = []
        headings = [h.get_text(strip=True).lower() for h in soup.select("h2")]
        for heading, table in zip(headings, soup.select("table")):
            if heading == "brewers":
                breweries = self._breweries_table(table)
            elif heading == "beers":
                beers = self._beers_table(table)
        return beers, breweries

    def _breweries_table(self, table: Tag) -> List[Brewery]:
        breweries = []
        for row in table.select("tr"):
            link = row.select_one("a")
            if link is None:
                continue
            cells = row.find_all("td")
            breweries.append(
                Brewery(
                    id_from_link(link),
                    name=fix_characters(cells[0].get_text() if cells else link.get_text()),
                    fetcher=self.fetcher,
                    location=fix_characters(cells[1].get_text()) if len(cells) > 1 else None,
                )
            )
        return breweries

    def _beers_table(self, table: Tag) -> List[Beer]:
        beers = []
        # First row holds the column headings
        for row in table.select("tr")[1:]:
            link = row.select_one("a")
            if link is None:
                continue
            beers.append(
                Beer(
                    id_from_link(link),
                    name=fix_characters(link.get_text()),
                    fetcher=self.fetcher,
                )
            )
        return beers

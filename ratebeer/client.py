"""Entry point for scraping RateBeer.com.

Usage::

    async with RateBeerClient() as client:
        beer = client.beer(1411)
        print(await beer.get("abv"))
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Union

import aiohttp

from .config.settings import ScraperSettings
from .models import Beer, Brewery, Entity, Location, Review, SearchResult, Style
from .parsers.alias import AliasResolver
from .parsers.review import ReviewListParser
from .parsers.search import SearchParser
from .parsers.style import StyleListParser
from .scrapers.coordinator import ResolutionCoordinator, ResolutionFailure
from .scrapers.fetcher import PageFetcher

logger = logging.getLogger(__name__)


class RateBeerClient:
    def __init__(
        self,
        settings: Optional[ScraperSettings] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> None:
        self.settings = settings or ScraperSettings.from_env()
        self._session = session
        self._owns_session = session is None
        self._fetcher: Optional[PageFetcher] = None
        self.errors: List[ResolutionFailure] = []

    async def __aenter__(self) -> "RateBeerClient":
        if self._session is None:
            connector = aiohttp.TCPConnector(limit=self.settings.max_concurrent)
            self._session = aiohttp.ClientSession(
                connector=connector,
                timeout=aiohttp.ClientTimeout(total=self.settings.timeout),
                headers={"User-Agent": self.settings.user_agent, **self.settings.headers},
            )
        self._fetcher = PageFetcher(self._session, self.settings)
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None
        self._fetcher = None

    @property
    def fetcher(self) -> PageFetcher:
        if self._fetcher is None:
            raise RuntimeError("RateBeerClient must be used as 'async with RateBeerClient()'")
        return self._fetcher

    def beer(self, id: Any, name: Optional[str] = None) -> Beer:
        return Beer(id, name=name, fetcher=self.fetcher)

    def brewery(self, id: Any, name: Optional[str] = None) -> Brewery:
        return Brewery(id, name=name, fetcher=self.fetcher)

    def style(self, id: Any, name: Optional[str] = None) -> Style:
        return Style(id, name=name, fetcher=self.fetcher)

    def location(self, id: Any, location_type: str, name: Optional[str] = None) -> Location:
        return Location(id, location_type, name=name, fetcher=self.fetcher)

    def country(self, id: Any, name: Optional[str] = None) -> Location:
        return Location.country(id, name=name, fetcher=self.fetcher)

    def region(self, id: Any, name: Optional[str] = None) -> Location:
        return Location.region(id, name=name, fetcher=self.fetcher)

    async def resolve_canonical(self, beer_id: int) -> int:
        """Return the id of the beer ``beer_id`` is an alias of, or itself."""
        resolver = AliasResolver(self.fetcher, limit=self.settings.alias_redirect_limit)
        canonical_id, _ = await resolver.resolve(int(beer_id))
        return canonical_id

    async def reviews(
        self, beer: Union[Beer, int], order: str = "most_recent", limit: int = 10
    ) -> List[Review]:
        return await ReviewListParser(self.fetcher).retrieve(beer, order=order, limit=limit)

    async def all_styles(self, include_hidden: bool = False) -> List[Style]:
        return await StyleListParser(self.fetcher).all_styles(include_hidden)

    def hidden_styles(self) -> List[Style]:
        return StyleListParser(self.fetcher).hidden_styles()

    async def search(
        self, query: str, resolve_fields: Sequence[str] = ()
    ) -> SearchResult:
        """
        Search for beers and breweries.

        ``resolve_fields`` names beer fields to resolve eagerly for every beer
        found, fetched concurrently.
        """
        result = await SearchParser(self.fetcher).search(query)
        logger.info(
            f"Search '{result.query}': {len(result.beers)} beers, "
            f"{len(result.breweries)} breweries"
        )
        if resolve_fields and result.beers:
            await self.resolve_all(result.beers, resolve_fields)
        return result

    async def resolve_all(
        self, entities: Sequence[Entity], fields: Sequence[str] = ()
    ) -> List[Optional[Dict[str, Any]]]:
        """Resolve many entities concurrently, recording failures in ``errors``."""
        coordinator = ResolutionCoordinator(max_concurrent=self.settings.max_concurrent)
        values = await coordinator.resolve_all(entities, fields)
        self.errors = coordinator.get_errors()
        return values

    def absolute_url(self, entity: Entity) -> str:
        return self.fetcher.absolute_url(entity.url)

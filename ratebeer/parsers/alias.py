"""Redirection of aliased beers.

RateBeer treats some beers as aliases of another (e.g. Koenig Ludwig
Weissbier) and shows a stub page linking to the "original" beer instead of
the beer's details.
"""

import logging
import re
from typing import Optional, Tuple

from bs4 import BeautifulSoup, Tag

from .. import urls
from ..exceptions import AliasChainError
from ..scrapers.fetcher import PageFetcher
from .base import id_from_link

ALIAS_SELECTOR = ".row.columns-container .col-sm-8"
ALIAS_PATTERN = re.compile(r"Also known as.*Proceed to the aliased beer\.{3}", re.DOTALL)

logger = logging.getLogger(__name__)


def alias_container(soup: BeautifulSoup) -> Optional[Tag]:
    return soup.select_one(ALIAS_SELECTOR)


def is_alias(soup: BeautifulSoup) -> bool:
    container = alias_container(soup)
    return container is not None and bool(ALIAS_PATTERN.search(container.get_text()))


def alias_target(soup: BeautifulSoup) -> int:
    """Id of the beer an alias page points to."""
    container = alias_container(soup)
    link = container.select_one("a") if container is not None else None
    return id_from_link(link)


class AliasResolver:
    def __init__(self, fetcher: PageFetcher, limit: int = 5) -> None:
        self.fetcher = fetcher
        self.limit = limit

    async def resolve(
        self, beer_id: int, soup: Optional[BeautifulSoup] = None
    ) -> Tuple[int, BeautifulSoup]:
        """
        Follow alias pages from ``beer_id`` to the canonical beer.

        Returns the canonical id with its page. ``soup`` is the already
        fetched page for ``beer_id``, if any.
        """
        if soup is None:
            soup = await self.fetcher.fetch(urls.beer_url(beer_id))

        current_id = beer_id
        redirects = 0
        while is_alias(soup):
            if redirects == self.limit:
                raise AliasChainError(beer_id, self.limit)
            target_id = alias_target(soup)
            logger.debug(f"Beer {current_id} is an alias of {target_id}")
            soup = await self.fetcher.fetch(urls.beer_url(target_id))
            current_id = target_id
            redirects += 1
        return current_id, soup

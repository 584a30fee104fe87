"""Beer detail page parser."""

from typing import Any, Dict, List, Optional, Union

from bs4 import BeautifulSoup

from .. import urls
from ..exceptions import EntityNotFoundError, ExtractionError
from ..models import Beer, Brewery, Style
from .alias import AliasResolver
from .base import BaseParser, fix_characters, misc_info, symbolize

NOT_FOUND_INDICATOR = "we didn't find this beer"


class BeerParser(BaseParser):
    """Fills every beer field from the beer's page."""

    async def parse(self, entity: Beer) -> Dict[str, Any]:  # type: ignore[override]
        soup = await self.fetch_page(urls.beer_url(entity.id))
        # The name comes from the page that was asked for, before any alias
        # redirection.
        name = self._name(soup, entity.id)

        resolver = AliasResolver(
            self.fetcher, limit=self.fetcher.settings.alias_redirect_limit
        )
        canonical_id, soup = await resolver.resolve(entity.id, soup)
        if canonical_id != entity.id:
            self.logger.info(f"Beer {entity.id} redirected to alias {canonical_id}")
            self._name(soup, canonical_id)

        misc = misc_info(self.require(soup, ".stats-container"))
        values = self.extract(soup, misc)
        values["name"] = name
        return values

    def extract(
        self, soup: BeautifulSoup, misc: Dict[str, Union[float, str]]
    ) -> Dict[str, Any]:
        return {
            "brewery": self._brewery(soup),
            "style": self._style(soup),
            "glassware": self._glassware(soup),
            "availability": self._availability(soup),
            "abv": _number(misc.get("abv")),
            "calories": _number(misc.get("est_calories")),
            "description": self._description(soup),
            "retired": self._retired(soup),
            "rating": self._rating(soup, misc),
        }

    def _name(self, soup: BeautifulSoup, beer_id: int) -> str:
        heading = soup.select_one("h1")
        if heading is None:
            raise EntityNotFoundError("beer", beer_id)
        name = fix_characters(heading.get_text())
        if name.lower() == NOT_FOUND_INDICATOR:
            raise EntityNotFoundError("beer", beer_id)
        return name

    def _brewery(self, soup: BeautifulSoup) -> Brewery:
        brewery_id, name = self.linked(self.require(soup, "a[itemprop='brand']"))
        return Brewery(brewery_id, name=name, fetcher=self.fetcher)

    def _style(self, soup: BeautifulSoup) -> Style:
        style_id, name = self.linked(self.require(soup, "a[href^='/beerstyles']"))
        return Style(style_id, name=name, fetcher=self.fetcher)

    def _glassware(self, soup: BeautifulSoup) -> List[Dict[str, Any]]:
        glassware = []
        for link in soup.select("a[href^='/ShowGlassware.asp']"):
            glass_id = int(_number_in(str(link["href"]).split("GWID=")[-1], "glassware id"))
            glassware.append({"id": glass_id, "name": link.get_text(strip=True)})
        return glassware

    def _availability(self, soup: BeautifulSoup) -> Dict[str, str]:
        availability: Dict[str, str] = {}
        for item in soup.select("#availability li"):
            label, _, value = fix_characters(item.get_text()).partition(":")
            if label.strip() and value.strip():
                availability[symbolize(label.strip())] = value.strip()
        return availability

    def _description(self, soup: BeautifulSoup) -> str:
        element = soup.select_one("#_description3")
        return fix_characters(element.get_text()) if element else ""

    def _retired(self, soup: BeautifulSoup) -> bool:
        element = soup.select_one("span.beertitle2")
        return element is not None and "RETIRED" in element.get_text()

    def _rating(
        self, soup: BeautifulSoup, misc: Dict[str, Union[float, str]]
    ) -> Dict[str, Any]:
        figures = [
            _number_in(str(div["title"]).split(":")[0], "rating figure")
            for div in soup.select("#_aggregateRating6 div")
            if "This figure" in str(div.get("title", ""))
        ]
        rating: Dict[str, Any] = dict(zip(("overall", "style"), figures))
        rating.update(
            ratings=misc.get("ratings"),
            weighted_avg=misc.get("weighted_avg"),
            mean=misc.get("mean"),
        )
        return rating


def _number_in(text: str, what: str) -> float:
    try:
        return float(text.strip())
    except ValueError as e:
        raise ExtractionError(f"Unexpected {what} on beer page: {text!r}") from e


def _number(value: Optional[Union[float, str]]) -> Optional[float]:
    return value if isinstance(value, float) else None

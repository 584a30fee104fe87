"""Brewery detail page and brewery beer list parsers."""

from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple

from bs4 import BeautifulSoup, Tag

from .. import urls
from ..exceptions import EntityNotFoundError, ExtractionError
from ..models import Beer, Brewery, Style
from .base import NBSP, BaseParser, fix_characters, to_float, to_int
from .pagination import aggregate, fetch_pages

INFO_SELECTOR = "div[itemtype='http://schema.org/LocalBusiness']"
BEER_TABLE_SELECTOR = "table#brewer-beer-table"

ADDRESS_KEYS = {
    "streetAddress": "street",
    "addressLocality": "city",
    "addressRegion": "state",
    "addressCountry": "country",
    "postalCode": "postcode",
}

# Listing columns holding a beer's rating figures
RATING_CELLS = {"avg_rating": 4, "style_rating": 5, "num_ratings": 6}


class BreweryParser(BaseParser):
    """Fills a brewery's name, type, address and telephone."""

    async def parse(self, entity: Brewery) -> Dict[str, Any]:  # type: ignore[override]
        soup = await self.fetch_page(urls.brewery_url(entity.id))
        info_root = self._info_root(soup, entity.id)

        heading = info_root.select_one("h1")
        if heading is None:
            raise ExtractionError(f"Brewery {entity.id} page has no name heading")

        divs = info_root.select("div")
        telephone = info_root.select_one("span[itemprop='telephone']")
        return {
            "name": fix_characters(heading.get_text()),
            "type": fix_characters(divs[1].get_text()) if len(divs) > 1 else "",
            "address": self._address(info_root),
            "telephone": telephone.get_text(strip=True) if telephone else None,
        }

    def _info_root(self, soup: BeautifulSoup, brewery_id: int) -> Tag:
        check_not_removed(soup, brewery_id)
        info_root = soup.select_one(INFO_SELECTOR)
        if info_root is None:
            raise EntityNotFoundError("brewery", brewery_id)
        return info_root

    def _address(self, info_root: Tag) -> Dict[str, str]:
        address: Dict[str, str] = {}
        for node in info_root.select("div[itemprop='address'] b span"):
            prop = node.get("itemprop")
            if prop not in ADDRESS_KEYS:
                raise ExtractionError(f"unrecognised address attribute: {prop}")
            address[ADDRESS_KEYS[str(prop)]] = node.get_text(strip=True)
        return address


class BreweryBeersParser(BaseParser):
    """
    Fills ``beers`` from the brewery's (possibly paginated) beer list.

    Rows may be grouped under "Brewed at X" or "Brewed by/for Y" headers; the
    header's brewery is attached to every beer below it in the same section.
    """

    async def parse(self, entity: Brewery) -> Dict[str, Any]:  # type: ignore[override]
        pages = await fetch_pages(
            self.fetcher, lambda page: urls.brewery_beers_url(entity.id, page)
        )
        check_not_removed(pages[0], entity.id)
        if pages[0].select_one(BEER_TABLE_SELECTOR) is None:
            raise EntityNotFoundError("brewery", entity.id)

        beers = aggregate(pages, self.extract_rows)
        self.logger.info(f"Brewery {entity.id}: {len(beers)} beers")
        return {"beers": beers}

    def extract_rows(self, soup: BeautifulSoup) -> List[Beer]:
        beers: List[Beer] = []
        for section in soup.select(f"{BEER_TABLE_SELECTOR} tbody"):
            context: Dict[str, Any] = {}
            for row in section.find_all("tr", recursive=False):
                cells = row.find_all("td", recursive=False)
                if not cells:
                    continue
                if cells[0].select_one("strong a") is not None:
                    beers.append(self._beer_row(cells, context))
                    continue
                header = cells[0].select_one("div.small em")
                if header is not None:
                    context = dict([self._brewed_at_for(header)])
        return beers

    def _brewed_at_for(self, header: Tag) -> Tuple[str, Brewery]:
        text = header.get_text()
        if "Brewed at" in text:
            key = "brewed_at"
        elif "Brewed by/for" in text:
            key = "brewed_by_for"
        else:
            raise ExtractionError(f"unrecognised brewed at/for header: {text!r}")
        brewery_id, name = self.linked(self.require(header, "a"))
        return key, Brewery(brewery_id, name=name, fetcher=self.fetcher)

    def _beer_row(self, cells: List[Tag], context: Dict[str, Any]) -> Beer:
        if len(cells) <= max(RATING_CELLS.values()):
            raise ExtractionError(
                f"Beer list row has {len(cells)} cells, expected at least "
                f"{max(RATING_CELLS.values()) + 1}"
            )
        name_cell = cells[0]
        beer_id, name = self.linked(self.require(name_cell, "strong a"))
        info = name_cell.select_one("em.real-small")
        style = self._style(name_cell)
        if style is not None:
            context = dict(context, style=style)

        return Beer(
            beer_id,
            name=name,
            fetcher=self.fetcher,
            retired=info is not None and "retired" in info.get_text().lower(),
            abv=to_float(cells[1].get_text()),
            date_added=_date_added(cells[2].get_text(strip=True)),
            listing_rating=self._rating_info(cells),
            **context,
        )

    def _style(self, name_cell: Tag) -> Optional[Style]:
        for link in name_cell.select("a"):
            if link.find("span") is not None:
                style_id, name = self.linked(link)
                return Style(style_id, name=name, fetcher=self.fetcher)
        return None

    def _rating_info(self, cells: List[Tag]) -> Dict[str, Any]:
        rating: Dict[str, Any] = {}
        for attr, index in RATING_CELLS.items():
            value = cells[index].get_text().replace(NBSP, " ").strip()
            rating[attr] = to_float(value) if attr == "avg_rating" else to_int(value)
        return rating


def check_not_removed(soup: BeautifulSoup, brewery_id: int) -> None:
    """Raise EntityNotFoundError on the 'no longer in the database' placeholder."""
    placeholder = soup.select_one("body p")
    message = (
        f"This brewer, ID#{brewery_id}, is no longer in the database. "
        "RateBeer Home"
    )
    if placeholder is not None and fix_characters(placeholder.get_text()) == message:
        raise EntityNotFoundError("brewery", brewery_id)


def _date_added(text: str) -> Optional[date]:
    if not text:
        return None
    try:
        return datetime.strptime(text, "%m/%d/%Y").date()
    except ValueError as e:
        raise ExtractionError(f"Unexpected date in beer list: {text!r}") from e

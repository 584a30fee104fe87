"""Country and region brewery listing parser."""

from typing import Any, Dict, List

from bs4 import BeautifulSoup, Tag

from ..exceptions import EntityNotFoundError, ExtractionError
from ..models import Brewery, BreweryStatus, Location, Style
from .base import NBSP, BaseParser, fix_characters, id_from_link, node_text, to_int
from .pagination import aggregate, fetch_pages


class LocationParser(BaseParser):
    """
    Fills a location's name, top styles, brewery count and breweries.

    Each page lists active breweries in its first ``#brewerTable`` and closed
    ones in the second.
    """

    async def parse(self, entity: Location) -> Dict[str, Any]:  # type: ignore[override]
        pages = await fetch_pages(self.fetcher, entity.page_url)
        heading = pages[0].select_one("#brewerCover")
        if heading is None:
            raise EntityNotFoundError(entity.entity_type, entity.id)

        title = heading.select_one("h1")
        name = title.get_text().split("Breweries")[0].strip() if title else "n/a"
        if name == "n/a":
            raise EntityNotFoundError(entity.entity_type, entity.id)

        show_info = heading.select_one("#showInfo")
        if show_info is None:
            raise ExtractionError(f"Location {entity.id} page has no brewery count")

        breweries = aggregate(pages, self.extract_rows)
        self.logger.info(
            f"{entity.location_type.value.capitalize()} {entity.id}: "
            f"{len(breweries)} breweries over {len(pages)} page(s)"
        )
        return {
            "name": name,
            "top_styles": self.top_styles(pages[0]),
            "num_breweries": to_int(show_info.get_text().split("active")[0]),
            "breweries": breweries,
        }

    def extract_rows(self, soup: BeautifulSoup) -> List[Brewery]:
        breweries: List[Brewery] = []
        for index, table in enumerate(soup.select("#brewerTable")):
            status = BreweryStatus.ACTIVE if index == 0 else BreweryStatus.OUT_OF_BUSINESS
            for row in table.select("tr"):
                cells = row.find_all("td")
                if not cells:
                    continue
                breweries.append(self._brewery_row(cells, status))
        return breweries

    def top_styles(self, soup: BeautifulSoup) -> List[Dict[str, Any]]:
        """Read the most rated styles and their counts from the sidebar."""
        styles: List[Dict[str, Any]] = []
        for link in soup.select("#tagside p a"):
            count = node_text(link.next_sibling) if link.next_sibling else ""
            style_id, name = self.linked(link)
            styles.append(
                {
                    "style": Style(style_id, name=name, fetcher=self.fetcher),
                    "count": to_int(count.replace(NBSP, " ")),
                }
            )
        return styles

    def _brewery_row(self, cells: List[Tag], status: BreweryStatus) -> Brewery:
        text = fix_characters(cells[0].get_text())
        location = text.split("-")[-1].replace("(Out of Business)", "").strip()
        established = None
        if status is BreweryStatus.ACTIVE and len(cells) > 4:
            established = to_int(cells[4].get_text(strip=True)) or None
        return Brewery(
            id_from_link(cells[0].select_one("a")),
            name=text.split("-")[0].strip(),
            fetcher=self.fetcher,
            location=location,
            established=established,
            status=status,
            type=cells[1].get_text(strip=True) if len(cells) > 1 else "",
        )

"""Style page, style beer list and style landing page parsers."""

from typing import Any, Dict, List

from bs4 import BeautifulSoup, Tag

from .. import urls
from ..exceptions import EntityNotFoundError, ExtractionError
from ..models import Beer, Style
from ..scrapers.fetcher import PageFetcher
from .base import BaseParser, fix_characters, id_from_link, to_int

# Styles which exist on the site but are not linked from the styles landing page
HIDDEN_STYLE_IDS = (40, 41, 57, 59, 66, 67, 68, 69, 70, 75, 83, 99, 104, 106, 116, 119, 120)


class StyleParser(BaseParser):
    """Fills a style's name, description and glassware."""

    async def parse(self, entity: Style) -> Dict[str, Any]:  # type: ignore[override]
        soup = await self.fetch_page(urls.style_url(entity.id))
        root = soup.select_one(".container-fluid")
        if root is None:
            raise EntityNotFoundError("style", entity.id)

        heading = root.select_one("h1")
        if heading is None:
            raise EntityNotFoundError("style", entity.id)
        description = root.select_one("#styleDescription")
        return {
            "name": fix_characters(heading.get_text()),
            "description": description.get_text().strip() if description else "",
            "glassware": [fix_characters(g.get_text()) for g in root.select(".glassblurb")],
        }


class StyleBeersParser(BaseParser):
    """
    Fills a style's ``beers`` from its top beers list.

    The list itself does not tell a missing style from an empty one, so a
    style without a known name has its page parsed first.
    """

    async def parse(self, entity: Style) -> Dict[str, Any]:  # type: ignore[override]
        details: Dict[str, Any] = {}
        if not entity.is_resolved("name"):
            details = await StyleParser(self.fetcher).parse(entity)

        soup = await self.fetch_page(urls.style_beers_url(entity.id))
        beers: Dict[int, Beer] = {}
        # First row holds the column headings
        for row in soup.select("tr")[1:]:
            cells = row.find_all("td")
            if len(cells) < 2:
                raise ExtractionError(f"Style {entity.id} beer row has too few cells")
            beer_id, name = self.linked(self.require(cells[1], "a"))
            beers[to_int(cells[0].get_text(strip=True))] = Beer(
                beer_id, name=name, fetcher=self.fetcher
            )
        self.logger.info(f"Style {entity.id}: {len(beers)} beers")
        return dict(details, beers=beers)


class StyleListParser:
    """Reads every style from the styles landing page."""

    def __init__(self, fetcher: PageFetcher) -> None:
        self.fetcher = fetcher

    async def all_styles(self, include_hidden: bool = False) -> List[Style]:
        soup = await self.fetcher.fetch(urls.STYLES_URL)
        styles = self.extract(soup)
        if include_hidden:
            styles.extend(self.hidden_styles())
        return styles

    def extract(self, soup: BeautifulSoup) -> List[Style]:
        root = soup.select_one("div.container-fluid")
        if root is None:
            raise ExtractionError("Styles page has no style container")

        categories = [h.get_text(strip=True) for h in root.select("h3")]
        groups: List[Tag] = root.select(".styleGroup")

        # Categories and style groups are parallel lists; the Nth heading
        # names every style in the Nth group.
        styles: List[Style] = []
        for category, group in zip(categories, groups):
            for link in group.select("a"):
                styles.append(
                    Style(
                        id_from_link(link),
                        name=fix_characters(link.get_text()),
                        fetcher=self.fetcher,
                        category=category,
                    )
                )
        return styles

    def hidden_styles(self) -> List[Style]:
        return [Style(style_id, fetcher=self.fetcher) for style_id in HIDDEN_STYLE_IDS]

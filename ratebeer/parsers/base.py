import logging
import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple, Union

from bs4 import BeautifulSoup, NavigableString, Tag

from ..exceptions import ExtractionError, RateBeerError
from ..scrapers.fetcher import PageFetcher

if TYPE_CHECKING:
    from ..models.entity import Entity

NBSP = "\u00a0"

# Characters RateBeer serves in a mangled single-byte form
_CHARACTER_FIXES = [
    (re.compile(NBSP), " "),
    (re.compile("\u0093"), "ž"),
    (re.compile("\u0092"), "'"),
    (re.compile("\u0096"), "–"),
    (re.compile(" {2,}"), " "),
]

_NUMERIC_PREFIX = re.compile(r"^\s*[-+]?(\d+(\.\d*)?|\.\d+)")


def fix_characters(text: str) -> str:
    """Substitute problematic characters found in scraped strings."""
    for pattern, replacement in _CHARACTER_FIXES:
        text = pattern.sub(replacement, text)
    return text.strip()


def symbolize(label: str) -> str:
    """Turn a free-text label such as 'Est. Calories' into 'est_calories'."""
    return label.lower().replace(" ", "_").replace(".", "")


def to_float(text: str) -> float:
    """Read the leading number from text, or 0.0 if it has none."""
    match = _NUMERIC_PREFIX.match(text)
    return float(match.group(0)) if match else 0.0


def to_int(text: str) -> int:
    return int(to_float(text.replace(",", "")))


def id_from_link(link: Optional[Tag]) -> int:
    """Read an entity id from the last path segment of a link."""
    if link is None or not link.get("href"):
        raise ExtractionError("Expected a link to an entity, found none")
    href = str(link["href"])
    segments = [s for s in href.split("?")[0].split("/") if s]
    try:
        return int(segments[-1])
    except (IndexError, ValueError) as e:
        raise ExtractionError(f"Link does not end in an id: {href}") from e


def node_text(node: Union[Tag, NavigableString]) -> str:
    if isinstance(node, Tag):
        return node.get_text()
    return str(node)


def misc_info(container: Tag) -> Dict[str, Union[float, str]]:
    """
    Read the 'LABEL: value' pairs of a stats block.

    Values are converted to floats unless the conversion gives exactly zero,
    in which case the raw text is kept.
    """
    parts: List[str] = []
    for child in container.children:
        text = node_text(child).replace(NBSP, " ").strip()
        parts.extend(p.strip() for p in text.split(":"))
    parts = [p for p in parts if p]

    info: Dict[str, Union[float, str]] = {}
    for key, value in zip(parts[0::2], parts[1::2]):
        number = to_float(value.replace(",", ""))
        info[symbolize(key)] = value if number == 0 else number
    return info


class BaseParser(ABC):
    """Extracts the values of one group of entity fields."""

    def __init__(self, fetcher: Optional[PageFetcher]):
        if fetcher is None:
            raise RateBeerError(
                f"{self.__class__.__name__} needs a PageFetcher to resolve fields"
            )
        self.fetcher = fetcher
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    async def parse(self, entity: "Entity") -> Dict[str, Any]:
        pass

    async def fetch_page(self, path: str) -> BeautifulSoup:
        return await self.fetcher.fetch(path)

    def require(self, root: Union[BeautifulSoup, Tag], selector: str) -> Tag:
        """Select one element, raising ExtractionError if it is absent."""
        element = root.select_one(selector)
        if element is None:
            raise ExtractionError(f"No element matching '{selector}'")
        return element

    def linked(self, link: Tag) -> Tuple[int, str]:
        return id_from_link(link), fix_characters(link.get_text())

from .alias import AliasResolver
from .base import BaseParser
from .beer import BeerParser
from .brewery import BreweryBeersParser, BreweryParser
from .location import LocationParser
from .query import normalize_query
from .registry import ParserRegistry
from .review import ReviewListParser, parse_review
from .search import SearchParser
from .style import HIDDEN_STYLE_IDS, StyleBeersParser, StyleListParser, StyleParser

__all__ = [
    "AliasResolver",
    "BaseParser",
    "BeerParser",
    "BreweryParser",
    "BreweryBeersParser",
    "LocationParser",
    "ParserRegistry",
    "ReviewListParser",
    "SearchParser",
    "StyleParser",
    "StyleBeersParser",
    "StyleListParser",
    "HIDDEN_STYLE_IDS",
    "normalize_query",
    "parse_review",
]

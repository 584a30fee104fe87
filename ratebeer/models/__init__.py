from .beer import Beer
from .brewery import Brewery, BreweryStatus
from .entity import Entity
from .location import Location, LocationType
from .review import RATING_AXES, Review
from .search_result import SearchResult
from .style import Style

__all__ = [
    "Entity",
    "Beer",
    "Brewery",
    "BreweryStatus",
    "Style",
    "Location",
    "LocationType",
    "Review",
    "RATING_AXES",
    "SearchResult",
]

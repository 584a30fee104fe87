"""Scraper for beers, breweries, styles, locations and reviews on RateBeer.com."""

from .client import RateBeerClient
from .config import ScraperSettings, load_settings
from .exceptions import (
    AliasChainError,
    EntityNotFoundError,
    ExtractionError,
    InvalidArgumentError,
    NotFoundError,
    ParseError,
    RateBeerError,
)
from .models import (
    Beer,
    Brewery,
    BreweryStatus,
    Location,
    LocationType,
    Review,
    SearchResult,
    Style,
)

__version__ = "0.1.0"

__all__ = [
    "RateBeerClient",
    "ScraperSettings",
    "load_settings",
    "Beer",
    "Brewery",
    "BreweryStatus",
    "Style",
    "Location",
    "LocationType",
    "Review",
    "SearchResult",
    "RateBeerError",
    "NotFoundError",
    "EntityNotFoundError",
    "ExtractionError",
    "AliasChainError",
    "ParseError",
    "InvalidArgumentError",
]

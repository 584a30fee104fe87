from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from .. import urls
from .entity import Entity

if TYPE_CHECKING:
    from ..scrapers.fetcher import PageFetcher


class BreweryStatus(str, Enum):
    ACTIVE = "active"
    OUT_OF_BUSINESS = "out_of_business"


class Brewery(Entity):
    """One brewery on RateBeer.com."""

    entity_type = "brewery"
    FIELDS = ("name", "type", "address", "telephone", "beers")

    def __init__(
        self,
        id: Any,
        name: Optional[str] = None,
        fetcher: Optional["PageFetcher"] = None,
        location: Optional[str] = None,
        established: Optional[int] = None,
        status: Optional[BreweryStatus] = None,
        **fields: Any,
    ) -> None:
        super().__init__(id, name=name, fetcher=fetcher, **fields)
        # Set only when the brewery comes from a country or region listing
        self.location = location
        self.established = established
        self.status = status

    @property
    def url(self) -> str:
        return urls.brewery_url(self.id)

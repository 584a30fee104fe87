from enum import Enum
from typing import TYPE_CHECKING, Any, Hashable, Optional, Tuple

from .. import urls
from ..exceptions import InvalidArgumentError
from .entity import Entity

if TYPE_CHECKING:
    from ..scrapers.fetcher import PageFetcher


class LocationType(str, Enum):
    COUNTRY = "country"
    REGION = "region"


class Location(Entity):
    """A country or region listing the breweries located there."""

    entity_type = "location"
    FIELDS = ("name", "top_styles", "num_breweries", "breweries")

    def __init__(
        self,
        id: Any,
        location_type: Any,
        name: Optional[str] = None,
        fetcher: Optional["PageFetcher"] = None,
        **fields: Any,
    ) -> None:
        try:
            self.location_type = LocationType(location_type)
        except ValueError as e:
            raise InvalidArgumentError(
                f"invalid location type: {location_type}"
            ) from e
        super().__init__(id, name=name, fetcher=fetcher, **fields)

    @classmethod
    def country(cls, id: Any, name: Optional[str] = None, **kwargs: Any) -> "Location":
        return cls(id, LocationType.COUNTRY, name=name, **kwargs)

    @classmethod
    def region(cls, id: Any, name: Optional[str] = None, **kwargs: Any) -> "Location":
        return cls(id, LocationType.REGION, name=name, **kwargs)

    @property
    def identity(self) -> Tuple[Hashable, ...]:
        return (self.entity_type, self.location_type.value, self.id)

    def page_url(self, page_number: int = 1) -> str:
        if self.location_type is LocationType.COUNTRY:
            return urls.country_url(self.id, page_number)
        return urls.region_url(self.id, page_number)

    @property
    def url(self) -> str:
        return self.page_url()

    def __repr__(self) -> str:
        value = f"<Location #{self.id} ({self.location_type.value})"
        if self.is_resolved("name"):
            value += f" - {self.peek('name')}"
        return value + ">"

    __str__ = __repr__

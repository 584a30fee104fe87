from datetime import date
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .. import urls
from .entity import Entity

if TYPE_CHECKING:
    from ..scrapers.fetcher import PageFetcher
    from .brewery import Brewery
    from .review import Review


class Beer(Entity):
    """One beer on RateBeer.com."""

    entity_type = "beer"
    FIELDS = (
        "name",
        "brewery",
        "style",
        "glassware",
        "availability",
        "abv",
        "calories",
        "description",
        "retired",
        "rating",
    )

    def __init__(
        self,
        id: Any,
        name: Optional[str] = None,
        fetcher: Optional["PageFetcher"] = None,
        brewed_at: Optional["Brewery"] = None,
        brewed_by_for: Optional["Brewery"] = None,
        date_added: Optional[date] = None,
        listing_rating: Optional[Dict[str, Any]] = None,
        **fields: Any,
    ) -> None:
        super().__init__(id, name=name, fetcher=fetcher, **fields)
        # Set only when the beer comes from a brewery's beer list
        self.brewed_at = brewed_at
        self.brewed_by_for = brewed_by_for
        self.date_added = date_added
        self.listing_rating = listing_rating

    @property
    def url(self) -> str:
        return urls.beer_url(self.id)

    async def reviews(
        self, order: str = "most_recent", limit: int = 10
    ) -> List["Review"]:
        """Return up to ``limit`` reviews of this beer in the given order."""
        from ..parsers.review import ReviewListParser

        return await ReviewListParser(self.fetcher).retrieve(
            self, order=order, limit=limit
        )

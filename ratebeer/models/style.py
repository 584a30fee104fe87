from typing import TYPE_CHECKING, Any, Optional

from .. import urls
from .entity import Entity

if TYPE_CHECKING:
    from ..scrapers.fetcher import PageFetcher


class Style(Entity):
    """A beer style. ``category`` is only known from the styles listing."""

    entity_type = "style"
    FIELDS = ("name", "description", "glassware", "beers")

    def __init__(
        self,
        id: Any,
        name: Optional[str] = None,
        fetcher: Optional["PageFetcher"] = None,
        category: Optional[str] = None,
        **fields: Any,
    ) -> None:
        super().__init__(id, name=name, fetcher=fetcher, **fields)
        self.category = category

    @property
    def url(self) -> str:
        return urls.style_url(self.id)

"""Base entity with lazily resolved fields.

Each concrete entity declares its logical fields in ``FIELDS``. Accessing a
field that has not been resolved yet asks the ``ParserRegistry`` for the parser
serving that field, runs it once and stores every value it returns. Values
that are already known (for example a name supplied by a listing page) are
never overwritten.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, Hashable, Optional, Tuple

from ..exceptions import EntityNotFoundError, InvalidArgumentError, NotFoundError

if TYPE_CHECKING:
    from ..scrapers.fetcher import PageFetcher

logger = logging.getLogger(__name__)


class Entity:
    entity_type: str = "entity"
    FIELDS: Tuple[str, ...] = ("name",)

    def __init__(
        self,
        id: Any,
        name: Optional[str] = None,
        fetcher: Optional["PageFetcher"] = None,
        **fields: Any,
    ) -> None:
        try:
            self._id = int(id)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(
                f"{self.__class__.__name__} id must be an integer, got {id!r}"
            ) from e
        self.fetcher = fetcher
        self._values: Dict[str, Any] = {}
        if name is not None:
            self._values["name"] = name
        for key, value in fields.items():
            if key not in self.FIELDS:
                raise InvalidArgumentError(
                    f"{self.__class__.__name__} has no field '{key}'"
                )
            self._values[key] = value

    @property
    def id(self) -> int:
        return self._id

    @property
    def url(self) -> str:
        raise NotImplementedError

    @property
    def identity(self) -> Tuple[Hashable, ...]:
        return (self.entity_type, self._id)

    def is_resolved(self, field: str) -> bool:
        return field in self._values

    def peek(self, field: str, default: Any = None) -> Any:
        """Return a field's value if already resolved, without fetching."""
        return self._values.get(field, default)

    async def get(self, field: str) -> Any:
        if field not in self.FIELDS:
            raise InvalidArgumentError(
                f"{self.__class__.__name__} has no field '{field}'"
            )
        if field not in self._values:
            await self.resolve(field)
        return self._values[field]

    async def resolve(self, field: Optional[str] = None) -> None:
        """Run the parser serving ``field`` and store what it extracts."""
        from ..parsers.registry import ParserRegistry

        parser_class = ParserRegistry.get_parser(self, field or self.FIELDS[0])
        parser = parser_class(self.fetcher)
        logger.debug(f"Resolving {self!r} with {parser_class.__name__}")
        try:
            values = await parser.parse(self)
        except EntityNotFoundError:
            raise
        except NotFoundError as e:
            raise EntityNotFoundError(self.entity_type, self._id, str(e)) from e

        for key, value in values.items():
            if key in self.FIELDS:
                self._values.setdefault(key, value)

    async def full_details(self) -> Dict[str, Any]:
        details: Dict[str, Any] = {"id": self.id, "url": self.url}
        for field in self.FIELDS:
            details[field] = await self.get(field)
        return details

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and other.identity == self.identity  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + self.identity)

    def __repr__(self) -> str:
        value = f"<{self.__class__.__name__} #{self._id}"
        if "name" in self._values:
            value += f" - {self._values['name']}"
        return value + ">"

    __str__ = __repr__

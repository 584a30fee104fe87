from typing import Any


class RateBeerError(Exception):
    """Base class for every error raised by the scraper."""


class NotFoundError(RateBeerError):
    """A page could not be fetched, or the site reports it does not exist."""


class EntityNotFoundError(NotFoundError):
    def __init__(self, entity_type: str, entity_id: Any, message: str = "") -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message or f"{entity_type.capitalize()} not found - {entity_id}")


class ExtractionError(RateBeerError, ValueError):
    """Expected markup was missing, or was an unrecognised variant."""


class AliasChainError(ExtractionError):
    def __init__(self, beer_id: Any, limit: int) -> None:
        self.beer_id = beer_id
        self.limit = limit
        super().__init__(
            f"Beer {beer_id} is still aliased after {limit} redirects"
        )


class ParseError(RateBeerError, ValueError):
    """Review text did not match the expected rating or reviewer format."""


class InvalidArgumentError(RateBeerError, ValueError):
    pass

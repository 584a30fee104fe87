import asyncio
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..exceptions import NotFoundError, RateBeerError
from ..models import Entity


class ResolutionFailure:
    """Represents an error that occurred while resolving one entity."""

    def __init__(
        self,
        entity: Entity,
        error_type: str,
        message: str,
        details: Optional[str] = None,
    ) -> None:
        self.entity = entity
        self.error_type = error_type
        self.message = message
        self.details = details
        self.timestamp = datetime.now()

    def __str__(self) -> str:
        return f"{self.error_type}: {self.message}"

    def to_user_message(self) -> str:
        """Create a user-facing summary of the failure."""
        return f"Failed to fetch information for: {self.entity}"


class ResolutionCoordinator:
    """
    Resolves fields of many independent entities concurrently.

    At most ``max_concurrent`` entities are resolved at once. Results come
    back in the order the entities were given, whatever order the fetches
    complete in.
    """

    def __init__(self, max_concurrent: int = 5):
        self.max_concurrent = max_concurrent
        self.logger = logging.getLogger(__name__)
        self.errors: List[ResolutionFailure] = []

    async def resolve_all(
        self,
        entities: Sequence[Entity],
        fields: Sequence[str] = (),
    ) -> List[Optional[Dict[str, Any]]]:
        """
        Resolve ``fields`` (all declared fields if empty) of every entity.

        Returns one mapping of field values per entity, or None for an
        entity that failed; failures are kept for later reporting.
        """
        self.errors = []  # Reset errors for this run
        semaphore = asyncio.Semaphore(self.max_concurrent)

        async def bounded(entity: Entity) -> Tuple[Optional[Dict[str, Any]], Optional[ResolutionFailure]]:
            async with semaphore:
                return await self._resolve_entity(entity, fields)

        results = await asyncio.gather(*(bounded(entity) for entity in entities))

        values: List[Optional[Dict[str, Any]]] = []
        for result, error in results:
            if error:
                self.errors.append(error)
            values.append(result)
        return values

    async def _resolve_entity(
        self, entity: Entity, fields: Sequence[str]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ResolutionFailure]]:
        try:
            if not fields:
                return await entity.full_details(), None
            return {field: await entity.get(field) for field in fields}, None

        except NotFoundError as e:
            self.logger.error(f"Not found while resolving {entity}: {str(e)}")
            return None, ResolutionFailure(
                entity=entity,
                error_type="Not Found",
                message=str(e),
            )

        except RateBeerError as e:
            self.logger.error(f"Extraction error for {entity}: {str(e)}")
            return None, ResolutionFailure(
                entity=entity,
                error_type="Extraction Error",
                message=f"Extraction failed: {str(e)}",
                details=type(e).__name__,
            )

    def get_errors(self) -> List[ResolutionFailure]:
        """Get list of errors that occurred during resolution."""
        return self.errors

    def has_errors(self) -> bool:
        """Check if any errors occurred during resolution."""
        return len(self.errors) > 0

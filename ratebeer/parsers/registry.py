from typing import Dict, List, Tuple, Type

from ..exceptions import InvalidArgumentError
from ..models.entity import Entity
from .base import BaseParser
from .beer import BeerParser
from .brewery import BreweryBeersParser, BreweryParser
from .location import LocationParser
from .style import StyleBeersParser, StyleParser


class ParserRegistry:
    # Default parsers - selected by entity.entity_type
    _entity: Dict[str, Type[BaseParser]] = {
        "beer": BeerParser,
        "brewery": BreweryParser,
        "style": StyleParser,
        "location": LocationParser,
    }

    # Field parsers - selected by (entity_type, field), take precedence over
    # the entity's default parser
    _field: Dict[Tuple[str, str], Type[BaseParser]] = {
        ("brewery", "beers"): BreweryBeersParser,
        ("style", "beers"): StyleBeersParser,
    }

    @classmethod
    def get_parser(cls, entity: Entity, field: str) -> Type[BaseParser]:
        """Return the parser class that resolves ``field`` of ``entity``.

        Field parsers (keyed by entity type and field) take precedence over
        the entity type's default parser.
        """
        if field not in entity.FIELDS:
            raise InvalidArgumentError(
                f"{entity.__class__.__name__} has no field '{field}'"
            )
        key = (entity.entity_type, field)
        if key in cls._field:
            return cls._field[key]
        if entity.entity_type in cls._entity:
            return cls._entity[entity.entity_type]
        raise InvalidArgumentError(
            f"No parser for entity type '{entity.entity_type}' (field: '{field}')"
        )

    @classmethod
    def register_parser(
        cls, entity_type: str, parser_class: Type[BaseParser], field: str = ""
    ) -> None:
        if field:
            cls._field[(entity_type, field)] = parser_class
        else:
            cls._entity[entity_type] = parser_class

    @classmethod
    def get_supported_types(cls) -> List[str]:
        return list(cls._entity.keys())

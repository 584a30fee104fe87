from dataclasses import dataclass, field
from typing import List

from .beer import Beer
from .brewery import Brewery


@dataclass
class SearchResult:
    query: str
    beers: List[Beer] = field(default_factory=list)
    breweries: List[Brewery] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.beers = unique_by_id(self.beers)
        self.breweries = sorted(unique_by_id(self.breweries), key=lambda b: b.id)

    def merge_beers(self, beers: List[Beer]) -> None:
        """Add extra beers, keeping the first occurrence of each id."""
        self.beers = unique_by_id(self.beers + beers)


def unique_by_id(entities: list) -> list:
    seen = set()
    unique = []
    for entity in entities:
        if entity.id in seen:
            continue
        seen.add(entity.id)
        unique.append(entity)
    return unique

from dataclasses import dataclass, fields
import datetime
from fractions import Fraction
from typing import Any, Dict

from ..exceptions import InvalidArgumentError
from .beer import Beer

RATING_AXES = ("overall", "aroma", "appearance", "taste", "palate")


@dataclass(eq=False)
class Review:
    beer: Beer
    reviewer: str
    reviewer_rank: int
    location: str
    date: datetime.date
    rating: float
    rating_breakdown: Dict[str, Fraction]
    comment: str

    def __post_init__(self) -> None:
        if isinstance(self.beer, int):
            self.beer = Beer(self.beer)
        elif not isinstance(self.beer, Beer):
            raise InvalidArgumentError(f"incorrect beer parameter: {self.beer!r}")
        for f in fields(self):
            if getattr(self, f.name) is None:
                raise InvalidArgumentError(f"{f.name} parameter required")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Review):
            return NotImplemented
        return (
            self.reviewer == other.reviewer
            and self.date == other.date
            and self.beer == other.beer
            and self.comment == other.comment
        )

    def __hash__(self) -> int:
        return hash((self.reviewer, self.date, self.beer, self.comment))

    def __str__(self) -> str:
        return f"Review of {self.beer} - {self.reviewer} on {self.date}"

"""Beer review parsing.

A review page lists reviews as three consecutive fragments: a rating line
("4.00 AROMA 7/10 APPEARANCE 4/5 TASTE 9/10 PALATE 3/5 OVERALL 20/20"), a
reviewer line ("Johnny Tester (1234) - The Moon - SEP 8, 2013") and the
comment itself.
"""

import logging
import math
import re
from fractions import Fraction
from typing import Dict, List, Optional, Sequence, Tuple, Union

from bs4 import BeautifulSoup
from dateutil import parser as dateutil_parser

from .. import urls
from ..exceptions import ExtractionError, InvalidArgumentError, ParseError, RateBeerError
from ..models import RATING_AXES, Beer, Review
from ..scrapers.fetcher import PageFetcher
from .base import NBSP
from .pagination import aggregate, fetch_pages

PAGE_SIZE = 10

ORDERINGS = {"most_recent": 1, "top_raters": 2, "highest_score": 3}

RATING_PATTERN = re.compile(
    r"^(?P<total>\d+(\.\d+)?).+"
    r"AROMA\s(?P<aroma>\d+/10).+"
    r"APPEARANCE\s(?P<appearance>\d+/5).+"
    r"TASTE\s(?P<taste>\d+/10).+"
    r"PALATE\s(?P<palate>\d+/5).+"
    r"OVERALL\s(?P<overall>\d+/20)$"
)

REVIEWER_PATTERN = re.compile(
    r"^(?P<name>.+?)\s\((?P<rank>\d+)\)\s-\s?"
    r"(?:(?P<location>.+?)?\s?-\s)?"
    r"(?P<date>.+)$"
)

# Fragments injected by the ad server between reviews
AD_PLACEHOLDER = "googleFillSlot"

Chunk = Tuple[str, str, str]

logger = logging.getLogger(__name__)


def _fraction(text: str) -> Fraction:
    numerator, denominator = text.split("/")
    return Fraction(int(numerator), int(denominator))


def parse_rating(text: str) -> Tuple[float, Dict[str, Fraction]]:
    """Read the total rating and its per-axis breakdown."""
    match = RATING_PATTERN.match(text.replace(NBSP, " ").strip())
    if match is None:
        raise ParseError(f"Unrecognised rating line: {text!r}")
    breakdown = {axis: _fraction(match.group(axis)) for axis in RATING_AXES}
    return float(match.group("total")), breakdown


def parse_reviewer(text: str) -> Dict[str, Union[str, int, object]]:
    """Read the reviewer's name, rank, location and review date."""
    match = REVIEWER_PATTERN.match(text.replace(NBSP, " ").strip())
    if match is None:
        raise ParseError(f"Unrecognised reviewer line: {text!r}")
    try:
        review_date = dateutil_parser.parse(match.group("date")).date()
    except (ValueError, OverflowError) as e:
        raise ParseError(f"Unrecognised review date: {match.group('date')!r}") from e
    return {
        "reviewer": match.group("name").strip(),
        "reviewer_rank": int(match.group("rank")),
        "location": (match.group("location") or "").strip(),
        "date": review_date,
    }


def parse_review(chunk: Sequence[str], beer: Union[Beer, int]) -> Review:
    """Build a Review from a (rating line, reviewer line, comment) chunk."""
    if len(chunk) != 3:
        raise ParseError(f"Review chunk must have 3 parts, got {len(chunk)}")
    rating_line, reviewer_line, comment = chunk
    rating, breakdown = parse_rating(rating_line)
    return Review(
        beer=beer,  # type: ignore[arg-type]
        rating=rating,
        rating_breakdown=breakdown,
        comment=comment.strip(),
        **parse_reviewer(reviewer_line),  # type: ignore[arg-type]
    )


def review_chunks(soup: BeautifulSoup) -> List[Chunk]:
    """Split one review page into (rating, reviewer, comment) chunks."""
    container = soup.select_one(".reviews-container")
    if container is None:
        raise ExtractionError("Review page has no reviews container")
    root = container.select_one(":scope div div")
    if root is None:
        return []

    fragments = [
        child.get_text()
        for child in root.find_all(["div", "small"], recursive=False)
    ]
    fragments = [f for f in fragments if f.strip() and AD_PLACEHOLDER not in f]

    chunks: List[Chunk] = []
    for start in range(0, len(fragments), 3):
        group = fragments[start:start + 3]
        if len(group) < 3:
            logger.warning(f"Dropping incomplete review fragment: {group!r}")
            continue
        chunks.append((group[0], group[1], group[2]))
    return chunks


def num_pages(limit: int) -> int:
    return math.ceil(limit / PAGE_SIZE)


def url_suffix(order: str) -> int:
    try:
        return ORDERINGS[order]
    except KeyError:
        raise InvalidArgumentError(f"unknown ordering: {order}") from None


class ReviewListParser:
    """Retrieves a beer's reviews across as many pages as the limit needs."""

    def __init__(self, fetcher: Optional[PageFetcher]) -> None:
        if fetcher is None:
            raise RateBeerError(
                f"{self.__class__.__name__} needs a PageFetcher to retrieve reviews"
            )
        self.fetcher = fetcher
        self.logger = logging.getLogger(self.__class__.__name__)

    async def retrieve(
        self, beer: Union[Beer, int], order: str = "most_recent", limit: int = 10
    ) -> List[Review]:
        if isinstance(beer, bool) or not isinstance(beer, (Beer, int)):
            raise InvalidArgumentError(f"unknown beer value: {beer!r}")
        if isinstance(beer, int):
            beer = Beer(beer, fetcher=self.fetcher)
        if not isinstance(limit, int) or limit < 1:
            raise InvalidArgumentError(f"limit must be a positive integer, got {limit!r}")
        suffix = url_suffix(order)

        pages = await fetch_pages(
            self.fetcher,
            lambda page: urls.review_url(beer.id, suffix, page),
            num_pages=num_pages(limit),
        )
        chunks = aggregate(pages, review_chunks)
        reviews = [parse_review(chunk, beer) for chunk in chunks[:limit]]
        self.logger.info(f"Beer {beer.id}: {len(reviews)} reviews ({order})")
        return reviews

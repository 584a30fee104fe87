"""Aggregation of listings split over several pages."""

import logging
from typing import Callable, Iterable, List, Optional, TypeVar

from bs4 import BeautifulSoup

from ..scrapers.fetcher import PageFetcher

T = TypeVar("T")

logger = logging.getLogger(__name__)


def page_count(soup: BeautifulSoup) -> Optional[int]:
    """Highest page number in the pagination control, None if there is none."""
    control = soup.select_one(".pagination")
    if control is None:
        return None
    numbers = [
        int(b.get_text(strip=True))
        for b in control.select("b")
        if b.get_text(strip=True).isdigit()
    ]
    return max(numbers) if numbers else None


def is_paginated(soup: BeautifulSoup) -> bool:
    return page_count(soup) is not None


async def fetch_pages(
    fetcher: PageFetcher,
    url_for_page: Callable[[int], str],
    num_pages: Optional[int] = None,
) -> List[BeautifulSoup]:
    """
    Fetch pages 1..N in order.

    When ``num_pages`` is not given, N is read from the first page's
    pagination control (a single page if it has none).
    """
    pages: List[BeautifulSoup] = []
    if num_pages is None:
        first = await fetcher.fetch(url_for_page(1))
        pages.append(first)
        num_pages = page_count(first) or 1

    for page_number in range(len(pages) + 1, num_pages + 1):
        pages.append(await fetcher.fetch(url_for_page(page_number)))

    logger.debug(f"Fetched {len(pages)} page(s) starting at {url_for_page(1)}")
    return pages


def aggregate(
    pages: Iterable[BeautifulSoup],
    extract_rows: Callable[[BeautifulSoup], Iterable[T]],
) -> List[T]:
    """Concatenate each page's rows, keeping page order and row order."""
    rows: List[T] = []
    for page in pages:
        rows.extend(extract_rows(page))
    return rows

"""Main entry point for the ratebeer CLI."""

import argparse
import asyncio
import json
import logging
import sys
from datetime import date
from enum import Enum
from fractions import Fraction
from typing import Any, List, Optional

from dotenv import load_dotenv

from .client import RateBeerClient
from .config import ScraperSettings, load_settings
from .exceptions import RateBeerError
from .models import Entity, Review

# Load environment variables from .env file
load_dotenv(override=True)


def to_jsonable(value: Any) -> Any:
    """JSON fallback for the values entities resolve to."""
    if isinstance(value, Entity):
        data = {"type": value.entity_type, "id": value.id}
        if value.is_resolved("name"):
            data["name"] = value.peek("name")
        return data
    if isinstance(value, Review):
        return {
            "beer": to_jsonable(value.beer),
            "reviewer": value.reviewer,
            "reviewer_rank": value.reviewer_rank,
            "location": value.location,
            "date": value.date.isoformat(),
            "rating": value.rating,
            "rating_breakdown": {k: str(v) for k, v in value.rating_breakdown.items()},
            "comment": value.comment,
        }
    if isinstance(value, Fraction):
        return f"{value.numerator}/{value.denominator}"
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def format_output(data: Any) -> str:
    return json.dumps(data, default=to_jsonable, indent=2, ensure_ascii=False)


async def async_main(args: argparse.Namespace) -> int:
    """Async main entry point."""
    settings = load_settings(args.config) if args.config else ScraperSettings.from_env()

    async with RateBeerClient(settings) as client:
        data: Any
        if args.command == "beer":
            data = await client.beer(args.id).full_details()
        elif args.command == "brewery":
            data = await client.brewery(args.id).full_details()
        elif args.command == "style":
            data = await client.style(args.id).full_details()
        elif args.command == "country":
            data = await client.country(args.id).full_details()
        elif args.command == "region":
            data = await client.region(args.id).full_details()
        elif args.command == "reviews":
            data = await client.reviews(args.id, order=args.order, limit=args.limit)
        elif args.command == "search":
            result = await client.search(args.query)
            data = {
                "query": result.query,
                "beers": result.beers,
                "breweries": result.breweries,
            }
        elif args.command == "styles":
            styles = await client.all_styles(include_hidden=args.hidden)
            data = [
                {"id": s.id, "name": s.peek("name"), "category": s.category}
                for s in styles
            ]
        else:
            raise ValueError(f"Unknown command: {args.command}")

    print(format_output(data))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Scrape beers, breweries, styles and reviews from RateBeer.com"
    )
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument("--config", "-c", help="Path to a JSON settings file")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    commands = parser.add_subparsers(dest="command", required=True)
    for name in ("beer", "brewery", "style", "country", "region"):
        command = commands.add_parser(name, help=f"Show full details of a {name}")
        command.add_argument("id", type=int)

    reviews = commands.add_parser("reviews", help="List reviews of a beer")
    reviews.add_argument("id", type=int)
    reviews.add_argument(
        "--order",
        choices=["most_recent", "top_raters", "highest_score"],
        default="most_recent",
    )
    reviews.add_argument("--limit", type=int, default=10)

    search = commands.add_parser("search", help="Search for beers and breweries")
    search.add_argument("query")

    styles = commands.add_parser("styles", help="List all beer styles")
    styles.add_argument(
        "--hidden", action="store_true", help="Include styles hidden from the listing"
    )

    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        return asyncio.run(async_main(args))
    except RateBeerError as e:
        print(f"Error: {e}")
        return 1
    except Exception as e:
        print(f"Critical Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())

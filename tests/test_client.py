"""End-to-end tests of the client over a mocked HTTP layer."""

import aiohttp
import pytest
from aioresponses import aioresponses

from ratebeer import RateBeerClient, ScraperSettings
from ratebeer.models import Beer, Location
from tests.pages import (
    alias_page,
    beer_page,
    review_fragments,
    reviews_page,
    search_page,
    styles_landing_page,
)

BASE = "https://www.ratebeer.com"


@pytest.fixture
def settings() -> ScraperSettings:
    return ScraperSettings(base_url=BASE, max_concurrent=2)


class TestRateBeerClient:
    """Test the RateBeerClient class."""

    def test_fetcher_requires_context(self, settings: ScraperSettings) -> None:
        with pytest.raises(RuntimeError, match="async with"):
            RateBeerClient(settings).beer(1411)

    @pytest.mark.asyncio
    async def test_beer_lookup(self, settings: ScraperSettings) -> None:
        with aioresponses() as m:
            m.get(f"{BASE}/beer/a/1411/", status=200, body=beer_page())

            async with RateBeerClient(settings) as client:
                beer = client.beer(1411)

                assert await beer.get("name") == "Tennents Lager"
                assert await beer.get("abv") == 4.0
                assert client.absolute_url(beer) == f"{BASE}/beer/a/1411/"

    @pytest.mark.asyncio
    async def test_location_factories(self, settings: ScraperSettings) -> None:
        async with RateBeerClient(settings) as client:
            assert client.country(12) == Location.country(12)
            assert client.region(7) == Location.region(7)
            assert client.location(7, "region") == Location.region(7)
            assert client.style(17).fetcher is client.fetcher

    @pytest.mark.asyncio
    async def test_resolve_canonical(self, settings: ScraperSettings) -> None:
        with aioresponses() as m:
            m.get(f"{BASE}/beer/a/100/", status=200, body=alias_page("Alias", 200))
            m.get(f"{BASE}/beer/a/200/", status=200, body=beer_page())

            async with RateBeerClient(settings) as client:
                assert await client.resolve_canonical(100) == 200

    @pytest.mark.asyncio
    async def test_search_resolves_beers_concurrently(
        self, settings: ScraperSettings
    ) -> None:
        """Requested fields are resolved for every beer found; failures are kept."""
        with aioresponses() as m:
            m.post(
                f"{BASE}/findbeer.asp",
                status=200,
                body=search_page(beers=[(1, "Good Lager"), (2, "Gone Lager")]),
            )
            m.get(f"{BASE}/beer/a/1/", status=200, body=beer_page(name="Good Lager"))
            m.get(f"{BASE}/beer/a/2/", status=404)

            async with RateBeerClient(settings) as client:
                result = await client.search("Lager", resolve_fields=["abv"])

                assert [b.id for b in result.beers] == [1, 2]
                assert result.beers[0].peek("abv") == 4.0
                assert not result.beers[1].is_resolved("abv")
                assert len(client.errors) == 1
                assert client.errors[0].entity == Beer(2)
                assert client.errors[0].error_type == "Not Found"

    @pytest.mark.asyncio
    async def test_reviews(self, settings: ScraperSettings) -> None:
        with aioresponses() as m:
            m.get(
                f"{BASE}/beer/a/1411/1/1/",
                status=200,
                body=reviews_page(review_fragments(1) + review_fragments(2)),
            )

            async with RateBeerClient(settings) as client:
                reviews = await client.reviews(1411, limit=5)

        assert [r.reviewer for r in reviews] == ["Reviewer 1", "Reviewer 2"]

    @pytest.mark.asyncio
    async def test_all_styles(self, settings: ScraperSettings) -> None:
        with aioresponses() as m:
            m.get(
                f"{BASE}/beerstyles/",
                status=200,
                body=styles_landing_page([("Lager", [(3, "Pale Lager")])]),
            )

            async with RateBeerClient(settings) as client:
                styles = await client.all_styles(include_hidden=True)
                hidden = client.hidden_styles()

        assert styles[0].category == "Lager"
        assert len(styles) == 1 + len(hidden)

    @pytest.mark.asyncio
    async def test_external_session_left_open(self, settings: ScraperSettings) -> None:
        """A session handed to the client is not closed by it."""
        async with aiohttp.ClientSession() as session:
            async with RateBeerClient(settings, session=session) as client:
                assert client.fetcher.session is session

            assert not session.closed

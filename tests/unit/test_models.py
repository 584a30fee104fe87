"""Unit tests for data models."""

from datetime import date
from fractions import Fraction

import pytest

from ratebeer.exceptions import InvalidArgumentError, RateBeerError
from ratebeer.models import (
    Beer,
    Brewery,
    BreweryStatus,
    Location,
    LocationType,
    Review,
    SearchResult,
    Style,
)


def _review(**overrides) -> Review:
    values = dict(
        beer=1411,
        reviewer="Johnny Tester",
        reviewer_rank=1234,
        location="The Moon",
        date=date(2013, 9, 8),
        rating=4.0,
        rating_breakdown={"overall": Fraction(20, 20)},
        comment="This is a nice beer.",
    )
    values.update(overrides)
    return Review(**values)


class TestEntity:
    """Test behaviour shared by all entities."""

    def test_identity_equality(self) -> None:
        """Entities are equal when type and id match, whatever else is known."""
        assert Beer(1411) == Beer("1411", name="Tennents Lager")
        assert Beer(1411) != Beer(1412)
        assert Beer(1) != Brewery(1)
        assert Brewery(1) != Style(1)

    def test_hashable(self) -> None:
        entities = {Beer(1), Beer(1, name="Dup"), Brewery(1), Style(1)}

        assert len(entities) == 3

    def test_invalid_id(self) -> None:
        with pytest.raises(InvalidArgumentError, match="id must be an integer"):
            Beer("abc")

    def test_unknown_field_in_constructor(self) -> None:
        with pytest.raises(InvalidArgumentError, match="no field 'colour'"):
            Beer(1, colour="amber")

    @pytest.mark.asyncio
    async def test_unknown_field_access(self) -> None:
        with pytest.raises(InvalidArgumentError):
            await Brewery(1).get("abv")

    @pytest.mark.asyncio
    async def test_preset_values_need_no_fetcher(self) -> None:
        beer = Beer(1, name="Known", abv=5.0)

        assert await beer.get("name") == "Known"
        assert await beer.get("abv") == 5.0

    @pytest.mark.asyncio
    async def test_resolution_without_fetcher(self) -> None:
        """An unresolved field cannot be fetched without a fetcher."""
        with pytest.raises(RateBeerError, match="needs a PageFetcher"):
            await Beer(1).get("abv")

    def test_peek_and_is_resolved(self) -> None:
        beer = Beer(1, name="Known")

        assert beer.is_resolved("name")
        assert not beer.is_resolved("abv")
        assert beer.peek("abv") is None
        assert beer.peek("abv", 0) == 0

    def test_repr(self) -> None:
        assert repr(Beer(1411, name="Tennents Lager")) == "<Beer #1411 - Tennents Lager>"
        assert str(Brewery(7)) == "<Brewery #7>"

    def test_urls(self) -> None:
        assert Beer(1411).url == "/beer/a/1411/"
        assert Brewery(8534).url == "/brewers/a/8534/"
        assert Style(17).url == "/beerstyles/a/17/"

    def test_listing_attributes(self) -> None:
        brewery = Brewery(
            1, location="Ellon", established=2007, status=BreweryStatus.ACTIVE
        )
        style = Style(17, category="North American Ale")

        assert brewery.location == "Ellon"
        assert brewery.established == 2007
        assert brewery.status is BreweryStatus.ACTIVE
        assert style.category == "North American Ale"
        assert Beer(1).brewed_at is None


class TestLocation:
    """Test the Location model."""

    def test_country_and_region_differ(self) -> None:
        assert Location.country(12) != Location.region(12)
        assert Location.country(12) == Location(12, "country")
        assert Location.region(12).location_type is LocationType.REGION

    def test_invalid_type(self) -> None:
        with pytest.raises(InvalidArgumentError, match="invalid location type"):
            Location(12, "planet")

    def test_page_urls(self) -> None:
        assert Location.country(12).url == "/breweries/a/0/12/"
        assert Location.country(12).page_url(3) == "/breweries/a/0/12/3/"
        assert Location.region(7).url == "/breweries/a/7/0/"
        assert Location.region(7).page_url(2) == "/breweries/a/7/0/2/"

    def test_repr(self) -> None:
        assert repr(Location.country(12, name="Scotland")) == "<Location #12 (country) - Scotland>"


class TestReview:
    """Test the Review model."""

    def test_beer_id_becomes_beer(self) -> None:
        review = _review(beer=1411)

        assert isinstance(review.beer, Beer)
        assert review.beer.id == 1411

    def test_invalid_beer(self) -> None:
        with pytest.raises(InvalidArgumentError, match="incorrect beer parameter"):
            _review(beer="Tennents")

    @pytest.mark.parametrize("field", ["reviewer", "date", "rating", "comment"])
    def test_required_fields(self, field: str) -> None:
        with pytest.raises(InvalidArgumentError, match=f"{field} parameter required"):
            _review(**{field: None})

    def test_equality_ignores_rating(self) -> None:
        assert _review() == _review(rating=1.0, location="Elsewhere")
        assert _review() != _review(comment="Different")
        assert len({_review(), _review(rating=2.0)}) == 1

    def test_str(self) -> None:
        assert str(_review()) == "Review of <Beer #1411> - Johnny Tester on 2013-09-08"


class TestSearchResult:
    """Test the SearchResult model."""

    def test_deduplicates_and_sorts(self) -> None:
        result = SearchResult(
            query="test",
            beers=[Beer(5), Beer(2), Beer(5)],
            breweries=[Brewery(30), Brewery(10), Brewery(30)],
        )

        assert [b.id for b in result.beers] == [5, 2]
        assert [b.id for b in result.breweries] == [10, 30]

    def test_merge_beers(self) -> None:
        result = SearchResult(query="test", beers=[Beer(1, name="First")])

        result.merge_beers([Beer(1, name="Second"), Beer(2)])

        assert [b.id for b in result.beers] == [1, 2]
        assert result.beers[0].peek("name") == "First"

    def test_empty_defaults(self) -> None:
        result = SearchResult(query="nothing")

        assert result.beers == []
        assert result.breweries == []

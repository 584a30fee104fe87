"""URL paths for RateBeer.com pages, relative to the configured base URL."""

BASE_URL = "https://www.ratebeer.com"
SEARCH_URL = "/findbeer.asp"
STYLES_URL = "/beerstyles/"


def beer_url(beer_id: int) -> str:
    return f"/beer/a/{beer_id}/"


def review_url(beer_id: int, sort_suffix: int, page_number: int) -> str:
    return f"/beer/a/{beer_id}/{sort_suffix}/{page_number}/"


def brewery_url(brewery_id: int) -> str:
    return f"/brewers/a/{brewery_id}/"


def brewery_beers_url(brewery_id: int, page_number: int = 1) -> str:
    return f"/brewers/a/{brewery_id}/beers/{page_number}/"


def country_url(country_id: int, page_number: int = 1) -> str:
    if page_number > 1:
        return f"/breweries/a/0/{country_id}/{page_number}/"
    return f"/breweries/a/0/{country_id}/"


def region_url(region_id: int, page_number: int = 1) -> str:
    if page_number > 1:
        return f"/breweries/a/{region_id}/0/{page_number}/"
    return f"/breweries/a/{region_id}/0/"


def style_url(style_id: int) -> str:
    return f"/beerstyles/a/{style_id}/"


def style_beers_url(style_id: int) -> str:
    return f"/ajax/top-beer-by-style.asp?style={style_id}"

"""Search query normalization.

RateBeer's search returns nothing for abbreviations, for special characters,
or for generic words such as "Brewers" that rarely appear in a brewery's
proper name. ``normalize_query`` rewrites free text into a query the site
handles well.
"""

import re

from unidecode import unidecode


GENERIC_WORDS = (
    "Brew",
    "Brewers",
    "Brewery",
    "Brewing",
    "Brewhouse",
    "Company",
    r"Co\.?",
    r"Inc\.?",
    r"Ltd\.?",
    "Limited",
)

GENERIC_PATTERN = re.compile(
    r"(?<!\S)(?:" + "|".join(GENERIC_WORDS) + r")(?!\S)", re.IGNORECASE
)

# Terms known to break the search, with what to send instead
PROBLEM_TERMS = (
    (re.compile("six°north", re.IGNORECASE), "Six Degrees North"),
    (re.compile(r"[/:]"), " "),
)


def strip_generic_terms(query: str) -> str:
    return GENERIC_PATTERN.sub(" ", query).strip()


def substitute_known_terms(query: str) -> str:
    for pattern, substitute in PROBLEM_TERMS:
        query = pattern.sub(substitute, query)
    return query.strip()


def transliterate(query: str) -> str:
    """Replace non-ASCII letters with their closest ASCII spelling."""
    return unidecode(query)


def normalize_query(query: str) -> str:
    query = strip_generic_terms(query)
    query = substitute_known_terms(query)
    return transliterate(query).strip()


def ipa_variant(query: str) -> str:
    """Spell out "IPA", which the search does not match consistently."""
    return query.lower().replace(" ipa", " india pale ale")

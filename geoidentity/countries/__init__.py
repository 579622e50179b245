"""Country lookup and attribute queries."""

from geoidentity.countries.countryapi import (
    country_finder,
    country_identifier,
    find_countries_by,
    find_country_by,
    find_country,
    list_countries,
)
from geoidentity.countries.countryidentity import (
    Country,
    CountryFinder,
    FinderRequest,
    InvalidAttributeError,
    parse_finder_request,
)

__all__ = [
    "country_finder",
    "country_identifier",
    "find_countries_by",
    "find_country_by",
    "find_country",
    "list_countries",
    "Country",
    "CountryFinder",
    "FinderRequest",
    "InvalidAttributeError",
    "parse_finder_request",
]

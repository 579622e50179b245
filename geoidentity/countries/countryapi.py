"""Country entity resolution API.

Public API for country lookup and attribute queries.
This provides a clean, simple API over one process-wide CountryFinder
built on the packaged dataset.
"""

from functools import lru_cache
from typing import Any, List, Optional, Union

import pandas as pd

from geoidentity.countries.countryidentity import Country, CountryFinder
from geoidentity.utils.dataset import load_dataset


# Columns returned by list_countries(), in order
LIST_COLUMNS = [
    "alpha2",
    "alpha3",
    "number",
    "iso_short_name",
    "iso_long_name",
    "continent",
    "region",
    "subregion",
    "currency_code",
]


@lru_cache(maxsize=1)
def country_finder() -> CountryFinder:
    """Shared CountryFinder over load_dataset().

    Created on first use and reused, so the accent-folding memo is shared
    by every query in the process.
    """
    return CountryFinder(load_dataset())


def country_identifier(code: Any) -> Optional[Country]:
    """Look up a country by ISO 3166-1 alpha-2 code.

    Args:
        code: Alpha-2 code in any case (e.g., "US", "us")

    Returns:
        Country, or None if the code is unknown

    Examples:
        >>> country_identifier("us").iso_short_name
        'United States of America'

        >>> country_identifier("ZZ") is None
        True
    """
    return country_finder().search(code)


def find_countries_by(attribute: str, value: Any) -> List[Country]:
    """All countries whose attribute matches the value.

    Matching is exact after accent and case folding; pass a compiled regex
    for pattern matching. "name" scans the short name, unofficial names and
    translations; "any_name" also scans the long name.

    Args:
        attribute: Searchable attribute (e.g., "alpha3", "region", "any_name")
        value: Query string or compiled regex

    Returns:
        Matching countries in dataset order (empty list if none)

    Raises:
        InvalidAttributeError: If the attribute is not searchable

    Examples:
        >>> [c.alpha2 for c in find_countries_by("currency_code", "EUR")]
        ['DE', 'ES', 'FR']

        >>> [c.alpha2 for c in find_countries_by("any_name", "Ivory Coast")]
        ['CI']
    """
    return country_finder().find_all_by(attribute, value)


def find_country_by(attribute: str, value: Any) -> Optional[Country]:
    """Single-country form of find_countries_by.

    When several countries match, the last one in dataset order is returned.

    Examples:
        >>> find_country_by("alpha3", "DEU").alpha2
        'DE'
    """
    return country_finder().find_by(attribute, value)


def find_country(request: str, value: Any) -> Union[List[Country], Country, None]:
    """Run a finder request by name.

    Accepts "find_by_<attribute>", "find_all_by_<attribute>",
    "find_country_by_<attribute>" and "find_countries_by_<attribute>"
    (plus "find_all_countries_by_<attribute>").

    Raises:
        AttributeError: If the request is not a finder request
        InvalidAttributeError: If the attribute is not searchable

    Examples:
        >>> find_country("find_by_ioc", "SUI").alpha2
        'CH'

        >>> [c.alpha2 for c in find_country("find_all_countries_by_region", "Europe")]
        ['CH', 'DE', 'ES', 'FR', 'GB']
    """
    return country_finder().dispatch(request, value)


def list_countries(region: Optional[str] = None) -> pd.DataFrame:
    """List countries, optionally filtered by region.

    Args:
        region: Optional region name (e.g., "Europe", "Americas"), case-insensitive.
                If None, returns all countries.

    Returns:
        DataFrame with one row per country and LIST_COLUMNS columns

    Examples:
        >>> list_countries(region="Europe")[["alpha2", "iso_short_name"]].values
        array([['CH', 'Switzerland'], ['DE', 'Germany'], ...])
    """
    rows = [
        {column: data.get(column) for column in LIST_COLUMNS}
        for _, data in load_dataset().items()
    ]
    df = pd.DataFrame(rows, columns=LIST_COLUMNS)

    if region is not None:
        df = df[df["region"].str.lower() == region.lower()].reset_index(drop=True)

    return df


__all__ = [
    "country_finder",
    "country_identifier",
    "find_countries_by",
    "find_country_by",
    "find_country",
    "list_countries",
]

"""Subdivision entity resolution API.

Public API for resolving subdivisions (states, provinces, regions) of a
country given its ISO 3166-1 alpha-2 code. Every function returns None,
False or an empty collection for unknown countries or queries; nothing
raises for "not found".
"""

from functools import lru_cache
from typing import Dict, Iterable, List, Optional, Tuple

import pandas as pd

from geoidentity.config import DEFAULT_LOCALE
from geoidentity.subdivisions import subdivisionidentity as _identity
from geoidentity.subdivisions.subdivisionidentity import Subdivision, create_subdivisions
from geoidentity.utils.dataset import load_dataset


@lru_cache(maxsize=None)
def load_subdivisions(country: str) -> Dict[str, Subdivision]:
    """Subdivision records of a country, built once per country code.

    Args:
        country: ISO 3166-1 alpha-2 code (case-insensitive)

    Returns:
        Ordered code -> Subdivision mapping (empty if the country is missing
        or has none)

    Examples:
        >>> list(load_subdivisions("CA"))[:3]
        ['CA-AB', 'CA-BC', 'CA-MB']
    """
    if not country:
        return {}
    return create_subdivisions(load_dataset().get_subdivisions(country.upper()))


def subdivision_identifier(country: str, query: str) -> Optional[Subdivision]:
    """Resolve a subdivision code, name or translated name within a country.

    Precedence: code, then canonical name, then translated name; within a
    tier the first subdivision in stored order wins.

    Examples:
        >>> subdivision_identifier("CA", "Québec").code
        'CA-QC'

        >>> subdivision_identifier("US", "US-TX").name
        'Texas'
    """
    return _identity.find_subdivision_by_name(load_subdivisions(country), query)


def find_subdivision_by_exact_name(country: str, query: str) -> Optional[Subdivision]:
    """First subdivision whose canonical name is exactly the query."""
    return _identity.find_subdivision_by_exact_name(load_subdivisions(country), query)


def find_subdivision_by_unofficial_names(country: str, query: str) -> Optional[Subdivision]:
    """First subdivision listing the query among its unofficial names.

    Examples:
        >>> find_subdivision_by_unofficial_names("US", "Golden State").code
        'US-CA'
    """
    return _identity.find_subdivision_by_unofficial_names(load_subdivisions(country), query)


def subdivision_for_string(country: str, query: str) -> bool:
    """True if the query is a subdivision code or translated name of the country."""
    return _identity.subdivision_for_string(load_subdivisions(country), query)


def subdivisions_of_types(country: str, types: Iterable[str]) -> Dict[str, Subdivision]:
    """Subdivisions of the given type(s), in stored order.

    Examples:
        >>> list(subdivisions_of_types("CA", ["territory"]))
        ['CA-NT', 'CA-NU', 'CA-YT']
    """
    return _identity.subdivisions_of_types(load_subdivisions(country), types)


def subdivision_types(country: str) -> List[str]:
    return _identity.subdivision_types(load_subdivisions(country))


def humanized_subdivision_types(country: str) -> List[str]:
    return _identity.humanized_subdivision_types(load_subdivisions(country))


def subdivision_names_with_codes(country: str, locale: str = DEFAULT_LOCALE) -> List[Tuple[str, str]]:
    """(name, code) pairs in the locale, falling back to canonical names.

    Examples:
        >>> subdivision_names_with_codes("CA", "fr")[:2]
        [('Alberta', 'CA-AB'), ('Colombie-Britannique', 'CA-BC')]
    """
    return _identity.subdivision_names_with_codes(load_subdivisions(country), locale)


def subdivision_names(country: str, locale: str = DEFAULT_LOCALE) -> List[str]:
    return _identity.subdivision_names(load_subdivisions(country), locale)


def list_subdivisions(country: str, locale: str = DEFAULT_LOCALE) -> pd.DataFrame:
    """List a country's subdivisions as a DataFrame.

    Args:
        country: ISO 3166-1 alpha-2 code
        locale: Locale for the translated name column

    Returns:
        DataFrame with columns: code, name, type, translated_name

    Examples:
        >>> list_subdivisions("CH")[["code", "name"]].values
        array([['CH-BE', 'Bern'], ['CH-GE', 'Genève'], ...])
    """
    rows = [
        {
            "code": code,
            "name": s.name,
            "type": s.type,
            "translated_name": s.translations.get(locale) or s.name,
        }
        for code, s in load_subdivisions(country).items()
    ]
    return pd.DataFrame(rows, columns=["code", "name", "type", "translated_name"])


__all__ = [
    "load_subdivisions",
    "subdivision_identifier",
    "find_subdivision_by_exact_name",
    "find_subdivision_by_unofficial_names",
    "subdivision_for_string",
    "subdivisions_of_types",
    "subdivision_types",
    "humanized_subdivision_types",
    "subdivision_names_with_codes",
    "subdivision_names",
    "list_subdivisions",
]

"""Geo Identity - Country and Subdivision Resolution

Public API for resolving countries by code or attribute, and subdivisions
by code, name or translated name.

Usage:
    from geoidentity import country_identifier, find_countries_by, find_country
    from geoidentity import subdivision_identifier

    # Keyed lookup by alpha-2 code
    country = country_identifier("us")  # Returns: Country('US')

    # Attribute queries (accent- and case-insensitive)
    countries = find_countries_by("any_name", "Cote d'Ivoire")  # Returns: [Country('CI')]

    # Finder requests
    country = find_country("find_by_alpha3", "DEU")  # Returns: Country('DE')

    # Subdivisions: code > name > translated name
    subdivision = subdivision_identifier("CA", "Québec")  # Returns: Subdivision(code='CA-QC', ...)
"""

__version__ = "0.0.1"

# ============================================================================
# Country Resolution API
# ============================================================================

from .countries.countryapi import (
    country_identifier,   # Primary API - keyed lookup by alpha-2 code
    find_countries_by,    # All countries matching an attribute value
    find_country_by,      # Last country matching an attribute value
    find_country,         # Run a "find_[all_]by_<attribute>" request
    country_finder,       # Shared CountryFinder over the packaged dataset
    list_countries,       # List/filter countries as a DataFrame
)
from .countries.countryidentity import (
    Country,
    CountryFinder,
    InvalidAttributeError,
)

# ============================================================================
# Subdivision Resolution API
# ============================================================================

from .subdivisions.subdivisionapi import (
    subdivision_identifier,               # Primary API - code > name > translation
    find_subdivision_by_exact_name,       # Canonical name only
    find_subdivision_by_unofficial_names, # Unofficial names only
    subdivision_for_string,               # Is this a code or translated name?
    subdivisions_of_types,                # Filter by subdivision type
    subdivision_types,                    # Distinct subdivision types
    humanized_subdivision_types,          # Display labels for the types
    subdivision_names_with_codes,         # (name, code) pairs for a locale
    subdivision_names,                    # Names for a locale
    list_subdivisions,                    # List subdivisions as a DataFrame
)
from .subdivisions.subdivisionidentity import Subdivision

# ============================================================================
# Data
# ============================================================================

from .utils.dataset import (
    CountryDataset,   # Read-only country/subdivision store
    load_dataset,     # Load packaged dataset (cached)
)

__all__ = [
    # Version
    "__version__",

    # ========================================================================
    # PRIMARY APIS - Start here!
    # ========================================================================
    "country_identifier",      # Alpha-2 code -> Country
    "find_countries_by",       # Attribute value -> [Country]
    "subdivision_identifier",  # Country + query -> Subdivision

    # ========================================================================
    # Country Resolution
    # ========================================================================
    "find_country_by",
    "find_country",
    "country_finder",
    "list_countries",
    "Country",
    "CountryFinder",
    "InvalidAttributeError",

    # ========================================================================
    # Subdivision Resolution
    # ========================================================================
    "find_subdivision_by_exact_name",
    "find_subdivision_by_unofficial_names",
    "subdivision_for_string",
    "subdivisions_of_types",
    "subdivision_types",
    "humanized_subdivision_types",
    "subdivision_names_with_codes",
    "subdivision_names",
    "list_subdivisions",
    "Subdivision",

    # ========================================================================
    # Data
    # ========================================================================
    "CountryDataset",
    "load_dataset",
]

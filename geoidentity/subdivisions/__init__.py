"""Subdivision resolution (states, provinces, regions)."""

from geoidentity.subdivisions.subdivisionidentity import (
    Subdivision,
    SubdivisionMethods,
    create_subdivisions,
)
from geoidentity.subdivisions.subdivisionapi import (
    load_subdivisions,
    subdivision_identifier,
    find_subdivision_by_exact_name,
    find_subdivision_by_unofficial_names,
    subdivision_for_string,
    subdivisions_of_types,
    subdivision_types,
    humanized_subdivision_types,
    subdivision_names_with_codes,
    subdivision_names,
    list_subdivisions,
)

__all__ = [
    "Subdivision",
    "SubdivisionMethods",
    "create_subdivisions",
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

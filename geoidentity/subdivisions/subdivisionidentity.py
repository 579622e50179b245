"""Subdivision Entity Resolution
-----------------------------

Exact, tiered matching of subdivision identifiers within one country.
No fuzzy scoring: a query either equals a code, a name or a translation,
or it does not match.

Precedence for find_subdivision_by_name:
  1. Subdivision code (e.g. "US-CA"), stops the scan
  2. Canonical name (first in stored order)
  3. Translated name in any locale (first in stored order)

API:
  create_subdivisions(data) -> dict[code, Subdivision]
  find_subdivision_by_name(subdivisions, query) -> Subdivision | None
  find_subdivision_by_exact_name(subdivisions, query) -> Subdivision | None
  find_subdivision_by_unofficial_names(subdivisions, query) -> Subdivision | None
  subdivision_for_string(subdivisions, query) -> bool
  subdivisions_of_types(subdivisions, types) -> dict[code, Subdivision]
  subdivision_types(subdivisions) -> list[str]
  humanized_subdivision_types(subdivisions) -> list[str]
  subdivision_names_with_codes(subdivisions, locale) -> list[(name, code)]
  subdivision_names(subdivisions, locale) -> list[str]

SubdivisionMethods exposes the same operations on any object with a
`subdivisions` mapping (Country).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple
import warnings

from geoidentity.config import DEFAULT_LOCALE
from geoidentity.utils.normalize import humanize_label


_EMPTY: Mapping[str, Any] = MappingProxyType({})


def _as_names(value: Any) -> Tuple[str, ...]:
    """Coerce an unofficial_names value (None, str or sequence) to a tuple."""
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(v) for v in value)


@dataclass(frozen=True)
class Subdivision:
    """One administrative division of a country."""

    code: str
    name: Optional[str]
    type: Optional[str] = None
    translations: Mapping[str, str] = field(default_factory=lambda: _EMPTY)
    unofficial_names: Tuple[str, ...] = ()
    data: Mapping[str, Any] = field(default_factory=lambda: _EMPTY, repr=False, compare=False)

    @classmethod
    def from_data(cls, code: str, data: Mapping[str, Any]) -> "Subdivision":
        data = data or {}
        return cls(
            code=code,
            name=data.get("name"),
            type=data.get("type"),
            translations=MappingProxyType(dict(data.get("translations") or {})),
            unofficial_names=_as_names(data.get("unofficial_names")),
            data=MappingProxyType(dict(data)),
        )

    def translation(self, locale: str = DEFAULT_LOCALE) -> Optional[str]:
        return self.translations.get(locale)

    def get(self, key: str, default: Any = None) -> Any:
        """Raw attribute from the dataset record (e.g. 'geo', 'comments')."""
        return self.data.get(key, default)


def create_subdivisions(data: Optional[Mapping[str, Mapping[str, Any]]]) -> Dict[str, Subdivision]:
    """Build Subdivision records from a code -> attributes mapping, keeping order.

    Examples:
        >>> subs = create_subdivisions({"US-CA": {"name": "California", "type": "state"}})
        >>> subs["US-CA"].name
        'California'
    """
    if not data:
        return {}
    return {code: Subdivision.from_data(code, attrs) for code, attrs in data.items()}


# ---- Resolution ----

def find_subdivision_by_name(
    subdivisions: Mapping[str, Subdivision],
    query: Optional[str],
) -> Optional[Subdivision]:
    """
    Resolve a subdivision code, name or translated name.

    A code match wins outright and ends the scan. Otherwise the first
    subdivision (in stored order) whose canonical name equals the query
    wins, then the first whose translations contain it. Each subdivision
    lands in at most one tier. Unofficial names are never consulted.

    Args:
        subdivisions: Ordered code -> Subdivision mapping of one country
        query: Code, name or translated name

    Returns:
        Best Subdivision, or None if nothing matches

    Examples:
        >>> find_subdivision_by_name(subs, "US-CA").name
        'California'
        >>> find_subdivision_by_name(subs, "Californie").code
        'US-CA'
    """
    if not query:
        return None

    key_match = None
    name_match = None
    translation_match = None

    for code, subdivision in subdivisions.items():
        if query == code:
            key_match = subdivision
            break
        elif subdivision.name == query:
            if name_match is None:
                name_match = subdivision
        elif query in subdivision.translations.values():
            if translation_match is None:
                translation_match = subdivision

    return key_match or name_match or translation_match


def find_subdivision_by_exact_name(
    subdivisions: Mapping[str, Subdivision],
    query: Optional[str],
) -> Optional[Subdivision]:
    """First subdivision whose canonical name equals the query."""
    if not query:
        return None
    return next((s for s in subdivisions.values() if s.name == query), None)


def find_subdivision_by_unofficial_names(
    subdivisions: Mapping[str, Subdivision],
    query: Optional[str],
) -> Optional[Subdivision]:
    """First subdivision listing the query among its unofficial names."""
    for subdivision in subdivisions.values():
        if query in subdivision.unofficial_names:
            return subdivision
    return None


def subdivision_for_string(subdivisions: Mapping[str, Subdivision], query: Optional[str]) -> bool:
    """True if the query is a subdivision code or a translated subdivision name.

    Canonical and unofficial names are not checked, so this is narrower
    than find_subdivision_by_name.
    """
    return any(
        query == code or query in subdivision.translations.values()
        for code, subdivision in subdivisions.items()
    )


# ---- Listings ----

def subdivisions_of_types(
    subdivisions: Mapping[str, Subdivision],
    types: Iterable[str],
) -> Dict[str, Subdivision]:
    """Subdivisions whose type is one of `types`, in stored order."""
    if isinstance(types, str):
        types = [types]
    wanted = set(types)
    return {code: s for code, s in subdivisions.items() if s.type in wanted}


def subdivision_types(subdivisions: Mapping[str, Subdivision]) -> List[str]:
    """Distinct subdivision types in order of first appearance."""
    return list(dict.fromkeys(s.type for s in subdivisions.values()))


def humanized_subdivision_types(subdivisions: Mapping[str, Subdivision]) -> List[str]:
    """Distinct display labels for the subdivision types.

    Examples:
        >>> humanized_subdivision_types(spain)
        ['Autonomous community', 'Province']
    """
    return list(dict.fromkeys(humanize_label(t) for t in subdivision_types(subdivisions)))


def subdivision_names_with_codes(
    subdivisions: Mapping[str, Subdivision],
    locale: str = DEFAULT_LOCALE,
) -> List[Tuple[str, str]]:
    """(name, code) pairs, using the locale's translation when there is one."""
    return [(s.translations.get(locale) or s.name, code) for code, s in subdivisions.items()]


def subdivision_names(
    subdivisions: Mapping[str, Subdivision],
    locale: str = DEFAULT_LOCALE,
) -> List[str]:
    """Subdivision names in the given locale, falling back to the canonical name."""
    return [s.translations.get(locale) or s.name for s in subdivisions.values()]


class SubdivisionMethods:
    """Subdivision queries for a country.

    Subclasses provide `_load_subdivisions()` returning the raw
    code -> attributes mapping; records are built on first access and
    cached on the instance.
    """

    _subdivisions: Optional[Dict[str, Subdivision]] = None

    def _load_subdivisions(self) -> Optional[Mapping[str, Mapping[str, Any]]]:
        raise NotImplementedError

    @property
    def subdivisions(self) -> Dict[str, Subdivision]:
        if self._subdivisions is None:
            self._subdivisions = create_subdivisions(self._load_subdivisions())
        return self._subdivisions

    @property
    def states(self) -> Dict[str, Subdivision]:
        """Deprecated alias for subdivisions."""
        warnings.warn(
            "states is deprecated and will be removed in v1.0.0. "
            "Use subdivisions instead.",
            DeprecationWarning,
            stacklevel=2
        )
        return self.subdivisions

    def has_subdivisions(self) -> bool:
        return bool(self.subdivisions)

    def find_subdivision_by_name(self, query: Optional[str]) -> Optional[Subdivision]:
        return find_subdivision_by_name(self.subdivisions, query)

    def find_subdivision_by_exact_name(self, query: Optional[str]) -> Optional[Subdivision]:
        return find_subdivision_by_exact_name(self.subdivisions, query)

    def find_subdivision_by_unofficial_names(self, query: Optional[str]) -> Optional[Subdivision]:
        return find_subdivision_by_unofficial_names(self.subdivisions, query)

    def subdivision_for_string(self, query: Optional[str]) -> bool:
        return subdivision_for_string(self.subdivisions, query)

    def subdivisions_of_types(self, types: Iterable[str]) -> Dict[str, Subdivision]:
        return subdivisions_of_types(self.subdivisions, types)

    def subdivision_types(self) -> List[str]:
        return subdivision_types(self.subdivisions)

    def humanized_subdivision_types(self) -> List[str]:
        return humanized_subdivision_types(self.subdivisions)

    def subdivision_names_with_codes(self, locale: str = DEFAULT_LOCALE) -> List[Tuple[str, str]]:
        return subdivision_names_with_codes(self.subdivisions, locale)

    def subdivision_names(self, locale: str = DEFAULT_LOCALE) -> List[str]:
        return subdivision_names(self.subdivisions, locale)


__all__ = [
    "Subdivision",
    "SubdivisionMethods",
    "create_subdivisions",
    "find_subdivision_by_name",
    "find_subdivision_by_exact_name",
    "find_subdivision_by_unofficial_names",
    "subdivision_for_string",
    "subdivisions_of_types",
    "subdivision_types",
    "humanized_subdivision_types",
    "subdivision_names_with_codes",
    "subdivision_names",
]

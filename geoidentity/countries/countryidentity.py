"""
Country Attribute Queries
-------------------------

Exact attribute matching over the country dataset:
  1) Resolve the query attribute ("name" and "any_name" expand to several
     name attributes) and reject anything outside the searchable set
  2) Normalize the query (filter characters, accent folding)
  3) Scan every country in dataset order, folding each stored value
     through a per-finder memo, and keep countries where any value matches

Finder requests such as "find_all_countries_by_alpha3" are decoded by
parse_finder_request() and routed through CountryFinder.dispatch().

API:
  Country(code_or_data, dataset=None)
  CountryFinder(dataset).find_all_by(attribute, value) -> list[Country]
  CountryFinder(dataset).find_by(attribute, value) -> Country | None
  CountryFinder(dataset).search(code) -> Country | None
  CountryFinder(dataset).dispatch(request, value) -> list[Country] | Country | None
  parse_finder_request(request) -> FinderRequest | None

Examples:
  >>> finder = CountryFinder(load_dataset())
  >>> [c.alpha2 for c in finder.find_all_by("alpha3", "USA")]
  ['US']
  >>> finder.dispatch("find_country_by_iso_short_name", "Cote d'Ivoire").alpha2
  'CI'
"""

from __future__ import annotations
from functools import lru_cache
from types import MappingProxyType
from typing import Any, List, Mapping, NamedTuple, Optional, Tuple, Union
import re
import warnings

from geoidentity.config import DEFAULT_LOCALE, NORMALIZATION_CACHE_SIZE, SEARCH_TERM_FILTER
from geoidentity.countries.countrynormalize import (
    fold_value,
    parse_query_value,
    value_matches,
)
from geoidentity.countries.countryvalues import (
    COUNTRY_ATTRIBUTES,
    DEPRECATED_ATTRIBUTES,
    AttributeValue,
    LocaleMap,
    StringList,
    attribute_value,
    expand_attribute,
    is_searchable,
)
from geoidentity.subdivisions.subdivisionidentity import SubdivisionMethods
from geoidentity.utils.dataset import CountryDataset


FIND_BY_REGEX = re.compile(r"^find_(all_)?(country_|countries_)?by_(.+)")


class InvalidAttributeError(ValueError):
    """Raised when a query names an attribute outside the searchable set."""

    def __init__(self, attribute: str):
        self.attribute = attribute
        super().__init__(f"Invalid attribute name '{attribute}'")


def _warn_deprecated_finder(attribute: str) -> None:
    warnings.warn(
        f"Finding countries by '{attribute}' is deprecated and will be removed in v1.0.0. "
        "Use 'any_name', 'iso_short_name' or 'unofficial_names' instead.",
        DeprecationWarning,
        stacklevel=4
    )


# ---- Country record ----

class Country(SubdivisionMethods):
    """A country record.

    Built from an alpha-2 code looked up in the dataset, or from an inline
    attribute mapping. An inline mapping may carry its own 'subdivisions'
    mapping, which is then used instead of the dataset's.

    Attributes in COUNTRY_ATTRIBUTES are readable as properties; a missing
    attribute reads as None.

    Examples:
        >>> us = Country("us", dataset=load_dataset())
        >>> us.alpha3
        'USA'
        >>> us.find_subdivision_by_name("Californie").code
        'US-CA'
    """

    def __init__(
        self,
        country_data: Union[str, Mapping[str, Any], None],
        dataset: Optional[CountryDataset] = None,
    ):
        self._dataset = dataset
        self._subdivisions = None

        if isinstance(country_data, Mapping):
            data = country_data
        elif dataset is not None and country_data is not None:
            data = dataset.get_country_attributes(str(country_data).upper()) or {}
        else:
            data = {}
        self.data: Mapping[str, Any] = MappingProxyType(dict(data))

    def __getattr__(self, attribute: str) -> Any:
        # Only reached for names not found normally
        if attribute in COUNTRY_ATTRIBUTES:
            return self.attribute(attribute)
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{attribute}'")

    def attribute(self, attribute: str) -> Any:
        """Raw value of an attribute (None if absent)."""
        if attribute == "translated_names":
            return self.translated_names
        return self.data.get(attribute)

    def attribute_value(self, attribute: str) -> AttributeValue:
        """Tagged value of an attribute for matching."""
        if attribute == "translated_names":
            return StringList(self.translated_names)
        return attribute_value(self.data.get(attribute))

    @property
    def translations(self) -> Mapping[str, str]:
        return self.data.get("translations") or MappingProxyType({})

    @property
    def translated_names(self) -> Tuple[str, ...]:
        return LocaleMap(self.translations).candidates()

    def translation(self, locale: str = DEFAULT_LOCALE) -> Optional[str]:
        return self.translations.get(locale)

    def is_valid(self) -> bool:
        """True when backed by a real record (non-empty with an alpha2 code)."""
        return bool(self.data) and bool(self.data.get("alpha2"))

    def _load_subdivisions(self) -> Optional[Mapping[str, Mapping[str, Any]]]:
        if "subdivisions" in self.data:
            return self.data["subdivisions"]
        if self._dataset is None:
            return None
        return self._dataset.get_subdivisions(self.data.get("alpha2"))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Country):
            return NotImplemented
        return self.data.get("alpha2") == other.data.get("alpha2")

    def __hash__(self) -> int:
        return hash(self.data.get("alpha2"))

    def __repr__(self) -> str:
        return f"Country({self.data.get('alpha2')!r})"


# ---- Finder request decoding ----

class FinderRequest(NamedTuple):
    """A decoded "find_[all_][country_|countries_]by_<attribute>" request."""

    attribute: str
    return_all: bool
    as_country: bool


def parse_finder_request(request: str) -> Optional[FinderRequest]:
    """
    Decode a finder request name.

    The attribute is lowercased; the legacy "names" attribute is rewritten
    to "unofficial_names" (with a DeprecationWarning). The attribute is not
    validated here.

    Args:
        request: e.g. "find_by_alpha3", "find_all_countries_by_region"

    Returns:
        FinderRequest, or None if the string is not a finder request

    Examples:
        >>> parse_finder_request("find_all_countries_by_region")
        FinderRequest(attribute='region', return_all=True, as_country=True)
        >>> parse_finder_request("find_by_names")
        FinderRequest(attribute='unofficial_names', return_all=False, as_country=False)
        >>> parse_finder_request("lookup_alpha3") is None
        True
    """
    matches = FIND_BY_REGEX.match(request or "")
    if not matches:
        return None

    attribute = matches.group(3).lower()
    if attribute == "names":
        _warn_deprecated_finder(attribute)
        attribute = "unofficial_names"

    return FinderRequest(
        attribute=attribute,
        return_all=matches.group(1) is not None,
        as_country=matches.group(2) is not None,
    )


# ---- Query engine ----

class CountryFinder:
    """Attribute queries over one dataset.

    Each finder owns the accent-folding memo for the stored values it has
    compared, so the memo lives exactly as long as the dataset it caches.
    """

    def __init__(
        self,
        dataset: CountryDataset,
        *,
        search_term_filter: str = SEARCH_TERM_FILTER,
        cache_size: Optional[int] = NORMALIZATION_CACHE_SIZE,
    ):
        self.dataset = dataset
        self.search_term_filter = search_term_filter
        self._fold = lru_cache(maxsize=cache_size)(fold_value)

    def country(self, data: Union[str, Mapping[str, Any]]) -> Country:
        return Country(data, dataset=self.dataset)

    def countries(self) -> List[Country]:
        """All countries in dataset order."""
        return [self.country(data) for _, data in self.dataset.items()]

    # -- keyed lookup --

    def search(self, query: Any) -> Optional[Country]:
        """Look up a country by alpha-2 code (case-insensitive).

        Examples:
            >>> finder.search("us").iso_short_name
            'United States of America'
            >>> finder.search("ZZ") is None
            True
        """
        if query is None:
            return None
        country = Country(str(query).upper(), dataset=self.dataset)
        return country if country.is_valid() else None

    def __getitem__(self, query: Any) -> Optional[Country]:
        return self.search(query)

    # -- attribute scan --

    def parse_attributes(self, attribute: str, value: Any) -> Tuple[Tuple[str, ...], Any]:
        """Validate and expand the query attribute, and normalize the value.

        Raises:
            InvalidAttributeError: If the attribute is not searchable
        """
        if not is_searchable(attribute):
            raise InvalidAttributeError(attribute)
        if attribute in DEPRECATED_ATTRIBUTES:
            _warn_deprecated_finder(attribute)

        return expand_attribute(attribute), parse_query_value(value, self.search_term_filter)

    def find_all_by(self, attribute: str, value: Any) -> List[Country]:
        """
        All countries whose attribute matches the value, in dataset order.

        Args:
            attribute: Searchable attribute name (case-insensitive), or one
                       of the synthetic "name" / "any_name" attributes
            value: Query string (exact after folding) or compiled regex
                   (searched after folding)

        Returns:
            Matching countries; empty list if none

        Raises:
            InvalidAttributeError: If the attribute is not searchable

        Examples:
            >>> [c.alpha2 for c in finder.find_all_by("name", "Corée du Sud")]
            ['KR']
            >>> [c.alpha2 for c in finder.find_all_by("region", re.compile("^eur"))]
            ['CH', 'DE', 'ES', 'FR', 'GB']
        """
        attributes, lookup = self.parse_attributes(str(attribute).lower(), value)

        matches = []
        for _, data in self.dataset.items():
            country = Country(data, dataset=self.dataset)
            if any(
                value_matches(lookup, self._fold(candidate))
                for attr in attributes
                for candidate in country.attribute_value(attr).candidates()
            ):
                matches.append(country)
        return matches

    def find_by(self, attribute: str, value: Any) -> Optional[Country]:
        """Singular form of find_all_by: the last matching country, or None."""
        matches = self.find_all_by(attribute, value)
        return matches[-1] if matches else None

    # -- finder requests --

    def supports(self, request: str) -> bool:
        """True if the request decodes to a searchable attribute."""
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", DeprecationWarning)
            decoded = parse_finder_request(request)
        return decoded is not None and is_searchable(decoded.attribute)

    def dispatch(self, request: str, value: Any) -> Union[List[Country], Country, None]:
        """
        Run a finder request such as "find_by_alpha3" or "find_all_countries_by_region".

        "all" requests return every match; singular requests return the
        last match (or None).

        Raises:
            AttributeError: If the request is not a finder request
            InvalidAttributeError: If it names an unsearchable attribute

        Examples:
            >>> finder.dispatch("find_by_alpha2", "FR").alpha3
            'FRA'
            >>> [c.alpha2 for c in finder.dispatch("find_all_by_currency_code", "EUR")]
            ['DE', 'ES', 'FR']
        """
        decoded = parse_finder_request(request)
        if decoded is None:
            raise AttributeError(f"'{type(self).__name__}' has no finder '{request}'")

        countries = self.find_all_by(decoded.attribute, value)
        if decoded.return_all:
            return countries
        return countries[-1] if countries else None

    def cache_info(self):
        """Statistics of the accent-folding memo."""
        return self._fold.cache_info()


__all__ = [
    "Country",
    "CountryFinder",
    "FinderRequest",
    "InvalidAttributeError",
    "FIND_BY_REGEX",
    "parse_finder_request",
]

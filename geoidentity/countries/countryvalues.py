"""Country attribute values and the searchable attribute set.

A country attribute is one of three shapes, tagged once when read:

  Scalar      "US", "840", "Americas"
  StringList  ("USA", "United States", "Vereinigte Staaten")
  LocaleMap   {"en": "United States", "fr": "États-Unis"}

candidates() flattens any of them to the individual values a query is
compared against.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple, Union


# Attributes stored per country and exposed on Country
COUNTRY_ATTRIBUTES: Tuple[str, ...] = (
    "alpha2",
    "alpha3",
    "continent",
    "country_code",
    "currency_code",
    "distance_unit",
    "gec",
    "international_prefix",
    "ioc",
    "iso_long_name",
    "iso_short_name",
    "languages_official",
    "languages_spoken",
    "national_prefix",
    "nationality",
    "number",
    "postal_code_format",
    "region",
    "start_of_week",
    "subregion",
    "translations",
    "translated_names",
    "un_locode",
    "unofficial_names",
    "world_region",
)

# Synthetic query attributes and the real attributes they scan
ATTRIBUTE_EXPANSIONS: Dict[str, Tuple[str, ...]] = {
    "name": ("iso_short_name", "unofficial_names", "translated_names"),
    "any_name": ("iso_long_name", "iso_short_name", "unofficial_names", "translated_names"),
    "names": ("unofficial_names",),
}

# Query attributes kept for older callers; using them warns
DEPRECATED_ATTRIBUTES = frozenset({"name", "names"})

SEARCHABLE_ATTRIBUTES = frozenset(COUNTRY_ATTRIBUTES) | frozenset(ATTRIBUTE_EXPANSIONS)


@dataclass(frozen=True)
class Scalar:
    value: Any

    def candidates(self) -> Tuple[Any, ...]:
        return (self.value,)


@dataclass(frozen=True)
class StringList:
    values: Tuple[Any, ...]

    def candidates(self) -> Tuple[Any, ...]:
        return self.values


@dataclass(frozen=True)
class LocaleMap:
    translations: Mapping[str, str]

    def candidates(self) -> Tuple[str, ...]:
        return tuple(self.translations.values())


AttributeValue = Union[Scalar, StringList, LocaleMap]

MISSING = StringList(())


def attribute_value(raw: Any) -> AttributeValue:
    """Tag a raw dataset value with its shape.

    Examples:
        >>> attribute_value("US").candidates()
        ('US',)
        >>> attribute_value(["USA", "America"]).candidates()
        ('USA', 'America')
        >>> attribute_value({"fr": "États-Unis"}).candidates()
        ('États-Unis',)
        >>> attribute_value(None).candidates()
        ()
    """
    if raw is None:
        return MISSING
    if isinstance(raw, Mapping):
        return LocaleMap(raw)
    if isinstance(raw, (list, tuple)):
        return StringList(tuple(raw))
    return Scalar(raw)


def is_searchable(attribute: str) -> bool:
    return attribute in SEARCHABLE_ATTRIBUTES


def expand_attribute(attribute: str) -> Tuple[str, ...]:
    """Real attributes scanned for a query attribute.

    Examples:
        >>> expand_attribute("any_name")
        ('iso_long_name', 'iso_short_name', 'unofficial_names', 'translated_names')
        >>> expand_attribute("alpha3")
        ('alpha3',)
    """
    return ATTRIBUTE_EXPANSIONS.get(attribute, (attribute,))


__all__ = [
    "COUNTRY_ATTRIBUTES",
    "ATTRIBUTE_EXPANSIONS",
    "DEPRECATED_ATTRIBUTES",
    "SEARCHABLE_ATTRIBUTES",
    "Scalar",
    "StringList",
    "LocaleMap",
    "AttributeValue",
    "MISSING",
    "attribute_value",
    "is_searchable",
    "expand_attribute",
]

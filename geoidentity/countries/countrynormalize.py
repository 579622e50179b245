"""
Country Query Normalization
---------------------------

Queries and stored values are compared after accent folding:

  >>> fold_value("Côte d'Ivoire")
  "cote d'ivoire"

Plain-string queries additionally lose the search term filter characters
(parentheses, square brackets, commas):

  >>> parse_query_value("Korea (Republic of)")
  'korea republic of'

Compiled patterns keep their syntax and case; diacritics are dropped from
their source and they are recompiled case-insensitively, then matched
with search():

  >>> parse_query_value(re.compile("^Cô"))
  re.compile('^Co', re.IGNORECASE)
"""

import re
from typing import Any, Pattern, Union

from geoidentity.config import SEARCH_TERM_FILTER
from geoidentity.utils.normalize import remove_diacritics, strip_accents, strip_characters


QueryValue = Union[str, Pattern]


def fold_value(value: Any) -> str:
    """Accent-fold any stored or queried value (non-strings via str())."""
    if value is None:
        return ""
    return strip_accents(str(value))


def parse_query_value(value: Any, search_term_filter: str = SEARCH_TERM_FILTER) -> QueryValue:
    """Normalize a query value for comparison against folded candidates.

    Args:
        value: Plain string, compiled regex, or any other value
        search_term_filter: Characters dropped from plain-string queries

    Returns:
        Folded string, or a case-insensitive pattern without diacritics

    Raises:
        TypeError: If a compiled pattern was built from bytes
    """
    if isinstance(value, re.Pattern):
        if not isinstance(value.pattern, str):
            raise TypeError(f"Query patterns must be compiled from str, not {type(value.pattern).__name__}")
        return re.compile(remove_diacritics(value.pattern), value.flags | re.IGNORECASE)
    if isinstance(value, str):
        value = strip_characters(value, search_term_filter)
    return fold_value(value)


def value_matches(lookup: QueryValue, candidate: str) -> bool:
    """Equality for folded strings, search() for patterns."""
    if isinstance(lookup, re.Pattern):
        return lookup.search(candidate) is not None
    return lookup == candidate


__all__ = [
    "QueryValue",
    "fold_value",
    "parse_query_value",
    "value_matches",
]

"""Read-only country and subdivision dataset.

The dataset is two mappings keyed by ISO 3166-1 alpha-2 code:

  countries.yaml     alpha2 -> {attribute: value}
  subdivisions.yaml  alpha2 -> {subdivision code: {name, type, translations, ...}}

Both are loaded once per process by load_dataset() and frozen, so every
query downstream is a pure read.
"""

from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional, Tuple, Union

from geoidentity.utils.dataloader import (
    find_data_file,
    package_data_dir,
    load_yaml_file,
    format_not_found_error,
)


def _freeze(value: Any) -> Any:
    """Recursively turn dicts into read-only mappings and lists into tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


class CountryDataset:
    """Immutable store of country attributes and subdivisions.

    Iteration order is the order the countries were supplied in, which is
    the order every scan reports its matches in.

    Examples:
        >>> ds = CountryDataset({"US": {"alpha2": "US", "iso_short_name": "United States of America"}})
        >>> ds.get_country_attributes("us")["alpha2"]
        'US'
        >>> ds.get_subdivisions("US") is None
        True
    """

    def __init__(
        self,
        countries: Mapping[str, Mapping[str, Any]],
        subdivisions: Optional[Mapping[str, Mapping[str, Any]]] = None,
    ):
        self._countries = MappingProxyType(
            {str(code).upper(): _freeze(attrs or {}) for code, attrs in countries.items()}
        )
        self._subdivisions = MappingProxyType(
            {str(code).upper(): _freeze(subs or {}) for code, subs in (subdivisions or {}).items()}
        )

    def get_country_attributes(self, code: str) -> Optional[Mapping[str, Any]]:
        """Attribute mapping for an alpha-2 code, or None if unknown."""
        if code is None:
            return None
        return self._countries.get(str(code).upper())

    def get_subdivisions(self, code: str) -> Optional[Mapping[str, Mapping[str, Any]]]:
        """Subdivision code -> attribute mapping for a country, or None if absent."""
        if code is None:
            return None
        return self._subdivisions.get(str(code).upper())

    def codes(self) -> Tuple[str, ...]:
        return tuple(self._countries)

    def items(self) -> Iterator[Tuple[str, Mapping[str, Any]]]:
        return iter(self._countries.items())

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.upper() in self._countries

    def __len__(self) -> int:
        return len(self._countries)

    def __repr__(self) -> str:
        return f"CountryDataset({len(self)} countries, {len(self._subdivisions)} with subdivisions)"


def _locate(subdirectory: str, filename: str, build_hint: str) -> Path:
    filenames = [filename, filename.replace(".yaml", ".yml")]
    found_path = find_data_file(__file__, subdirectory, filenames)
    if found_path is None:
        raise FileNotFoundError(format_not_found_error(
            subdirectory,
            package_data_dir(__file__, subdirectory),
            filenames,
            build_hint,
        ))
    return found_path


@lru_cache(maxsize=1)
def load_dataset(
    countries_path: Optional[Union[str, Path]] = None,
    subdivisions_path: Optional[Union[str, Path]] = None,
) -> CountryDataset:
    """Load countries.yaml and subdivisions.yaml into a CountryDataset.

    Uses LRU cache to load the dataset once and reuse it, so repeated
    calls are idempotent and cheap.

    Args:
        countries_path: Optional path to countries.yaml. If None, uses
                        geoidentity/data/countries/countries.yaml
        subdivisions_path: Optional path to subdivisions.yaml. If None, uses
                           geoidentity/data/subdivisions/subdivisions.yaml

    Returns:
        Frozen CountryDataset

    Raises:
        FileNotFoundError: If a data file cannot be located

    Examples:
        >>> ds = load_dataset()
        >>> ds.get_country_attributes("US")["alpha3"]
        'USA'
    """
    build_hint = "Run geoidentity/data/build_countries.py to generate it."

    if countries_path is None:
        countries_path = _locate("countries", "countries.yaml", build_hint)
    if subdivisions_path is None:
        subdivisions_path = _locate("subdivisions", "subdivisions.yaml", build_hint)

    countries = load_yaml_file(Path(countries_path))
    subdivisions = load_yaml_file(Path(subdivisions_path))
    return CountryDataset(countries, subdivisions)


__all__ = [
    "CountryDataset",
    "load_dataset",
]

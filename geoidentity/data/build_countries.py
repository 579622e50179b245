#!/usr/bin/env python3
"""
Build countries.yaml and subdivisions.yaml from pycountry (ISO 3166-1 / 3166-2).

This script:
1. Reads every country and subdivision shipped with pycountry
2. Translates names through pycountry's gettext catalogs for LOCALES
3. Merges hand-curated fields from the existing YAML files (unofficial
   names, region, currency, calling codes, ...) so rebuilds keep them
4. Validates codes and names, then writes both YAML files in code order

Output schema:
  countries.yaml     alpha2 -> {alpha2, alpha3, number, iso_short_name,
                               iso_long_name, translations, ...curated}
  subdivisions.yaml  alpha2 -> {code -> {name, type, translations, ...curated}}
"""

import gettext
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import pycountry
import yaml

from geoidentity.utils.dataloader import load_yaml_file


LOCALES = ["en", "de", "es", "fr", "it", "ja", "ko", "pt"]

# Fields owned by pycountry; everything else in an existing record is curated
GENERATED_COUNTRY_FIELDS = {"alpha2", "alpha3", "number", "iso_short_name", "iso_long_name", "translations"}
GENERATED_SUBDIVISION_FIELDS = {"name", "type", "translations"}


def load_catalogs(domain: str, locales: Iterable[str]) -> Dict[str, gettext.NullTranslations]:
    """Load pycountry gettext catalogs for a domain, skipping English and missing locales."""
    catalogs = {}
    for locale in locales:
        if locale == "en":
            continue
        try:
            catalogs[locale] = gettext.translation(domain, pycountry.LOCALES_DIR, languages=[locale])
        except FileNotFoundError:
            print(f"  No {domain} catalog for locale '{locale}', skipping")
    return catalogs


def translate(name: str, catalogs: Dict[str, gettext.NullTranslations]) -> Dict[str, str]:
    """Translations of a name for every catalog.

    English is always the name itself; pycountry ships no English catalog.
    """
    translations = {"en": name}
    for locale, catalog in catalogs.items():
        if locale != "en":
            translations[locale] = catalog.gettext(name)
    return translations


def normalize_type(subdivision_type: Optional[str]) -> Optional[str]:
    """pycountry type label to dataset type (e.g. 'Autonomous community' -> 'autonomous_community')."""
    if not subdivision_type:
        return None
    return "_".join(subdivision_type.strip().lower().split())


def country_record(country: Any, catalogs: Dict[str, gettext.NullTranslations]) -> dict:
    """Convert a pycountry country to a dataset record."""
    name = country.name
    return {
        "alpha2": country.alpha_2,
        "alpha3": country.alpha_3,
        "number": country.numeric,
        "iso_short_name": name,
        "iso_long_name": getattr(country, "official_name", None) or name,
        "translations": translate(name, catalogs),
    }


def subdivision_records(alpha2: str, catalogs: Dict[str, gettext.NullTranslations]) -> Dict[str, dict]:
    """Subdivision records of a country, keyed by ISO 3166-2 code in code order."""
    subdivisions = pycountry.subdivisions.get(country_code=alpha2) or []
    records = {}
    for sub in sorted(subdivisions, key=lambda s: s.code):
        records[sub.code] = {
            "name": sub.name,
            "type": normalize_type(sub.type),
            "translations": translate(sub.name, catalogs),
        }
    return records


def merge_curated(generated: dict, existing: Optional[dict], generated_fields: set) -> dict:
    """Keep curated fields of an existing record alongside freshly generated ones."""
    merged = dict(generated)
    for key, value in (existing or {}).items():
        if key not in generated_fields:
            merged[key] = value
    return merged


def validate_dataset(countries: Dict[str, dict], subdivisions: Dict[str, Dict[str, dict]]) -> List[str]:
    """Validate generated data and return list of issues."""
    issues = []

    for code, record in countries.items():
        if len(code) != 2 or record.get("alpha2") != code:
            issues.append(f"Country key/alpha2 mismatch: {code} -> {record.get('alpha2')}")
        if not record.get("iso_short_name"):
            issues.append(f"Missing iso_short_name: {code}")

    for code, subs in subdivisions.items():
        if code not in countries:
            issues.append(f"Subdivisions for unknown country: {code}")
        for sub_code, sub in subs.items():
            if not sub_code.startswith(f"{code}-"):
                issues.append(f"Subdivision code outside its country: {sub_code} in {code}")
            if not sub.get("name"):
                issues.append(f"Missing subdivision name: {sub_code}")

    return issues


def build_dataset(
    existing_countries: Optional[dict] = None,
    existing_subdivisions: Optional[dict] = None,
    locales: Iterable[str] = LOCALES,
) -> tuple:
    """Build (countries, subdivisions) mappings from pycountry."""
    existing_countries = existing_countries or {}
    existing_subdivisions = existing_subdivisions or {}
    locales = list(locales)

    country_catalogs = load_catalogs("iso3166-1", locales)
    subdivision_catalogs = load_catalogs("iso3166-2", locales)

    countries = {}
    subdivisions = {}
    for country in sorted(pycountry.countries, key=lambda c: c.alpha_2):
        code = country.alpha_2
        countries[code] = merge_curated(
            country_record(country, country_catalogs),
            existing_countries.get(code),
            GENERATED_COUNTRY_FIELDS,
        )

        subs = subdivision_records(code, subdivision_catalogs)
        if subs:
            curated = existing_subdivisions.get(code) or {}
            subdivisions[code] = {
                sub_code: merge_curated(sub, curated.get(sub_code), GENERATED_SUBDIVISION_FIELDS)
                for sub_code, sub in subs.items()
            }

    return countries, subdivisions


def write_yaml(data: dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, allow_unicode=True, sort_keys=False)


def main():
    """Main build process."""
    data_dir = Path(__file__).parent
    countries_path = data_dir / "countries" / "countries.yaml"
    subdivisions_path = data_dir / "subdivisions" / "subdivisions.yaml"

    existing_countries = load_yaml_file(countries_path) if countries_path.exists() else {}
    existing_subdivisions = load_yaml_file(subdivisions_path) if subdivisions_path.exists() else {}

    print(f"Building dataset from pycountry {getattr(pycountry, '__version__', '')}")
    countries, subdivisions = build_dataset(existing_countries, existing_subdivisions)

    issues = validate_dataset(countries, subdivisions)
    if issues:
        print("\nValidation issues:")
        for issue in issues:
            print(f"  - {issue}")
        return 1

    write_yaml(countries, countries_path)
    write_yaml(subdivisions, subdivisions_path)

    total_subdivisions = sum(len(s) for s in subdivisions.values())
    print(f"Wrote {len(countries)} countries to {countries_path}")
    print(f"Wrote {total_subdivisions} subdivisions for {len(subdivisions)} countries to {subdivisions_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Shared test fixtures and utilities for geoidentity tests."""

import pytest

from geoidentity.utils.dataset import CountryDataset
from geoidentity.countries.countryidentity import CountryFinder
from geoidentity.subdivisions.subdivisionidentity import create_subdivisions


SAMPLE_COUNTRIES = {
    "AA": {
        "alpha2": "AA",
        "alpha3": "AAA",
        "number": "901",
        "country_code": "99",
        "region": "Europe",
        "currency_code": "EUR",
        "iso_short_name": "Alphaland",
        "iso_long_name": "The Republic of Alphaland",
        "unofficial_names": ["Alpha", "Alfalandia"],
        "translations": {"en": "Alphaland", "fr": "Alphalande", "es": "Alfalandia"},
    },
    "BB": {
        "alpha2": "BB",
        "alpha3": "BBB",
        "number": "902",
        "country_code": "99",
        "region": "Europe",
        "currency_code": "EUR",
        "iso_short_name": "Bêtaland",
        "iso_long_name": "The Kingdom of Betaland",
        "unofficial_names": ["Beta"],
        "translations": {"en": "Betaland", "fr": "Bêtalande"},
    },
    "CC": {
        "alpha2": "CC",
        "alpha3": "CCC",
        "number": "903",
        "country_code": "98",
        "region": "Asia",
        "currency_code": "CCD",
        "iso_short_name": "Gamma (Republic of)",
        "iso_long_name": "The Gamma Union",
        "unofficial_names": ["Gamma, Republic of"],
        "translations": {"en": "Gamma", "ko": "감마"},
    },
}

SAMPLE_SUBDIVISIONS = {
    "AA": {
        "AA-01": {
            "name": "Northshire",
            "type": "province",
            "translations": {"en": "Northshire", "fr": "Nordcomté"},
            "unofficial_names": ["The North"],
        },
        "AA-02": {
            "name": "AA-03",
            "type": "province",
            "translations": {"en": "Oddshire"},
        },
        "AA-03": {
            "name": "Southshire",
            "type": "autonomous_region",
            "translations": {"en": "Southshire", "fr": "Sudcomté"},
        },
        "AA-04": {
            "name": "Lakeshire",
            "type": "province",
            "translations": {"en": "Lakeshire", "fr": "Nordcomté"},
        },
        "AA-05": {
            "name": "Lakeshire",
            "type": "federal_district",
            "translations": {"en": "Lakeshire District", "fr": "Comté des Lacs"},
            "unofficial_names": ["The North"],
        },
        "AA-06": {
            "name": "Riverside",
            "type": "province",
            "translations": {"fr": "Lakeshire"},
        },
    },
}


@pytest.fixture
def sample_dataset():
    """Small in-memory dataset with known ordering and edge cases.

    AA and BB share region/currency/calling code so singular finders can
    be checked against the last match. AA's subdivisions exercise the
    code > name > translation precedence:
      - AA-02's name equals AA-03's code
      - AA-04 and AA-05 share a canonical name
      - AA-01 and AA-04 share a French translation
      - AA-06's translation equals AA-04's canonical name, and its own
        canonical name appears in no translation
    """
    return CountryDataset(SAMPLE_COUNTRIES, SAMPLE_SUBDIVISIONS)


@pytest.fixture
def finder(sample_dataset):
    """CountryFinder over the sample dataset."""
    return CountryFinder(sample_dataset)


@pytest.fixture
def aa_subdivisions():
    """Subdivision records of sample country AA, in stored order."""
    return create_subdivisions(SAMPLE_SUBDIVISIONS["AA"])


@pytest.fixture
def sample_countries():
    """Fixture providing codes and names from the packaged dataset.

    Returns a dict of country names (any language, any accents) and their ISO2 codes.
    """
    return {
        "United States": "US",
        "United Kingdom": "GB",
        "Deutschland": "DE",
        "Côte d'Ivoire": "CI",
        "Cote d'Ivoire": "CI",
        "South Korea": "KR",
        "México": "MX",
    }

"""Tests for the country API over the packaged dataset."""

import re

import pandas as pd
import pytest

from geoidentity import (
    Country,
    InvalidAttributeError,
    country_finder,
    country_identifier,
    find_countries_by,
    find_country,
    find_country_by,
    list_countries,
)


def codes(countries):
    return [c.alpha2 for c in countries]


class TestCountryIdentifier:
    """Keyed lookup by alpha-2 code"""

    def test_lookup(self):
        us = country_identifier("US")
        assert isinstance(us, Country)
        assert us.alpha3 == "USA"
        assert us.iso_short_name == "United States of America"

    def test_lookup_lowercase(self):
        assert country_identifier("de").alpha3 == "DEU"

    def test_unknown_code(self):
        assert country_identifier("ZZ") is None
        assert country_identifier("USA") is None
        assert country_identifier(None) is None

    def test_shared_finder(self):
        assert country_finder() is country_finder()


class TestFindCountriesBy:
    """Attribute queries"""

    def test_exact_code(self):
        assert codes(find_countries_by("alpha3", "CHE")) == ["CH"]

    def test_dataset_order(self):
        assert codes(find_countries_by("currency_code", "EUR")) == ["DE", "ES", "FR"]
        assert codes(find_countries_by("region", "Europe")) == ["CH", "DE", "ES", "FR", "GB"]

    def test_no_match(self):
        assert find_countries_by("alpha3", "ZZZ") == []

    def test_any_name(self, sample_countries):
        for name, code in sample_countries.items():
            assert codes(find_countries_by("any_name", name)) == [code], name

    def test_translated_name(self):
        with pytest.warns(DeprecationWarning):
            assert codes(find_countries_by("name", "Corée du Sud")) == ["KR"]
        with pytest.warns(DeprecationWarning):
            assert codes(find_countries_by("name", "Coree du Sud")) == ["KR"]

    def test_accented_query_against_plain_name(self):
        assert codes(find_countries_by("iso_short_name", "México")) == ["MX"]

    def test_plain_query_against_accented_name(self):
        assert codes(find_countries_by("iso_short_name", "Cote d'Ivoire")) == ["CI"]

    def test_unofficial_alias(self):
        assert codes(find_countries_by("unofficial_names", "Ivory Coast")) == ["CI"]
        assert codes(find_countries_by("unofficial_names", "usa")) == ["US"]

    def test_short_name_does_not_include_aliases(self):
        assert find_countries_by("iso_short_name", "Ivory Coast") == []

    def test_regex(self):
        assert codes(find_countries_by("region", re.compile("^eur"))) == ["CH", "DE", "ES", "FR", "GB"]
        assert codes(find_countries_by("iso_short_name", re.compile(r"^Korea \(Rep"))) == ["KR"]

    def test_list_attribute(self):
        assert codes(find_countries_by("languages_official", "de")) == ["CH", "DE"]

    def test_invalid_attribute(self):
        with pytest.raises(InvalidAttributeError):
            find_countries_by("capital", "Paris")


class TestFindCountryBy:
    """Singular lookups return the last match"""

    def test_single_match(self):
        assert find_country_by("alpha3", "DEU").alpha2 == "DE"

    def test_last_of_several(self):
        assert find_country_by("country_code", "1").alpha2 == "US"
        assert find_country_by("currency_code", "EUR").alpha2 == "FR"

    def test_no_match(self):
        assert find_country_by("alpha3", "ZZZ") is None


class TestFindCountry:
    """Finder requests by name"""

    def test_singular(self):
        assert find_country("find_by_ioc", "SUI").alpha2 == "CH"
        assert find_country("find_country_by_country_code", "1").alpha2 == "US"

    def test_all(self):
        assert codes(find_country("find_all_by_country_code", "1")) == ["CA", "US"]
        assert codes(find_country("find_all_countries_by_region", "Africa")) == ["CI", "ZA"]

    def test_names_alias(self):
        with pytest.warns(DeprecationWarning):
            assert find_country("find_by_names", "UK").alpha2 == "GB"

    def test_not_a_finder(self):
        with pytest.raises(AttributeError):
            find_country("get_country", "US")

    def test_invalid_attribute(self):
        with pytest.raises(InvalidAttributeError):
            find_country("find_by_capital", "Paris")


class TestCountryRecord:
    """Country records from the packaged dataset"""

    def test_translations(self):
        kr = country_identifier("KR")
        assert kr.translation("fr") == "Corée du Sud"
        assert "Südkorea" in kr.translated_names

    def test_subdivisions(self):
        us = country_identifier("US")
        assert us.has_subdivisions()
        assert us.find_subdivision_by_name("Californie").code == "US-CA"
        assert us.find_subdivision_by_unofficial_names("Lone Star State").code == "US-TX"

    def test_no_subdivisions(self):
        assert not country_identifier("JP").has_subdivisions()


class TestListCountries:
    """DataFrame listing"""

    def test_all(self):
        df = list_countries()
        assert isinstance(df, pd.DataFrame)
        assert len(df) == 15
        assert df["alpha2"].tolist()[:3] == ["AU", "BR", "CA"]
        assert {"alpha2", "alpha3", "iso_short_name", "region"} <= set(df.columns)

    def test_region_filter(self):
        df = list_countries(region="europe")
        assert df["alpha2"].tolist() == ["CH", "DE", "ES", "FR", "GB"]

    def test_unknown_region(self):
        assert list_countries(region="Antarctica").empty

"""Tests for shared utilities."""

import pytest
from pathlib import Path
import tempfile

from geoidentity.utils.dataloader import (
    find_data_file,
    package_data_dir,
    load_yaml_file,
    format_not_found_error,
)
from geoidentity.utils.dataset import CountryDataset, load_dataset
from geoidentity.utils.normalize import (
    humanize_label,
    remove_diacritics,
    strip_accents,
    strip_characters,
)


class TestFindDataFile:
    """Test data file finding utility"""

    def test_find_package_data(self):
        """Test finding data in package data directory"""
        # Country data is in geoidentity/data/countries/
        from geoidentity.utils import dataset
        path = find_data_file(
            module_file=dataset.__file__,
            subdirectory="countries",
            filenames=["countries.yaml", "countries.yml"],
        )
        assert path is not None
        assert path.exists()
        assert path.name == "countries.yaml"

    def test_find_from_other_module(self):
        """Test that any module one level below the package finds package data"""
        from geoidentity.subdivisions import subdivisionapi
        path = find_data_file(
            module_file=subdivisionapi.__file__,
            subdirectory="subdivisions",
            filenames=["subdivisions.yaml"],
        )
        assert path is not None
        assert path.name == "subdivisions.yaml"

    def test_package_data_dir(self):
        """Test the data directory is resolved from the package root"""
        from geoidentity.utils import dataset
        data_dir = package_data_dir(dataset.__file__, "subdivisions")
        assert data_dir.parts[-3:] == ("geoidentity", "data", "subdivisions")
        assert data_dir.is_dir()

    def test_find_nonexistent_file(self):
        """Test that None is returned when file not found"""
        from geoidentity.utils import dataset
        path = find_data_file(
            module_file=dataset.__file__,
            subdirectory="nonexistent",
            filenames=["missing.yaml"],
        )
        assert path is None


class TestLoadYamlFile:
    """Test YAML loading utility"""

    def test_load_mapping(self):
        """Test loading a YAML mapping"""
        with tempfile.NamedTemporaryFile(mode='w', suffix=".yaml", delete=False, encoding='utf-8') as f:
            f.write("FR:\n  alpha2: FR\n  iso_short_name: France\n")
            temp_path = Path(f.name)

        try:
            data = load_yaml_file(temp_path)
            assert data == {"FR": {"alpha2": "FR", "iso_short_name": "France"}}
        finally:
            temp_path.unlink()

    def test_load_empty_file(self, tmp_path):
        """Test that an empty file loads as an empty mapping"""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_yaml_file(path) == {}

    def test_non_mapping(self, tmp_path):
        """Test that a top-level list is rejected"""
        path = tmp_path / "list.yaml"
        path.write_text("- FR\n- DE\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Expected a mapping"):
            load_yaml_file(path)

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises FileNotFoundError"""
        with pytest.raises(FileNotFoundError, match="Required file not found"):
            load_yaml_file(tmp_path / "missing.yaml")


class TestFormatNotFoundError:
    """Test error message formatting utility"""

    def test_format_basic_error(self):
        """Test basic error message formatting"""
        msg = format_not_found_error(
            "countries",
            Path("/pkg/data/countries"),
            ["countries.yaml", "countries.yml"],
            "Run geoidentity/data/build_countries.py",
        )

        assert "No countries data in /pkg/data/countries" in msg
        assert "countries.yaml, countries.yml" in msg
        assert "build_countries.py" in msg
        assert "tables" not in msg

    def test_missing_packaged_file(self, monkeypatch, tmp_path):
        """Test the error raised when the packaged file is absent"""
        from geoidentity.utils import dataset
        monkeypatch.setattr(dataset, "__file__", str(tmp_path / "utils" / "dataset.py"))
        with pytest.raises(FileNotFoundError, match="No countries data in"):
            dataset._locate("countries", "countries.yaml", "Run build_countries.py")


class TestCountryDataset:
    """Test the read-only dataset"""

    def test_codes_are_uppercased(self):
        ds = CountryDataset({"fr": {"alpha2": "FR"}}, {"fr": {"FR-IDF": {"name": "Île-de-France"}}})
        assert ds.codes() == ("FR",)
        assert "fr" in ds
        assert ds.get_country_attributes("Fr")["alpha2"] == "FR"
        assert ds.get_subdivisions("fr")["FR-IDF"]["name"] == "Île-de-France"

    def test_unknown_codes(self):
        ds = CountryDataset({"FR": {"alpha2": "FR"}})
        assert ds.get_country_attributes("ZZ") is None
        assert ds.get_country_attributes(None) is None
        assert ds.get_subdivisions("FR") is None
        assert 42 not in ds

    def test_frozen(self):
        source = {"FR": {"alpha2": "FR", "unofficial_names": ["France"]}}
        ds = CountryDataset(source)
        attrs = ds.get_country_attributes("FR")

        with pytest.raises(TypeError):
            attrs["alpha2"] = "XX"
        assert attrs["unofficial_names"] == ("France",)

        # Later changes to the source do not leak in
        source["FR"]["alpha2"] = "XX"
        assert ds.get_country_attributes("FR")["alpha2"] == "FR"

    def test_order(self, sample_dataset):
        assert [code for code, _ in sample_dataset.items()] == ["AA", "BB", "CC"]
        assert len(sample_dataset) == 3

    def test_load_dataset_cached(self):
        assert load_dataset() is load_dataset()
        assert "US" in load_dataset()

    def test_load_dataset_explicit_paths(self, tmp_path):
        countries = tmp_path / "countries.yaml"
        subdivisions = tmp_path / "subdivisions.yaml"
        countries.write_text("XK:\n  alpha2: XK\n  iso_short_name: Kosovo\n", encoding="utf-8")
        subdivisions.write_text("", encoding="utf-8")

        ds = load_dataset(countries, subdivisions)
        assert ds.codes() == ("XK",)
        assert ds.get_subdivisions("XK") is None


class TestNormalize:
    """Test text normalization helpers"""

    def test_remove_diacritics_keeps_case(self):
        assert remove_diacritics("São Tomé") == "Sao Tome"
        assert remove_diacritics("Øresund Straße") == "Oresund Strasse"
        assert remove_diacritics("") == ""

    def test_strip_accents(self):
        assert strip_accents("Côte d'Ivoire") == "cote d'ivoire"
        assert strip_accents("Québec") == "quebec"
        assert strip_accents("日本") == "日本"

    def test_strip_characters(self):
        assert strip_characters("Korea (Republic of)", "()[],") == "Korea Republic of"
        assert strip_characters("[a],b", "()[],") == "ab"
        assert strip_characters("a(b)", "") == "a(b)"

    def test_humanize_label(self):
        assert humanize_label("autonomous_community") == "Autonomous community"
        assert humanize_label("state") == "State"
        assert humanize_label("") == ""

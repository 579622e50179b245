"""Shared utilities for GeoIdentity package."""

from geoidentity.utils.dataloader import (
    find_data_file,
    package_data_dir,
    load_yaml_file,
    format_not_found_error,
)
from geoidentity.utils.dataset import (
    CountryDataset,
    load_dataset,
)
from geoidentity.utils.normalize import (
    remove_diacritics,
    strip_accents,
    strip_characters,
    humanize_label,
)

__all__ = [
    # Data loading
    "find_data_file",
    "package_data_dir",
    "load_yaml_file",
    "format_not_found_error",
    "CountryDataset",
    "load_dataset",
    # Normalization
    "remove_diacritics",
    "strip_accents",
    "strip_characters",
    "humanize_label",
]

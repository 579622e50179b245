"""Locating and reading the packaged YAML data files.

Data lives in geoidentity/data/{countries,subdivisions}/ and ships with
the package, so there is a single place to look.
"""

from pathlib import Path
from typing import List, Optional

import yaml


def package_data_dir(module_file: str, subdirectory: str) -> Path:
    """geoidentity/data/{subdirectory}/ for a module one level below the package."""
    return Path(module_file).parent.parent / "data" / subdirectory


def find_data_file(
    module_file: str,
    subdirectory: str,
    filenames: List[str],
) -> Optional[Path]:
    """Find the first existing candidate file in the package data directory.

    Args:
        module_file: __file__ from a module directly below geoidentity/
                     (e.g., geoidentity/utils/dataset.py)
        subdirectory: Data subdirectory ('countries' or 'subdivisions')
        filenames: Candidate filenames in order of preference

    Returns:
        Path to found file, or None if not found

    Examples:
        >>> # From utils/dataset.py
        >>> path = find_data_file(__file__, 'countries', ['countries.yaml', 'countries.yml'])
    """
    data_dir = package_data_dir(module_file, subdirectory)
    for filename in filenames:
        p = data_dir / filename
        if p.exists():
            return p
    return None


def load_yaml_file(path: Path) -> dict:
    """
    Load and parse YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Parsed YAML data as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If file does not exist
        ValueError: If the document is not a mapping

    Examples:
        >>> data = load_yaml_file(Path("countries.yaml"))
        >>> data['US']['alpha3']
        'USA'
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Required file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {path}, got {type(data).__name__}")
    return data


def format_not_found_error(
    subdirectory: str,
    data_dir: Path,
    filenames: List[str],
    build_hint: str,
) -> str:
    """Message for a missing dataset file.

    Examples:
        >>> print(format_not_found_error("countries", Path("geoidentity/data/countries"),
        ...                              ["countries.yaml"], "Run build_countries.py"))
        No countries data in geoidentity/data/countries
        Looked for: countries.yaml
        Run build_countries.py
    """
    return "\n".join([
        f"No {subdirectory} data in {data_dir}",
        f"Looked for: {', '.join(filenames)}",
        build_hint,
    ])


__all__ = [
    "package_data_dir",
    "find_data_file",
    "load_yaml_file",
    "format_not_found_error",
]

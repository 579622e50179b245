"""Package configuration.

Settings live in geoconfig.yaml next to this module and are merged over the
defaults below, so a missing or partial file still yields a full config.
"""

from pathlib import Path
from typing import Any, Dict

import yaml


DEFAULTS: Dict[str, Any] = {
    "default_locale": "en",
    "search_term_filter": "()[],",
    "normalization_cache_size": None,
}


def _load_config() -> Dict[str, Any]:
    """Load package configuration from YAML file.

    Returns:
        Dictionary with every key of DEFAULTS present
    """
    config = dict(DEFAULTS)
    config_path = Path(__file__).parent / "geoconfig.yaml"

    if not config_path.exists():
        return config

    with open(config_path, 'r', encoding='utf-8') as f:
        loaded = yaml.safe_load(f) or {}

    config.update({k: v for k, v in loaded.items() if k in DEFAULTS})
    return config


# Cache config on module load
CONFIG = _load_config()

DEFAULT_LOCALE: str = CONFIG["default_locale"]
SEARCH_TERM_FILTER: str = CONFIG["search_term_filter"]
NORMALIZATION_CACHE_SIZE = CONFIG["normalization_cache_size"]


__all__ = [
    "CONFIG",
    "DEFAULT_LOCALE",
    "SEARCH_TERM_FILTER",
    "NORMALIZATION_CACHE_SIZE",
]

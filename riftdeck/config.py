"""Scoring configuration management."""

import os
from functools import lru_cache

from .schemas import ScoringConfig
from .utils import load_json

CONFIG_ENV_VAR = 'RIFTDECK_CONFIG'


@lru_cache(maxsize=1)
def get_config() -> ScoringConfig:
    """
    Load scoring configuration.

    Reads the JSON file named by the RIFTDECK_CONFIG environment variable
    when it is set; otherwise the built-in defaults apply. Configuration is
    cached after first load.

    Returns:
        ScoringConfig object with validated settings

    Raises:
        FileNotFoundError: If RIFTDECK_CONFIG points at a missing file
        ValueError: If the config file has invalid structure

    Example:
        from riftdeck.config import get_config
        config = get_config()
        print(f"Kill weight: {config.kill_points}")
    """
    config_path = os.environ.get(CONFIG_ENV_VAR)
    if not config_path:
        return ScoringConfig()
    return load_json(config_path, schema=ScoringConfig)


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if RIFTDECK_CONFIG or the file it names changes during
    runtime and you need to reload it.
    """
    get_config.cache_clear()

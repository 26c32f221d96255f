from __future__ import annotations

"""
Configuration Domain Management.

Provides the default runtime configuration of the indexer and loads
optional JSON configuration files that override it.
"""

import json
import logging
import os
from typing import Any, Dict

from docsindex.domain.constants import (
    DEFAULT_INPUT_DIR,
    DEFAULT_LINK_PREFIX,
    DEFAULT_OUTPUT_FILE,
    MARKDOWN_EXTENSIONS,
    RESERVED_NAV_TITLES,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "docsindex.json"


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.
    This dictionary drives the behavior of the indexing pipeline.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "input_path": DEFAULT_INPUT_DIR,
        "output_path": DEFAULT_OUTPUT_FILE,
        "base_dir": "",

        # Tree Shape
        "mode": "full",
        "link_prefix": DEFAULT_LINK_PREFIX,
        "encode_links": True,
        "markdown_extensions": list(MARKDOWN_EXTENSIONS),
        "sort_entries": False,
        "workers": 1,

        # Filtering (added to the built-in index page and artifact rules)
        "exclude_names": [],
        "exclude_patterns": [],

        # Outputs
        "print_tree": False,
        "nav_output_path": "",
        "reserved_nav_titles": list(RESERVED_NAV_TITLES),
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config_file(path: str = DEFAULT_CONFIG_FILE) -> Dict[str, Any]:
    """
    Load configuration overrides from a JSON file merged over the defaults.

    Args:
        path: JSON configuration file.

    Returns:
        Dict[str, Any]: The merged configuration, or defaults on failure.
    """
    config = get_default_config()

    if not path or not os.path.exists(path):
        logger.debug(f"Config file not found at '{path}'. Using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config '{path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Corrupted config file '{path}'. Using defaults.")
        return config

    unknown = sorted(k for k in data if k not in config)
    if unknown:
        logger.warning(f"Ignoring unknown config keys in '{path}': {', '.join(unknown)}")

    config.update({k: v for k, v in data.items() if k in config})
    return config

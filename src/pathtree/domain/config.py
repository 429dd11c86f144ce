from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of the last session's settings using JSON in
the user data directory. Missing or corrupt files fall back to defaults.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from pathtree.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"
DEFAULT_INPUT_PATH = "paths.txt"
CURRENT_CONFIG_VERSION = "1.0.0"

# Sentinel for "no depth lookup requested"
NO_DEPTH = -1


def get_config_file() -> str:
    """Resolve the absolute path of the persistent configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.
    This dictionary drives the behavior of the ingestion engine.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Source
        "input_path": DEFAULT_INPUT_PATH,
        "source_url": "",

        # Output
        "display_tree": True,

        # Lookups
        "find_name": "",
        "find_path": "",
        "find_depth": NO_DEPTH,

        # Diagnostics
        "log_level": "INFO",
        "log_file": "",
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the last session configuration from disk, merged over defaults.

    Args:
        config_file: Explicit file to read. Defaults to the user data dir.

    Returns:
        Dict[str, Any]: The loaded configuration or defaults on failure.
    """
    defaults = get_default_config()
    path = config_file or get_config_file()

    if not os.path.exists(path):
        logger.debug(f"Config file not found at {path}. Returning defaults.")
        return defaults

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Unreadable config file {path}: {e}. Using defaults.")
        return defaults

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return defaults

    session = data.get("last_session", data)
    if isinstance(session, dict):
        defaults.update({k: v for k, v in session.items() if k in defaults})
    return defaults


def save_config(config: Dict[str, Any], config_file: Optional[str] = None) -> None:
    """
    Persist the provided config as the 'last_session'.

    Args:
        config: Configuration to store.
        config_file: Explicit destination. Defaults to the user data dir.
    """
    path = config_file or get_config_file()
    state = {"version": CURRENT_CONFIG_VERSION, "last_session": config}
    try:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {path}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")

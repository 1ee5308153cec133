"""Default configuration settings for treepick.

This module provides default settings and paths used throughout the application.
"""

import os
from ..utils.constants import (
    DEFAULT_CASE_SENSITIVITY,
    DEFAULT_CONFIG_DIR,
    DEFAULT_CONFIG_FILE,
    DEFAULT_SCREEN_STYLE,
)

def default_config() -> dict:
    """Get default configuration settings.

    Returns:
        dict: Default configuration dictionary
    """

    return {
        "matching": {
            "caseSensitivity": DEFAULT_CASE_SENSITIVITY
        },
        "displaySettings": {
            "showHelp": True
        },
        "style": dict(DEFAULT_SCREEN_STYLE)
    }

def sanitize_config_name(config_name: str) -> str:
    """Sanitize configuration name for use in filenames.

    Args:
        config_name: Name to sanitize

    Returns:
        str: Sanitized name safe for use in filenames
    """
    sanitized = ''.join(c for c in config_name if c.isalnum() or c in ['-', '_']).lower()
    return sanitized or "default"

def get_config_path(config_name: str = "default", config_dir: str = DEFAULT_CONFIG_DIR) -> str:
    """Get the path to a specific configuration file.

    Args:
        config_name: Name of the configuration (default: "default")
        config_dir: Directory holding the configuration files

    Returns:
        str: Path to the configuration file
    """
    config_name = sanitize_config_name(config_name)

    if config_name == "default":
        return os.path.join(config_dir, DEFAULT_CONFIG_FILE)
    else:
        return os.path.join(config_dir, f"{config_name}.json")

"""
Default configuration values for nodepath.

This module contains all default values used throughout the configuration system.
"""

from typing import Any

# Wait defaults
DEFAULT_WAIT_TIMEOUT_MS = 5000
DEFAULT_POLL_INTERVAL_MS = 100

# Driver defaults
DEFAULT_ENCODING = "utf-8"
DEFAULT_HIDDEN_STYLES: list[str] = [
    "display:none",
    "visibility:hidden",
]

# Logging defaults
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# File config defaults
DEFAULT_CONFIG_FILENAME = "nodepath.config"
DEFAULT_CONFIG_EXTENSIONS = [".json", ".yaml", ".yml", ".toml"]
DEFAULT_CONFIG_SEARCH_PATHS = [
    ".",
    "~/.config/nodepath",
    "~",
]

# Environment variable prefix
ENV_PREFIX = "NODEPATH_"


def get_default_config() -> dict[str, Any]:
    """Get the default configuration as a nested dictionary."""
    return {
        "wait": {
            "timeout_ms": DEFAULT_WAIT_TIMEOUT_MS,
            "poll_interval_ms": DEFAULT_POLL_INTERVAL_MS,
        },
        "driver": {
            "encoding": DEFAULT_ENCODING,
            "hidden_styles": DEFAULT_HIDDEN_STYLES.copy(),
        },
        "logging": {
            "level": DEFAULT_LOG_LEVEL,
            "format": DEFAULT_LOG_FORMAT,
        },
    }

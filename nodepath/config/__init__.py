"""
Configuration module for nodepath.

Provides:
- Strongly-typed option classes (WaitOptions, DriverOptions, LoggingOptions)
- Configuration file loading (JSON, YAML, TOML)
- Environment variable support
- Validation via Pydantic

Example usage:
    from nodepath.config import load_config, configure_logging

    config = load_config("nodepath.config.yaml")
    configure_logging(config.logging)

Environment variables:
    NODEPATH_WAIT_TIMEOUT_MS=10000
    NODEPATH_WAIT_POLL_INTERVAL_MS=50
    NODEPATH_LOGGING_LEVEL=DEBUG
"""

from .defaults import (
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_ENCODING,
    DEFAULT_HIDDEN_STYLES,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_POLL_INTERVAL_MS,
    DEFAULT_WAIT_TIMEOUT_MS,
    ENV_PREFIX,
    get_default_config,
)
from .env import (
    ENV_MAPPINGS,
    get_env_key,
    load_env_config,
    parse_value,
)
from .loader import (
    ConfigLoader,
    configure_logging,
    find_config_file,
    load_config,
    load_file,
    merge_configs,
)
from .options import (
    DriverOptions,
    LoggingOptions,
    NodepathConfig,
    WaitOptions,
)

__all__ = [
    # Main configuration class
    "NodepathConfig",
    # Option classes
    "WaitOptions",
    "DriverOptions",
    "LoggingOptions",
    # Loaders
    "ConfigLoader",
    "load_config",
    "load_file",
    "find_config_file",
    "merge_configs",
    "configure_logging",
    # Environment
    "ENV_MAPPINGS",
    "get_env_key",
    "load_env_config",
    "parse_value",
    # Defaults
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_ENCODING",
    "DEFAULT_HIDDEN_STYLES",
    "DEFAULT_LOG_FORMAT",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_POLL_INTERVAL_MS",
    "DEFAULT_WAIT_TIMEOUT_MS",
    "ENV_PREFIX",
    "get_default_config",
]

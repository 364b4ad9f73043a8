"""
Configuration file loader for nodepath.

Loads configuration from JSON, YAML or TOML files and merges it with
environment variables and programmatic overrides.
"""

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import ValidationError

from nodepath.exceptions import ConfigurationError

from .defaults import (
    DEFAULT_CONFIG_EXTENSIONS,
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_CONFIG_SEARCH_PATHS,
)
from .env import load_env_config
from .options import LoggingOptions, NodepathConfig

logger = logging.getLogger(__name__)


def _load_json(path: Path) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        import yaml
    except ImportError:
        raise ConfigurationError(
            "PyYAML is required to load YAML config files. "
            "Install with: pip install pyyaml"
        )

    with open(path, "r", encoding="utf-8") as f:
        try:
            return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse {path}: {e}") from e


def _load_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def load_file(path: Union[str, Path]) -> dict[str, Any]:
    """Load configuration from file based on extension.

    Args:
        path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        ConfigurationError: If the file is missing, malformed or of an
            unsupported format
    """
    path = Path(path)

    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    suffix = path.suffix.lower()
    loaders = {
        ".json": _load_json,
        ".yaml": _load_yaml,
        ".yml": _load_yaml,
        ".toml": _load_toml,
    }
    if suffix not in loaders:
        raise ConfigurationError(f"Unsupported configuration format: {suffix}")

    try:
        data = loaders[suffix](path)
    except (ValueError, OSError) as e:
        raise ConfigurationError(f"Failed to parse {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration root must be a mapping: {path}")
    return data


def find_config_file(
    filename: str = DEFAULT_CONFIG_FILENAME,
    search_paths: Optional[list[str]] = None,
    extensions: Optional[list[str]] = None,
) -> Optional[Path]:
    """Find configuration file in search paths.

    Args:
        filename: Base filename without extension
        search_paths: Directories to search
        extensions: File extensions to try

    Returns:
        Path to config file or None if not found
    """
    if search_paths is None:
        search_paths = DEFAULT_CONFIG_SEARCH_PATHS

    if extensions is None:
        extensions = DEFAULT_CONFIG_EXTENSIONS

    for search_path in search_paths:
        search_dir = Path(search_path).expanduser()

        for ext in extensions:
            config_path = search_dir / f"{filename}{ext}"
            if config_path.exists():
                return config_path

    return None


def merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
    """Deep merge multiple configuration dictionaries.

    Later configs take precedence over earlier ones.
    """
    result: dict[str, Any] = {}

    for config in configs:
        _deep_merge(result, config)

    return result


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> None:
    for key, value in override.items():
        if (
            key in base
            and isinstance(base[key], dict)
            and isinstance(value, dict)
        ):
            _deep_merge(base[key], value)
        else:
            base[key] = value


class ConfigLoader:
    """Configuration loader with support for multiple sources.

    Priority (highest to lowest):

    1. Programmatic overrides
    2. Environment variables
    3. Configuration file
    4. Default values
    """

    def __init__(
        self,
        config_file: Optional[Union[str, Path]] = None,
        search_paths: Optional[list[str]] = None,
        load_env: bool = True,
        auto_find: bool = True,
    ):
        """Initialize configuration loader.

        Args:
            config_file: Explicit path to configuration file
            search_paths: Directories to search for config files
            load_env: Whether to load environment variables
            auto_find: Whether to auto-find config files
        """
        self.config_file = Path(config_file) if config_file else None
        self.search_paths = search_paths or DEFAULT_CONFIG_SEARCH_PATHS
        self.load_env = load_env
        self.auto_find = auto_find
        self._file_config: Optional[dict[str, Any]] = None
        self._env_config: Optional[dict[str, Any]] = None

    def load(self, overrides: Optional[dict[str, Any]] = None) -> NodepathConfig:
        """Load configuration from all sources.

        Args:
            overrides: Programmatic configuration overrides

        Returns:
            Loaded configuration

        Raises:
            ConfigurationError: If an explicit config file cannot be read or
                the merged values fail validation
        """
        configs = []

        file_config = self._load_file_config()
        if file_config:
            configs.append(file_config)

        if self.load_env:
            env_config = self._load_env_config()
            if env_config:
                configs.append(env_config)

        if overrides:
            configs.append(overrides)

        merged = merge_configs(*configs) if configs else {}

        try:
            return NodepathConfig.from_dict(merged)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def _load_file_config(self) -> Optional[dict[str, Any]]:
        if self._file_config is not None:
            return self._file_config

        if self.config_file is not None:
            # An explicit file must be loadable.
            self._file_config = load_file(self.config_file)
            return self._file_config

        if self.auto_find:
            config_path = find_config_file(search_paths=self.search_paths)
            if config_path is not None:
                try:
                    self._file_config = load_file(config_path)
                except ConfigurationError as e:
                    logger.warning(f"Ignoring configuration file {config_path}: {e}")
                    self._file_config = {}

        return self._file_config

    def _load_env_config(self) -> Optional[dict[str, Any]]:
        if self._env_config is not None:
            return self._env_config

        self._env_config = load_env_config()
        return self._env_config

    def reload(self) -> NodepathConfig:
        """Reload configuration from all sources."""
        self._file_config = None
        self._env_config = None
        return self.load()


def load_config(
    config_file: Optional[Union[str, Path]] = None,
    overrides: Optional[dict[str, Any]] = None,
    load_env: bool = True,
    auto_find: bool = True,
) -> NodepathConfig:
    """Convenience function to load configuration.

    Args:
        config_file: Path to configuration file
        overrides: Programmatic overrides
        load_env: Whether to load environment variables
        auto_find: Whether to search for a config file when none is given

    Returns:
        Loaded configuration
    """
    loader = ConfigLoader(config_file=config_file, load_env=load_env, auto_find=auto_find)
    return loader.load(overrides=overrides)


def configure_logging(options: Optional[LoggingOptions] = None) -> logging.Logger:
    """Apply logging options to the ``nodepath`` logger.

    A stream handler is attached once; later calls only update the level
    and format.

    Args:
        options: Logging options, defaults when omitted

    Returns:
        The configured ``nodepath`` logger
    """
    options = options or LoggingOptions()
    package_logger = logging.getLogger("nodepath")
    package_logger.setLevel(options.level)

    formatter = logging.Formatter(options.format)
    handler = next(
        (h for h in package_logger.handlers if getattr(h, "_nodepath_handler", False)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler._nodepath_handler = True  # type: ignore[attr-defined]
        package_logger.addHandler(handler)
    handler.setFormatter(formatter)

    return package_logger

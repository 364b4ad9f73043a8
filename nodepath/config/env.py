"""
Environment variable support for nodepath configuration.

Configuration keys map to variables by upper-casing them and replacing
dots with underscores under the ``NODEPATH_`` prefix, e.g.
``wait.timeout_ms`` is read from ``NODEPATH_WAIT_TIMEOUT_MS``.
"""

import os
from typing import Any, Union, get_args, get_origin

from nodepath.exceptions import ConfigurationError

from .defaults import ENV_PREFIX


def get_env_key(key: str, prefix: str = ENV_PREFIX) -> str:
    """Convert a configuration key to environment variable name.

    Args:
        key: Configuration key (e.g., "wait.timeout_ms")
        prefix: Environment variable prefix

    Returns:
        Environment variable name (e.g., "NODEPATH_WAIT_TIMEOUT_MS")
    """
    return f"{prefix}{key.upper().replace('.', '_').replace('-', '_')}"


def parse_bool(value: str) -> bool:
    """Parse string to boolean."""
    return value.lower() in ("true", "1", "yes", "on", "enabled")


def parse_list(value: str, item_type: type = str) -> list[Any]:
    """Parse a comma-separated string to a list.

    Args:
        value: Comma-separated string value
        item_type: Type of list items

    Returns:
        List of parsed values
    """
    if not value:
        return []

    items = [item.strip() for item in value.split(",")]

    if item_type == int:
        return [int(item) for item in items]
    elif item_type == float:
        return [float(item) for item in items]
    elif item_type == bool:
        return [parse_bool(item) for item in items]

    return items


def parse_value(value: str, target_type: Any) -> Any:
    """Parse string value to target type.

    Args:
        value: String value
        target_type: Target type, ``Optional[...]`` and ``list[...]`` included

    Returns:
        Parsed value
    """
    origin = get_origin(target_type)

    if origin is Union:
        non_none_types = [t for t in get_args(target_type) if t is not type(None)]
        if non_none_types:
            return parse_value(value, non_none_types[0])
        return value

    if origin is list:
        item_type = get_args(target_type)[0] if get_args(target_type) else str
        return parse_list(value, item_type)

    if target_type == bool:
        return parse_bool(value)

    if target_type == int:
        return int(value)

    if target_type == float:
        return float(value)

    return value


# Predefined environment variable mappings
ENV_MAPPINGS: dict[str, type] = {
    "wait.timeout_ms": int,
    "wait.poll_interval_ms": int,
    "driver.encoding": str,
    "driver.hidden_styles": list[str],
    "logging.level": str,
    "logging.format": str,
}


def load_env_config(prefix: str = ENV_PREFIX) -> dict[str, Any]:
    """Load configuration from predefined environment variables.

    Args:
        prefix: Environment variable prefix

    Returns:
        Nested dictionary holding only the variables that are set
    """
    result: dict[str, Any] = {}

    for key, target_type in ENV_MAPPINGS.items():
        value = os.environ.get(get_env_key(key, prefix))
        if value is not None:
            section, option = key.split(".", 1)
            try:
                parsed = parse_value(value, target_type)
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid value for {get_env_key(key, prefix)}: {value!r}"
                ) from e
            result.setdefault(section, {})[option] = parsed

    return result

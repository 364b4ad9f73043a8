"""
Configuration options classes for nodepath.

Strongly-typed option classes for waiting, drivers and logging, validated
with pydantic.
"""

import logging
from typing import Any

from pydantic import BaseModel, Field, field_validator

from .defaults import (
    DEFAULT_ENCODING,
    DEFAULT_HIDDEN_STYLES,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_POLL_INTERVAL_MS,
    DEFAULT_WAIT_TIMEOUT_MS,
)


class WaitOptions(BaseModel):
    """Polling options used by ``wait_for``."""

    timeout_ms: int = Field(
        DEFAULT_WAIT_TIMEOUT_MS, ge=0, description="Default wait budget in milliseconds"
    )
    poll_interval_ms: int = Field(
        DEFAULT_POLL_INTERVAL_MS, gt=0, description="Delay between predicate calls"
    )

    @property
    def poll_interval(self) -> float:
        """Poll interval in seconds."""
        return self.poll_interval_ms / 1000.0


class DriverOptions(BaseModel):
    """Options for the bundled HTML driver."""

    encoding: str = Field(DEFAULT_ENCODING, description="Encoding of byte documents")
    hidden_styles: list[str] = Field(
        default_factory=lambda: DEFAULT_HIDDEN_STYLES.copy(),
        description="Inline style declarations that hide an element",
    )

    @field_validator("hidden_styles", mode="before")
    @classmethod
    def normalize_styles(cls, v: Any) -> Any:
        """Accept a comma separated string and strip inner whitespace."""
        if isinstance(v, str):
            v = v.split(",")
        if isinstance(v, list):
            return ["".join(str(style).split()).lower() for style in v if str(style).strip()]
        return v


class LoggingOptions(BaseModel):
    """Logging options for the ``nodepath`` logger."""

    level: str = Field(DEFAULT_LOG_LEVEL, description="Log level name")
    format: str = Field(DEFAULT_LOG_FORMAT, description="Log record format")

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: Any) -> Any:
        """Normalize and validate the level name."""
        if isinstance(v, str):
            v = v.strip().upper()
            if not isinstance(logging.getLevelName(v), int):
                raise ValueError(f"Unknown log level: {v}")
        return v


class NodepathConfig(BaseModel):
    """Main configuration class combining all options."""

    wait: WaitOptions = Field(default_factory=WaitOptions, description="Wait options")
    driver: DriverOptions = Field(
        default_factory=DriverOptions, description="Driver options"
    )
    logging: LoggingOptions = Field(
        default_factory=LoggingOptions, description="Logging options"
    )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NodepathConfig":
        """Create configuration from dictionary."""
        return cls(**data)

    def merge(self, other: "NodepathConfig") -> "NodepathConfig":
        """Merge with another NodepathConfig, explicitly set fields of other win."""
        data = self.model_dump()
        for section, values in other.model_dump(exclude_unset=True).items():
            if isinstance(values, dict):
                data[section].update(values)
            else:
                data[section] = values
        return NodepathConfig.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump(exclude_none=True)

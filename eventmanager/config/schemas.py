"""
Configuration schemas using Pydantic for validation.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..exceptions import ConfigError
from ..log import LogConstants


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: bool | int | str = Field(
        default="warning", description="Log level name, number, or false to disable"
    )
    location: bool = Field(default=False, description="Show file locations in logs")
    micros: bool = Field(default=False, description="Show microsecond timestamps")
    colors: bool = Field(default=True, description="Colored log output")

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: Any) -> Any:
        """Validate log level is a recognized level."""
        if isinstance(v, str) and not v.isnumeric():
            if v.lower() not in LogConstants.LEVEL_NAMES:
                valid = ", ".join(LogConstants.LEVEL_NAMES)
                raise ValueError(f"Invalid log level '{v}'. Must be one of: {valid}")
        return v

    model_config = ConfigDict(extra="allow")


class UiConfig(BaseModel):
    """Configuration for the interactive console."""

    prompt: str = Field(default="> ", description="Input prompt")
    colors: bool | None = Field(
        default=None, description="Colored output, auto-detected when unset"
    )
    banner: bool = Field(default=True, description="Show the welcome banner")

    model_config = ConfigDict(extra="allow")


class AppConfig(BaseModel):
    """Root configuration model."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    ui: UiConfig = Field(default_factory=UiConfig)

    model_config = ConfigDict(extra="allow")


def validate_config(config_dict: dict[str, Any]) -> AppConfig:
    """
    Validate configuration dictionary against the schema.

    Raises:
        ConfigError: If validation fails
    """
    try:
        return AppConfig(**config_dict)
    except ValidationError as e:
        raise ConfigError(
            f"Invalid configuration: {e.errors()[0]['msg']}",
            errors=e.error_count(),
        ) from e

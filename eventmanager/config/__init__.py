"""
Configuration management package.

This module provides:
- Config class for loading YAML configuration with environment overrides
- Pydantic schemas for validating the merged configuration
"""

from .config import PROJECT_ROOT, Config, find_config_file, get_default_config
from .constants import DEFAULT_CONFIG_FILENAME, ENV_PREFIX, MAX_CONFIG_SIZE_BYTES
from .schemas import AppConfig, LoggingConfig, UiConfig, validate_config

__all__ = [
    "Config",
    "find_config_file",
    "get_default_config",
    "PROJECT_ROOT",
    "DEFAULT_CONFIG_FILENAME",
    "ENV_PREFIX",
    "MAX_CONFIG_SIZE_BYTES",
    "AppConfig",
    "LoggingConfig",
    "UiConfig",
    "validate_config",
]

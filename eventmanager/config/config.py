"""
Configuration loading for the event manager.

Config merges three layers, later ones winning:
built-in defaults, an optional YAML file, and EVENTMGR_* environment variables.
String values may reference other keys with ${dotted.key} syntax.
"""

import copy
import os
import re
from pathlib import Path
from typing import Any

import yaml

from ..dot_dict import DotDict, DotDictReservedKeyError
from ..exceptions import ConfigError
from .constants import DEFAULT_CONFIG_FILENAME, ENV_PREFIX, MAX_CONFIG_SIZE_BYTES
from .schemas import AppConfig, validate_config

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

_DEFAULT_CONFIG: dict[str, Any] = {
    "logging": {
        "level": "warning",
        "location": False,
        "micros": False,
        "colors": True,
    },
    "ui": {
        "prompt": "> ",
        "colors": None,
        "banner": True,
    },
}

_VAR_PATTERN = re.compile(r"\$\{([a-zA-Z0-9_.]+)\}")


def get_default_config() -> dict[str, Any]:
    """Return a copy of the built-in default configuration."""
    return copy.deepcopy(_DEFAULT_CONFIG)


def find_config_file(
    etc_dir: str | Path | None = None, file_name: str = DEFAULT_CONFIG_FILENAME
) -> Path | None:
    """
    Locate the configuration file.

    An explicit ``etc_dir`` must contain the file. Otherwise ./etc and the
    project's etc/ directory are searched in that order.

    Returns:
        Path to the config file, or None when no file is found

    Raises:
        ConfigError: If ``etc_dir`` is given but does not contain the file
    """
    if etc_dir is not None:
        path = Path(etc_dir) / file_name
        if not path.is_file():
            raise ConfigError("Config file not found", path=str(path))
        return path

    for candidate in (Path.cwd() / "etc", PROJECT_ROOT / "etc"):
        path = candidate / file_name
        if path.is_file():
            return path
    return None


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into base (override wins)."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def _read_yaml(path: Path) -> dict[str, Any]:
    """Read a YAML mapping from ``path``."""
    try:
        size = os.path.getsize(path)
    except OSError as e:
        raise ConfigError("Cannot read config file", path=str(path)) from e
    if size > MAX_CONFIG_SIZE_BYTES:
        raise ConfigError(
            "Config file too large",
            path=str(path),
            size=size,
            limit=MAX_CONFIG_SIZE_BYTES,
        )

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError("Invalid YAML in config file", path=str(path)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError("Cannot read config file", path=str(path)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("Config file must contain a mapping", path=str(path))
    return data


class Config(DotDict):
    """
    Application configuration with attribute and dotted-path access.

    Environment Variable Override Format:
        EVENTMGR_<SECTION>_<KEY>=value

    Examples:
        EVENTMGR_LOGGING_LEVEL=debug
        EVENTMGR_UI_BANNER=false

    Example:
        config = Config("etc/eventmanager.yaml")
        config.logging.level
        config.get("ui.prompt")
    """

    def __init__(
        self,
        fname: str | Path | None = None,
        enable_env_overrides: bool = True,
        env_prefix: str = ENV_PREFIX,
    ):
        """
        Load configuration.

        Args:
            fname: YAML file to load on top of the defaults (optional)
            enable_env_overrides: Whether to apply environment variable overrides
            env_prefix: Prefix for environment variables
        """
        super().__init__()
        self._enable_env_overrides = enable_env_overrides
        self._env_prefix = env_prefix
        self._config_path: Path | None = Path(fname).resolve() if fname else None
        self._load()

    @property
    def config_path(self) -> Path | None:
        """Path of the loaded YAML file, None when running on defaults."""
        return self._config_path

    def _load(self) -> None:
        data = get_default_config()
        if self._config_path is not None:
            data = _deep_merge(data, _read_yaml(self._config_path))
        if self._enable_env_overrides:
            data = self._apply_env_overrides(data)
        self.clear()
        try:
            self.set(**data)
        except DotDictReservedKeyError as e:
            raise ConfigError("Reserved config key", key=e.key) from e
        self.set(**self._resolve(self.to_dict()))

    def apply_overrides(self, overrides: dict[str, Any]) -> "Config":
        """
        Apply dotted-key overrides, skipping None values.

        Example:
            config.apply_overrides({"logging.level": args.log_level})
        """
        data = self.to_dict()
        for path, value in overrides.items():
            if value is not None:
                self._set_nested_value(data, path.split("."), value)
        self.clear()
        self.set(**data)
        return self

    def validate(self) -> AppConfig:
        """
        Validate the configuration against the schema.

        Raises:
            ConfigError: If validation fails
        """
        return validate_config(self.to_dict())

    def _resolve(self, content: Any) -> Any:
        """Recursively resolve ${dotted.key} substitutions."""
        if isinstance(content, dict):
            return {k: self._resolve(v) for k, v in content.items()}
        if isinstance(content, list):
            return [self._resolve(v) for v in content]
        if isinstance(content, str):
            return _VAR_PATTERN.sub(self._substitute_var, content)
        return content

    def _substitute_var(self, match: re.Match) -> str:
        var_name = match.group(1)
        if not self.has(var_name):
            raise ConfigError("Undefined config variable", variable=var_name)
        return str(self.get(var_name))

    def _apply_env_overrides(self, data: dict[str, Any]) -> dict[str, Any]:
        for env_key, env_value in self._collect_env_vars().items():
            path = env_key[len(self._env_prefix) :].lower().split("_")
            self._set_nested_value(data, path, self._convert_env_value(env_value))
        return data

    def _collect_env_vars(self) -> dict[str, str]:
        return {k: v for k, v in os.environ.items() if k.startswith(self._env_prefix)}

    @staticmethod
    def _set_nested_value(data: dict[str, Any], path: list[str], value: Any) -> None:
        current = data
        for part in path[:-1]:
            if not isinstance(current.get(part), dict):
                current[part] = {}
            current = current[part]
        current[path[-1]] = value

    def _convert_env_value(self, value: str) -> bool | int | float | str | list | None:
        """Convert an environment variable string to a typed value."""
        if value.lower() in ("null", "none", ""):
            return None
        if value.lower() in ("true", "false"):
            return value.lower() == "true"
        if "," in value:
            return [self._convert_env_value(v.strip()) for v in value.split(",")]
        try:
            if "." in value:
                return float(value)
            return int(value)
        except ValueError:
            return value

    def get_env_overrides(self) -> dict[str, Any]:
        """Return the overrides that environment variables would apply."""
        if not self._enable_env_overrides:
            return {}
        return {
            ".".join(k[len(self._env_prefix) :].lower().split("_")): self._convert_env_value(v)
            for k, v in self._collect_env_vars().items()
        }
